"""MAC address utilities."""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

NOTATIONS: dict[str, re.Pattern] = {
    "plain": re.compile(r"[0-9a-f]{12}", re.IGNORECASE),
    "hyphen": re.compile(r"([0-9a-f]{2}-){5}[0-9a-f]{2}", re.IGNORECASE),
    "colon": re.compile(r"([0-9a-f]{2}:){5}[0-9a-f]{2}", re.IGNORECASE),
    "dot": re.compile(r"([0-9a-f]{4}\.){2}[0-9a-f]{4}", re.IGNORECASE),
}

_NOT_DIGITS = re.compile(r"[^0-9a-f]")


class ValidationError(ValueError):
    """Raised when text is not a MAC address in a supported notation."""

    message = "Pass in 12 hexadecimal digits."

    def __init__(self, value):
        super().__init__(self.message)
        self.value = value


def detect_notation(mac: str) -> Optional[str]:
    """
    Return the name of the notation the text is written in.

    Returns:
        "plain", "hyphen", "colon" or "dot", or None if nothing matches
    """
    if not isinstance(mac, str):
        return None

    for name, pattern in NOTATIONS.items():
        if pattern.fullmatch(mac):
            return name

    return None


def is_valid_mac(mac: str) -> bool:
    """Check whether text is a MAC address in a supported notation."""
    return detect_notation(mac) is not None


def normalize_mac(mac: str) -> str:
    """
    Normalize MAC address to 12 lowercase hex digits without separators.

    Supported input formats:
    - A0B1C2D3E4F5
    - A0-B1-C2-D3-E4-F5
    - A0:B1:C2:D3:E4:F5
    - A0B1.C2D3.E4F5 (Cisco)

    Raises:
        ValidationError: text matches none of the formats above
    """
    notation = detect_notation(mac)
    if notation is None:
        logger.debug("Rejected MAC address input", extra={"mac": mac})
        raise ValidationError(mac)

    digits = _NOT_DIGITS.sub("", mac.lower())
    logger.debug(
        "Normalized MAC address", extra={"mac": digits, "notation": notation}
    )
    return digits
