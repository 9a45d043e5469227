"""MAC address / 48-bit IEEE extended identifier model.

Extended identifiers are either extended unique identifiers (EUI) or
extended local identifiers (ELI). EUIs carry an organizationally unique
identifier (OUI), ELIs carry a company ID (CID).

See https://standards.ieee.org/products-services/regauth/tut/index.html
"""

from dataclasses import dataclass
from enum import Enum

from .mac_utils import normalize_mac

BROADCAST = "ffffffffffff"


class Kind(Enum):
    """Extended identifier kind."""

    UNIQUE = "unique"  # EUI, has an OUI
    LOCAL = "local"  # ELI, has a CID
    UNKNOWN = "unknown"


@dataclass(frozen=True, order=True)
class MACAddress:
    """
    Immutable MAC address.

    Accepts 12 hexadecimal digits in plain, hyphen, colon or dot notation,
    in either case. Equal addresses compare and hash equal regardless of
    the notation they were written in.
    """

    digits: str

    def __post_init__(self):
        object.__setattr__(self, "digits", normalize_mac(self.digits))

    def __str__(self) -> str:
        return self.digits

    def __int__(self) -> int:
        return self.to_decimal_representation()

    def _groups(self, size: int) -> list[str]:
        return [self.digits[i : i + size] for i in range(0, 12, size)]

    def to_binary_representation(self) -> str:
        """
        Return the address as 48 binary digits.

        The most-significant bit of each octet comes first.
        """
        return "".join(f"{int(octet, 16):08b}" for octet in self._groups(2))

    def to_decimal_representation(self) -> int:
        return int(self.to_binary_representation(), 2)

    def to_plain_notation(self) -> str:
        """Example: a0b1c2d3e4f5"""
        return self.digits

    def to_hyphen_notation(self) -> str:
        """Example: a0-b1-c2-d3-e4-f5"""
        return "-".join(self._groups(2))

    def to_colon_notation(self) -> str:
        """Example: a0:b1:c2:d3:e4:f5"""
        return ":".join(self._groups(2))

    def to_dot_notation(self) -> str:
        """Example: a0b1.c2d3.e4f5"""
        return ".".join(self._groups(4))

    def to_fragments(self) -> tuple[str, str]:
        """
        Split the address into its two 24-bit halves.

        The first half is the OUI or CID, the second is specific to the
        interface. Example: ("a0b1c2", "d3e4f5")
        """
        return self.digits[:6], self.digits[6:]

    def kind(self) -> Kind:
        """
        Classify the address as an EUI, an ELI, or neither.

        The two least-significant bits of the first octet decide EUI
        ("00" = unique). Failing that, the four least-significant bits
        of the first octet decide ELI ("1010" = local).
        """
        binary = self.to_binary_representation()

        if binary[6:8] == "00":
            return Kind.UNIQUE
        if binary[4:8] == "1010":
            return Kind.LOCAL
        return Kind.UNKNOWN

    def has_oui(self) -> bool:
        return self.kind() == Kind.UNIQUE

    def has_cid(self) -> bool:
        return self.kind() == Kind.LOCAL

    def is_broadcast(self) -> bool:
        return self.digits == BROADCAST

    def is_multicast(self) -> bool:
        """
        Layer-two multicast check.

        The I/G bit (least-significant bit of the first octet) is 1.
        """
        return self.to_binary_representation()[7] == "1"

    def is_unicast(self) -> bool:
        return not self.is_multicast()

    def is_uaa(self) -> bool:
        """Unicast with the U/L bit (second-least-significant, first octet) at 0."""
        return self.is_unicast() and self.to_binary_representation()[6] == "0"

    def is_laa(self) -> bool:
        """Unicast with the U/L bit (second-least-significant, first octet) at 1."""
        return self.is_unicast() and self.to_binary_representation()[6] == "1"
