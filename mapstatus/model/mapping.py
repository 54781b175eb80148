"""MAP data models: addresses, mapping rules, rule table rows."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..defaults import MAP_TYPE_LABELS, UNKNOWN_LABEL

# Opaque port range token as reported by the backend ("1024-1039")
PortRange = str


class MapType(Enum):
    MAP_E = "map-e"
    MAP_T = "map-t"
    LW4OVER6 = "lw4o6"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return MAP_TYPE_LABELS.get(self.value, UNKNOWN_LABEL)


@dataclass(frozen=True)
class AddressWithMask:
    address: str
    mask: int

    def __str__(self) -> str:
        return f"{self.address}/{self.mask}"


@dataclass(frozen=True)
class MapRule:
    """One entry of the reported rule list. Missing fields are None."""
    ipv4_address: Optional[AddressWithMask] = None
    ipv6_address: Optional[AddressWithMask] = None
    dmr_address: Optional[AddressWithMask] = None   # BR / DMR / AFTR
    ipv4_prefix: Optional[AddressWithMask] = None
    ipv6_prefix: Optional[AddressWithMask] = None
    psid_length: Optional[int] = None
    port_set: Tuple[PortRange, ...] = ()            # only set on the BMR


@dataclass(frozen=True)
class MapConfig:
    """Validated view of the reported MAP data."""
    map_type: MapType = MapType.UNKNOWN
    link: str = ""
    bmr_index: Optional[int] = None                 # 1-based into rules
    rules: Tuple[MapRule, ...] = ()


@dataclass(frozen=True)
class RuleRow:
    """Presentation-ready row of the forwarding mapping rule table."""
    index: int
    share_ratio: Optional[int] = None
    ipv4_address: str = ""
    ipv6_address: str = ""
    border_relay: str = ""
    ipv4_prefix: str = ""
    ipv6_prefix: str = ""
