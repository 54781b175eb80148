"""MAP protocol descriptor."""

from dataclasses import dataclass
from typing import Optional

from .defaults import PROTOCOL_LABEL, PROTOCOL_NAME, PROTOCOL_PACKAGE


@dataclass(frozen=True)
class MapProtocol:
    name: str = PROTOCOL_NAME
    label: str = PROTOCOL_LABEL
    package: str = PROTOCOL_PACKAGE
    floating: bool = True       # no fixed device, runs on top of tunlink
    virtual: bool = True

    def ifname(self, section: str, l3_device: Optional[str] = None) -> str:
        """Tunnel device name: the reported L3 device, else 'map-<section>'."""
        if l3_device:
            return l3_device
        return f"{self.name}-{section}"

    def contains_device(self, ifname: str, section: str, l3_device: Optional[str] = None) -> bool:
        return ifname == self.ifname(section, l3_device)
