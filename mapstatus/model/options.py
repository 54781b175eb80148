"""Protocol option data model for a MAP interface section."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..defaults import OPTION_PLACEHOLDERS


@dataclass
class MapOptions:
    """Options of one MAP interface section, as edited by the config form."""
    section: str = ""
    maptype: Optional[str] = None           # "map-e", "map-t", "lw4o6"
    peeraddr: Optional[str] = None          # BR / DMR / AFTR, IPv6
    ipaddr: Optional[str] = None            # IPv4 prefix
    ip4prefixlen: Optional[int] = None
    ip6prefix: Optional[str] = None         # provider prefix, usually ends with "::"
    ip6prefixlen: Optional[int] = None
    ealen: Optional[int] = None             # EA-bits length
    psidlen: Optional[int] = None
    offset: Optional[int] = None            # PSID offset
    tunlink: Optional[str] = None
    ttl: Optional[int] = None
    mtu: Optional[int] = None
    legacymap: bool = False                 # draft-ietf-softwire-map-00 interface identifiers

    def effective(self, name: str) -> Any:
        """Return the option's value, falling back to its placeholder."""
        value = getattr(self, name)
        if value is None or value == "":
            return OPTION_PLACEHOLDERS.get(name)
        return value

    def to_dict(self) -> Dict[str, Any]:
        d = {}
        for f in fields(self):
            if f.name == "section":
                continue
            value = getattr(self, f.name)
            if value is not None:
                d[f.name] = value
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any], section: str = "") -> "MapOptions":
        return cls(
            section=section,
            maptype=d.get("maptype"),
            peeraddr=d.get("peeraddr"),
            ipaddr=d.get("ipaddr"),
            ip4prefixlen=d.get("ip4prefixlen"),
            ip6prefix=d.get("ip6prefix"),
            ip6prefixlen=d.get("ip6prefixlen"),
            ealen=d.get("ealen"),
            psidlen=d.get("psidlen"),
            offset=d.get("offset"),
            tunlink=d.get("tunlink"),
            ttl=d.get("ttl"),
            mtu=d.get("mtu"),
            legacymap=_as_flag(d.get("legacymap", False)),
        )


def _as_flag(value: Any) -> bool:
    """UCI flags are '0'/'1' strings; YAML may hand us real booleans."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "yes", "on", "true", "enabled")
    return bool(value)
