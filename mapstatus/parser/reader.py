"""Read the daemon's status dump into typed MAP models.

The dump reflects live daemon state, so any field may be missing or
malformed. Every field is resolved on its own: a bad value turns into
"unknown" for that field and never fails the whole parse.

Status dump shape (the "data" blob of an interface status):
{
  "map": {
    "map-type": "map-e", "link": "wan6", "bmr": 1,
    "rule": [
      {"psid-len": 4,
       "ipv4-address": {"address": "192.0.2.1", "mask": 32},
       "ipv6-address": {...}, "dmr-addres": {...},
       "ipv4-prefix": {...}, "ipv6-prefix": {...},
       "port-set": ["1024-1039", ...]}
    ]
  }
}
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..defaults import (
    KEY_BMR,
    KEY_DMR_ADDRESS,
    KEY_IPV4_ADDRESS,
    KEY_IPV4_PREFIX,
    KEY_IPV6_ADDRESS,
    KEY_IPV6_PREFIX,
    KEY_LINK,
    KEY_MAP,
    KEY_MAP_TYPE,
    KEY_PORT_SET,
    KEY_PSID_LEN,
    KEY_RULES,
    PSID_LEN_MAX,
)
from ..model.interface import BackendError, InterfaceStatus
from ..model.mapping import AddressWithMask, MapConfig, MapRule, MapType, PortRange
from ..util import SnapshotLoadError, address_width, as_int

log = logging.getLogger(__name__)

_MAP_TYPES = {
    "map-e": MapType.MAP_E,
    "map-t": MapType.MAP_T,
    "lw4o6": MapType.LW4OVER6,
}


def load_snapshot(text: str) -> Any:
    """Decode a JSON status dump."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(e.msg, e.lineno) from e


def get_map_data(snapshot: Any) -> Optional[Mapping[str, Any]]:
    """Return the "map" object of a snapshot, or None."""
    if not isinstance(snapshot, Mapping):
        return None
    data = snapshot.get(KEY_MAP)
    if not isinstance(data, Mapping):
        return None
    return data


def parse(snapshot: Any) -> Optional[MapConfig]:
    """Build a MapConfig from a status snapshot.

    Returns None when the snapshot has no "map" object.
    """
    data = get_map_data(snapshot)
    if data is None:
        log.debug("Snapshot carries no MAP data")
        return None

    return MapConfig(
        map_type=parse_map_type(data.get(KEY_MAP_TYPE)),
        link=_get_str(data, KEY_LINK),
        bmr_index=_parse_bmr_index(data.get(KEY_BMR)),
        rules=parse_rules(data.get(KEY_RULES)),
    )


def parse_map_type(value: Any) -> MapType:
    """Map a backend type tag to MapType. Tags are matched exactly."""
    if isinstance(value, str) and value in _MAP_TYPES:
        return _MAP_TYPES[value]
    if value is not None:
        log.debug(f"Unknown map-type {value!r}")
    return MapType.UNKNOWN


def _parse_bmr_index(value: Any) -> Optional[int]:
    index = as_int(value)
    if index is None and value is not None:
        log.debug(f"Ignoring non-numeric bmr {value!r}")
    return index


def parse_rules(value: Any) -> Tuple[MapRule, ...]:
    """Parse the rule list, keeping the backend's order."""
    if not isinstance(value, list):
        if value is not None:
            log.debug(f"Ignoring rule list of type {type(value).__name__}")
        return ()

    rules = []
    for idx, raw in enumerate(value):
        if not isinstance(raw, Mapping):
            log.debug(f"Rule {idx}: not an object, all fields unknown")
            rules.append(MapRule())
            continue
        rules.append(parse_rule(raw))
    return tuple(rules)


def parse_rule(raw: Mapping[str, Any]) -> MapRule:
    return MapRule(
        ipv4_address=parse_address(raw.get(KEY_IPV4_ADDRESS)),
        ipv6_address=parse_address(raw.get(KEY_IPV6_ADDRESS)),
        dmr_address=parse_address(raw.get(KEY_DMR_ADDRESS)),
        ipv4_prefix=parse_address(raw.get(KEY_IPV4_PREFIX)),
        ipv6_prefix=parse_address(raw.get(KEY_IPV6_PREFIX)),
        psid_length=_parse_psid_length(raw.get(KEY_PSID_LEN)),
        port_set=_parse_port_set(raw.get(KEY_PORT_SET)),
    )


def parse_address(value: Any) -> Optional[AddressWithMask]:
    """Parse an {address, mask} object.

    The mask must be an integer within the address family's width
    (32 for IPv4, 128 for IPv6).
    """
    if not isinstance(value, Mapping):
        return None

    address = value.get("address")
    mask = as_int(value.get("mask"))
    if not isinstance(address, str) or mask is None:
        log.debug(f"Incomplete address object {dict(value)!r}")
        return None

    width = address_width(address)
    if width is None or not 0 <= mask <= width:
        log.debug(f"Invalid address/mask {address}/{mask}")
        return None

    return AddressWithMask(address=address, mask=mask)


def _parse_psid_length(value: Any) -> Optional[int]:
    psid_len = as_int(value)
    if psid_len is None or not 0 <= psid_len <= PSID_LEN_MAX:
        if value is not None:
            log.debug(f"Ignoring psid-len {value!r}")
        return None
    return psid_len


def _parse_port_set(value: Any) -> Tuple[PortRange, ...]:
    if not isinstance(value, list):
        return ()

    ranges: List[PortRange] = []
    for item in value:
        port = as_int(item)
        if isinstance(item, str):
            ranges.append(item)
        elif port is not None:
            ranges.append(str(port))
        elif isinstance(item, list) and len(item) == 2:
            ranges.append(f"{item[0]}-{item[1]}")
        else:
            log.debug(f"Ignoring port-set entry {item!r}")
    return tuple(ranges)


def _get_str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def parse_errors(value: Any) -> Tuple[BackendError, ...]:
    """Parse the interface's error list. Entries without a code are dropped."""
    if not isinstance(value, list):
        return ()

    errors = []
    for item in value:
        if not isinstance(item, Mapping) or not isinstance(item.get("code"), str):
            continue
        data = item.get("data", "")
        if isinstance(data, list):
            data = ", ".join(str(d) for d in data)
        errors.append(BackendError(
            code=item["code"],
            subsystem=_get_str(item, "subsystem"),
            data=str(data),
        ))
    return tuple(errors)


def parse_interface_status(status: Any, name: str = "") -> InterfaceStatus:
    """Build an InterfaceStatus from a full interface status dump.

    A dump with a top-level "map" object and no "data" is read as the
    data blob itself.
    """
    if not isinstance(status, Mapping):
        return InterfaceStatus(name=name)

    data: Any = status.get("data")
    if data is None and KEY_MAP in status:
        data = status

    l3_device = status.get("l3_device")
    return InterfaceStatus(
        name=name or _get_str(status, "interface"),
        up=status.get("up") is True,
        l3_device=l3_device if isinstance(l3_device, str) and l3_device else None,
        errors=parse_errors(status.get("errors")),
        map=parse(data),
    )


def summarize(config: Optional[MapConfig]) -> Dict[str, Any]:
    """Short description of a parsed config, for logging."""
    if config is None:
        return {"map": None}
    return {
        "map-type": config.map_type.value,
        "link": config.link,
        "bmr": config.bmr_index,
        "rules": len(config.rules),
    }
