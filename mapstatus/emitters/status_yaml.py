"""YAML status emitter for scripting."""

from dataclasses import asdict
from typing import Any, Dict, Optional

import yaml

from ..model.interface import InterfaceStatus
from ..model.options import MapOptions
from ..resolver import rules


def status_to_dict(status: InterfaceStatus, options: Optional[MapOptions] = None) -> Dict[str, Any]:
    config = status.map
    br = rules.border_relay_address(config)
    data = {
        "interface": status.name,
        "up": status.up,
        "device": status.l3_device,
        "errors": [err.code for err in status.errors],
        "type": config.map_type.value if config is not None else None,
        "link": config.link if config is not None else None,
        "bmr": {
            "ipv4-address": rules.own_ipv4_address(config),
            "ipv6-address": rules.own_ipv6_address(config),
            "br-address": str(br) if br is not None else None,
            "share-ratio": rules.share_ratio(config),
            "port-set": list(rules.port_ranges(config)),
        },
        "ipv4-prefixes": rules.all_ipv4_prefixes(config),
        "rules": [asdict(row) for row in rules.rule_table(config)],
    }
    if options is not None:
        data["options"] = options.to_dict()
    return data


def emit_yaml(status: InterfaceStatus, options: Optional[MapOptions] = None) -> str:
    return yaml.dump(
        status_to_dict(status, options),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=120,
    )
