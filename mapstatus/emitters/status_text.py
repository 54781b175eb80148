"""Plain-text status views for a MAP interface."""

from typing import List, Optional, Sequence, Tuple

import tabulate

from ..defaults import PROTOCOL_NAME, UNKNOWN_LABEL
from ..model.interface import InterfaceStatus
from ..model.mapping import MapConfig
from ..model.options import MapOptions
from ..registry import ProtocolRegistry
from ..resolver import rules

TABLE_HEADERS = [
    "Index",
    "Share Ratio",
    "Shared IPv4",
    "MAP IPv6 Address",
    "BR / DMR / AFTR",
    "IPv4 Prefix",
    "IPv6 Prefix",
]

PORTS_PER_LINE = 6


def format_ratio(ratio: Optional[int]) -> str:
    """'1:16' for a known ratio, 'Unknown' otherwise."""
    if ratio is None or ratio < 1:
        return UNKNOWN_LABEL
    return f"1:{ratio}"


def map_type_label(config: Optional[MapConfig]) -> str:
    return config.map_type.label if config is not None else UNKNOWN_LABEL


def _itemlist(items: Sequence[Tuple[str, Optional[str]]], indent: str = "") -> List[str]:
    """Render label/value pairs, skipping pairs without a value."""
    shown = [(label, value) for label, value in items if value is not None]
    if not shown:
        return []
    width = max(len(label) for label, _ in shown) + 1
    return [f"{indent}{label + ':':<{width}} {value}" for label, value in shown]


def emit_brief(status: InterfaceStatus) -> str:
    """One-glance status: type, shared IPv4, share ratio, port set size."""
    config = status.map
    ratio = rules.share_ratio(config)
    port_set = None
    if ratio is not None and ratio > 1:
        port_set = f"{len(rules.port_ranges(config))} ranges"

    return "\n".join(_itemlist([
        ("Type", map_type_label(config)),
        ("Shared IPv4", rules.own_ipv4_address(config)),
        ("Share Ratio", format_ratio(ratio)),
        ("Port Set", port_set),
    ]))


def emit_port_list(ranges: Sequence[str]) -> List[str]:
    lines = []
    for i in range(0, len(ranges), PORTS_PER_LINE):
        lines.append("  " + "  ".join(f"{r:<11}" for r in ranges[i:i + PORTS_PER_LINE]).rstrip())
    return lines


def emit_rule_table(config: Optional[MapConfig]) -> str:
    rows = [
        [
            str(row.index),
            format_ratio(row.share_ratio),
            row.ipv4_address,
            row.ipv6_address,
            row.border_relay,
            row.ipv4_prefix,
            row.ipv6_prefix,
        ]
        for row in rules.rule_table(config)
    ]
    if not rows:
        return "There are no rules"
    return tabulate.tabulate(rows, headers=TABLE_HEADERS, disable_numparse=True)


def emit_options(options: MapOptions) -> List[str]:
    """Configured options, with placeholders filled in for empty ones."""
    items = []
    for name in (
        "maptype", "peeraddr", "ipaddr", "ip4prefixlen", "ip6prefix", "ip6prefixlen",
        "ealen", "psidlen", "offset", "tunlink", "ttl", "mtu",
    ):
        value = options.effective(name)
        items.append((name, str(value) if value is not None else None))
    items.append(("legacymap", "yes" if options.legacymap else "no"))
    return _itemlist(items, indent="  ")


def emit_extended(status: InterfaceStatus, registry: ProtocolRegistry,
                  options: Optional[MapOptions] = None) -> str:
    """Full status: interface box, Basic Mapping Rule, forwarding rule table.

    With options, a Configuration section follows the interface box.
    """
    config = status.map
    ratio = rules.share_ratio(config)
    br = rules.border_relay_address(config)
    protocol = registry.get_protocol(PROTOCOL_NAME)

    lines = [status.name.upper() or UNKNOWN_LABEL.upper()]
    lines += _itemlist([
        ("Device", status.l3_device or "Not present"),
        ("Uplink", config.link.upper() if config is not None and config.link else None),
        ("Connected", "yes" if status.up else "no"),
        ("Protocol", protocol.label if protocol is not None else None),
    ], indent="  ")
    for err in status.errors:
        message = registry.error_message(err.code)
        if err.data:
            message = f"{message} ({err.data})"
        lines.append(f"  Error: {message}")

    if options is not None:
        lines += ["", "Configuration"]
        lines += emit_options(options)

    lines += ["", "Basic Mapping Rule"]
    lines += _itemlist([
        ("Type", map_type_label(config)),
        ("Shared IPv4", rules.own_ipv4_address(config)),
        ("MAP IPv6", rules.own_ipv6_address(config)),
        ("BR / DMR / AFTR", str(br) if br is not None else None),
        ("Share Ratio", format_ratio(ratio)),
    ], indent="  ")
    if ratio is not None:
        lines += ["", "Port Sets"]
        lines += emit_port_list(rules.port_ranges(config))

    lines += ["", "Forwarding Mapping Rules", emit_rule_table(config)]
    return "\n".join(lines)
