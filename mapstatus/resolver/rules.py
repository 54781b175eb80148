"""Derive the effective Basic Mapping Rule and sharing parameters from a MapConfig.

Every function accepts None in place of a config and answers "unknown"
(None or an empty sequence) instead of raising.
"""

from typing import List, Optional, Tuple

from ..model.mapping import AddressWithMask, MapConfig, MapRule, PortRange, RuleRow


def effective_bmr(config: Optional[MapConfig]) -> Optional[MapRule]:
    """Return the rule governing this node's own mapping.

    That is rules[bmr_index - 1] when the 1-based index is in range.
    """
    if config is None or config.bmr_index is None:
        return None
    if not 1 <= config.bmr_index <= len(config.rules):
        return None
    return config.rules[config.bmr_index - 1]


def ratio_for_psid(psid_length: Optional[int]) -> Optional[int]:
    """Number of subscribers sharing one IPv4 address, 2^psid_length.

    A PSID length of 0 gives 1 (no sharing).
    """
    if psid_length is None:
        return None
    return 2 ** psid_length


def share_ratio(config: Optional[MapConfig]) -> Optional[int]:
    bmr = effective_bmr(config)
    if bmr is None:
        return None
    return ratio_for_psid(bmr.psid_length)


def own_ipv4_address(config: Optional[MapConfig]) -> Optional[str]:
    bmr = effective_bmr(config)
    if bmr is None or bmr.ipv4_address is None:
        return None
    return bmr.ipv4_address.address


def own_ipv6_address(config: Optional[MapConfig]) -> Optional[str]:
    bmr = effective_bmr(config)
    if bmr is None or bmr.ipv6_address is None:
        return None
    return bmr.ipv6_address.address


def border_relay_address(config: Optional[MapConfig]) -> Optional[AddressWithMask]:
    """BR / DMR / AFTR address of the effective BMR."""
    bmr = effective_bmr(config)
    if bmr is None:
        return None
    return bmr.dmr_address


def port_ranges(config: Optional[MapConfig]) -> Tuple[PortRange, ...]:
    """Port ranges assigned by the BMR, in the backend's order."""
    bmr = effective_bmr(config)
    if bmr is None:
        return ()
    return bmr.port_set


def all_ipv4_prefixes(config: Optional[MapConfig]) -> List[str]:
    """IPv4 address/mask of every rule in the mapping domain, in rule order.

    Rules without an IPv4 address are skipped.
    """
    if config is None:
        return []
    return [
        str(rule.ipv4_address) for rule in config.rules
        if rule.ipv4_address is not None
    ]


def _address_only(addr: Optional[AddressWithMask]) -> str:
    return addr.address if addr is not None else ""


def _with_mask(addr: Optional[AddressWithMask]) -> str:
    return str(addr) if addr is not None else ""


def rule_row(index: int, rule: MapRule) -> RuleRow:
    return RuleRow(
        index=index,
        share_ratio=ratio_for_psid(rule.psid_length),
        ipv4_address=_address_only(rule.ipv4_address),
        ipv6_address=_address_only(rule.ipv6_address),
        border_relay=_with_mask(rule.dmr_address),
        ipv4_prefix=_with_mask(rule.ipv4_prefix),
        ipv6_prefix=_with_mask(rule.ipv6_prefix),
    )


def rule_table(config: Optional[MapConfig]) -> List[RuleRow]:
    """One row per forwarding mapping rule, in rule order.

    Each row carries that rule's own share ratio, not the BMR's. Rules
    with missing fields still get a row, with empty strings in their place.
    """
    if config is None:
        return []
    return [rule_row(idx, rule) for idx, rule in enumerate(config.rules)]
