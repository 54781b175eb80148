"""Load and validate MAP protocol options."""

import logging
from typing import Any, Iterable, List, Optional

import yaml

from ..defaults import MAP_TYPE_LABELS, OPTION_RANGES
from ..model.options import MapOptions
from ..util import OptionsValidationError, is_ip4addr, is_ip6addr

log = logging.getLogger(__name__)

REQUIRED_OPTIONS = ("peeraddr", "ip6prefix")


def load_options(yaml_text: str, section: str = "") -> MapOptions:
    """Load options from YAML.

    The document is either the section's options directly, or a mapping of
    section names to options, in which case `section` picks one.
    """
    data = yaml.safe_load(yaml_text)
    if data is None:
        return MapOptions(section=section)
    if not isinstance(data, dict):
        raise OptionsValidationError(["options document must be a mapping"])

    if section and isinstance(data.get(section), dict):
        data = data[section]
    elif section and section in data:
        raise OptionsValidationError([f"section '{section}' must be a mapping"])

    return MapOptions.from_dict(data, section=section)


def _to_int(value: Any) -> Optional[int]:
    """UCI stores numbers as strings; accept both forms."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _check_range(name: str, value: Any, errors: List[str]):
    if value is None or value == "":
        return
    number = _to_int(value)
    if number is None:
        errors.append(f"{name}: '{value}' is not an integer")
        return

    low, high = OPTION_RANGES[name]
    if low is not None and number < low:
        errors.append(f"{name}: {number} is below {low}")
    if high is not None and number > high:
        errors.append(f"{name}: {number} is above {high}")


def validate_options(options: MapOptions, networks: Optional[Iterable[str]] = None) -> List[str]:
    """Return a list of problems with the options; empty means valid.

    `networks` is the set of known logical interface names; when given,
    tunlink must name one of them.
    """
    errors: List[str] = []

    for name in REQUIRED_OPTIONS:
        if not getattr(options, name):
            errors.append(f"{name}: value is required")

    if options.maptype and (not isinstance(options.maptype, str) or options.maptype not in MAP_TYPE_LABELS):
        errors.append(
            f"maptype: '{options.maptype}' is not one of {', '.join(MAP_TYPE_LABELS)}"
        )

    if options.peeraddr and not is_ip6addr(str(options.peeraddr)):
        errors.append(f"peeraddr: '{options.peeraddr}' is not an IPv6 address")
    if options.ip6prefix and not is_ip6addr(str(options.ip6prefix)):
        errors.append(f"ip6prefix: '{options.ip6prefix}' is not an IPv6 address")
    if options.ipaddr and not is_ip4addr(str(options.ipaddr)):
        errors.append(f"ipaddr: '{options.ipaddr}' is not an IPv4 address")

    for name in OPTION_RANGES:
        _check_range(name, getattr(options, name), errors)

    if options.tunlink and not isinstance(options.tunlink, str):
        errors.append(f"tunlink: '{options.tunlink}' is not a network name")
    elif options.tunlink:
        if options.section and options.tunlink == options.section:
            errors.append("tunlink: interface cannot tunnel over itself")
        elif networks is not None and options.tunlink not in set(networks):
            errors.append(f"tunlink: unknown network '{options.tunlink}'")

    for err in errors:
        log.debug(f"Option check failed for '{options.section}': {err}")
    return errors


def check_options(options: MapOptions, networks: Optional[Iterable[str]] = None) -> MapOptions:
    """Validate options, raising OptionsValidationError on any problem."""
    errors = validate_options(options, networks)
    if errors:
        raise OptionsValidationError(errors)
    return options
