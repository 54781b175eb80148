"""Exceptions and helpers for value coercion, address checks and logging."""

import ipaddress
import logging
from typing import Any, Optional


class MapStatusError(Exception):
    """Base class for errors raised at the mapstatus boundary."""


class SnapshotLoadError(MapStatusError):
    """Raised when a status dump cannot be decoded."""

    def __init__(self, message: str, line_num: int = 0):
        self.line_num = line_num
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class OptionsValidationError(MapStatusError):
    """Raised when protocol options are missing or invalid."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"{len(errors)} option validation error(s)")


def as_int(value: Any) -> Optional[int]:
    """Return value as an int if it is numeric and integral, else None.

    JSON numbers may arrive as floats ('32.0'); booleans are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def address_width(address: str) -> Optional[int]:
    """Return the bit width of an address family (32 or 128), or None.

    Example: address_width('192.0.2.1') -> 32
    """
    try:
        return ipaddress.ip_address(address).max_prefixlen
    except ValueError:
        return None


def is_ip4addr(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ip6addr(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def setup_logging(verbose: bool = False):
    """Configure logging for the status tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
