"""Interface status data models."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .mapping import MapConfig


@dataclass(frozen=True)
class BackendError:
    """Error entry reported by the daemon for an interface."""
    code: str
    subsystem: str = ""
    data: str = ""


@dataclass(frozen=True)
class InterfaceStatus:
    name: str = ""
    up: bool = False
    l3_device: Optional[str] = None
    errors: Tuple[BackendError, ...] = ()
    map: Optional[MapConfig] = None
