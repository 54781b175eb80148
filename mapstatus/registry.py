"""Registry of protocols, virtual interface patterns and backend error codes.

Built once at startup with build_default_registry() and handed to the
consumers that need it.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .defaults import ERROR_CODES, VIRTUAL_IFNAME_PATTERN
from .protocol import MapProtocol

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorCode:
    code: str
    message: str


class ProtocolRegistry:
    def __init__(self):
        self._protocols: Dict[str, MapProtocol] = {}
        self._error_codes: Dict[str, ErrorCode] = {}
        self._virtual_patterns: List[re.Pattern] = []

    def register_protocol(self, protocol: MapProtocol) -> MapProtocol:
        if protocol.name in self._protocols:
            log.warning(f"Protocol '{protocol.name}' registered twice, replacing")
        self._protocols[protocol.name] = protocol
        return protocol

    def get_protocol(self, name: str) -> Optional[MapProtocol]:
        return self._protocols.get(name)

    def register_error_code(self, code: str, message: str) -> ErrorCode:
        entry = ErrorCode(code=code, message=message)
        self._error_codes[code] = entry
        return entry

    def error_message(self, code: str) -> str:
        """Message for a backend error code; unknown codes are returned as-is."""
        entry = self._error_codes.get(code)
        return entry.message if entry else code

    def register_pattern_virtual(self, pattern: str):
        self._virtual_patterns.append(re.compile(pattern))

    def is_virtual_ifname(self, ifname: str) -> bool:
        """True for device names created by a virtual protocol (e.g. 'map-wan6')."""
        return any(p.match(ifname) for p in self._virtual_patterns)


def build_default_registry() -> ProtocolRegistry:
    registry = ProtocolRegistry()
    registry.register_pattern_virtual(VIRTUAL_IFNAME_PATTERN)
    for code, message in ERROR_CODES.items():
        registry.register_error_code(code, message)
    registry.register_protocol(MapProtocol())
    return registry
