"""Shared fixtures: status dumps as reported by the daemon."""

import copy

import pytest

from mapstatus.parser.reader import parse, parse_interface_status
from mapstatus.registry import build_default_registry

RULE_0 = {
    "psid-len": 4,
    "ipv4-address": {"address": "192.0.2.1", "mask": 32},
    "ipv6-address": {"address": "2001:db8:12:3400:0:c000:201:34", "mask": 128},
    "dmr-addres": {"address": "2001:db8:ffff::1", "mask": 128},
    "ipv4-prefix": {"address": "192.0.2.0", "mask": 24},
    "ipv6-prefix": {"address": "2001:db8::", "mask": 40},
    "port-set": ["4928-4991", "9024-9087", "13120-13183"],
}

RULE_1 = {
    "psid-len": 6,
    "ipv4-address": {"address": "198.51.100.7", "mask": 32},
    "ipv6-address": {"address": "2001:db8:100::7", "mask": 128},
    "dmr-addres": {"address": "2001:db8:ffff::2", "mask": 128},
    "ipv4-prefix": {"address": "198.51.100.0", "mask": 24},
    "ipv6-prefix": {"address": "2001:db8:100::", "mask": 48},
}

MAP_DATA = {
    "map": {
        "map-type": "map-e",
        "link": "wan6",
        "bmr": 1,
        "rule": [RULE_0, RULE_1],
    },
}

INTERFACE_STATUS = {
    "up": True,
    "interface": "wan6_4",
    "l3_device": "map-wan6_4",
    "errors": [],
    "data": MAP_DATA,
}


@pytest.fixture
def map_data():
    return copy.deepcopy(MAP_DATA)


@pytest.fixture
def interface_status():
    return copy.deepcopy(INTERFACE_STATUS)


@pytest.fixture
def config(map_data):
    return parse(map_data)


@pytest.fixture
def status(interface_status):
    return parse_interface_status(interface_status, name="wan6_4")


@pytest.fixture
def registry():
    return build_default_registry()
