"""Tests for the text and YAML status views."""

import pytest
import yaml

from mapstatus.emitters.status_text import (
    emit_brief,
    emit_extended,
    emit_options,
    emit_port_list,
    emit_rule_table,
    format_ratio,
)
from mapstatus.emitters.status_yaml import emit_yaml, status_to_dict
from mapstatus.model.interface import InterfaceStatus
from mapstatus.model.options import MapOptions
from mapstatus.parser.reader import parse_interface_status


class TestFormatRatio:
    @pytest.mark.parametrize(("ratio", "text"), [(1, "1:1"), (16, "1:16"), (None, "Unknown"), (-1, "Unknown")])
    def test_format(self, ratio, text):
        assert format_ratio(ratio) == text


class TestBrief:
    def test_shared_address(self, status):
        assert emit_brief(status).splitlines() == [
            "Type:        MAP-E",
            "Shared IPv4: 192.0.2.1",
            "Share Ratio: 1:16",
            "Port Set:    3 ranges",
        ]

    def test_no_port_set_without_sharing(self, interface_status):
        interface_status["data"]["map"]["rule"][0]["psid-len"] = 0
        text = emit_brief(parse_interface_status(interface_status))
        assert "Share Ratio: 1:1" in text
        assert "Port Set" not in text

    def test_unknown(self):
        assert emit_brief(InterfaceStatus()).splitlines() == [
            "Type:        Unknown",
            "Share Ratio: Unknown",
        ]


class TestExtended:
    def test_sections(self, status, registry):
        text = emit_extended(status, registry)
        assert text.startswith("WAN6_4\n")
        assert "  Device:    map-wan6_4" in text
        assert "  Uplink:    WAN6" in text
        assert "  Connected: yes" in text
        assert "  Protocol:  MAP / LW4over6" in text
        assert "Configuration" not in text
        assert "Basic Mapping Rule" in text
        assert "  BR / DMR / AFTR: 2001:db8:ffff::1/128" in text
        assert "  MAP IPv6:        2001:db8:12:3400:0:c000:201:34" in text
        assert "Port Sets" in text
        assert "4928-4991" in text
        assert "Forwarding Mapping Rules" in text
        assert "198.51.100.0/24" in text

    def test_backend_errors(self, interface_status, registry):
        interface_status["up"] = False
        interface_status["errors"] = [
            {"subsystem": "map", "code": "NO_MATCHING_PD"},
            {"subsystem": "map", "code": "SOMETHING_NEW", "data": "detail"},
        ]
        text = emit_extended(parse_interface_status(interface_status), registry)
        assert "  Connected: no" in text
        assert "  Error: No matching prefix delegation" in text
        assert "  Error: SOMETHING_NEW (detail)" in text

    def test_without_map_data(self, registry):
        text = emit_extended(InterfaceStatus(name="wan6_4"), registry)
        assert "  Device:    Not present" in text
        assert "Uplink" not in text
        assert "Port Sets" not in text
        assert text.endswith("There are no rules")


class TestRuleTable:
    def test_headers_and_rows(self, config):
        lines = emit_rule_table(config).splitlines()
        assert lines[0].split()[:2] == ["Index", "Share"]
        assert len(lines) == 4
        assert lines[2].split()[:3] == ["0", "1:16", "192.0.2.1"]
        assert lines[3].split()[:3] == ["1", "1:64", "198.51.100.7"]

    def test_no_rules(self):
        assert emit_rule_table(None) == "There are no rules"


class TestPortList:
    def test_wraps(self):
        ranges = [f"{n}-{n + 15}" for n in range(1024, 1024 + 16 * 8, 16)]
        lines = emit_port_list(ranges)
        assert len(lines) == 2
        assert lines[0].split() == ranges[:6]
        assert lines[1].split() == ranges[6:]

    def test_empty(self):
        assert emit_port_list([]) == []


class TestYaml:
    def test_round_trips_through_yaml(self, status):
        data = yaml.safe_load(emit_yaml(status))
        assert data == status_to_dict(status)
        assert data["type"] == "map-e"
        assert data["bmr"]["share-ratio"] == 16
        assert data["bmr"]["br-address"] == "2001:db8:ffff::1/128"
        assert data["ipv4-prefixes"] == ["192.0.2.1/32", "198.51.100.7/32"]
        assert [row["index"] for row in data["rules"]] == [0, 1]

    def test_unknown_status(self):
        data = status_to_dict(InterfaceStatus())
        assert data["type"] is None
        assert data["bmr"]["share-ratio"] is None
        assert data["rules"] == []

    def test_options_in_yaml(self, status):
        opts = MapOptions(peeraddr="2001:db8:ffff::1", ip6prefix="2001:db8::", mtu=1460)
        data = yaml.safe_load(emit_yaml(status, opts))
        assert data["options"] == {
            "peeraddr": "2001:db8:ffff::1",
            "ip6prefix": "2001:db8::",
            "mtu": 1460,
            "legacymap": False,
        }
        assert "options" not in status_to_dict(status)


class TestOptionsView:
    def test_placeholders_filled(self):
        lines = emit_options(MapOptions(peeraddr="2001:db8:ffff::1", ip6prefix="2001:db8::", legacymap=True))
        assert "  maptype:      map-e" in lines
        assert "  ip4prefixlen: 32" in lines
        assert "  ip6prefixlen: 16" in lines
        assert "  ttl:          64" in lines
        assert "  mtu:          1280" in lines
        assert "  legacymap:    yes" in lines
        assert not any(line.strip().startswith("ealen") for line in lines)

    def test_in_extended_view(self, status, registry):
        opts = MapOptions(peeraddr="2001:db8:ffff::1", ip6prefix="2001:db8::", ttl=20)
        text = emit_extended(status, registry, opts)
        assert text.index("Configuration") < text.index("Basic Mapping Rule")
        assert "  ttl:          20" in text
