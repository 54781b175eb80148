"""Default values and constants for the MAP protocol."""

# Protocol identity
PROTOCOL_NAME = "map"
PROTOCOL_LABEL = "MAP / LW4over6"
PROTOCOL_PACKAGE = "map-t"
VIRTUAL_IFNAME_PATTERN = r"^map-.+$"

# Backend map-type tags -> display labels
MAP_TYPE_LABELS = {
    "map-e": "MAP-E",
    "map-t": "MAP-T",
    "lw4o6": "LW4over6",
}
UNKNOWN_LABEL = "Unknown"

# Status dump keys (wire contract with the daemon, matched verbatim)
KEY_MAP = "map"
KEY_MAP_TYPE = "map-type"
KEY_LINK = "link"
KEY_BMR = "bmr"
KEY_RULES = "rule"
KEY_PSID_LEN = "psid-len"
KEY_IPV4_ADDRESS = "ipv4-address"
KEY_IPV6_ADDRESS = "ipv6-address"
KEY_DMR_ADDRESS = "dmr-addres"          # sic
KEY_IPV4_PREFIX = "ipv4-prefix"
KEY_IPV6_PREFIX = "ipv6-prefix"
KEY_PORT_SET = "port-set"

# PSID bit length bounds (RFC 7597 section 5.1)
PSID_LEN_MAX = 16

# Backend error codes -> messages
ERROR_CODES = {
    "INVALID_MAP_RULE": "MAP rule is invalid",
    "NO_MATCHING_PD": "No matching prefix delegation",
    "UNSUPPORTED_TYPE": "Unsupported MAP type",
}

# Protocol option ranges: option -> (min, max)
OPTION_RANGES = {
    "ip4prefixlen": (0, 32),
    "ip6prefixlen": (0, 64),
    "ealen": (0, 48),
    "psidlen": (0, 16),
    "offset": (0, 16),
    "ttl": (1, 255),
    "mtu": (None, 9200),
}

# Values used when an option is left empty
OPTION_PLACEHOLDERS = {
    "maptype": "map-e",
    "ip4prefixlen": 32,
    "ip6prefixlen": 16,
    "ttl": 64,
    "mtu": 1280,
}
