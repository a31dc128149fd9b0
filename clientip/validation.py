"""
IP address syntax validation.

Pure checks on the textual form only: no reachability, no private/public
classification. Both patterns must match the whole string, so surrounding
whitespace, ports, brackets and zone ids are all rejected.
"""

import re
from typing import Any

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"
_IPV4 = rf"{_OCTET}(?:\.{_OCTET}){{3}}"
_HEXTET = r"[0-9a-fA-F]{1,4}"


def _compressed_forms(total: int, tail: str) -> list:
    """
    Build every '::' zero-compressed layout for `total` hextets.

    `tail` is appended after the right-hand groups (an embedded IPv4
    address, or an empty string for pure hex forms).
    """
    forms = []
    for left in range(total):
        prefix = "::" if left == 0 else rf"(?:{_HEXTET}:){{{left}}}:"
        right = total - 1 - left
        if tail:
            forms.append(rf"{prefix}(?:{_HEXTET}:){{0,{right}}}{tail}")
        elif right:
            forms.append(rf"{prefix}(?:{_HEXTET}(?::{_HEXTET}){{0,{right - 1}}})?")
        else:
            forms.append(prefix)
    return forms


def _build_ipv6_pattern() -> str:
    forms = [
        rf"(?:{_HEXTET}:){{7}}{_HEXTET}",
        rf"(?:{_HEXTET}:){{6}}{_IPV4}",
    ]
    forms.extend(_compressed_forms(8, ""))
    # An embedded IPv4 address occupies the last two hextets
    forms.extend(_compressed_forms(6, _IPV4))
    return "|".join(f"(?:{form})" for form in forms)


IPV4_REGEX = re.compile(_IPV4)
IPV6_REGEX = re.compile(_build_ipv6_pattern())


def is_valid_ipv4(value: Any) -> bool:
    """Return True if `value` is a dotted-quad IPv4 address."""
    return isinstance(value, str) and IPV4_REGEX.fullmatch(value) is not None


def is_valid_ipv6(value: Any) -> bool:
    """Return True if `value` is an IPv6 address, compressed or with an IPv4 tail."""
    return isinstance(value, str) and IPV6_REGEX.fullmatch(value) is not None


def is_valid_ip(value: Any) -> bool:
    """
    Check whether a value is a syntactically valid IPv4 or IPv6 address.

    Non-string input (including None) is treated as invalid rather than
    raising, so header values can be passed straight through.

    Example:
        >>> is_valid_ip("203.0.113.5")
        True
        >>> is_valid_ip("2001:DB8::1")
        True
        >>> is_valid_ip(" 203.0.113.5")
        False
    """
    return is_valid_ipv4(value) or is_valid_ipv6(value)
