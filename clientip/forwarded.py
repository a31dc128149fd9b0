"""
X-Forwarded-For parsing.

The header lists addresses left to right as "client, proxy1, proxy2": the
left-most entry is the originating client and every following entry is a
proxy closer to this server.
"""

from typing import Any, List, Optional

from .validation import is_valid_ip


def _strip_port(token: str) -> str:
    # Exactly one colon means "ipv4:port"; anything else is left alone
    # so bare IPv6 addresses survive.
    if ":" in token:
        parts = token.split(":")
        if len(parts) == 2:
            return parts[0]
    return token


def split_forwarded_for(value: Any) -> List[str]:
    """
    Split an X-Forwarded-For value into ordered, port-stripped tokens.

    Tokens are not validated; "unknown" and garbage entries are kept.

    Args:
        value: Raw header value

    Returns:
        Tokens in header order, empty list for missing or non-string input
    """
    if not value or not isinstance(value, str):
        return []
    return [_strip_port(token.strip()) for token in value.split(",")]


def parse_forwarded_for(value: Any) -> Optional[str]:
    """
    Return the left-most valid IP address from an X-Forwarded-For value.

    Entries that are not addresses are skipped. Proxies (Squid among them)
    may write the literal "unknown" in place of an address.

    Example:
        >>> parse_forwarded_for("unknown, 70.41.3.18")
        '70.41.3.18'
        >>> parse_forwarded_for("1.2.3.4:5678")
        '1.2.3.4'
    """
    for candidate in split_forwarded_for(value):
        if is_valid_ip(candidate):
            return candidate
    return None
