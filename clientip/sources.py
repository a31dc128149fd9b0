"""
Ordered client IP sources.

DEFAULT_SOURCES is the full cascade the resolver walks, highest priority
first. Header and connection sources must hold a syntactically valid
address. The three platform sources at the end (hapi "info" objects and
API Gateway's requestContext) are returned as-is whenever they are set.
"""

from dataclasses import dataclass
from operator import methodcaller
from typing import Any, Callable, Optional, Tuple

from .adapters import RequestAdapter
from .forwarded import parse_forwarded_for

Extractor = Callable[[RequestAdapter], Optional[Any]]

X_FORWARDED_FOR = "x-forwarded-for"

HEADER_PRIORITY: Tuple[str, ...] = (
    "x-client-ip",
    X_FORWARDED_FOR,
    "cf-connecting-ip",      # Cloudflare
    "fastly-client-ip",      # Fastly, Firebase hosting
    "true-client-ip",        # Akamai, Cloudflare Enterprise
    "x-real-ip",             # nginx
    "x-cluster-client-ip",   # Rackspace LB, Riverbed Stingray
    "x-forwarded",
    "forwarded-for",
    "forwarded",
)


@dataclass(frozen=True)
class Source:
    """
    One step of the client IP cascade.

    Args:
        name: Source name reported alongside the resolved address
        extractor: Callable(adapter) returning the raw candidate or None
        validate: Require the candidate to be a valid IP address; when
            False any truthy candidate is accepted
    """
    name: str
    extractor: Extractor
    validate: bool = True


def header_source(name: str) -> Source:
    """Source reading a single header value."""
    return Source(name, methodcaller("header_value", name))


def _forwarded_for(adapter: RequestAdapter) -> Optional[str]:
    return parse_forwarded_for(adapter.header_value(X_FORWARDED_FOR))


def _header_sources() -> Tuple[Source, ...]:
    return tuple(
        Source(name, _forwarded_for) if name == X_FORWARDED_FOR else header_source(name)
        for name in HEADER_PRIORITY
    )


DEFAULT_SOURCES: Tuple[Source, ...] = _header_sources() + (
    Source("connection.remoteAddress", methodcaller("connection_remote_address")),
    Source("connection.socket.remoteAddress", methodcaller("connection_socket_remote_address")),
    Source("info.socket.remoteAddress", methodcaller("info_socket_remote_address"), validate=False),
    Source("info.remoteAddress", methodcaller("info_remote_address"), validate=False),
    Source(
        "requestContext.identity.sourceIp",
        methodcaller("request_context_source_ip"),
        validate=False,
    ),
)
