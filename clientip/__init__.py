"""
clientip - Client IP address resolution for Python web frameworks

Finds the most plausible originating client IP of a request that may have
passed through any number of reverse proxies or CDNs.

Core Features (No Optional Dependencies):
- Resolver - Ordered cascade over proxy/CDN headers and connection fields
- X-Forwarded-For parsing - Left-most valid entry, ports stripped
- Address validation - IPv4 and IPv6 (compressed and IPv4-tail forms)
- Request adapters - Dicts, plain objects, API Gateway events
- Flexible Logging - Silent by default, supports any logging framework

Optional Features (Require Installation):
- Framework Integrations - FastAPI, aiohttp, Sanic

Usage:
    from clientip import get_client_ip

    get_client_ip({"headers": {"x-forwarded-for": "203.0.113.5, 10.0.0.1"}})
    # '203.0.113.5'

    # Framework integrations
    from clientip.integrations.fastapi import ClientIpMiddleware
    from clientip.integrations.aiohttp import create_client_ip_middleware
    from clientip.integrations.sanic import setup_client_ip
"""

from .config import ClientIpConfig

from .exceptions import (
    ClientIpError,
    ClientIpNotFoundError,
)

from .validation import (
    is_valid_ip,
    is_valid_ipv4,
    is_valid_ipv6,
)

from .forwarded import (
    parse_forwarded_for,
    split_forwarded_for,
)

from .adapters import (
    RequestAdapter,
    MappingRequestAdapter,
    lookup,
    wrap_request,
)

from .sources import (
    Source,
    DEFAULT_SOURCES,
    HEADER_PRIORITY,
    header_source,
)

from .resolver import (
    ClientIp,
    get_client_ip,
    resolve_client_ip,
    require_client_ip,
)

from .logging import (
    configure_logging,
    set_error_handler,
    disable_logging,
    is_logging_enabled,
)

__all__ = [
    # Configuration
    "ClientIpConfig",

    # Exceptions
    "ClientIpError",
    "ClientIpNotFoundError",

    # Validation
    "is_valid_ip",
    "is_valid_ipv4",
    "is_valid_ipv6",

    # X-Forwarded-For
    "parse_forwarded_for",
    "split_forwarded_for",

    # Adapters
    "RequestAdapter",
    "MappingRequestAdapter",
    "lookup",
    "wrap_request",

    # Sources
    "Source",
    "DEFAULT_SOURCES",
    "HEADER_PRIORITY",
    "header_source",

    # Resolver
    "ClientIp",
    "get_client_ip",
    "resolve_client_ip",
    "require_client_ip",

    # Logging Configuration
    "configure_logging",
    "set_error_handler",
    "disable_logging",
    "is_logging_enabled",
]

__version__ = "0.1.0"
__license__ = "MIT"
