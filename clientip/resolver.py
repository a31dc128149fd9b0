"""
Client IP resolution.

Walks the source cascade in priority order and returns the first match:

1. Proxy/CDN headers: x-client-ip, x-forwarded-for (left-most valid entry),
   cf-connecting-ip, fastly-client-ip, true-client-ip, x-real-ip,
   x-cluster-client-ip, x-forwarded, forwarded-for, forwarded
2. connection.remoteAddress, connection.socket.remoteAddress
3. info.socket.remoteAddress, info.remoteAddress,
   requestContext.identity.sourceIp (returned without syntax checks)

Header-derived addresses are supplied by the client or by whatever proxy
sits in front of the server. Use the result for logging and coarse rate
limiting, never for authentication.
"""

from typing import Any, NamedTuple, Optional, Sequence

from .adapters import wrap_request
from .exceptions import ClientIpNotFoundError
from .logging import get_logger
from .sources import DEFAULT_SOURCES, Source
from .validation import is_valid_ip

logger = get_logger(__name__)


class ClientIp(NamedTuple):
    """A resolved address and the name of the source it came from."""
    ip: str
    source: str


def resolve_client_ip(
    request: Any,
    sources: Sequence[Source] = DEFAULT_SOURCES,
) -> Optional[ClientIp]:
    """
    Resolve the client IP of a request along with its source.

    Args:
        request: A RequestAdapter, or any mapping/object shaped like a
            Node, hapi or API Gateway request
        sources: Cascade to walk (default: DEFAULT_SOURCES)

    Returns:
        ClientIp(ip, source), or None if no source matched
    """
    adapter = wrap_request(request)

    for source in sources:
        candidate = source.extractor(adapter)
        if source.validate:
            if not is_valid_ip(candidate):
                continue
        elif not candidate:
            continue

        logger.debug(f"Client IP {candidate} resolved from {source.name}")
        return ClientIp(candidate, source.name)

    logger.debug("No client IP source matched")
    return None


def get_client_ip(request: Any) -> Optional[str]:
    """
    Determine the client IP address of a request.

    Never raises for missing or malformed input; anything unusable just
    moves on to the next source.

    Example:
        >>> get_client_ip({"headers": {"x-forwarded-for": "not-an-ip, 9.9.9.9"}})
        '9.9.9.9'
        >>> get_client_ip({}) is None
        True

    Returns:
        The address, or None if it is unknown
    """
    resolved = resolve_client_ip(request)
    return resolved.ip if resolved else None


def require_client_ip(request: Any) -> str:
    """
    Like get_client_ip, but raise when the address is unknown.

    Raises:
        ClientIpNotFoundError: If no source yields an address
    """
    resolved = resolve_client_ip(request)
    if resolved is None:
        raise ClientIpNotFoundError()
    return resolved.ip
