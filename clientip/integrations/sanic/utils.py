"""
Utility functions for Sanic integration
"""

from typing import Optional

from ...adapters import RequestAdapter
from ...resolver import get_client_ip as resolve


class SanicRequestAdapter(RequestAdapter):
    """
    Adapter for Sanic Request objects.

    Uses request.ip (the socket peer) as the connection address; proxy
    headers are handled by the resolver, not by Sanic's remote_addr.
    """

    def __init__(self, request):
        self.request = request

    def header_value(self, name: str) -> Optional[str]:
        headers = getattr(self.request, "headers", None)
        return headers.get(name) if headers is not None else None

    def connection_remote_address(self) -> Optional[str]:
        return getattr(self.request, "ip", None) or None


def get_client_ip(request) -> Optional[str]:
    """
    Extract client IP address from Sanic request with proxy support.

    Args:
        request: Sanic Request object

    Returns:
        Client IP address string, or None if unknown
    """
    return resolve(SanicRequestAdapter(request))
