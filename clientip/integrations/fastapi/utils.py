"""
Utility functions for FastAPI integration
"""

from typing import Optional

from fastapi import Request

from ...adapters import RequestAdapter
from ...resolver import get_client_ip as resolve


class StarletteRequestAdapter(RequestAdapter):
    """
    Adapter for FastAPI / Starlette requests.

    Headers come from request.headers (case-insensitive); the connection
    address is the ASGI client host.
    """

    def __init__(self, request: Request):
        self.request = request

    def header_value(self, name: str) -> Optional[str]:
        headers = getattr(self.request, "headers", None)
        return headers.get(name) if headers is not None else None

    def connection_remote_address(self) -> Optional[str]:
        client = getattr(self.request, "client", None)
        return client.host if client else None


def get_client_ip(request: Request) -> Optional[str]:
    """
    Extract client IP address from request with proxy support.

    Checks the proxy/CDN headers in priority order, then the direct
    connection address.

    Args:
        request: FastAPI Request object

    Returns:
        Client IP address string, or None if unknown
    """
    return resolve(StarletteRequestAdapter(request))
