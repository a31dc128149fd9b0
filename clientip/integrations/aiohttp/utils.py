"""
Utility functions for aiohttp integration
"""

from typing import Optional

from ...adapters import RequestAdapter
from ...resolver import get_client_ip as resolve


class AiohttpRequestAdapter(RequestAdapter):
    """
    Adapter for aiohttp web.Request objects.

    The connection address is request.remote, falling back to the
    transport's peername when remote is not available.
    """

    def __init__(self, request):
        self.request = request

    def header_value(self, name: str) -> Optional[str]:
        headers = getattr(self.request, "headers", None)
        return headers.get(name) if headers is not None else None

    def connection_remote_address(self) -> Optional[str]:
        remote = getattr(self.request, "remote", None)
        if isinstance(remote, str):
            return remote

        transport = getattr(self.request, "transport", None)
        peername = transport.get_extra_info('peername') if transport else None
        if isinstance(peername, (tuple, list)) and peername:
            return peername[0]
        return None


def get_client_ip(request) -> Optional[str]:
    """
    Extract client IP address from aiohttp request with proxy support.

    Args:
        request: aiohttp Request object

    Returns:
        Client IP address string, or None if unknown
    """
    return resolve(AiohttpRequestAdapter(request))
