"""
aiohttp middleware for clientip
"""

from typing import Optional

from aiohttp import web

from ...config import ClientIpConfig
from ...logging import get_logger, log_error
from .utils import get_client_ip

logger = get_logger(__name__)


def create_client_ip_middleware(config: Optional[ClientIpConfig] = None):
    """
    Create aiohttp middleware that stores the client IP on each request.

    The address (or None) is available as request[config.attribute_name].

    Example:
        from aiohttp import web
        from clientip.integrations.aiohttp import create_client_ip_middleware

        app = web.Application(middlewares=[create_client_ip_middleware()])

        async def whoami(request):
            return web.json_response({"ip": request["client_ip"]})

    Args:
        config: ClientIpConfig (default: ClientIpConfig())

    Returns:
        aiohttp middleware function
    """
    config = config or ClientIpConfig()

    @web.middleware
    async def client_ip_middleware(request, handler):
        """Resolve and store the client IP"""
        if config.is_excluded(request.path):
            return await handler(request)

        client_ip = get_client_ip(request)
        # web.Request supports item assignment; hand-built request objects
        # passed straight to the middleware (outside an aiohttp app) may not.
        try:
            request[config.attribute_name] = client_ip
        except TypeError as e:
            log_error(__name__, e, attribute_name=config.attribute_name)

        if client_ip is None and config.required:
            logger.warning(f"Client IP unknown: {request.method} {request.path}")
            return web.json_response(
                {"error": config.error_message},
                status=config.status_code,
            )

        return await handler(request)

    logger.info("Client IP middleware configured for aiohttp app")
    return client_ip_middleware
