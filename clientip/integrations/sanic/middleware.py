"""
Sanic middleware setup for clientip
"""

from typing import Optional

from sanic.response import json as sanic_json

from ...config import ClientIpConfig
from ...logging import get_logger
from .utils import get_client_ip

logger = get_logger(__name__)


def setup_client_ip(app, config: Optional[ClientIpConfig] = None):
    """
    Register request middleware that stores the client IP on request.ctx.

    Example:
        from sanic import Sanic, json
        from clientip.integrations.sanic import setup_client_ip

        app = Sanic("MyApp")
        setup_client_ip(app)

        @app.get("/whoami")
        async def whoami(request):
            return json({"ip": request.ctx.client_ip})

    Args:
        app: Sanic application instance
        config: ClientIpConfig (default: ClientIpConfig())
    """
    config = config or ClientIpConfig()

    @app.middleware("request")
    async def attach_client_ip(request):
        """Resolve and store the client IP before each request"""
        if config.is_excluded(request.path):
            return None

        client_ip = get_client_ip(request)
        setattr(request.ctx, config.attribute_name, client_ip)

        if client_ip is None and config.required:
            logger.warning(f"Client IP unknown: {request.method} {request.path}")
            return sanic_json(
                {"error": config.error_message},
                status=config.status_code,
            )
        return None

    logger.info(f"Client IP middleware configured for Sanic app: {app.name}")
