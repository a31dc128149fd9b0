"""
aiohttp Integration for clientip

Example:
    from aiohttp import web
    from clientip.integrations.aiohttp import create_client_ip_middleware

    app = web.Application()
    app.middlewares.append(create_client_ip_middleware())

    async def get_data(request):
        return web.json_response({"ip": request["client_ip"]})

    app.router.add_get("/api/data", get_data)
"""

from .middleware import create_client_ip_middleware
from .utils import AiohttpRequestAdapter, get_client_ip

__all__ = [
    # Middleware
    "create_client_ip_middleware",
    # Utilities
    "AiohttpRequestAdapter",
    "get_client_ip",
]
