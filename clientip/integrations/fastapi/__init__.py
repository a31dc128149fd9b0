"""
FastAPI / Starlette Integration for clientip

Available Middleware:
- ClientIpMiddleware: Resolve the client IP once and store it on request.state

Available Dependencies:
- client_ip_dependency: FastAPI dependency returning the client IP

Utilities:
- get_client_ip: Extract client IP with proxy support
- StarletteRequestAdapter: RequestAdapter over a Starlette request

Example:
    from fastapi import FastAPI, Depends
    from clientip.integrations.fastapi import ClientIpMiddleware, client_ip_dependency

    app = FastAPI()
    app.add_middleware(ClientIpMiddleware)

    @app.get("/ip")
    async def ip(client_ip: str = Depends(client_ip_dependency())):
        return {"ip": client_ip}
"""

from .middleware import ClientIpMiddleware
from .dependencies import client_ip_dependency
from .utils import StarletteRequestAdapter, get_client_ip

__all__ = [
    # Middleware
    "ClientIpMiddleware",
    # Dependencies
    "client_ip_dependency",
    # Utilities
    "StarletteRequestAdapter",
    "get_client_ip",
]
