"""
Sanic Integration for clientip

Example:
    from sanic import Sanic, json
    from clientip.integrations.sanic import setup_client_ip

    app = Sanic("MyApp")
    setup_client_ip(app)

    @app.get("/api/data")
    async def get_data(request):
        return json({"ip": request.ctx.client_ip})
"""

from .middleware import setup_client_ip
from .utils import SanicRequestAdapter, get_client_ip

__all__ = [
    # Setup
    "setup_client_ip",
    # Utilities
    "SanicRequestAdapter",
    "get_client_ip",
]
