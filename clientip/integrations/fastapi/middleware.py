"""
Client IP Middleware for FastAPI
"""

from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from ...config import ClientIpConfig
from ...logging import get_logger
from .utils import get_client_ip

logger = get_logger(__name__)


class ClientIpMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware that resolves the client IP once per request.

    The address (or None) is stored on request.state under
    config.attribute_name.

    Example:
        from fastapi import FastAPI, Request
        from clientip import ClientIpConfig
        from clientip.integrations.fastapi import ClientIpMiddleware

        app = FastAPI()
        app.add_middleware(ClientIpMiddleware, config=ClientIpConfig(required=True))

        @app.get("/whoami")
        async def whoami(request: Request):
            return {"ip": request.state.client_ip}
    """

    def __init__(
        self,
        app,
        config: Optional[ClientIpConfig] = None,
        response_factory: Optional[Callable] = None,
    ):
        """
        Initialize middleware

        Args:
            config: ClientIpConfig (default: ClientIpConfig())
            response_factory: Optional callable(request) -> Response used
                when a required client IP is missing
        """
        super().__init__(app)
        self.config = config or ClientIpConfig()
        self.response_factory = response_factory

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Resolve and store the client IP"""
        if self.config.is_excluded(request.url.path):
            return await call_next(request)

        client_ip = get_client_ip(request)
        setattr(request.state, self.config.attribute_name, client_ip)

        if client_ip is None and self.config.required:
            logger.warning(f"Client IP unknown: {request.method} {request.url.path}")

            if self.response_factory:
                return self.response_factory(request)

            return JSONResponse(
                status_code=self.config.status_code,
                content={"detail": self.config.error_message},
            )

        return await call_next(request)
