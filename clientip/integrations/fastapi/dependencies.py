"""
FastAPI dependency injection utilities for clientip
"""

from typing import Optional

from fastapi import HTTPException, Request
from starlette.status import HTTP_400_BAD_REQUEST

from .utils import get_client_ip


def client_ip_dependency(
    required: bool = False,
    error_message: str = "Client IP could not be determined",
    status_code: int = HTTP_400_BAD_REQUEST,
):
    """
    Create FastAPI dependency that provides the client IP.

    Example:
        from fastapi import FastAPI, Depends
        from clientip.integrations.fastapi import client_ip_dependency

        app = FastAPI()

        @app.get("/api/data")
        async def get_data(client_ip: str = Depends(client_ip_dependency(required=True))):
            return {"ip": client_ip}

    Args:
        required: Raise HTTPException instead of returning None when unknown
        error_message: Custom error message
        status_code: HTTP status code (default: 400)

    Returns:
        FastAPI dependency function
    """
    async def client_ip_from_request(request: Request) -> Optional[str]:
        client_ip = get_client_ip(request)
        if client_ip is None and required:
            raise HTTPException(status_code=status_code, detail=error_message)
        return client_ip

    return client_ip_from_request
