"""
Framework Integrations for clientip

Available integrations:
- FastAPI / Starlette (clientip.integrations.fastapi)
- Sanic (clientip.integrations.sanic)
- aiohttp (clientip.integrations.aiohttp)
"""

__all__ = []
