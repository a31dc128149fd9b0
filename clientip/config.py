"""
Configuration for the client IP middleware integrations.
"""

from dataclasses import dataclass
from typing import Optional, Set


@dataclass
class ClientIpConfig:
    """
    Configuration shared by the FastAPI, aiohttp and Sanic middleware.

    Args:
        attribute_name: Name the resolved address is stored under on the
            request (request.state.<name>, request[<name>], request.ctx.<name>)
        exclude_paths: Paths the middleware leaves untouched
        required: Reject requests whose client IP cannot be determined
        status_code: HTTP status code used when rejecting (default: 400)
        error_message: Message used when rejecting

    Example:
        >>> config = ClientIpConfig(attribute_name="remote_ip", required=True)
        >>> app.add_middleware(ClientIpMiddleware, config=config)
    """
    attribute_name: str = "client_ip"
    exclude_paths: Optional[Set[str]] = None
    required: bool = False
    status_code: int = 400
    error_message: str = "Client IP could not be determined"

    def __post_init__(self):
        """Validate configuration"""
        if not isinstance(self.attribute_name, str) or not self.attribute_name.isidentifier():
            raise ValueError("attribute_name must be a valid Python identifier")
        if not 400 <= self.status_code <= 599:
            raise ValueError("status_code must be a 4xx or 5xx HTTP status")
        if self.exclude_paths is not None:
            self.exclude_paths = set(self.exclude_paths)

    def is_excluded(self, path: str) -> bool:
        return bool(self.exclude_paths) and path in self.exclude_paths
