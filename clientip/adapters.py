"""
Request adapters.

The resolver never touches a request object directly. It asks a
RequestAdapter for each value it needs, and every accessor answers with the
value or None. Missing attributes, missing keys and None intermediates are
all reported as None.
"""

from collections.abc import Mapping
from typing import Any, Optional, Tuple, Union

PathKey = Union[str, Tuple[str, ...]]

# camelCase first, then the snake_case spelling Python objects tend to use
REMOTE_ADDRESS = ("remoteAddress", "remote_address")
REQUEST_CONTEXT = ("requestContext", "request_context")
SOURCE_IP = ("sourceIp", "source_ip")


def _step(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping) and name in obj:
        return obj[name]
    return getattr(obj, name, None)


def lookup(obj: Any, *path: PathKey) -> Any:
    """
    Null-safe nested lookup over mappings and attribute objects.

    Each path element is a key name or a tuple of alternative names tried
    in order; the first one holding a non-None value wins.

    Example:
        >>> lookup({"info": {"socket": None}}, "info", "socket", "remoteAddress")
        >>> lookup({"a": {"b": 1}}, "a", ("x", "b"))
        1
    """
    for key in path:
        if obj is None:
            return None
        names = (key,) if isinstance(key, str) else key
        value = None
        for name in names:
            value = _step(obj, name)
            if value is not None:
                break
        obj = value
    return obj


class RequestAdapter:
    """
    Capability set the resolver reads from.

    Every accessor returns None when the request does not have the value.
    Subclasses override the accessors their request type can answer; the
    rest keep the default of None.
    """

    def header_value(self, name: str) -> Optional[Any]:
        """Value of the lower-case header `name`."""
        return None

    def connection_remote_address(self) -> Optional[Any]:
        return None

    def connection_socket_remote_address(self) -> Optional[Any]:
        return None

    def info_socket_remote_address(self) -> Optional[Any]:
        return None

    def info_remote_address(self) -> Optional[Any]:
        return None

    def request_context_source_ip(self) -> Optional[Any]:
        return None


class MappingRequestAdapter(RequestAdapter):
    """
    Adapter for duck-typed requests built from mappings or plain objects.

    Understands Node-style shapes ({"headers": ..., "connection":
    {"remoteAddress": ...}}), hapi-style "info" objects and AWS API Gateway
    proxy events ({"requestContext": {"identity": {"sourceIp": ...}}}).

    Example:
        >>> adapter = MappingRequestAdapter({"headers": {"x-real-ip": "8.8.8.8"}})
        >>> adapter.header_value("x-real-ip")
        '8.8.8.8'
    """

    def __init__(self, request: Any):
        self.request = request

    def header_value(self, name: str) -> Optional[Any]:
        headers = lookup(self.request, "headers")
        if not hasattr(headers, "get"):
            # Mapping requests such as Starlette's expose the raw ASGI
            # header list under the "headers" key and the real container
            # as an attribute.
            headers = getattr(self.request, "headers", None)
        if headers is None or not hasattr(headers, "get"):
            return None
        return headers.get(name)

    def connection_remote_address(self) -> Optional[Any]:
        return lookup(self.request, "connection", REMOTE_ADDRESS)

    def connection_socket_remote_address(self) -> Optional[Any]:
        return lookup(self.request, "connection", "socket", REMOTE_ADDRESS)

    def info_socket_remote_address(self) -> Optional[Any]:
        return lookup(self.request, "info", "socket", REMOTE_ADDRESS)

    def info_remote_address(self) -> Optional[Any]:
        return lookup(self.request, "info", REMOTE_ADDRESS)

    def request_context_source_ip(self) -> Optional[Any]:
        return lookup(self.request, REQUEST_CONTEXT, "identity", SOURCE_IP)


def wrap_request(request: Any) -> RequestAdapter:
    """Return `request` itself if it is already an adapter, else wrap it."""
    if isinstance(request, RequestAdapter):
        return request
    return MappingRequestAdapter(request)
