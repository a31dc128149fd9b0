"""
Exception classes for clientip.

Resolution itself never raises; these are used by the strict helpers
(require_client_ip, client_ip_dependency) that turn "unknown" into an error.
"""

from typing import Optional


class ClientIpError(Exception):
    """
    Base exception for all clientip errors.

    Attributes:
        message: Error message
        source: Name of the source involved, if any
        metadata: Additional context information
    """

    def __init__(self, message: str, source: Optional[str] = None, **metadata):
        super().__init__(message)
        self.source = source
        self.metadata = metadata

    def __repr__(self):
        parts = [f"{self.__class__.__name__}('{str(self)}')"]
        if self.source:
            parts.append(f"source='{self.source}'")
        if self.metadata:
            parts.append(f"metadata={self.metadata}")
        return f"<{', '.join(parts)}>"


class ClientIpNotFoundError(ClientIpError):
    """Raised when no source yields a client IP address."""

    def __init__(self, message: str = "Client IP could not be determined", **metadata):
        super().__init__(message, **metadata)
