"""Exceptions raised by the monolite client."""


class MonoliteError(Exception):
    """Base class for all monolite errors."""


class ServerError(MonoliteError):
    """The API answered with an error status.

    Attributes:
        status_code: HTTP status code returned by the API.
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Server error: {status_code}")


class NetworkError(MonoliteError):
    """No response was received (DNS failure, timeout, connection reset)."""

    def __init__(self, message: str = "Network error") -> None:
        super().__init__(message)


class ConfigurationError(MonoliteError):
    """Raised when client or cache configuration is invalid."""
