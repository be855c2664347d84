"""Nexmo SDK Exceptions."""


class NexmoError(Exception):
    """Base exception for Nexmo API errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        status_code: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, status_code={self.status_code})"


class AuthenticationError(NexmoError):
    """Raised when the API rejects the key/secret pair (HTTP 401)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR", 401)


class ConfigurationError(NexmoError):
    """Raised when the client cannot be configured, e.g. missing credentials."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", 0)


class TimeoutError(NexmoError):
    """Raised when a request times out."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message, "TIMEOUT", 0)
