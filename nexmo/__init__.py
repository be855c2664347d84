"""Nexmo Python SDK for phone number verification."""

from .client import AsyncClient, Client
from .config import DEFAULT_ENDPOINT_URL, endpoint_url, set_endpoint_url
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    NexmoError,
    TimeoutError,
)
from .types import ControlCommand, Credentials, ParsedResponse

__version__ = "1.0.0"

__all__ = [
    # Clients
    "Client",
    "AsyncClient",
    # Configuration
    "DEFAULT_ENDPOINT_URL",
    "endpoint_url",
    "set_endpoint_url",
    # Types
    "Credentials",
    "ControlCommand",
    "ParsedResponse",
    # Exceptions
    "NexmoError",
    "AuthenticationError",
    "ConfigurationError",
    "TimeoutError",
]
