"""Process-wide endpoint and credential resolution."""

import logging
import os
import threading
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .types import Credentials

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_URL = "https://api.nexmo.com"

API_KEY_ENV = "NEXMO_API_KEY"
API_SECRET_ENV = "NEXMO_API_SECRET"

_endpoint_lock = threading.Lock()
_endpoint_url = DEFAULT_ENDPOINT_URL


def endpoint_url() -> str:
    """Return the API base URL used by clients without an explicit base_url."""
    with _endpoint_lock:
        return _endpoint_url


def set_endpoint_url(url: str) -> None:
    """Point every client without an explicit base_url at ``url``.

    Requests that have already built their URL are unaffected.
    """
    global _endpoint_url
    if not url:
        raise ValueError("Endpoint URL must not be empty")
    with _endpoint_lock:
        _endpoint_url = url
    logger.debug("Nexmo endpoint set to %s", url)


def reset_endpoint_url() -> None:
    set_endpoint_url(DEFAULT_ENDPOINT_URL)


def resolve_credentials(
    key: Optional[str] = None,
    secret: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Credentials:
    """Resolve the API key and secret.

    Args:
        key: Explicit API key. Falls back to ``NEXMO_API_KEY``.
        secret: Explicit API secret. Falls back to ``NEXMO_API_SECRET``.
        environ: Mapping to read fallbacks from (default: ``os.environ``).

    Returns:
        Immutable Credentials.

    Raises:
        ConfigurationError: If either value is missing from both sources.
    """
    env = os.environ if environ is None else environ

    if key is None:
        key = env.get(API_KEY_ENV)
    if secret is None:
        secret = env.get(API_SECRET_ENV)

    if not key:
        raise ConfigurationError(f"API key is required (pass key= or set {API_KEY_ENV})")
    if not secret:
        raise ConfigurationError(f"API secret is required (pass secret= or set {API_SECRET_ENV})")

    return Credentials(key=key, secret=secret)
