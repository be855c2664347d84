"""Nexmo Verify SDK Client."""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple
from urllib.parse import quote_plus

import httpx

from .config import endpoint_url, resolve_credentials
from .exceptions import AuthenticationError, NexmoError, TimeoutError
from .types import ControlCommand, Credentials, Params, ParsedResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "nexmo-python/1.0.0"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

START_PATH = "/verify/json"
CHECK_PATH = "/verify/check/json"
SEARCH_PATH = "/verify/search/json"
CONTROL_PATH = "/verify/control/json"


def _values(value: Any) -> Iterable[Any]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return value
    return (value,)


def _escape(component: Any) -> str:
    if isinstance(component, bool):
        component = "true" if component else "false"
    return quote_plus(str(component))


def query_string(params: Params) -> str:
    """Form-encode ``params``, emitting one ``key=value`` pair per list element."""
    return "&".join(
        f"{_escape(key)}={_escape(value)}"
        for key, values in params.items()
        for value in _values(values)
    )


def merge_params(params: Optional[Params], extra: Params, credentials: Credentials) -> Dict[str, Any]:
    """Merge caller params, call-specific fields and credentials, in that order."""
    merged: Dict[str, Any] = dict(params or {})
    merged.update(extra)
    merged.update(credentials.as_params())
    return merged


def build_url(base_url: str, path: str) -> httpx.URL:
    """Resolve ``path`` against ``base_url``, always over HTTPS."""
    if "?" in path or "#" in path:
        raise ValueError(f"Path must not contain a query or fragment: {path!r}")
    return httpx.URL(base_url).join(path).copy_with(scheme="https")


def parse_response(response: httpx.Response) -> ParsedResponse:
    """Turn a raw response into decoded JSON, body text, or an exception."""
    status = response.status_code

    if response.is_success:
        content_type = response.headers.get("Content-Type", "")
        if content_type.split(";")[0].strip().lower() == JSON_CONTENT_TYPE:
            return response.json()
        return response.text

    if status == 401:
        raise AuthenticationError()

    raise NexmoError(f"Unexpected HTTP response (code={status})", "HTTP_ERROR", status)


def _prepare(
    method: str,
    base_url: str,
    path: str,
    params: Dict[str, Any],
) -> Tuple[httpx.URL, Optional[bytes], Dict[str, str]]:
    url = build_url(base_url, path)
    encoded = query_string(params).encode("ascii")

    if method == "GET":
        return url.copy_with(query=encoded), None, {}

    return url, encoded, {"Content-Type": FORM_CONTENT_TYPE}


class Client:
    """Nexmo Verify API Client."""

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the Nexmo client.

        Args:
            key: Your API key (default: NEXMO_API_KEY environment variable).
            secret: Your API secret (default: NEXMO_API_SECRET environment variable).
            base_url: API base URL. When omitted, the process-wide endpoint
                from ``nexmo.config.endpoint_url()`` is read on every request.
            timeout: Request timeout in seconds (default: 30).
            transport: httpx transport to send requests through.
        """
        self.credentials = resolve_credentials(key, secret)
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.Client(
            timeout=self.timeout,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        )

    @property
    def key(self) -> str:
        return self.credentials.key

    @property
    def secret(self) -> str:
        return self.credentials.secret

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Params] = None,
        **extra: Any,
    ) -> ParsedResponse:
        """Make an HTTP request to the API."""
        merged = merge_params(params, extra, self.credentials)
        url, content, headers = _prepare(method, self.base_url or endpoint_url(), path, merged)

        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}")
        except httpx.RequestError as e:
            raise NexmoError(f"Network error: {e}", "NETWORK_ERROR", 0)
        logger.debug("%s %s -> %d", method, path, response.status_code)

        return parse_response(response)

    def start_verification(self, params: Optional[Params] = None, **kwargs: Any) -> ParsedResponse:
        """Start a verification workflow.

        Args:
            params: Request fields, e.g. ``{"number": "447700900000", "brand": "Acme"}``.
                Keyword arguments are merged on top.

        Returns:
            Decoded JSON response, usually containing ``request_id``.
        """
        return self._request("POST", START_PATH, dict(params or {}, **kwargs))

    def check_verification(self, request_id: str, params: Optional[Params] = None, **kwargs: Any) -> ParsedResponse:
        """Check the code a user entered for a verification.

        Args:
            request_id: ID returned by ``start_verification``.
            params: Request fields, usually ``{"code": "1234"}``.
        """
        return self._request("POST", CHECK_PATH, dict(params or {}, **kwargs), request_id=request_id)

    def get_verification(self, request_id: str) -> ParsedResponse:
        """Look up the current state of a verification."""
        return self._request("GET", SEARCH_PATH, request_id=request_id)

    def cancel_verification(self, request_id: str) -> ParsedResponse:
        return self._control(request_id, "cancel")

    def trigger_next_verification_event(self, request_id: str) -> ParsedResponse:
        return self._control(request_id, "trigger_next_event")

    def _control(self, request_id: str, cmd: ControlCommand) -> ParsedResponse:
        return self._request("POST", CONTROL_PATH, request_id=request_id, cmd=cmd)


class AsyncClient:
    """Async Nexmo Verify API Client."""

    def __init__(
        self,
        key: Optional[str] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the async Nexmo client."""
        self.credentials = resolve_credentials(key, secret)
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        )

    @property
    def key(self) -> str:
        return self.credentials.key

    @property
    def secret(self) -> str:
        return self.credentials.secret

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Params] = None,
        **extra: Any,
    ) -> ParsedResponse:
        """Make an async HTTP request to the API."""
        merged = merge_params(params, extra, self.credentials)
        url, content, headers = _prepare(method, self.base_url or endpoint_url(), path, merged)

        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}")
        except httpx.RequestError as e:
            raise NexmoError(f"Network error: {e}", "NETWORK_ERROR", 0)
        logger.debug("%s %s -> %d", method, path, response.status_code)

        return parse_response(response)

    async def start_verification(self, params: Optional[Params] = None, **kwargs: Any) -> ParsedResponse:
        return await self._request("POST", START_PATH, dict(params or {}, **kwargs))

    async def check_verification(
        self, request_id: str, params: Optional[Params] = None, **kwargs: Any
    ) -> ParsedResponse:
        return await self._request("POST", CHECK_PATH, dict(params or {}, **kwargs), request_id=request_id)

    async def get_verification(self, request_id: str) -> ParsedResponse:
        return await self._request("GET", SEARCH_PATH, request_id=request_id)

    async def cancel_verification(self, request_id: str) -> ParsedResponse:
        return await self._request("POST", CONTROL_PATH, request_id=request_id, cmd="cancel")

    async def trigger_next_verification_event(self, request_id: str) -> ParsedResponse:
        return await self._request("POST", CONTROL_PATH, request_id=request_id, cmd="trigger_next_event")
