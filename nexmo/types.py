"""Nexmo SDK Types."""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Union


ControlCommand = Literal["cancel", "trigger_next_event"]

Params = Mapping[str, Any]

# Decoded JSON value, or the raw body for non-JSON responses.
ParsedResponse = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


@dataclass(frozen=True)
class Credentials:
    """API key/secret pair sent with every request."""

    key: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(key={self.key!r}, secret='***')"

    def as_params(self) -> Dict[str, str]:
        return {"api_key": self.key, "api_secret": self.secret}
