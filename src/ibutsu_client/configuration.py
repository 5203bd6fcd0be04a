"""
Client configuration.

A ``Configuration`` is built once per client and never mutated afterwards, so
it can be shared by any number of concurrent calls.
"""

from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union
import os

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ibutsu_client.auth import AuthProvider, auth_provider_for
from ibutsu_client.middleware import Middleware

DEFAULT_BASE_PATH = "http://localhost/api"

QueryStringifier = Callable[[List[Tuple[str, str]]], str]


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.lower() in ["true", "1", "yes", "on"]


class Configuration(BaseModel):
    """
    Immutable snapshot of everything a client needs to issue requests.

    Args:
        base_path: Base URL of the API (e.g., "https://ibutsu.example.com/api")
        default_headers: Headers sent with every request
        access_token: A literal bearer token, or a (sync or async) function
            returning one. Functions are called on every request and may
            accept the list of requested OAuth scopes.
        scopes: OAuth scopes passed to a token function
        middleware: Hooks run around every request
        query_params_stringify: Replacement for the default query encoder
        transport: httpx transport to send requests through
        timeout: Request timeout in seconds, enforced by httpx
        verify_ssl: Whether TLS certificates are verified
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_path: str = DEFAULT_BASE_PATH
    default_headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    access_token: Optional[Union[str, Callable[..., Any], AuthProvider]] = None
    scopes: Tuple[str, ...] = ()
    middleware: Tuple[Middleware, ...] = ()
    query_params_stringify: Optional[QueryStringifier] = None
    transport: Optional[httpx.AsyncBaseTransport] = None
    timeout: Optional[float] = 30.0
    verify_ssl: bool = True

    @field_validator("base_path")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("default_headers", mode="before")
    @classmethod
    def _none_headers(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("default_headers")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_validator("scopes", "middleware", mode="before")
    @classmethod
    def _to_tuple(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, set)):
            return tuple(value)
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "Configuration":
        """
        Build a configuration from the environment.

        Reads ``IBUTSU_API`` (base path), ``IBUTSU_TOKEN`` (bearer token) and
        ``IBUTSU_VERIFY_SSL``. Keyword arguments win over the environment.
        """
        values: dict = {}
        if os.environ.get("IBUTSU_API"):
            values["base_path"] = os.environ["IBUTSU_API"]
        if os.environ.get("IBUTSU_TOKEN"):
            values["access_token"] = os.environ["IBUTSU_TOKEN"]
        values["verify_ssl"] = _env_flag(os.environ.get("IBUTSU_VERIFY_SSL"), True)
        values.update(overrides)
        return cls(**values)

    @property
    def auth_provider(self) -> AuthProvider:
        return auth_provider_for(self.access_token)

    def with_overrides(self, **changes: Any) -> "Configuration":
        """Return a new configuration with some values replaced."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)
