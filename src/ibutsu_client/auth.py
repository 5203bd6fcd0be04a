"""
Authentication providers.

A provider decides, for every outgoing request, whether an ``Authorization``
header is attached and with which bearer token.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Sequence, Union
import inspect

TokenCallable = Callable[..., Union[str, Awaitable[str]]]
AccessToken = Union[str, TokenCallable]


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_access_token(self, scopes: Sequence[str] = ()) -> Optional[str]:
        """Resolve the token to use for the next request."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if requests will carry credentials."""
        ...

    async def authorization_header(self, scopes: Sequence[str] = ()) -> Optional[str]:
        """Return the ``Authorization`` header value, or None for anonymous calls."""
        token = await self.get_access_token(scopes)
        if not token:
            return None
        return f"Bearer {token}"


class NoAuthProvider(AuthProvider):
    """Anonymous access: no Authorization header is ever added."""

    async def get_access_token(self, scopes: Sequence[str] = ()) -> Optional[str]:
        return None

    def is_authenticated(self) -> bool:
        return False


class StaticTokenProvider(AuthProvider):
    """The same literal token is used for every request."""

    def __init__(self, access_token: str):
        self._access_token = access_token

    async def get_access_token(self, scopes: Sequence[str] = ()) -> Optional[str]:
        return self._access_token

    def is_authenticated(self) -> bool:
        return bool(self._access_token)


class CallableTokenProvider(AuthProvider):
    """
    Token supplied by a function, invoked fresh on every request.

    The function may be sync or async. When it accepts a positional
    argument it receives the list of requested OAuth scopes. Nothing is
    cached, so rotating or short-lived tokens are picked up immediately.
    Exceptions raised by the function propagate unchanged.
    """

    def __init__(self, callback: TokenCallable):
        self._callback = callback
        self._pass_scopes = _accepts_argument(callback)

    async def get_access_token(self, scopes: Sequence[str] = ()) -> Optional[str]:
        if self._pass_scopes:
            result: Any = self._callback(list(scopes))
        else:
            result = self._callback()
        if inspect.isawaitable(result):
            result = await result
        return result

    def is_authenticated(self) -> bool:
        return True


def _accepts_argument(func: Callable) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return True
    return False


def auth_provider_for(access_token: Optional[Union[AccessToken, AuthProvider]]) -> AuthProvider:
    """Pick the provider matching the shape of a configured access token."""
    if access_token is None:
        return NoAuthProvider()
    if isinstance(access_token, AuthProvider):
        return access_token
    if isinstance(access_token, str):
        return StaticTokenProvider(access_token)
    if callable(access_token):
        return CallableTokenProvider(access_token)
    raise TypeError(
        f"access_token must be a string or a callable, not {type(access_token).__name__}"
    )
