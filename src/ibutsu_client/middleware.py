"""
Request middleware.

Middleware hooks run around every request sent by ``AsyncHTTPClient``. Each
hook may return a replacement object, or None to keep the current one.
"""

from typing import TYPE_CHECKING, Optional

import httpx

if TYPE_CHECKING:
    from ibutsu_client.request import RequestContext


class Middleware:
    """Base class for request middleware; override the hooks you need."""

    async def pre(self, context: "RequestContext") -> Optional["RequestContext"]:
        """Called before the request is sent. May return a modified context."""
        return None

    async def post(
        self,
        context: "RequestContext",
        response: httpx.Response,
    ) -> Optional[httpx.Response]:
        """Called with every received response, before status classification."""
        return None

    async def on_error(
        self,
        context: "RequestContext",
        error: Exception,
    ) -> Optional[httpx.Response]:
        """
        Called when the network call raised.

        Returning a response replaces the failure; returning None lets the
        error surface as a ``TransportError``.
        """
        return None
