"""
Async HTTP executor for the Ibutsu API.

Sends a ``RequestContext`` through httpx and classifies the outcome:

- 2xx: the fully read ``httpx.Response`` is returned;
- any other status: a ``ResponseError`` subclass is raised;
- no response at all: the transport exception is wrapped in a
  ``TransportError``.

Nothing is retried; every failure reaches the caller immediately.
"""

from typing import Optional
import asyncio
import logging

import httpx

from ibutsu_client.configuration import Configuration
from ibutsu_client.exceptions import (
    ConnectionFailedError,
    RequestCancelledError,
    RequestTimeoutError,
    ResponseError,
    TransportError,
    exception_from_response,
)
from ibutsu_client.request import JSONBody, MultipartBody, RequestContext

logger = logging.getLogger(__name__)


def transport_error_from(error: Exception) -> TransportError:
    """Wrap an exception raised by the network call."""
    if isinstance(error, httpx.TimeoutException):
        return RequestTimeoutError(f"Request timed out: {error}", cause=error)
    if isinstance(error, httpx.ConnectError):
        return ConnectionFailedError(f"Connection failed: {error}", cause=error)
    return TransportError(f"Request failed: {error!r}", cause=error)


def error_from_response(response: httpx.Response) -> ResponseError:
    """Build the ResponseError for a non-2xx response, parsing JSON when possible."""
    try:
        body = response.json()
    except ValueError:
        body = response.text
    return exception_from_response(
        response.status_code,
        reason=response.reason_phrase,
        body=body,
        headers=response.headers,
    )


class AsyncHTTPClient:
    """
    Executes requests for the resource APIs.

    The underlying ``httpx.AsyncClient`` (and its connection pool) is created
    lazily from the configuration, or can be passed in. The configuration is
    only read, never modified, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            configuration: Client configuration (defaults to ``Configuration()``)
            client: An existing httpx client to send requests with. It is not
                closed by ``close()``.
        """
        self.configuration = configuration or Configuration()
        self._client = client
        self._owns_client = client is None

    @property
    def borrowed_client(self) -> Optional[httpx.AsyncClient]:
        """The caller-provided httpx client, or None when this instance owns its own."""
        if self._owns_client:
            return None
        return self._client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            options = {
                "timeout": httpx.Timeout(self.configuration.timeout),
                "verify": self.configuration.verify_ssl,
                "follow_redirects": True,
            }
            if self.configuration.transport is not None:
                options["transport"] = self.configuration.transport
            self._client = httpx.AsyncClient(**options)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        if self._owns_client:
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_request(self, client: httpx.AsyncClient, context: RequestContext) -> httpx.Request:
        url = context.full_url(self.configuration.query_params_stringify)
        body = context.body
        if isinstance(body, JSONBody):
            return client.build_request(context.method, url, headers=context.headers, json=body.payload)
        if isinstance(body, MultipartBody):
            headers = {
                name: value
                for name, value in context.headers.items()
                if name.lower() != "content-type"
            }
            return client.build_request(
                context.method,
                url,
                headers=headers,
                data=body.fields,
                files=body.files,
            )
        return client.build_request(context.method, url, headers=context.headers)

    async def _fetch(
        self,
        client: httpx.AsyncClient,
        request: httpx.Request,
        cancel: Optional[asyncio.Event],
    ) -> httpx.Response:
        if cancel is None:
            return await client.send(request)

        send_task = asyncio.ensure_future(client.send(request))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            cancel_task.cancel()
            if not send_task.done():
                send_task.cancel()
                await asyncio.gather(send_task, return_exceptions=True)
        if send_task in done:
            return send_task.result()
        raise RequestCancelledError("Request was cancelled")

    async def send(
        self,
        context: RequestContext,
        *,
        cancel: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """
        Send a request and return its successful response.

        Args:
            context: The resolved request
            cancel: Optional event; setting it aborts the call

        Returns:
            The fully read httpx.Response (status in [200, 300))

        Raises:
            ResponseError: On a status outside [200, 300)
            TransportError: When no response was received
        """
        middleware = self.configuration.middleware
        for hook in middleware:
            context = await hook.pre(context) or context

        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("Request was cancelled before it was sent")

        client = await self._get_client()
        request = self._build_request(client, context)
        logger.debug(f"{request.method} {request.url}")

        try:
            response = await self._fetch(client, request, cancel)
        except RequestCancelledError:
            raise
        except Exception as e:
            response = None
            for hook in middleware:
                response = await hook.on_error(context, e) or response
            if response is None:
                logger.warning(f"{request.method} {request.url} failed: {e!r}")
                raise transport_error_from(e) from e

        for hook in middleware:
            response = await hook.post(context, response) or response

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.is_success:
            raise error_from_response(response)
        return response
