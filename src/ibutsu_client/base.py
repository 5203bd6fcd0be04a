"""
Base class for resource API clients.

Resource APIs declare paths, parameters and models; this class turns each
call into a ``RequestContext``, sends it and wraps the response.
"""

from typing import Any, Callable, Mapping, Optional, TypeVar

import httpx

from ibutsu_client.configuration import Configuration
from ibutsu_client.exceptions import RequestCancelledError
from ibutsu_client.http import AsyncHTTPClient
from ibutsu_client.request import RequestBody, build_request_context, require
from ibutsu_client.response import BlobApiResponse, JSONApiResponse, TextApiResponse, VoidApiResponse

T = TypeVar("T")


class BaseAPI:
    """
    Common functionality for resource API clients.

    Operations come in pairs: ``get_run`` returns the decoded model and
    ``get_run_raw`` returns the response wrapper (status, headers, and a
    ``value()`` that decodes on demand).

    Every operation accepts two keyword-only options, forwarded to the
    request: ``headers`` (per-call headers, winning over configured ones)
    and ``cancel`` (an ``asyncio.Event`` that aborts the call when set).
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        *,
        http_client: Optional[AsyncHTTPClient] = None,
    ):
        """
        Initialize the API client.

        Args:
            configuration: Client configuration; ignored when ``http_client``
                is given
            http_client: Shared executor, e.g. the one owned by ``IbutsuClient``
        """
        self._owns_http = http_client is None
        self._http = http_client or AsyncHTTPClient(configuration)

    @property
    def configuration(self) -> Configuration:
        return self._http.configuration

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def _require(operation: str, **params: Any) -> None:
        require(params, *params, operation=operation)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        body: RequestBody = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        cancel: Any = None,
    ) -> httpx.Response:
        """Build the request context and send it."""
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("Request was cancelled before it was sent")
        context = await build_request_context(
            self.configuration,
            method,
            path,
            path_params=path_params,
            query=query,
            headers=headers,
            body=body,
            operation=operation,
        )
        return await self._http.send(context, cancel=cancel)

    async def _json(
        self,
        method: str,
        path: str,
        transformer: Optional[Callable[[Any], T]] = None,
        **kwargs: Any,
    ) -> JSONApiResponse[T]:
        response = await self._request(method, path, **kwargs)
        return JSONApiResponse(response, transformer)

    async def _void(self, method: str, path: str, **kwargs: Any) -> VoidApiResponse:
        response = await self._request(method, path, **kwargs)
        return VoidApiResponse(response)

    async def _blob(self, method: str, path: str, **kwargs: Any) -> BlobApiResponse:
        response = await self._request(method, path, **kwargs)
        return BlobApiResponse(response)

    async def _text(self, method: str, path: str, **kwargs: Any) -> TextApiResponse:
        response = await self._request(method, path, **kwargs)
        return TextApiResponse(response)
