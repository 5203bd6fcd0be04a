"""
Response wrappers.

A wrapper holds the raw (fully read) ``httpx.Response`` of a successful call
and decodes its body into the shape the endpoint declares.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from ibutsu_client.exceptions import DecodeError

T = TypeVar("T")


_BODY_FRAMING_HEADERS = ("content-encoding", "content-length", "transfer-encoding")


def snapshot(response: httpx.Response) -> httpx.Response:
    """Copy a read response so status, headers and body can be inspected again."""
    # content is already decoded, so framing headers must not be replayed
    headers = [
        (name, value)
        for name, value in response.headers.multi_items()
        if name.lower() not in _BODY_FRAMING_HEADERS
    ]
    try:
        request = response.request
    except RuntimeError:
        request = None
    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        content=response.content,
        request=request,
    )


def has_body(response: httpx.Response) -> bool:
    return response.status_code != 204 and bool(response.content)


class ApiResponse(Generic[T]):
    """Base wrapper around a successful raw response."""

    def __init__(self, raw: httpx.Response):
        self.raw = raw

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    def value(self) -> T:
        raise NotImplementedError

    def clone(self) -> "ApiResponse[T]":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.raw = snapshot(self.raw)
        return clone


class JSONApiResponse(ApiResponse[T]):
    """
    JSON body, optionally passed through a transformer such as
    ``Project.from_json``. An empty body decodes to None.
    """

    def __init__(
        self,
        raw: httpx.Response,
        transformer: Optional[Callable[[Any], T]] = None,
    ):
        super().__init__(raw)
        self.transformer = transformer

    def value(self) -> Optional[T]:
        if not has_body(self.raw):
            return None
        try:
            data = self.raw.json()
        except ValueError as e:
            raise DecodeError(
                f"Response body is not valid JSON: {e}",
                status_code=self.raw.status_code,
                body=self.raw.text,
                cause=e,
            ) from e
        if self.transformer is None:
            return data
        try:
            return self.transformer(data)
        except (PydanticValidationError, ValueError, TypeError) as e:
            raise DecodeError(
                f"Response body does not match the expected shape: {e}",
                status_code=self.raw.status_code,
                body=self.raw.text,
                cause=e,
            ) from e


class VoidApiResponse(ApiResponse[None]):
    """No value is expected from the body."""

    def value(self) -> None:
        return None


class BlobApiResponse(ApiResponse[bytes]):
    """Binary body, e.g. an artifact download."""

    def value(self) -> bytes:
        return self.raw.content


class TextApiResponse(ApiResponse[str]):
    """Raw text body."""

    def value(self) -> str:
        return self.raw.text
