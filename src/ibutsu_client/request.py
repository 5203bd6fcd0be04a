"""
Request construction.

Turns a logical operation (method, path template, path/query/header
parameters, body) into a fully resolved ``RequestContext``.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, IO, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote
import json
import re

from pydantic import BaseModel

from ibutsu_client.configuration import Configuration
from ibutsu_client.exceptions import MissingParameterError

FileContent = Union[bytes, IO[bytes]]
FileInput = Union[FileContent, Tuple[str, FileContent], Tuple[str, FileContent, str]]

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


@dataclass
class JSONBody:
    """A JSON request body, already converted to wire form."""
    payload: Any


@dataclass
class MultipartBody:
    """A multipart/form-data body: binary file parts plus text parts."""
    files: List[Tuple[str, FileInput]] = field(default_factory=list)
    fields: Dict[str, str] = field(default_factory=dict)


RequestBody = Union[None, JSONBody, MultipartBody]


@dataclass
class RequestContext:
    """Everything needed to send one request. Built fresh for each call."""
    method: str
    url: str
    query: List[Tuple[str, str]] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    body: RequestBody = None

    def full_url(self, stringify: Optional[Callable[[List[Tuple[str, str]]], str]] = None) -> str:
        if not self.query:
            return self.url
        query_string = (stringify or querystring)(self.query)
        if not query_string:
            return self.url
        return f"{self.url}?{query_string}"


# =============================================================================
# Validation and path rendering
# =============================================================================


def require(params: Mapping[str, Any], *names: str, operation: Optional[str] = None) -> None:
    """Raise MissingParameterError for the first required parameter that is None."""
    for name in names:
        if params.get(name) is None:
            raise MissingParameterError(name, operation=operation)


def render_path(
    template: str,
    path_params: Optional[Mapping[str, Any]] = None,
    *,
    operation: Optional[str] = None,
) -> str:
    """
    Substitute ``{name}`` placeholders with percent-encoded parameter values.

    Raises:
        MissingParameterError: If a placeholder has no value or a None value
    """
    path_params = path_params or {}

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = path_params.get(name)
        if value is None:
            raise MissingParameterError(name, operation=operation)
        return quote(stringify_value(value), safe="")

    return _PLACEHOLDER.sub(substitute, template)


# =============================================================================
# Query encoding
# =============================================================================


def stringify_value(value: Any) -> str:
    """Render a scalar the way it appears in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return stringify_value(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def flatten_query(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten query parameters into ordered (key, value) pairs.

    None values are omitted. Lists produce one pair per element, in order, so
    repeated keys such as ``filter`` keep their multiplicity. Mappings produce
    ``key[sub]`` pairs.
    """
    pairs: List[Tuple[str, str]] = []
    if not params:
        return pairs
    for key, value in params.items():
        _flatten_into(pairs, key, value)
    return pairs


def _flatten_into(pairs: List[Tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten_into(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            if item is not None:
                pairs.append((key, stringify_value(item)))
    else:
        pairs.append((key, stringify_value(value)))


def querystring(pairs: Sequence[Tuple[str, str]]) -> str:
    """Join pairs into a query string, percent-encoding keys and values."""
    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in pairs)


# =============================================================================
# Body encoding
# =============================================================================


def to_wire(value: Any) -> Any:
    """Convert models (and containers of models) to their JSON wire form."""
    if isinstance(value, BaseModel):
        to_json = getattr(value, "to_json", None)
        if callable(to_json):
            return to_json()
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, Mapping):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def json_body(value: Any) -> JSONBody:
    return JSONBody(payload=to_wire(value))


def multipart_body(
    files: Mapping[str, Optional[FileInput]],
    fields: Optional[Mapping[str, Any]] = None,
) -> MultipartBody:
    """
    Build a multipart body.

    Scalar fields become text parts; dicts, lists and models are
    JSON-stringified first. None files and fields are left out.
    """
    body = MultipartBody()
    for name, content in files.items():
        if content is not None:
            body.files.append((name, content))
    for name, value in (fields or {}).items():
        if value is None:
            continue
        if isinstance(value, (BaseModel, Mapping, list, tuple)):
            body.fields[name] = json.dumps(to_wire(value))
        else:
            body.fields[name] = stringify_value(value)
    return body


# =============================================================================
# Context assembly
# =============================================================================


async def build_headers(
    configuration: Configuration,
    headers: Optional[Mapping[str, Optional[str]]] = None,
    body: RequestBody = None,
) -> Dict[str, str]:
    """
    Merge headers for one request.

    Precedence, lowest first: library defaults, configuration default
    headers, the Authorization header, per-call headers.
    """
    merged: Dict[str, str] = {"Accept": "application/json"}
    if isinstance(body, JSONBody):
        merged["Content-Type"] = "application/json"
    merged.update(configuration.default_headers)

    authorization = await configuration.auth_provider.authorization_header(configuration.scopes)
    if authorization:
        merged["Authorization"] = authorization

    for name, value in (headers or {}).items():
        if value is not None:
            merged[name] = value
    return merged


async def build_request_context(
    configuration: Configuration,
    method: str,
    path: str,
    *,
    path_params: Optional[Mapping[str, Any]] = None,
    query: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, Optional[str]]] = None,
    body: RequestBody = None,
    operation: Optional[str] = None,
) -> RequestContext:
    """
    Assemble a RequestContext for one call.

    Path parameters are validated before anything else, so a missing value
    never reaches the token provider or the network.
    """
    resolved_path = render_path(path, path_params, operation=operation)
    return RequestContext(
        method=method.upper(),
        url=f"{configuration.base_path}{resolved_path}",
        query=flatten_query(query),
        headers=await build_headers(configuration, headers, body),
        body=body,
    )
