"""Tests for request construction."""

import json
from datetime import datetime

import pytest

from ibutsu_client.configuration import Configuration
from ibutsu_client.exceptions import MissingParameterError
from ibutsu_client.models import Run, UpdateRun
from ibutsu_client.request import (
    JSONBody,
    MultipartBody,
    RequestContext,
    build_headers,
    build_request_context,
    flatten_query,
    json_body,
    multipart_body,
    querystring,
    render_path,
    require,
    stringify_value,
)


class TestRenderPath:
    """Tests for path template substitution."""

    def test_substitutes_placeholders(self):
        assert render_path("/project/{id}", {"id": "p1"}) == "/project/p1"

    def test_values_are_percent_encoded(self):
        """Test that reserved characters cannot change the path structure."""
        assert render_path("/project/{id}", {"id": "a b/c?d"}) == "/project/a%20b%2Fc%3Fd"

    def test_missing_value(self):
        """Test that a None path parameter is rejected."""
        with pytest.raises(MissingParameterError) as exc_info:
            render_path("/project/{id}", {"id": None}, operation="get_project")

        assert exc_info.value.parameter == "id"
        assert str(exc_info.value) == (
            "Required parameter 'id' was null or undefined when calling get_project()"
        )

    def test_absent_value(self):
        with pytest.raises(MissingParameterError):
            render_path("/login/config/{provider}", {})


class TestRequire:
    """Tests for required parameter checks."""

    def test_passes_when_present(self):
        require({"run": Run()}, "run", operation="add_run")

    def test_first_missing_parameter_reported(self):
        with pytest.raises(MissingParameterError) as exc_info:
            require({"a": 1, "b": None, "c": None}, "a", "b", "c")
        assert exc_info.value.parameter == "b"


class TestQueryEncoding:
    """Tests for query flattening and encoding."""

    def test_lists_repeat_in_order(self):
        """Test that list values keep their multiplicity and order."""
        pairs = flatten_query({"filter": ["b=2", "a=1", "b=2"]})
        assert pairs == [("filter", "b=2"), ("filter", "a=1"), ("filter", "b=2")]

    def test_none_values_omitted(self):
        pairs = flatten_query({"filter": None, "page": 1, "pageSize": None})
        assert pairs == [("page", "1")]

    def test_empty_list_omitted(self):
        assert flatten_query({"filter": []}) == []

    def test_scalars_stringified(self):
        pairs = flatten_query({"estimate": True, "page": 2, "since": datetime(2024, 5, 1, 10, 0)})
        assert pairs == [
            ("estimate", "true"),
            ("page", "2"),
            ("since", "2024-05-01T10:00:00"),
        ]

    def test_mappings_use_bracket_keys(self):
        pairs = flatten_query({"params": {"project": "p1", "weeks": 4}})
        assert pairs == [("params[project]", "p1"), ("params[weeks]", "4")]

    def test_querystring_encoding(self):
        """Test the exact encoding of a filtered and paged list request."""
        pairs = flatten_query({"filter": ["a=1", "b=2"], "page": 2, "pageSize": 10})
        assert querystring(pairs) == "filter=a%3D1&filter=b%3D2&page=2&pageSize=10"

    def test_querystring_encodes_keys(self):
        assert querystring([("params[weeks]", "4")]) == "params%5Bweeks%5D=4"

    def test_stringify_value(self):
        assert stringify_value(False) == "false"
        assert stringify_value(1.5) == "1.5"


class TestRequestContext:
    """Tests for RequestContext.full_url."""

    def test_without_query(self):
        context = RequestContext(method="GET", url="http://localhost/api/run")
        assert context.full_url() == "http://localhost/api/run"

    def test_with_query(self):
        context = RequestContext(
            method="GET",
            url="http://localhost/api/run",
            query=[("page", "1")],
        )
        assert context.full_url() == "http://localhost/api/run?page=1"

    def test_custom_stringify(self):
        """Test that a configured stringifier replaces the default."""
        context = RequestContext(
            method="GET",
            url="http://localhost/api/run",
            query=[("filter", "a=1")],
        )
        url = context.full_url(lambda pairs: ";".join(f"{k}:{v}" for k, v in pairs))
        assert url == "http://localhost/api/run?filter:a=1"


class TestBodies:
    """Tests for JSON and multipart bodies."""

    def test_json_body_uses_wire_names(self):
        body = json_body(UpdateRun(metadata={"component": "frontend"}))
        assert isinstance(body, JSONBody)
        assert body.payload == {"metadata": {"component": "frontend"}}

    def test_json_body_passes_plain_values(self):
        assert json_body({"a": [1, 2]}).payload == {"a": [1, 2]}

    def test_multipart_body(self):
        """Test that structured fields are JSON strings and None is skipped."""
        body = multipart_body(
            {"file": ("log.txt", b"hello"), "other": None},
            {"filename": "log.txt", "runId": None, "additionalMetadata": {"build": 42}},
        )

        assert isinstance(body, MultipartBody)
        assert body.files == [("file", ("log.txt", b"hello"))]
        assert body.fields["filename"] == "log.txt"
        assert "runId" not in body.fields
        assert json.loads(body.fields["additionalMetadata"]) == {"build": 42}


class TestBuildHeaders:
    """Tests for header precedence."""

    @pytest.mark.asyncio
    async def test_library_defaults(self):
        headers = await build_headers(Configuration(), body=json_body({}))
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"
        assert "Authorization" not in headers

    @pytest.mark.asyncio
    async def test_no_content_type_without_json_body(self):
        headers = await build_headers(Configuration())
        assert "Content-Type" not in headers

    @pytest.mark.asyncio
    async def test_precedence(self):
        """Test defaults < default_headers < Authorization < per-call headers."""
        config = Configuration(
            access_token="tok",
            default_headers={"Accept": "text/plain", "Authorization": "Basic abc", "X-Team": "qe"},
        )

        headers = await build_headers(config)
        assert headers["Accept"] == "text/plain"
        assert headers["Authorization"] == "Bearer tok"
        assert headers["X-Team"] == "qe"

        headers = await build_headers(config, {"Authorization": "Bearer other", "X-Team": None})
        assert headers["Authorization"] == "Bearer other"
        assert headers["X-Team"] == "qe"


class TestBuildRequestContext:
    """Tests for build_request_context."""

    @pytest.mark.asyncio
    async def test_full_context(self):
        config = Configuration(base_path="http://localhost/api", access_token="tok")

        context = await build_request_context(
            config,
            "get",
            "/run/{id}",
            path_params={"id": "r1"},
            query={"page": 1},
        )

        assert context.method == "GET"
        assert context.url == "http://localhost/api/run/r1"
        assert context.query == [("page", "1")]
        assert context.headers["Authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_token_not_requested_when_path_invalid(self):
        """Test that validation fails before the token function runs."""
        calls = []

        def fetch_token():
            calls.append(1)
            return "tok"

        config = Configuration(access_token=fetch_token)

        with pytest.raises(MissingParameterError):
            await build_request_context(config, "GET", "/run/{id}", path_params={"id": None})

        assert calls == []
