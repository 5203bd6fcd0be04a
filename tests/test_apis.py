"""Tests for the resource API clients."""

import asyncio
import json
from datetime import datetime

import httpx
import pytest

from ibutsu_client.apis import (
    ArtifactApi,
    DashboardApi,
    HealthApi,
    ImportApi,
    LoginApi,
    ProjectApi,
    ResultApi,
    RunApi,
    UserApi,
    WidgetApi,
)
from ibutsu_client.exceptions import (
    DecodeError,
    MissingParameterError,
    NotFoundError,
    RequestCancelledError,
)
from ibutsu_client.models import (
    AccountReset,
    CreateToken,
    Credentials,
    Project,
    ProjectList,
    Result,
    Run,
    UpdateRun,
)


class TestProjectApi:
    """Tests for ProjectApi."""

    @pytest.mark.asyncio
    async def test_get_project(self, configuration, transport, mock_project_data):
        """Test the request sent for a single project and its decoding."""
        transport.respond_with(200, json=mock_project_data)

        async with ProjectApi(configuration) as api:
            project = await api.get_project("p1")

        request = transport.last_request
        assert request.method == "GET"
        assert str(request.url) == "http://localhost/api/project/p1"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Accept"] == "application/json"
        assert isinstance(project, Project)
        assert project.title == "My Project"

    @pytest.mark.asyncio
    async def test_get_project_raw(self, configuration, transport, mock_project_data):
        transport.respond_with(200, json=mock_project_data, headers={"X-Request-Id": "abc"})

        async with ProjectApi(configuration) as api:
            response = await api.get_project_raw("p1")

        assert response.status_code == 200
        assert response.headers["X-Request-Id"] == "abc"
        assert response.value().id == "p1"

    @pytest.mark.asyncio
    async def test_not_found(self, configuration, transport):
        """Test that a 404 surfaces as NotFoundError with the parsed body."""
        transport.respond_with(404, json={"error": "Not Found"})

        async with ProjectApi(configuration) as api:
            with pytest.raises(NotFoundError) as exc_info:
                await api.get_project("missing")

        assert exc_info.value.status == 404
        assert exc_info.value.body == {"error": "Not Found"}

    @pytest.mark.asyncio
    async def test_missing_id_sends_nothing(self, configuration, transport):
        """Test that a None path parameter fails before any network call."""
        async with ProjectApi(configuration) as api:
            with pytest.raises(MissingParameterError) as exc_info:
                await api.get_project(None)

        assert exc_info.value.parameter == "id"
        assert exc_info.value.operation == "get_project"
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_get_project_list(self, configuration, transport):
        transport.respond_with(200, json={
            "projects": [{"id": "p1"}],
            "pagination": {"page": 1, "page_size": 25, "total_items": 1, "total_pages": 1},
        })

        async with ProjectApi(configuration) as api:
            projects = await api.get_project_list(owner_id="u1", page=1)

        assert transport.last_request.url.query == b"ownerId=u1&page=1"
        assert isinstance(projects, ProjectList)
        assert projects.pagination.total_items == 1
        assert projects.items[0].id == "p1"

    @pytest.mark.asyncio
    async def test_update_project_clears_field(self, configuration, transport):
        """Test that an explicit None is sent as null and unset fields are omitted."""
        async with ProjectApi(configuration) as api:
            await api.update_project("p1", Project(title="New", group_id=None))

        assert transport.last_request.method == "PUT"
        assert transport.last_json() == {"title": "New", "group_id": None}

    @pytest.mark.asyncio
    async def test_filter_params(self, configuration, transport):
        transport.respond_with(200, json=["env", "component"])

        async with ProjectApi(configuration) as api:
            params = await api.get_filter_params("p1")

        assert str(transport.last_request.url) == "http://localhost/api/project/filter-params/p1"
        assert params == ["env", "component"]


class TestRunApi:
    """Tests for RunApi."""

    @pytest.mark.asyncio
    async def test_get_run_list_query(self, configuration, transport):
        """Test repeated filters, their encoding and the paging parameters."""
        transport.respond_with(200, json={"runs": []})

        async with RunApi(configuration) as api:
            await api.get_run_list(filter=["a=1", "b=2"], page=2, page_size=10)

        assert transport.last_request.url.query == b"filter=a%3D1&filter=b%3D2&page=2&pageSize=10"

    @pytest.mark.asyncio
    async def test_get_run_list_with_null_entries(self, configuration, transport):
        """Test that null entries in the run array come back as None in place."""
        transport.respond_with(200, json={"runs": [None, {"id": "r"}]})

        async with RunApi(configuration) as api:
            runs = await api.get_run_list()

        assert runs.runs == [None, Run(id="r")]

    @pytest.mark.asyncio
    async def test_get_run_list_without_parameters(self, configuration, transport):
        transport.respond_with(200, json={"runs": []})

        async with RunApi(configuration) as api:
            runs = await api.get_run_list()

        assert str(transport.last_request.url) == "http://localhost/api/run"
        assert runs.items == []

    @pytest.mark.asyncio
    async def test_add_run(self, configuration, transport):
        transport.respond_with(201, json={"id": "run-1", "component": "frontend"})

        async with RunApi(configuration) as api:
            run = await api.add_run(Run(component="frontend", metadata={"jenkins": {"build_number": 42}}))

        assert transport.last_request.method == "POST"
        assert transport.last_request.headers["Content-Type"] == "application/json"
        assert transport.last_json() == {
            "component": "frontend",
            "metadata": {"jenkins": {"build_number": 42}},
        }
        assert run.id == "run-1"

    @pytest.mark.asyncio
    async def test_add_run_requires_body(self, configuration, transport):
        async with RunApi(configuration) as api:
            with pytest.raises(MissingParameterError) as exc_info:
                await api.add_run(None)

        assert exc_info.value.parameter == "run"
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_bulk_update(self, configuration, transport):
        transport.respond_with(200, json={"runs": [{"id": "run-1"}]})

        async with RunApi(configuration) as api:
            await api.bulk_update(UpdateRun(metadata={"release": "1.0"}), filter=["env=ci"])

        request = transport.last_request
        assert request.url.path == "/api/runs/bulk-update"
        assert request.url.query == b"filter=env%3Dci"
        assert transport.last_json() == {"metadata": {"release": "1.0"}}


class TestResultApi:
    """Tests for ResultApi."""

    @pytest.mark.asyncio
    async def test_add_result_wire_names(self, configuration, transport):
        """Test that the body uses the snake_case wire keys."""
        transport.respond_with(201, json={"id": "r1", "test_id": "test_login"})

        async with ResultApi(configuration) as api:
            result = await api.add_result(
                Result(test_id="test_login", start_time=datetime(2024, 5, 1, 10, 0))
            )

        body = transport.last_json()
        assert body == {"test_id": "test_login", "start_time": "2024-05-01T10:00:00"}
        assert "testId" not in body
        assert result.test_id == "test_login"

    @pytest.mark.asyncio
    async def test_malformed_body(self, configuration, transport):
        transport.respond_with(200, content=b"not json", headers={"Content-Type": "application/json"})

        async with ResultApi(configuration) as api:
            with pytest.raises(DecodeError):
                await api.get_result("r1")


class TestArtifactApi:
    """Tests for ArtifactApi."""

    @pytest.mark.asyncio
    async def test_upload_artifact(self, configuration, transport):
        """Test the multipart parts of an artifact upload."""
        transport.respond_with(201, json={"id": "a1", "filename": "log.txt"})

        async with ArtifactApi(configuration) as api:
            artifact = await api.upload_artifact(
                "log.txt",
                b"line one\n",
                result_id="r1",
                additional_metadata={"build": 42},
            )

        content = transport.last_request.content
        assert transport.last_request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"; filename="log.txt"' in content
        assert b"line one\n" in content
        assert b'name="resultId"\r\n\r\nr1' in content
        assert b'name="additionalMetadata"\r\n\r\n{"build": 42}' in content
        assert b'name="runId"' not in content
        assert artifact.id == "a1"

    @pytest.mark.asyncio
    async def test_download_artifact(self, configuration, transport):
        transport.respond_with(200, content=b"\x89PNG", headers={"Content-Type": "image/png"})

        async with ArtifactApi(configuration) as api:
            data = await api.download_artifact("a1")

        assert data == b"\x89PNG"
        assert transport.last_request.url.path == "/api/artifact/a1/download"
        assert transport.last_request.headers["Accept"] == "*/*"

    @pytest.mark.asyncio
    async def test_view_artifact_text(self, configuration, transport):
        """Test that a text artifact is returned as decoded text."""
        transport.respond_with(
            200,
            content="première ligne\n".encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )

        async with ArtifactApi(configuration) as api:
            response = await api.view_artifact_text_raw("a1")

        assert response.value() == "première ligne\n"
        assert response.status_code == 200
        assert transport.last_request.url.path == "/api/artifact/a1/view"
        assert transport.last_request.headers["Accept"] == "*/*"

    @pytest.mark.asyncio
    async def test_delete_artifact(self, configuration, transport):
        transport.respond_with(204)

        async with ArtifactApi(configuration) as api:
            assert await api.delete_artifact("a1") is None

        assert transport.last_request.method == "DELETE"


class TestImportApi:
    """Tests for ImportApi."""

    @pytest.mark.asyncio
    async def test_add_import(self, configuration, transport):
        transport.respond_with(201, json={"id": "i1", "status": "pending", "format": "junit"})

        async with ImportApi(configuration) as api:
            result = await api.add_import(
                ("results.xml", b"<testsuites/>", "application/xml"),
                project="p1",
                metadata={"jenkins": {"job_name": "nightly"}},
            )

        content = transport.last_request.content
        assert b'name="importFile"; filename="results.xml"' in content
        assert b'name="project"\r\n\r\np1' in content
        assert json.dumps({"jenkins": {"job_name": "nightly"}}).encode() in content
        assert result.status == "pending"
        assert result.file_format == "junit"


class TestOtherApis:
    """Tests for the smaller API clients."""

    @pytest.mark.asyncio
    async def test_health(self, configuration, transport):
        transport.respond_with(200, json={"status": "OK", "message": "Service is running"})

        async with HealthApi(configuration) as api:
            health = await api.get_health()

        assert transport.last_request.url.path == "/api/health"
        assert health.status == "OK"

    @pytest.mark.asyncio
    async def test_widget_params_as_query(self, configuration, transport):
        transport.respond_with(200, json={"passed": 10, "failed": 2})

        async with WidgetApi(configuration) as api:
            data = await api.get_widget("result-summary", params={"project": "p1", "weeks": 4})

        assert transport.last_request.url.query == b"project=p1&weeks=4"
        assert data == {"passed": 10, "failed": 2}

    @pytest.mark.asyncio
    async def test_dashboard_delete(self, configuration, transport):
        transport.respond_with(200)

        async with DashboardApi(configuration) as api:
            await api.delete_dashboard("d1")

        assert str(transport.last_request.url) == "http://localhost/api/dashboard/d1"

    @pytest.mark.asyncio
    async def test_add_token(self, configuration, transport):
        transport.respond_with(201, json={"id": "t1", "name": "ci", "token": "secret"})

        async with UserApi(configuration) as api:
            token = await api.add_token(CreateToken(name="ci"))

        assert transport.last_request.url.path == "/api/user/token"
        assert transport.last_json() == {"name": "ci"}
        assert token.token == "secret"

    @pytest.mark.asyncio
    async def test_login(self, make_configuration, transport):
        transport.respond_with(200, json={"name": "Jane", "email": "jane@example.com", "token": "jwt"})

        async with LoginApi(make_configuration()) as api:
            token = await api.login(Credentials(email="jane@example.com", password="secret"))

        assert "Authorization" not in transport.last_request.headers
        assert transport.last_json() == {"email": "jane@example.com", "password": "secret"}
        assert token.token == "jwt"

    @pytest.mark.asyncio
    async def test_path_parameter_encoding(self, configuration, transport):
        async with LoginApi(configuration) as api:
            await api.activate("abc/def")

        assert transport.last_request.url.raw_path == b"/api/login/activate/abc%2Fdef"

    @pytest.mark.asyncio
    async def test_reset_password(self, configuration, transport):
        async with LoginApi(configuration) as api:
            await api.reset_password(AccountReset(activation_code="code", password="new"))

        assert transport.last_json() == {"activation_code": "code", "password": "new"}


class TestPerCallOptions:
    """Tests for options accepted by every operation."""

    @pytest.mark.asyncio
    async def test_per_call_headers(self, configuration, transport):
        async with HealthApi(configuration) as api:
            await api.get_health(headers={"Authorization": "Bearer other", "X-Trace": "1"})

        assert transport.last_request.headers["Authorization"] == "Bearer other"
        assert transport.last_request.headers["X-Trace"] == "1"

    @pytest.mark.asyncio
    async def test_token_resolved_per_request(self, make_configuration, transport):
        """Test that a token function is called again for every request."""
        tokens = iter(["first", "second"])
        config = make_configuration(access_token=lambda: next(tokens))

        async with HealthApi(config) as api:
            await api.get_health()
            await api.get_health()

        assert [request.headers["Authorization"] for request in transport.requests] == [
            "Bearer first",
            "Bearer second",
        ]

    @pytest.mark.asyncio
    async def test_token_error_aborts_before_sending(self, make_configuration, transport):
        """Test that a failing token function fails the call with nothing sent."""

        async def fetch_token():
            raise RuntimeError("vault unavailable")

        config = make_configuration(access_token=fetch_token)

        async with HealthApi(config) as api:
            with pytest.raises(RuntimeError, match="vault unavailable"):
                await api.get_health()

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_cancel(self, configuration, transport):
        cancel = asyncio.Event()
        cancel.set()

        async with HealthApi(configuration) as api:
            with pytest.raises(RequestCancelledError):
                await api.get_health(cancel=cancel)

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_cancelled_call_skips_token_function(self, make_configuration, transport):
        """Test that a call cancelled in advance never resolves a token."""
        calls = []

        def fetch_token():
            calls.append(1)
            return "tok"

        cancel = asyncio.Event()
        cancel.set()
        config = make_configuration(access_token=fetch_token)

        async with HealthApi(config) as api:
            with pytest.raises(RequestCancelledError):
                await api.get_health(cancel=cancel)

        assert calls == []
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_concurrent_calls(self, configuration, transport):
        """Test that one client can serve concurrent calls."""
        transport.responder = lambda request: httpx.Response(
            200, json={"id": request.url.path.rsplit("/", 1)[-1]}
        )

        async with ProjectApi(configuration) as api:
            projects = await asyncio.gather(*(api.get_project(f"p{i}") for i in range(5)))

        assert [project.id for project in projects] == [f"p{i}" for i in range(5)]
        assert len(transport.requests) == 5
