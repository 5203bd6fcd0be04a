"""Client for the /artifact endpoints."""

from typing import Any, Dict, Mapping, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Artifact, ArtifactList
from ibutsu_client.request import FileContent, multipart_body
from ibutsu_client.response import BlobApiResponse, JSONApiResponse, TextApiResponse, VoidApiResponse


class ArtifactApi(BaseAPI):
    """Files (logs, screenshots, ...) attached to results or runs."""

    async def upload_artifact_raw(
        self,
        filename: str,
        file: FileContent,
        *,
        result_id: Optional[str] = None,
        run_id: Optional[str] = None,
        additional_metadata: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> JSONApiResponse[Artifact]:
        self._require("upload_artifact", filename=filename, file=file)
        body = multipart_body(
            {"file": (filename, file)},
            {
                "filename": filename,
                "resultId": result_id,
                "runId": run_id,
                "additionalMetadata": additional_metadata,
            },
        )
        return await self._json(
            "POST",
            "/artifact",
            Artifact.from_json,
            operation="upload_artifact",
            body=body,
            **options,
        )

    async def upload_artifact(self, filename: str, file: FileContent, **kwargs: Any) -> Artifact:
        """
        Upload a file and attach it to a result or a run.

        ``additional_metadata`` is sent as a JSON-encoded form field.
        """
        response = await self.upload_artifact_raw(filename, file, **kwargs)
        return response.value()

    async def get_artifact_raw(self, id: str, **options: Any) -> JSONApiResponse[Artifact]:
        return await self._json(
            "GET",
            "/artifact/{id}",
            Artifact.from_json,
            operation="get_artifact",
            path_params={"id": id},
            **options,
        )

    async def get_artifact(self, id: str, **options: Any) -> Artifact:
        response = await self.get_artifact_raw(id, **options)
        return response.value()

    async def get_artifact_list_raw(
        self,
        *,
        result_id: Optional[str] = None,
        run_id: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[ArtifactList]:
        return await self._json(
            "GET",
            "/artifact",
            ArtifactList.from_json,
            operation="get_artifact_list",
            query={
                "resultId": result_id,
                "runId": run_id,
                "page": page,
                "pageSize": page_size,
            },
            **options,
        )

    async def get_artifact_list(self, **kwargs: Any) -> ArtifactList:
        response = await self.get_artifact_list_raw(**kwargs)
        return response.value()

    async def delete_artifact_raw(self, id: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "DELETE",
            "/artifact/{id}",
            operation="delete_artifact",
            path_params={"id": id},
            **options,
        )

    async def delete_artifact(self, id: str, **options: Any) -> None:
        response = await self.delete_artifact_raw(id, **options)
        return response.value()

    async def download_artifact_raw(
        self,
        id: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        **options: Any,
    ) -> BlobApiResponse:
        return await self._blob(
            "GET",
            "/artifact/{id}/download",
            operation="download_artifact",
            path_params={"id": id},
            headers=_binary_headers(headers),
            **options,
        )

    async def download_artifact(self, id: str, **options: Any) -> bytes:
        """Download the artifact's file content."""
        response = await self.download_artifact_raw(id, **options)
        return response.value()

    async def view_artifact_raw(
        self,
        id: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        **options: Any,
    ) -> BlobApiResponse:
        return await self._blob(
            "GET",
            "/artifact/{id}/view",
            operation="view_artifact",
            path_params={"id": id},
            headers=_binary_headers(headers),
            **options,
        )

    async def view_artifact(self, id: str, **options: Any) -> bytes:
        """Fetch the artifact for inline display (served with its own content type)."""
        response = await self.view_artifact_raw(id, **options)
        return response.value()

    async def view_artifact_text_raw(
        self,
        id: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        **options: Any,
    ) -> TextApiResponse:
        return await self._text(
            "GET",
            "/artifact/{id}/view",
            operation="view_artifact_text",
            path_params={"id": id},
            headers=_binary_headers(headers),
            **options,
        )

    async def view_artifact_text(self, id: str, **options: Any) -> str:
        """Fetch a text artifact (e.g. a log) decoded with its response charset."""
        response = await self.view_artifact_text_raw(id, **options)
        return response.value()


def _binary_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    return {"Accept": "*/*", **(headers or {})}
