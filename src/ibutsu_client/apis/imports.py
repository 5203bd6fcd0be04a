"""Client for the /import endpoints."""

from typing import Any, Mapping, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Import
from ibutsu_client.request import FileInput, multipart_body
from ibutsu_client.response import JSONApiResponse


class ImportApi(BaseAPI):
    """Imports of JUnit XML files and Ibutsu archives."""

    async def add_import_raw(
        self,
        import_file: FileInput,
        *,
        project: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None,
        source: Optional[str] = None,
        **options: Any,
    ) -> JSONApiResponse[Import]:
        self._require("add_import", import_file=import_file)
        body = multipart_body(
            {"importFile": import_file},
            {"project": project, "metadata": metadata, "source": source},
        )
        return await self._json(
            "POST",
            "/import",
            Import.from_json,
            operation="add_import",
            body=body,
            **options,
        )

    async def add_import(self, import_file: FileInput, **kwargs: Any) -> Import:
        """Upload a file to import. The returned import is usually still pending."""
        response = await self.add_import_raw(import_file, **kwargs)
        return response.value()

    async def get_import_raw(self, id: str, **options: Any) -> JSONApiResponse[Import]:
        return await self._json(
            "GET",
            "/import/{id}",
            Import.from_json,
            operation="get_import",
            path_params={"id": id},
            **options,
        )

    async def get_import(self, id: str, **options: Any) -> Import:
        response = await self.get_import_raw(id, **options)
        return response.value()
