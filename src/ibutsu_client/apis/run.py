"""Client for the /run endpoints."""

from typing import Any, List, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Run, RunList, UpdateRun
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse


class RunApi(BaseAPI):
    """Test runs: a set of results from one execution."""

    async def add_run_raw(self, run: Run, **options: Any) -> JSONApiResponse[Run]:
        self._require("add_run", run=run)
        return await self._json(
            "POST",
            "/run",
            Run.from_json,
            operation="add_run",
            body=json_body(run),
            **options,
        )

    async def add_run(self, run: Run, **options: Any) -> Run:
        """Create a run."""
        response = await self.add_run_raw(run, **options)
        return response.value()

    async def get_run_raw(self, id: str, **options: Any) -> JSONApiResponse[Run]:
        return await self._json(
            "GET",
            "/run/{id}",
            Run.from_json,
            operation="get_run",
            path_params={"id": id},
            **options,
        )

    async def get_run(self, id: str, **options: Any) -> Run:
        """Get a single run by ID."""
        response = await self.get_run_raw(id, **options)
        return response.value()

    async def get_run_list_raw(
        self,
        *,
        filter: Optional[List[str]] = None,
        estimate: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[RunList]:
        """
        List runs.

        Args:
            filter: Filter expressions such as ``"metadata.project=my-project"``
                or ``"summary.failures>0"``; all of them must match
            estimate: Let the server estimate the total item count
            page: Page number, starting at 1
            page_size: Number of runs per page
        """
        return await self._json(
            "GET",
            "/run",
            RunList.from_json,
            operation="get_run_list",
            query={
                "filter": filter,
                "estimate": estimate,
                "page": page,
                "pageSize": page_size,
            },
            **options,
        )

    async def get_run_list(self, **kwargs: Any) -> RunList:
        response = await self.get_run_list_raw(**kwargs)
        return response.value()

    async def update_run_raw(self, id: str, run: Run, **options: Any) -> JSONApiResponse[Run]:
        self._require("update_run", run=run)
        return await self._json(
            "PUT",
            "/run/{id}",
            Run.from_json,
            operation="update_run",
            path_params={"id": id},
            body=json_body(run),
            **options,
        )

    async def update_run(self, id: str, run: Run, **options: Any) -> Run:
        response = await self.update_run_raw(id, run, **options)
        return response.value()

    async def bulk_update_raw(
        self,
        update_run: UpdateRun,
        *,
        filter: Optional[List[str]] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[RunList]:
        self._require("bulk_update", update_run=update_run)
        return await self._json(
            "POST",
            "/runs/bulk-update",
            RunList.from_json,
            operation="bulk_update",
            query={"filter": filter, "pageSize": page_size},
            body=json_body(update_run),
            **options,
        )

    async def bulk_update(self, update_run: UpdateRun, **kwargs: Any) -> RunList:
        """Apply ``update_run`` to every run matching ``filter``."""
        response = await self.bulk_update_raw(update_run, **kwargs)
        return response.value()
