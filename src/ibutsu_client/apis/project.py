"""Client for the /project endpoints."""

from typing import Any, List, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Project, ProjectList
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse


class ProjectApi(BaseAPI):
    """Projects group runs and results."""

    async def add_project_raw(self, project: Project, **options: Any) -> JSONApiResponse[Project]:
        self._require("add_project", project=project)
        return await self._json(
            "POST",
            "/project",
            Project.from_json,
            operation="add_project",
            body=json_body(project),
            **options,
        )

    async def add_project(self, project: Project, **options: Any) -> Project:
        """Create a project."""
        response = await self.add_project_raw(project, **options)
        return response.value()

    async def get_project_raw(self, id: str, **options: Any) -> JSONApiResponse[Project]:
        return await self._json(
            "GET",
            "/project/{id}",
            Project.from_json,
            operation="get_project",
            path_params={"id": id},
            **options,
        )

    async def get_project(self, id: str, **options: Any) -> Project:
        """Get a project by ID or name."""
        response = await self.get_project_raw(id, **options)
        return response.value()

    async def get_project_list_raw(
        self,
        *,
        filter: Optional[List[str]] = None,
        owner_id: Optional[str] = None,
        group_id: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[ProjectList]:
        return await self._json(
            "GET",
            "/project",
            ProjectList.from_json,
            operation="get_project_list",
            query={
                "filter": filter,
                "ownerId": owner_id,
                "groupId": group_id,
                "page": page,
                "pageSize": page_size,
            },
            **options,
        )

    async def get_project_list(self, **kwargs: Any) -> ProjectList:
        """List projects; see ``get_project_list_raw`` for the parameters."""
        response = await self.get_project_list_raw(**kwargs)
        return response.value()

    async def update_project_raw(self, id: str, project: Project, **options: Any) -> JSONApiResponse[Project]:
        self._require("update_project", project=project)
        return await self._json(
            "PUT",
            "/project/{id}",
            Project.from_json,
            operation="update_project",
            path_params={"id": id},
            body=json_body(project),
            **options,
        )

    async def update_project(self, id: str, project: Project, **options: Any) -> Project:
        response = await self.update_project_raw(id, project, **options)
        return response.value()

    async def get_filter_params_raw(self, id: str, **options: Any) -> JSONApiResponse[List[str]]:
        return await self._json(
            "GET",
            "/project/filter-params/{id}",
            operation="get_filter_params",
            path_params={"id": id},
            **options,
        )

    async def get_filter_params(self, id: str, **options: Any) -> List[str]:
        """Get the field names that results of a project can be filtered on."""
        response = await self.get_filter_params_raw(id, **options)
        return response.value()
