"""Client for the /dashboard endpoints."""

from typing import Any, List, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Dashboard, DashboardList
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse, VoidApiResponse


class DashboardApi(BaseAPI):

    async def add_dashboard_raw(self, dashboard: Dashboard, **options: Any) -> JSONApiResponse[Dashboard]:
        self._require("add_dashboard", dashboard=dashboard)
        return await self._json(
            "POST",
            "/dashboard",
            Dashboard.from_json,
            operation="add_dashboard",
            body=json_body(dashboard),
            **options,
        )

    async def add_dashboard(self, dashboard: Dashboard, **options: Any) -> Dashboard:
        response = await self.add_dashboard_raw(dashboard, **options)
        return response.value()

    async def get_dashboard_raw(self, id: str, **options: Any) -> JSONApiResponse[Dashboard]:
        return await self._json(
            "GET",
            "/dashboard/{id}",
            Dashboard.from_json,
            operation="get_dashboard",
            path_params={"id": id},
            **options,
        )

    async def get_dashboard(self, id: str, **options: Any) -> Dashboard:
        response = await self.get_dashboard_raw(id, **options)
        return response.value()

    async def get_dashboard_list_raw(
        self,
        *,
        filter: Optional[List[str]] = None,
        project_id: Optional[str] = None,
        user_id: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[DashboardList]:
        return await self._json(
            "GET",
            "/dashboard",
            DashboardList.from_json,
            operation="get_dashboard_list",
            query={
                "filter": filter,
                "project_id": project_id,
                "user_id": user_id,
                "page": page,
                "pageSize": page_size,
            },
            **options,
        )

    async def get_dashboard_list(self, **kwargs: Any) -> DashboardList:
        response = await self.get_dashboard_list_raw(**kwargs)
        return response.value()

    async def update_dashboard_raw(self, id: str, dashboard: Dashboard, **options: Any) -> JSONApiResponse[Dashboard]:
        self._require("update_dashboard", dashboard=dashboard)
        return await self._json(
            "PUT",
            "/dashboard/{id}",
            Dashboard.from_json,
            operation="update_dashboard",
            path_params={"id": id},
            body=json_body(dashboard),
            **options,
        )

    async def update_dashboard(self, id: str, dashboard: Dashboard, **options: Any) -> Dashboard:
        response = await self.update_dashboard_raw(id, dashboard, **options)
        return response.value()

    async def delete_dashboard_raw(self, id: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "DELETE",
            "/dashboard/{id}",
            operation="delete_dashboard",
            path_params={"id": id},
            **options,
        )

    async def delete_dashboard(self, id: str, **options: Any) -> None:
        response = await self.delete_dashboard_raw(id, **options)
        return response.value()
