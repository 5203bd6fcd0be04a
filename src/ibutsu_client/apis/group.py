"""Client for the /group endpoints."""

from typing import Any, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Group, GroupList
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse


class GroupApi(BaseAPI):

    async def add_group_raw(self, group: Group, **options: Any) -> JSONApiResponse[Group]:
        self._require("add_group", group=group)
        return await self._json(
            "POST", "/group", Group.from_json, operation="add_group", body=json_body(group), **options
        )

    async def add_group(self, group: Group, **options: Any) -> Group:
        response = await self.add_group_raw(group, **options)
        return response.value()

    async def get_group_raw(self, id: str, **options: Any) -> JSONApiResponse[Group]:
        return await self._json(
            "GET", "/group/{id}", Group.from_json, operation="get_group", path_params={"id": id}, **options
        )

    async def get_group(self, id: str, **options: Any) -> Group:
        response = await self.get_group_raw(id, **options)
        return response.value()

    async def get_group_list_raw(
        self,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[GroupList]:
        return await self._json(
            "GET",
            "/group",
            GroupList.from_json,
            operation="get_group_list",
            query={"page": page, "pageSize": page_size},
            **options,
        )

    async def get_group_list(self, **kwargs: Any) -> GroupList:
        response = await self.get_group_list_raw(**kwargs)
        return response.value()

    async def update_group_raw(self, id: str, group: Group, **options: Any) -> JSONApiResponse[Group]:
        self._require("update_group", group=group)
        return await self._json(
            "PUT",
            "/group/{id}",
            Group.from_json,
            operation="update_group",
            path_params={"id": id},
            body=json_body(group),
            **options,
        )

    async def update_group(self, id: str, group: Group, **options: Any) -> Group:
        response = await self.update_group_raw(id, group, **options)
        return response.value()
