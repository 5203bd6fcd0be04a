"""Client for the /widget-config endpoints."""

from typing import Any, List, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import WidgetConfig, WidgetConfigList
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse, VoidApiResponse


class WidgetConfigApi(BaseAPI):

    async def add_widget_config_raw(
        self, widget_config: WidgetConfig, **options: Any
    ) -> JSONApiResponse[WidgetConfig]:
        self._require("add_widget_config", widget_config=widget_config)
        return await self._json(
            "POST",
            "/widget-config",
            WidgetConfig.from_json,
            operation="add_widget_config",
            body=json_body(widget_config),
            **options,
        )

    async def add_widget_config(self, widget_config: WidgetConfig, **options: Any) -> WidgetConfig:
        response = await self.add_widget_config_raw(widget_config, **options)
        return response.value()

    async def get_widget_config_raw(self, id: str, **options: Any) -> JSONApiResponse[WidgetConfig]:
        return await self._json(
            "GET",
            "/widget-config/{id}",
            WidgetConfig.from_json,
            operation="get_widget_config",
            path_params={"id": id},
            **options,
        )

    async def get_widget_config(self, id: str, **options: Any) -> WidgetConfig:
        response = await self.get_widget_config_raw(id, **options)
        return response.value()

    async def get_widget_config_list_raw(
        self,
        *,
        filter: Optional[List[str]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[WidgetConfigList]:
        return await self._json(
            "GET",
            "/widget-config",
            WidgetConfigList.from_json,
            operation="get_widget_config_list",
            query={"filter": filter, "page": page, "pageSize": page_size},
            **options,
        )

    async def get_widget_config_list(self, **kwargs: Any) -> WidgetConfigList:
        response = await self.get_widget_config_list_raw(**kwargs)
        return response.value()

    async def update_widget_config_raw(
        self, id: str, widget_config: WidgetConfig, **options: Any
    ) -> JSONApiResponse[WidgetConfig]:
        self._require("update_widget_config", widget_config=widget_config)
        return await self._json(
            "PUT",
            "/widget-config/{id}",
            WidgetConfig.from_json,
            operation="update_widget_config",
            path_params={"id": id},
            body=json_body(widget_config),
            **options,
        )

    async def update_widget_config(self, id: str, widget_config: WidgetConfig, **options: Any) -> WidgetConfig:
        response = await self.update_widget_config_raw(id, widget_config, **options)
        return response.value()

    async def delete_widget_config_raw(self, id: str, **options: Any) -> VoidApiResponse:
        return await self._void(
            "DELETE",
            "/widget-config/{id}",
            operation="delete_widget_config",
            path_params={"id": id},
            **options,
        )

    async def delete_widget_config(self, id: str, **options: Any) -> None:
        response = await self.delete_widget_config_raw(id, **options)
        return response.value()
