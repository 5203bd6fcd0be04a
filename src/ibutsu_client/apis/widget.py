"""Client for the /widget endpoints."""

from typing import Any, Dict, Mapping, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import WidgetTypeList
from ibutsu_client.response import JSONApiResponse


class WidgetApi(BaseAPI):

    async def get_widget_raw(
        self,
        id: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> JSONApiResponse[Dict[str, Any]]:
        return await self._json(
            "GET",
            "/widget/{id}",
            operation="get_widget",
            path_params={"id": id},
            query=params,
            **options,
        )

    async def get_widget(self, id: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Generate the data for a widget.

        ``params`` are the widget's own parameters (see ``get_widget_types``)
        and are sent as query parameters. The shape of the returned data
        depends on the widget.
        """
        response = await self.get_widget_raw(id, **kwargs)
        return response.value()

    async def get_widget_types_raw(
        self,
        *,
        type: Optional[str] = None,
        **options: Any,
    ) -> JSONApiResponse[WidgetTypeList]:
        return await self._json(
            "GET",
            "/widget/types",
            WidgetTypeList.from_json,
            operation="get_widget_types",
            query={"type": type},
            **options,
        )

    async def get_widget_types(self, **kwargs: Any) -> WidgetTypeList:
        response = await self.get_widget_types_raw(**kwargs)
        return response.value()
