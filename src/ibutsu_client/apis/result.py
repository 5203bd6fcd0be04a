"""Client for the /result endpoints."""

from typing import Any, List, Optional

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Result, ResultList
from ibutsu_client.request import json_body
from ibutsu_client.response import JSONApiResponse


class ResultApi(BaseAPI):

    async def add_result_raw(self, result: Result, **options: Any) -> JSONApiResponse[Result]:
        self._require("add_result", result=result)
        return await self._json(
            "POST",
            "/result",
            Result.from_json,
            operation="add_result",
            body=json_body(result),
            **options,
        )

    async def add_result(self, result: Result, **options: Any) -> Result:
        """Create a test result."""
        response = await self.add_result_raw(result, **options)
        return response.value()

    async def get_result_raw(self, id: str, **options: Any) -> JSONApiResponse[Result]:
        return await self._json(
            "GET",
            "/result/{id}",
            Result.from_json,
            operation="get_result",
            path_params={"id": id},
            **options,
        )

    async def get_result(self, id: str, **options: Any) -> Result:
        response = await self.get_result_raw(id, **options)
        return response.value()

    async def get_result_list_raw(
        self,
        *,
        filter: Optional[List[str]] = None,
        estimate: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        **options: Any,
    ) -> JSONApiResponse[ResultList]:
        return await self._json(
            "GET",
            "/result",
            ResultList.from_json,
            operation="get_result_list",
            query={
                "filter": filter,
                "estimate": estimate,
                "page": page,
                "pageSize": page_size,
            },
            **options,
        )

    async def get_result_list(self, **kwargs: Any) -> ResultList:
        """List results matching every ``filter`` expression (e.g. ``"result=failed"``)."""
        response = await self.get_result_list_raw(**kwargs)
        return response.value()

    async def update_result_raw(self, id: str, result: Result, **options: Any) -> JSONApiResponse[Result]:
        self._require("update_result", result=result)
        return await self._json(
            "PUT",
            "/result/{id}",
            Result.from_json,
            operation="update_result",
            path_params={"id": id},
            body=json_body(result),
            **options,
        )

    async def update_result(self, id: str, result: Result, **options: Any) -> Result:
        response = await self.update_result_raw(id, result, **options)
        return response.value()
