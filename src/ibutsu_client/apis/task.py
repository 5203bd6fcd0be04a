"""Client for the /task endpoints."""

from typing import Any, Dict

from ibutsu_client.base import BaseAPI
from ibutsu_client.response import JSONApiResponse


class TaskApi(BaseAPI):

    async def get_task_raw(self, id: str, **options: Any) -> JSONApiResponse[Dict[str, Any]]:
        return await self._json(
            "GET",
            "/task/{id}",
            operation="get_task",
            path_params={"id": id},
            **options,
        )

    async def get_task(self, id: str, **options: Any) -> Dict[str, Any]:
        """Get the status (and, once finished, the result) of a background task."""
        response = await self.get_task_raw(id, **options)
        return response.value()
