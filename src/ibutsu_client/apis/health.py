"""Client for the /health endpoints."""

from typing import Any

from ibutsu_client.base import BaseAPI
from ibutsu_client.models import Health, HealthInfo
from ibutsu_client.response import JSONApiResponse


class HealthApi(BaseAPI):

    async def get_health_raw(self, **options: Any) -> JSONApiResponse[Health]:
        return await self._json("GET", "/health", Health.from_json, operation="get_health", **options)

    async def get_health(self, **options: Any) -> Health:
        response = await self.get_health_raw(**options)
        return response.value()

    async def get_database_health_raw(self, **options: Any) -> JSONApiResponse[Health]:
        return await self._json(
            "GET", "/health/database", Health.from_json, operation="get_database_health", **options
        )

    async def get_database_health(self, **options: Any) -> Health:
        response = await self.get_database_health_raw(**options)
        return response.value()

    async def get_health_info_raw(self, **options: Any) -> JSONApiResponse[HealthInfo]:
        return await self._json(
            "GET", "/health/info", HealthInfo.from_json, operation="get_health_info", **options
        )

    async def get_health_info(self, **options: Any) -> HealthInfo:
        """Get the frontend, backend and API UI URLs of the server."""
        response = await self.get_health_info_raw(**options)
        return response.value()
