from typing import Optional

from ibutsu_client.models.base import WireModel


class Health(WireModel):
    status: Optional[str] = None
    message: Optional[str] = None


class HealthInfo(WireModel):
    frontend: Optional[str] = None
    backend: Optional[str] = None
    api_ui: Optional[str] = None
