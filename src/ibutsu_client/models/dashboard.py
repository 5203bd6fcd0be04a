from typing import ClassVar, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class Dashboard(WireModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    filters: Optional[str] = None
    project_id: Optional[str] = None
    user_id: Optional[str] = None


class DashboardList(PaginatedList):
    items_field: ClassVar[str] = "dashboards"

    dashboards: Optional[List[Optional[Dashboard]]] = None
