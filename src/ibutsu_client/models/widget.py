from typing import Any, ClassVar, Dict, List, Optional

from pydantic import Field

from ibutsu_client.models.base import PaginatedList, WireModel


class WidgetParam(WireModel):
    name: Optional[str] = None
    description: Optional[str] = None
    param_type: Optional[str] = Field(None, alias="type")


class WidgetType(WireModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    params: Optional[List[Optional[WidgetParam]]] = None
    widget_type: Optional[str] = Field(None, alias="type")


class WidgetTypeList(PaginatedList):
    items_field: ClassVar[str] = "types"

    types: Optional[List[Optional[WidgetType]]] = None


class WidgetConfig(WireModel):
    """Placement of a widget (or view) on a dashboard."""
    id: Optional[str] = None
    config_type: Optional[str] = Field(None, alias="type")
    widget: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    weight: Optional[int] = None
    navigable: Optional[bool] = None
    title: Optional[str] = None
    project_id: Optional[str] = None
    dashboard_id: Optional[str] = None


class WidgetConfigList(PaginatedList):
    items_field: ClassVar[str] = "widgets"

    widgets: Optional[List[Optional[WidgetConfig]]] = None
