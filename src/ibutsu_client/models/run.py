from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class Run(WireModel):
    id: Optional[str] = None
    created: Optional[datetime] = None
    duration: Optional[float] = None
    source: Optional[str] = None
    start_time: Optional[datetime] = None
    component: Optional[str] = None
    env: Optional[str] = None
    project_id: Optional[str] = None
    summary: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


class RunList(PaginatedList):
    items_field: ClassVar[str] = "runs"

    runs: Optional[List[Optional[Run]]] = None


class UpdateRun(WireModel):
    """Fields applied to every run matched by a bulk update."""
    metadata: Optional[Dict[str, Any]] = None
