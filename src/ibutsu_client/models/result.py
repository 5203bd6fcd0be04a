from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class ResultStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"
    XPASSED = "xpassed"
    XFAILED = "xfailed"
    MANUAL = "manual"
    BLOCKED = "blocked"


class Result(WireModel):
    id: Optional[str] = None
    test_id: Optional[str] = None
    start_time: Optional[datetime] = None
    duration: Optional[float] = None
    result: Optional[ResultStatus] = None
    component: Optional[str] = None
    env: Optional[str] = None
    run_id: Optional[str] = None
    project_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    params: Optional[Dict[str, Any]] = None
    source: Optional[str] = None


class ResultList(PaginatedList):
    items_field: ClassVar[str] = "results"

    results: Optional[List[Optional[Result]]] = None
