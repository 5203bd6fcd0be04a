from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class Artifact(WireModel):
    id: Optional[str] = None
    filename: Optional[str] = None
    result_id: Optional[str] = None
    run_id: Optional[str] = None
    upload_date: Optional[datetime] = None
    additional_metadata: Optional[Dict[str, Any]] = None


class ArtifactList(PaginatedList):
    items_field: ClassVar[str] = "artifacts"

    artifacts: Optional[List[Optional[Artifact]]] = None
