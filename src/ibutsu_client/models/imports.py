from typing import Any, Dict, Optional

from pydantic import Field

from ibutsu_client.models.base import WireModel


class Import(WireModel):
    """An uploaded JUnit XML or Ibutsu archive being imported."""
    id: Optional[str] = None
    status: Optional[str] = Field(None, description='One of "pending", "running", "done"')
    filename: Optional[str] = None
    file_format: Optional[str] = Field(None, alias="format")
    run_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
