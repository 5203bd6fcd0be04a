from typing import ClassVar, List, Optional

from pydantic import Field

from ibutsu_client.models.base import PaginatedList, WireModel


class Project(WireModel):
    id: Optional[str] = Field(None, description="Unique ID of the project")
    name: Optional[str] = Field(None, description="Machine name of the project")
    title: Optional[str] = Field(None, description="Human-friendly title")
    owner_id: Optional[str] = None
    group_id: Optional[str] = None


class ProjectList(PaginatedList):
    items_field: ClassVar[str] = "projects"

    projects: Optional[List[Optional[Project]]] = None
