from typing import ClassVar, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class Group(WireModel):
    id: Optional[str] = None
    name: Optional[str] = None


class GroupList(PaginatedList):
    items_field: ClassVar[str] = "groups"

    groups: Optional[List[Optional[Group]]] = None
