from datetime import datetime
from typing import ClassVar, List, Optional

from ibutsu_client.models.base import PaginatedList, WireModel


class User(WireModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    is_superadmin: Optional[bool] = None
    is_active: Optional[bool] = None


class Token(WireModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    token: Optional[str] = None
    expires: Optional[datetime] = None


class TokenList(PaginatedList):
    items_field: ClassVar[str] = "tokens"

    tokens: Optional[List[Optional[Token]]] = None


class CreateToken(WireModel):
    name: str
    expires: Optional[datetime] = None
