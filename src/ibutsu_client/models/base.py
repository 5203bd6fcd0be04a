"""
Wire serialization for API models.

Each model's pydantic fields are its field table: the attribute name is the
in-memory name, the field alias (when declared) is the wire name. Both
directions of the mapping are driven by that one declaration.

Optional fields have three states:

- unset: never sent, and what a wire ``null`` or a missing key decodes to;
- explicitly set to ``None``: sent as ``null`` (clears the value server side);
- set to a value: sent as that value.

Lists of entities are converted element by element, keeping order and
length; a null element stays None in both directions.
"""

from typing import Any, ClassVar, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

M = TypeVar("M", bound="WireModel")

WIRE_CONTEXT = {"wire": True}


class WireModel(BaseModel):
    """Base class for models exchanged with the API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_wire_nulls(cls, data: Any, info: ValidationInfo) -> Any:
        # Only when decoding wire payloads; explicit None from callers is kept.
        if info.context and info.context.get("wire") and isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_json(cls: Type[M], value: Optional[Mapping[str, Any]]) -> Optional[M]:
        """
        Decode a wire object.

        Returns None for a None payload. Unknown keys are dropped and null
        values leave the field unset.
        """
        if value is None:
            return None
        return cls.model_validate(value, context=WIRE_CONTEXT)

    @classmethod
    def from_json_list(
        cls: Type[M], values: Optional[Iterable[Optional[Mapping[str, Any]]]]
    ) -> Optional[List[Optional[M]]]:
        if values is None:
            return None
        return [cls.from_json(value) for value in values]

    def to_json(self) -> dict:
        """Encode to a wire object, omitting fields that were never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @classmethod
    def looks_like(cls, value: Any) -> bool:
        """
        Cheap input-boundary check: a mapping carrying every required wire key.

        For models without required fields this accepts any mapping. It does
        not validate field types.
        """
        if not isinstance(value, Mapping):
            return False
        for name, info in cls.model_fields.items():
            if info.is_required() and (info.alias or name) not in value:
                return False
        return True


def to_json(value: Optional[WireModel]) -> Optional[dict]:
    """Null-safe ``WireModel.to_json``."""
    if value is None:
        return None
    return value.to_json()


class Pagination(WireModel):
    """Paging information attached to every list response."""
    page: Optional[int] = None
    page_size: Optional[int] = None
    total_items: Optional[int] = None
    total_pages: Optional[int] = None


class PaginatedList(WireModel):
    """
    List response envelope: ``{<items_field>: [...], "pagination": {...}}``.

    Subclasses declare the array field and name it in ``items_field``.
    """

    items_field: ClassVar[str] = "items"

    pagination: Optional[Pagination] = None

    @property
    def items(self) -> list:
        return getattr(self, self.items_field, None) or []
