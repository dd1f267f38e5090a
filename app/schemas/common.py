"""Shared schema building blocks: camelCase base model, field types, paging."""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Generic, Self, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.shared.utils.datetime import ensure_utc, is_past

T = TypeVar("T")


def _non_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("value must not be empty or whitespace")
    return v


def _in_past(v: datetime) -> datetime:
    """Treat naive datetimes as UTC (common from frontends); reject now and later."""
    if not is_past(v):
        raise ValueError("date must be in the past")
    return ensure_utc(v)  # type: ignore[return-value]


NonBlankStr = Annotated[str, StringConstraints(max_length=255), AfterValidator(_non_blank)]
PastDatetime = Annotated[datetime, AfterValidator(_in_past)]
Identifier = Annotated[str, StringConstraints(min_length=1, max_length=64)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; accepts either on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        """JSON-ready dict with wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)


class UpdateModel(CamelModel):
    """Partial update body. Only fields sent by the client become changes.

    Fields in required_fields may be omitted but not sent as null.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self) -> Self:
        nulls = sorted(
            name
            for name in self.required_fields & self.model_fields_set
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Sent fields keyed by snake_case name (explicit nulls kept)."""
        return self.model_dump(exclude_unset=True)


class PageResponse(CamelModel, Generic[T]):
    """One page of items with totals."""

    data: list[T]
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=1)
