"""Shared pagination schemas and the UTC datetime output type."""

import math
from datetime import datetime, timezone
from typing import Annotated, Generic, List, TypeVar

from pydantic import BaseModel, PlainSerializer

T = TypeVar("T")


def _as_utc(value: datetime) -> datetime:
    # Stored values are naive UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, PlainSerializer(_as_utc, return_type=datetime)]


class PageParams(BaseModel):
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int


class Page(BaseModel, Generic[T]):
    items: List[T]
    pagination: Pagination

    @classmethod
    def build(cls, items: List[T], total: int, params: PageParams) -> "Page[T]":
        return cls(
            items=items,
            pagination=Pagination(
                currentPage=params.page,
                totalPages=math.ceil(total / params.limit) if total else 0,
                totalItems=total,
                itemsPerPage=params.limit,
            ),
        )


class MessageResponse(BaseModel):
    message: str
