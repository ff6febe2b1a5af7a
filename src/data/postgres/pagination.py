"""Page requests and result pages for repository queries."""
import math
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.utils.exceptions import ValidationError

T = TypeVar("T")

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort_field: str = "code"
    direction: str = ASC

    @classmethod
    def of(cls, page: int, size: int, sort: str | None = None) -> "PageRequest":
        """
        Build a page request from query parameters.

        ``sort`` has the form ``"field,direction"``. The direction is
        descending only when it reads ``desc`` (any case), otherwise ascending.
        """
        if page < 0:
            raise ValidationError("Page index must not be less than zero")
        if size < 1:
            raise ValidationError("Page size must not be less than one")

        sort_field, direction = "code", ASC
        if sort:
            parts = [part.strip() for part in sort.split(",")]
            if parts[0]:
                sort_field = parts[0]
            if len(parts) > 1 and parts[1].lower() == DESC:
                direction = DESC
        return cls(page=page, size=size, sort_field=sort_field, direction=direction)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    sort: str = field(default="")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def last(self) -> bool:
        return self.page >= self.total_pages - 1

    def map(self, fn) -> "Page":
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
            sort=self.sort,
        )


async def paginate(
    session: AsyncSession,
    query: Select,
    page_request: PageRequest,
    sortable_columns: Mapping[str, Any],
) -> Page:
    """
    Run ``query`` for one page and count the rows it matches overall.

    Args:
        session: Open database session
        query: Filtered select of a single entity
        page_request: Page index, size and ordering
        sortable_columns: Sort names accepted from clients mapped to columns

    Raises:
        ValidationError: If the sort field is not one of ``sortable_columns``
    """
    column = sortable_columns.get(page_request.sort_field)
    if column is None:
        raise ValidationError(f"Unknown sort field: '{page_request.sort_field}'")

    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await session.execute(count_query)).scalar_one()

    order = column.desc() if page_request.direction == DESC else column.asc()
    result = await session.execute(
        query.order_by(order).limit(page_request.size).offset(page_request.offset)
    )
    return Page(
        content=list(result.scalars().all()),
        page=page_request.page,
        size=page_request.size,
        total_elements=total,
        sort=f"{page_request.sort_field},{page_request.direction}",
    )
