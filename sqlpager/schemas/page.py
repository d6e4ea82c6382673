from typing import TYPE_CHECKING, Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

if TYPE_CHECKING:
    from sqlpager.schemas.config import PaginationConfig

EntryType = TypeVar("EntryType")


def total_pages(total_entries: int, page_size: int) -> int:
    """
    Number of pages needed for total_entries at page_size per page.

    Rounds toward positive infinity, so 25 entries at 10 per page is 3
    pages and 0 entries is 0 pages. Integer arithmetic keeps it exact for
    totals of any size.
    """
    return -(-total_entries // page_size)


class Page(BaseModel, Generic[EntryType]):  # type: ignore[misc]
    model_config = ConfigDict(frozen=True)

    entries: list[EntryType]
    page_number: Annotated[int, Field(ge=1)]
    page_size: Annotated[int, Field(ge=1)]
    total_entries: Annotated[int, Field(ge=0)]
    total_pages: Annotated[int, Field(ge=0)]

    @classmethod
    def assemble(
        cls,
        entries: Sequence[Any],
        total_entries: int,
        config: "PaginationConfig",
    ) -> "Page[Any]":
        return cls(
            entries=list(entries),
            page_number=config.page_number,
            page_size=config.page_size,
            total_entries=total_entries,
            total_pages=total_pages(total_entries, config.page_size),
        )

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1
