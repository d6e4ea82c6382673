"""
Join-aware pagination for SQLAlchemy queries.

Example:
    ```python
    from sqlmodel import select

    from sqlpager import Paginator

    paginator = Paginator(session, page_size=20, max_page_size=100)
    page = await paginator.paginate(
        select(Author).order_by(Author.name), {"page": "2"}
    )
    print(page.total_pages, len(page.entries))
    ```
"""

from sqlpager.paginator import Paginator, paginate
from sqlpager.schemas.config import PageParam, PaginationConfig
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.schemas.page import Page
from sqlpager.storage.dialects import Dialect

__all__ = [
    "Dialect",
    "Page",
    "PageParam",
    "PaginationConfig",
    "Paginator",
    "ReceiptFilters",
    "paginate",
]
