"""
Pagination entry points.

paginate() runs one page request from a resolved PaginationConfig.
Paginator binds an executor to repository defaults and resolves caller
options (query-string values or keyword arguments) on every call.

The count and the page are two independent round trips. Nothing isolates
them from concurrent writes: total_entries may disagree with the entries
returned if the data changes in between.
"""

from typing import Any, Mapping

from sqlalchemy import Select
from sqlmodel.ext.asyncio.session import AsyncSession

from sqlpager.logging import logger
from sqlpager.protocols import RelationExecutor
from sqlpager.schemas.config import PaginationConfig
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.schemas.page import Page
from sqlpager.storage.dialects import Dialect
from sqlpager.storage.executor import SessionExecutor
from sqlpager.storage.pagination.counter import count_entries
from sqlpager.storage.pagination.factory import select_fetcher


async def paginate(query: Select, config: PaginationConfig) -> Page[Any]:
    """
    Paginate a structured query with a resolved config.

    Args:
        query: Structured query with filters, joins and ordering applied.
        config: Resolved pagination config.

    Returns:
        Page with the entries and totals of the requested page.

    Raises:
        MissingPrimaryKeyError: If the base entity has no primary key.
        FilterExtractionError: If positional receipt filters cannot be read.
        SQLAlchemyError: If database query fails.

    Example:
        ```python
        config = PaginationConfig(
            page_number=2, page_size=5, source=SessionExecutor(session)
        )
        page = await paginate(select(Author).order_by(Author.id), config)
        ```
    """
    schema = config.dialect.schema if config.dialect is not None else None
    total_entries = await count_entries(
        config.source, query, schema, config.filters
    )

    fetcher = select_fetcher(config, query)
    entries = await fetcher.fetch(query, config.page_number, config.page_size)

    page = Page.assemble(entries, total_entries, config)
    logger.debug(
        f"Page {page.page_number}/{page.total_pages}: "
        f"{len(page.entries)} of {page.total_entries} entries"
    )
    return page


class Paginator:
    """
    Repository-bound pagination with configured defaults.

    Attributes:
        executor: Relation executor the queries run against.
        defaults: page_size, max_page_size, dialect and filters applied
            when the caller does not override them.

    Example:
        ```python
        paginator = Paginator(session, page_size=10, max_page_size=100)

        # Query-string params
        page = await paginator.paginate(query, {"page": "2", "page_size": "5"})

        # Keyword arguments
        page = await paginator.paginate(query, page=2, page_size=5)
        ```
    """

    def __init__(
        self,
        source: AsyncSession | RelationExecutor,
        *,
        page_size: int | None = None,
        max_page_size: int | None = None,
        dialect: Dialect | None = None,
        filters: ReceiptFilters | None = None,
    ):
        """
        Initialize paginator.

        Args:
            source: Async session or relation executor.
            page_size: Default page size. Falls back to settings.
            max_page_size: Hard ceiling for page size. Falls back to
                settings; None means no ceiling.
            dialect: Receipt dialect of the source database, if any.
            filters: Default receipt filters for the dialect path.
        """
        if isinstance(source, AsyncSession):
            source = SessionExecutor(source)
        self.executor = source
        self.defaults: dict[str, Any] = {
            "page_size": page_size,
            "dialect": dialect,
            "filters": filters,
        }
        if max_page_size is not None:
            self.defaults["max_page_size"] = max_page_size

    def config(
        self, options: Mapping[Any, Any] | None = None, **kwargs: Any
    ) -> PaginationConfig:
        """Resolve caller options into a PaginationConfig."""
        merged = dict(options or {})
        merged.update(kwargs)
        return PaginationConfig.new(self.executor, self.defaults, merged)

    async def paginate(
        self,
        query: Select,
        options: Mapping[Any, Any] | None = None,
        **kwargs: Any,
    ) -> Page[Any]:
        """
        Paginate a structured query.

        Args:
            query: Structured query with filters, joins and ordering applied.
            options: Mapping with "page"/"page_size" keys (strings or
                PageParam members) and integer or decimal string values.
            **kwargs: Same options as keyword arguments.

        Returns:
            Page with the entries and totals of the requested page.

        Raises:
            InvalidPageParameterError: If page or page_size is malformed.
        """
        return await paginate(query, self.config(options, **kwargs))
