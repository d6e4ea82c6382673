"""
Direct offset/limit entry fetcher.

Used when the query has no joins: every result row is one root entity, so
LIMIT/OFFSET on the query itself pages correctly.
"""

from typing import Any

from sqlalchemy import Select

from sqlpager.logging import logger
from sqlpager.protocols import RelationExecutor


class DirectEntryFetcher:
    """
    Offset-based fetch applied straight to the structured query.

    Example:
        ```python
        fetcher = DirectEntryFetcher(SessionExecutor(session))
        query = select(Author).where(Author.name.ilike("%John%"))
        entries = await fetcher.fetch(query, page_number=2, page_size=20)
        ```
    """

    def __init__(self, executor: RelationExecutor):
        """
        Initialize direct fetcher.

        Args:
            executor: Relation executor for database queries.
        """
        self.executor = executor

    async def fetch(
        self,
        query: Select,
        page_number: int,
        page_size: int,
    ) -> list[Any]:
        offset = page_size * (page_number - 1)
        logger.debug(f"Direct fetch: offset={offset} limit={page_size}")

        data_query = query.limit(page_size).offset(offset)
        return await self.executor.execute_structured(data_query)
