"""
Join-safe entry fetcher.

A one-to-many join multiplies rows, so LIMIT/OFFSET on the joined query
would count child rows instead of root entities and return duplicate or
missing entities. This fetcher first pages over distinct primary keys, then
loads the full rows for those keys.
"""

from typing import Any

from sqlalchemy import Select

from sqlpager.logging import logger
from sqlpager.protocols import RelationExecutor
from sqlpager.storage.pagination.query_builder import (
    primary_key_of,
    remove_clauses,
)


class JoinSafeEntryFetcher:
    """
    Two-phase fetch for queries with joins.

    1. Key page: the query stripped of loader options and grouping,
       projected to the primary key, grouped by it, with OFFSET/LIMIT.
    2. Rehydration: the original query (joins, projection, ordering
       intact) restricted to the collected keys, with DISTINCT.

    Page size is measured in distinct root entities. The final order follows
    the original query's ORDER BY, not the order the keys were collected in.
    The two round trips are not atomic.

    Example:
        ```python
        fetcher = JoinSafeEntryFetcher(SessionExecutor(session))
        query = (
            select(Author)
            .join(Book)
            .where(Book.title.ilike("%python%"))
            .order_by(Author.name)
        )
        authors = await fetcher.fetch(query, page_number=1, page_size=10)
        ```
    """

    def __init__(self, executor: RelationExecutor):
        """
        Initialize join-safe fetcher.

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
        primary_key = primary_key_of(query)
        offset = page_size * (page_number - 1)

        keys_query = (
            remove_clauses(query)
            .with_only_columns(primary_key, maintain_column_froms=True)
            .group_by(primary_key)
            .offset(offset)
            .limit(page_size)
        )
        keys = await self.executor.execute_structured(keys_query)
        logger.debug(
            f"Join-safe fetch: {len(keys)} key(s) at offset={offset} limit={page_size}"
        )

        if not keys:
            return []

        data_query = query.where(primary_key.in_(keys)).distinct()
        return await self.executor.execute_structured(data_query)
