"""
Protocol definition for entry fetchers.

Uses Python's structural subtyping (Protocol) to define the interface for the
strategies that fetch one page of entries, without requiring explicit
inheritance. This follows the same pattern as sqlpager.protocols.RelationExecutor.
"""

from typing import Any, Protocol

from sqlalchemy import Select


class EntryFetcher(Protocol):
    """
    Protocol for entry fetching strategies.

    Example:
        ```python
        class CustomFetcher:
            async def fetch(
                self, query: Select, page_number: int, page_size: int
            ) -> list[Any]:
                # Custom fetching logic
                ...


        # Type-checks as EntryFetcher
        fetcher: EntryFetcher = CustomFetcher()
        ```
    """

    async def fetch(
        self,
        query: Select,
        page_number: int,
        page_size: int,
    ) -> list[Any]:
        """
        Fetch the entries of one page.

        Args:
            query: Structured query with filters, joins and ordering
                already applied. The fetcher only applies paging.
            page_number: 1-indexed page number.
            page_size: Number of root entities per page.

        Returns:
            Entries of the requested page, at most page_size of them.

        Raises:
            SQLAlchemyError: If database query fails
        """
        ...
