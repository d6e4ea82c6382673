"""
Pagination strategies for structured queries.

Counting and fetching are split: count_entries() returns the number of
distinct entities, and an EntryFetcher returns the page itself. The
factory picks the fetcher from the query shape and the configured dialect.

Example:
    Using the facade function:
    ```python
    from sqlpager import Paginator

    page = await Paginator(session).paginate(select(Author), page=2)
    ```

    Using strategies directly:
    ```python
    from sqlpager.storage.pagination import JoinSafeEntryFetcher

    fetcher = JoinSafeEntryFetcher(SessionExecutor(session))
    authors = await fetcher.fetch(select(Author).join(Book), 1, 20)
    ```
"""

from sqlpager.storage.pagination.counter import build_count_query, count_entries
from sqlpager.storage.pagination.factory import select_fetcher
from sqlpager.storage.pagination.joined import JoinSafeEntryFetcher
from sqlpager.storage.pagination.offset import DirectEntryFetcher
from sqlpager.storage.pagination.protocol import EntryFetcher
from sqlpager.storage.pagination.windowed import WindowedEntryFetcher

__all__ = [
    "EntryFetcher",
    "DirectEntryFetcher",
    "JoinSafeEntryFetcher",
    "WindowedEntryFetcher",
    "build_count_query",
    "count_entries",
    "select_fetcher",
]
