"""
Strategy factory for selecting the appropriate entry fetcher.

Encapsulates the logic for choosing between join-safe, windowed and direct
fetching based on the query shape and the configured dialect.
"""

from sqlalchemy import Select

from sqlpager.logging import logger
from sqlpager.schemas.config import PaginationConfig
from sqlpager.storage.pagination.joined import JoinSafeEntryFetcher
from sqlpager.storage.pagination.offset import DirectEntryFetcher
from sqlpager.storage.pagination.protocol import EntryFetcher
from sqlpager.storage.pagination.query_builder import has_joins
from sqlpager.storage.pagination.windowed import WindowedEntryFetcher


def select_fetcher(config: PaginationConfig, query: Select) -> EntryFetcher:
    """
    Select appropriate entry fetcher for a query.

    Decision logic:
    - Query has joins → JoinSafeEntryFetcher
    - Config has a receipt dialect → WindowedEntryFetcher
    - Otherwise → DirectEntryFetcher

    Args:
        config: Resolved pagination config (executor, dialect, filters).
        query: Structured query being paginated.

    Returns:
        Entry fetcher instance.
    """
    if has_joins(query):
        logger.debug("Query has joins, using join-safe fetch")
        return JoinSafeEntryFetcher(config.source)

    if config.dialect is not None:
        logger.debug(f"Using windowed fetch for dialect {config.dialect.value}")
        return WindowedEntryFetcher(
            config.source, config.dialect.schema, config.filters
        )

    return DirectEntryFetcher(config.source)
