"""
Tests for pagination strategy factory.

Tests the fetcher selection logic that chooses between join-safe,
windowed and direct fetching based on query shape and dialect.
"""

from sqlmodel import select

from sqlpager.schemas.config import PaginationConfig
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.storage.dialects import CFD_SCHEMA, HADES_SCHEMA, Dialect
from sqlpager.storage.pagination.factory import select_fetcher
from sqlpager.storage.pagination.joined import JoinSafeEntryFetcher
from sqlpager.storage.pagination.offset import DirectEntryFetcher
from sqlpager.storage.pagination.windowed import WindowedEntryFetcher
from tests.mocks.models import Author, Book, Receipt


class TestSelectFetcher:
    """Tests for select_fetcher function."""

    def test_direct_fetcher_without_joins(self, mock_executor):
        config = PaginationConfig(page_size=10, source=mock_executor)

        fetcher = select_fetcher(config, select(Author))

        assert isinstance(fetcher, DirectEntryFetcher)
        assert fetcher.executor is mock_executor

    def test_join_safe_fetcher_with_joins(self, mock_executor):
        config = PaginationConfig(page_size=10, source=mock_executor)

        fetcher = select_fetcher(config, select(Author).join(Book))

        assert isinstance(fetcher, JoinSafeEntryFetcher)

    def test_windowed_fetcher_with_dialect(self, mock_executor):
        filters = ReceiptFilters(series="A")
        config = PaginationConfig(
            page_size=10,
            source=mock_executor,
            dialect=Dialect.HADES,
            filters=filters,
        )

        fetcher = select_fetcher(config, select(Receipt))

        assert isinstance(fetcher, WindowedEntryFetcher)
        assert fetcher.schema is HADES_SCHEMA
        assert fetcher.filters == filters

    def test_windowed_fetcher_cfd(self, mock_executor):
        config = PaginationConfig(
            page_size=10, source=mock_executor, dialect=Dialect.CFD
        )

        fetcher = select_fetcher(config, select(Receipt))

        assert fetcher.schema is CFD_SCHEMA
        assert fetcher.filters is None

    def test_joins_take_precedence_over_dialect(self, mock_executor):
        """Test a joined query with a dialect still uses join-safe fetch."""
        config = PaginationConfig(
            page_size=10, source=mock_executor, dialect=Dialect.HADES
        )

        fetcher = select_fetcher(config, select(Author).join(Book))

        assert isinstance(fetcher, JoinSafeEntryFetcher)
