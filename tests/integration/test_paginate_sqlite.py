"""
End-to-end pagination against an in-memory SQLite database.

Runs real statements through SessionExecutor: structured queries for the
direct and join-safe paths, raw windowed statements for the hades
receipt tables.
"""

from datetime import datetime

import pytest
from sqlmodel import select

from sqlpager import Dialect, Paginator, ReceiptFilters
from tests.mocks.models import Author, Book, Receipt


async def seed_authors(session, count, books_per_author=0):
    for i in range(1, count + 1):
        author = Author(id=i, name=f"Author {i:02d}")
        session.add(author)
        for j in range(books_per_author):
            session.add(Book(title=f"Book {i}.{j}", author_id=i))
    await session.commit()


class TestDirectPagination:
    """Queries without joins."""

    @pytest.mark.asyncio
    async def test_last_partial_page(self, db_session):
        await seed_authors(db_session, 25)
        paginator = Paginator(db_session, page_size=10)

        page = await paginator.paginate(
            select(Author).order_by(Author.id), {"page": "3"}
        )

        assert [a.id for a in page.entries] == [21, 22, 23, 24, 25]
        assert page.total_entries == 25
        assert page.total_pages == 3
        assert not page.has_next

    @pytest.mark.asyncio
    async def test_default_page_size(self, db_session):
        await seed_authors(db_session, 12)

        page = await Paginator(db_session).paginate(select(Author))

        assert page.page_size == 10
        assert len(page.entries) == 10
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_filtered_count(self, db_session):
        await seed_authors(db_session, 12)
        query = select(Author).where(Author.id > 8).order_by(Author.id.desc())

        page = await Paginator(db_session, page_size=3).paginate(query)

        assert [a.id for a in page.entries] == [12, 11, 10]
        assert page.total_entries == 4
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_page_past_the_end(self, db_session):
        await seed_authors(db_session, 5)

        page = await Paginator(db_session, page_size=5).paginate(
            select(Author), page=4
        )

        assert page.entries == []
        assert page.total_entries == 5
        assert page.total_pages == 1


class TestJoinSafePagination:
    """One-to-many joins must page over distinct authors."""

    @pytest.mark.asyncio
    async def test_join_does_not_inflate_page_or_total(self, db_session):
        await seed_authors(db_session, 3, books_per_author=2)
        query = select(Author).join(Book).order_by(Author.id)
        paginator = Paginator(db_session, page_size=2)

        first = await paginator.paginate(query)
        second = await paginator.paginate(query, page=2)

        assert [a.id for a in first.entries] == [1, 2]
        assert [a.id for a in second.entries] == [3]
        assert first.total_entries == 3
        assert first.total_pages == 2

    @pytest.mark.asyncio
    async def test_join_with_child_predicate(self, db_session):
        await seed_authors(db_session, 3, books_per_author=2)
        query = (
            select(Author)
            .join(Book)
            .where(Book.title.in_(["Book 1.0", "Book 1.1", "Book 3.0"]))
            .order_by(Author.id)
        )

        page = await Paginator(db_session, page_size=10).paginate(query)

        assert [a.id for a in page.entries] == [1, 3]
        assert page.total_entries == 2

    @pytest.mark.asyncio
    async def test_authors_without_books_excluded(self, db_session):
        await seed_authors(db_session, 4)
        db_session.add(Book(title="Only", author_id=2))
        await db_session.commit()

        page = await Paginator(db_session).paginate(select(Author).join(Book))

        assert [a.id for a in page.entries] == [2]
        assert page.total_pages == 1


class TestWindowedPagination:
    """Raw windowed statements against the hades receipt tables."""

    @pytest.mark.asyncio
    async def test_newest_first_with_explicit_filters(self, hades_session):
        paginator = Paginator(
            hades_session,
            page_size=4,
            dialect=Dialect.HADES,
            filters=ReceiptFilters(emitter_rfc="AAA010101AAA"),
        )

        first = await paginator.paginate(select(Receipt))
        second = await paginator.paginate(select(Receipt), page=2)

        assert [r["document_id"] for r in first.entries] == [11, 9, 7, 5]
        assert [r["document_id"] for r in second.entries] == [3, 1]
        assert first.total_entries == 6
        assert first.total_pages == 2
        assert "row_num" not in first.entries[0]
        assert first.entries[0]["uuid"] == "uuid-11"

    @pytest.mark.asyncio
    async def test_no_filters(self, hades_session):
        paginator = Paginator(
            hades_session,
            page_size=5,
            dialect=Dialect.HADES,
            filters=ReceiptFilters(document_type="todos"),
        )

        page = await paginator.paginate(select(Receipt), page=3)

        assert [r["document_id"] for r in page.entries] == [2, 1]
        assert page.total_entries == 12
        assert page.total_pages == 3

    @pytest.mark.asyncio
    async def test_positional_filters_from_structured_query(self, hades_session):
        """Test legacy callers that only build the structured query."""
        query = select(Receipt).where(
            Receipt.rfc_emitter == "BBB020202BBB",
            Receipt.rfc_receiver == "",
            Receipt.receipt_serie == "A",
            Receipt.receipt_folio == "",
            Receipt.issue_date >= datetime.min,
            Receipt.issue_date <= datetime.min,
            Receipt.issue_date >= datetime.min,
            Receipt.receipt_type == "all",
            Receipt.total == "",
        )
        paginator = Paginator(hades_session, page_size=10, dialect=Dialect.HADES)

        page = await paginator.paginate(query)

        assert [r["document_id"] for r in page.entries] == [12, 10, 8, 6, 4, 2]
        assert page.total_entries == 6
        assert page.total_pages == 1
