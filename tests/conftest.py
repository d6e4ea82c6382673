"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for executors, in-memory databases
and the receipt schemas used by the dialect tests.
"""

import os
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Settings are read at import time; keep them independent of the host env
os.environ.setdefault("SQLPAGER_DEFAULT_PAGE_SIZE", "10")
os.environ.setdefault("SQLPAGER_LOG_LEVEL", "WARNING")

from tests.mocks import models  # noqa: E402,F401
from tests.mocks.executor_mocks import create_mock_executor  # noqa: E402

HADES_DDL = (
    """
    CREATE TABLE hades_sealed_cfdis (
        id INTEGER PRIMARY KEY,
        uuid VARCHAR NOT NULL
    )
    """,
    """
    CREATE TABLE hades_cfdi_3_2_comprobantes (
        id INTEGER PRIMARY KEY,
        document_id INTEGER NOT NULL REFERENCES hades_sealed_cfdis (id),
        client_id INTEGER NOT NULL,
        receipt_serie VARCHAR,
        receipt_folio VARCHAR,
        rfc_emitter VARCHAR,
        rfc_receiver VARCHAR,
        status VARCHAR,
        issue_date VARCHAR,
        receipt_type VARCHAR,
        total VARCHAR
    )
    """,
)


@pytest.fixture
def mock_executor():
    """
    Provides an executor mock with no queued results.

    Returns:
        AsyncMock: Mocked SessionExecutor
    """
    return create_mock_executor()


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Create an in-memory SQLite engine with every SQLModel table.

    StaticPool keeps a single connection so the in-memory database
    survives across sessions.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Async SQLModel session bound to the in-memory engine."""
    async_session = sessionmaker(
        db_engine, expire_on_commit=False, class_=AsyncSession
    )
    async with async_session() as session:
        yield session


@pytest.fixture
async def hades_session(db_session: AsyncSession) -> AsyncSession:
    """
    Session whose database holds the hades receipt tables.

    Seeds 12 sealed receipts issued on consecutive January 2024 days,
    alternating between two emitters.
    """
    for ddl in HADES_DDL:
        await db_session.exec(text(ddl))

    for i in range(1, 13):
        await db_session.exec(
            text(
                "INSERT INTO hades_sealed_cfdis (id, uuid) VALUES (:id, :uuid)"
            ),
            params={"id": i, "uuid": f"uuid-{i:02d}"},
        )
        await db_session.exec(
            text(
                "INSERT INTO hades_cfdi_3_2_comprobantes "
                "(id, document_id, client_id, receipt_serie, receipt_folio, "
                "rfc_emitter, rfc_receiver, status, issue_date, receipt_type, "
                "total) VALUES (:id, :id, 1, 'A', :folio, :emitter, "
                "'XEXX010101000', 'active', :issued, 'I', '100.00')"
            ),
            params={
                "id": i,
                "folio": str(i),
                "emitter": "AAA010101AAA" if i % 2 else "BBB020202BBB",
                "issued": f"2024-01-{i:02d} 10:00:00",
            },
        )
    await db_session.commit()
    return db_session
