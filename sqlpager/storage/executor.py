"""
Session-backed relation executor.

Adapts a SQLModel AsyncSession to the RelationExecutor protocol. Errors
raised by the session propagate unchanged; rollback and retries are the
session owner's concern.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import Row, Select, text
from sqlmodel.ext.asyncio.session import AsyncSession

from sqlpager.logging import logger


@dataclass(frozen=True)
class RawResult:
    """Result of a raw SQL statement."""

    columns: list[str]
    row_count: int
    rows: list[dict[str, Any]] = field(default_factory=list)

    def scalar(self) -> Any:
        """First column of the first row, or None for an empty result."""
        if not self.rows:
            return None
        return next(iter(self.rows[0].values()))


def unwrap_row(row: Any) -> Any:
    """Return the value of a single-column Row, or the row itself."""
    if isinstance(row, Row) and len(row) == 1:
        return row[0]
    return row


class SessionExecutor:
    """
    Relation executor over a SQLModel async session.

    Example:
        ```python
        async with async_session() as session:
            executor = SessionExecutor(session)
            authors = await executor.execute_structured(select(Author))
        ```
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize executor.

        Args:
            session: SQLModel async session for database queries.
        """
        self.session = session

    async def execute_structured(self, query: Select) -> list[Any]:
        results = await self.session.exec(query)
        return [unwrap_row(row) for row in results.all()]

    async def execute_raw(
        self, sql: str, params: Mapping[str, Any] | None = None
    ) -> RawResult:
        logger.debug(f"Executing raw statement: {sql}")
        result = await self.session.exec(text(sql), params=dict(params or {}))
        columns = list(result.keys())
        rows = [dict(row) for row in result.mappings().all()]
        return RawResult(columns=columns, row_count=len(rows), rows=rows)

    def to_sql(self, query: Select) -> tuple[str, list[Any]]:
        bind = self.session.bind
        compiled = query.compile(dialect=bind.dialect if bind is not None else None)
        return str(compiled), list(compiled.params.values())
