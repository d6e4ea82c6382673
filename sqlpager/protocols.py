"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, so tests and
alternative drivers can stand in for the session-backed executor.

Example:
    ```python
    from sqlpager.protocols import RelationExecutor


    async def first_rows(executor: RelationExecutor, query: Select) -> list:
        # Works with any executor implementation
        return await executor.execute_structured(query.limit(5))
    ```
"""

from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

from sqlalchemy import Select

if TYPE_CHECKING:
    from sqlpager.storage.executor import RawResult


@runtime_checkable
class RelationExecutor(Protocol):
    """
    Protocol for the database execution layer used by pagination.

    Pagination only builds statements; running them, connection handling,
    timeouts and cancellation all belong to the executor.
    """

    async def execute_structured(self, query: Select) -> list[Any]:
        """
        Execute a structured query.

        Args:
            query: SQLAlchemy Select statement.

        Returns:
            Result rows. Single-column selects yield bare values.
        """
        ...

    async def execute_raw(
        self, sql: str, params: Mapping[str, Any] | None = None
    ) -> "RawResult":
        """
        Execute a raw SQL statement with bound parameters.

        Args:
            sql: Statement text using :name placeholders.
            params: Values bound to the placeholders.

        Returns:
            RawResult with column names, row count and rows.
        """
        ...

    def to_sql(self, query: Select) -> tuple[str, list[Any]]:
        """
        Compile a structured query.

        Args:
            query: SQLAlchemy Select statement.

        Returns:
            Tuple of (statement text, bound values in statement order).
        """
        ...
