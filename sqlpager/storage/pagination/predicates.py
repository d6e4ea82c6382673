"""
Predicate compiler for raw-SQL receipt dialects.

Renders ReceiptFilters into a WHERE clause against a dialect descriptor.
Values are always bound parameters; only the dialect's fixed column names
are written into the statement text.
"""

from typing import Any, Sequence

from sqlpager.logging import logger
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.storage.dialects import DialectSchema


class PredicateChain:
    """
    Accumulator of AND-ed predicates with bound values.

    A predicate is only appended when it is given a value, so blank filters
    never reach the statement. The first rendered predicate is introduced
    by WHERE and every following one by AND.

    Example:
        >>> chain = PredicateChain()
        >>> _ = chain.add("t.a", "=", "a", "x").add("t.b", "=", "b", None)
        >>> chain.render()
        ' WHERE t.a = :a'
        >>> chain.params
        {'a': 'x'}
    """

    def __init__(self) -> None:
        self._clauses: list[str] = []
        self.params: dict[str, Any] = {}

    def add(
        self, column: str, operator: str, name: str, value: Any
    ) -> "PredicateChain":
        """
        Append `column operator :name` when value is not None.

        Args:
            column: Qualified column name from the dialect descriptor.
            operator: Comparison operator.
            name: Bound parameter name, unique within the chain.
            value: Value to bind, or None to skip the predicate.

        Returns:
            The chain, for fluent use.
        """
        if value is None:
            return self
        if name in self.params:
            raise ValueError(f"Duplicate predicate parameter: {name}")
        self._clauses.append(f"{column} {operator} :{name}")
        self.params[name] = value
        return self

    @property
    def clauses(self) -> Sequence[str]:
        return tuple(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def render(self) -> str:
        if not self._clauses:
            return ""
        return " WHERE " + " AND ".join(self._clauses)


def compile_predicates(
    schema: DialectSchema, filters: ReceiptFilters
) -> PredicateChain:
    """
    Render receipt filters for a dialect.

    Predicates are emitted in a fixed order: emitter, receiver, series,
    folio, start date, end date, limit date, document type, amount.

    Args:
        schema: Dialect descriptor providing the physical columns.
        filters: Named receipt filters.

    Returns:
        PredicateChain holding the clauses and their bound values.
    """
    columns = schema.columns
    targets = {
        "emitter_rfc": (columns.emitter_rfc, "="),
        "receiver_rfc": (columns.receiver_rfc, "="),
        "series": (columns.series, "="),
        "folio": (columns.folio, "="),
        "start_date": (columns.issue_date, ">="),
        "end_date": (columns.issue_date, "<="),
        "limit_date": (columns.issue_date, ">="),
        "document_type": (columns.document_type, "="),
        "amount": (columns.total, "="),
    }

    chain = PredicateChain()
    for name, value in filters.bound_values().items():
        column, operator = targets[name]
        chain.add(column, operator, name, value)
    logger.debug(
        f"Compiled {len(chain)} predicate(s) for dialect {schema.name}"
    )
    return chain


def resolve_filters(
    filters: ReceiptFilters | None,
    parameters: Sequence[Any] | None = None,
) -> ReceiptFilters:
    """
    Named filters for a dialect request.

    Explicit filters win. Otherwise the filters are read by position from
    the bound values of the structured query (legacy callers).

    Args:
        filters: Explicit filters from the pagination config, if any.
        parameters: Bound values of the structured query in statement order.

    Returns:
        ReceiptFilters to render.

    Raises:
        FilterExtractionError: If positional extraction finds too few values.
    """
    if filters is not None:
        return filters
    logger.debug("No explicit receipt filters, reading query parameters")
    return ReceiptFilters.from_parameters(parameters or [])
