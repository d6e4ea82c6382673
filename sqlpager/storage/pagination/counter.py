"""
Distinct entity counting.

The total is the number of distinct root entities matched by the query's
predicates; joined child rows never inflate it.
"""

from sqlalchemy import Select, distinct, func

from sqlpager.logging import logger
from sqlpager.protocols import RelationExecutor
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.storage.dialects import DialectSchema
from sqlpager.storage.pagination.predicates import (
    compile_predicates,
    resolve_filters,
)
from sqlpager.storage.pagination.query_builder import (
    primary_key_of,
    remove_clauses,
)
from sqlpager.storage.pagination.windowed import build_count_statement


def build_count_query(query: Select) -> Select:
    """
    Derive a COUNT(DISTINCT primary key) query from a structured query.

    Loader options, projection, grouping, ordering and any LIMIT/OFFSET are
    dropped; joins and WHERE predicates are kept.

    Raises:
        MissingPrimaryKeyError: If the base entity has no primary key.
    """
    primary_key = primary_key_of(query)
    return (
        remove_clauses(query)
        .order_by(None)
        .limit(None)
        .offset(None)
        .with_only_columns(
            func.count(distinct(primary_key)), maintain_column_froms=True
        )
    )


async def count_entries(
    executor: RelationExecutor,
    query: Select,
    schema: DialectSchema | None = None,
    filters: ReceiptFilters | None = None,
) -> int:
    """
    Count the distinct entities a query matches.

    Args:
        executor: Relation executor for database queries.
        query: Structured query being paginated.
        schema: Receipt dialect of the executor, if any. When set, the count
            runs as a raw statement built from the receipt filters.
        filters: Explicit receipt filters for the dialect path.

    Returns:
        Number of distinct entities.

    Raises:
        MissingPrimaryKeyError: If the base entity has no primary key
            (structured path).
        FilterExtractionError: If positional filters cannot be read
            (dialect path).
        SQLAlchemyError: If database query fails.
    """
    if schema is None:
        rows = await executor.execute_structured(build_count_query(query))
        total = rows[0] if rows else 0
    else:
        parameters = None
        if filters is None:
            _, parameters = executor.to_sql(build_count_query(query))
        chain = compile_predicates(schema, resolve_filters(filters, parameters))
        sql, params = build_count_statement(schema, chain)
        result = await executor.execute_raw(sql, params)
        total = result.scalar() or 0

    logger.debug(f"Counted {total} distinct entries")
    return int(total)
