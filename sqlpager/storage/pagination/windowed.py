"""
Windowed raw-SQL pagination for receipt dialects.

The receipt stores reject LIMIT/OFFSET over a filtered, windowed join, so
pages are sliced by rank instead: a CTE numbers the filtered rows with
ROW_NUMBER() over the issue date (newest first) and the outer query keeps
the rows ranked in (offset, offset + page_size].

One template serves both dialects; only the DialectSchema differs.
"""

from typing import Any

from sqlalchemy import Select

from sqlpager.constants import (
    ROW_NUMBER_COLUMN,
    WINDOW_LOWER_PARAM,
    WINDOW_UPPER_PARAM,
)
from sqlpager.logging import logger
from sqlpager.protocols import RelationExecutor
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.storage.dialects import DialectSchema
from sqlpager.storage.pagination.predicates import (
    PredicateChain,
    compile_predicates,
    resolve_filters,
)


def build_windowed_statement(
    schema: DialectSchema,
    chain: PredicateChain,
    offset: int,
    page_size: int,
) -> tuple[str, dict[str, Any]]:
    """
    Build the ranked, sliced page statement for a dialect.

    Args:
        schema: Dialect descriptor.
        chain: Compiled predicates.
        offset: Number of ranked rows to skip.
        page_size: Number of rows to keep.

    Returns:
        Tuple of (statement text, bound parameters).
    """
    projection = ", ".join(schema.projection)
    sql = (
        f"WITH {schema.cte_name} AS ("
        f"SELECT {projection}, "
        f"ROW_NUMBER() OVER (ORDER BY {schema.columns.issue_date} DESC) "
        f"AS {ROW_NUMBER_COLUMN} "
        f"FROM {schema.from_clause}{chain.render()}"
        f") SELECT * FROM {schema.cte_name} "
        f"WHERE {ROW_NUMBER_COLUMN} > :{WINDOW_LOWER_PARAM} "
        f"AND {ROW_NUMBER_COLUMN} <= :{WINDOW_UPPER_PARAM}"
    )
    params = {
        **chain.params,
        WINDOW_LOWER_PARAM: offset,
        WINDOW_UPPER_PARAM: offset + page_size,
    }
    return sql, params


def build_count_statement(
    schema: DialectSchema, chain: PredicateChain
) -> tuple[str, dict[str, Any]]:
    """
    Build the distinct receipt count statement for a dialect.

    Args:
        schema: Dialect descriptor.
        chain: Compiled predicates (same as the page statement).

    Returns:
        Tuple of (statement text, bound parameters).
    """
    sql = (
        f"SELECT COUNT(DISTINCT {schema.count_column}) "
        f"FROM {schema.from_clause}{chain.render()}"
    )
    return sql, dict(chain.params)


class WindowedEntryFetcher:
    """
    Rank-bounded fetch for queries against a receipt dialect.

    The structured query is only used as a source of positional filters
    when no explicit ReceiptFilters are configured.

    Example:
        ```python
        fetcher = WindowedEntryFetcher(
            executor,
            Dialect.HADES.schema,
            ReceiptFilters(emitter_rfc="AAA010101AAA"),
        )
        rows = await fetcher.fetch(query, page_number=3, page_size=25)
        ```
    """

    def __init__(
        self,
        executor: RelationExecutor,
        schema: DialectSchema,
        filters: ReceiptFilters | None = None,
    ):
        """
        Initialize windowed fetcher.

        Args:
            executor: Relation executor for raw statements.
            schema: Dialect descriptor of the executor's database.
            filters: Explicit receipt filters. If None, they are read by
                position from the structured query's parameters.
        """
        self.executor = executor
        self.schema = schema
        self.filters = filters

    async def fetch(
        self,
        query: Select,
        page_number: int,
        page_size: int,
    ) -> list[dict[str, Any]]:
        parameters = None
        if self.filters is None:
            _, parameters = self.executor.to_sql(query)
        filters = resolve_filters(self.filters, parameters)

        offset = page_size * (page_number - 1)
        chain = compile_predicates(self.schema, filters)
        sql, params = build_windowed_statement(
            self.schema, chain, offset, page_size
        )
        logger.debug(
            f"Windowed fetch ({self.schema.name}): rows ({offset}, {offset + page_size}]"
        )

        result = await self.executor.execute_raw(sql, params)
        return [
            {k: v for k, v in row.items() if k.lower() != ROW_NUMBER_COLUMN}
            for row in result.rows
        ]
