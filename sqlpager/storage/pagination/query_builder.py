"""
Shared query building utilities for pagination strategies.

Reads what pagination needs from a structured query (base entity primary
key, presence of joins) and derives the stripped queries the count and
key sub-queries are built from. The caller's query is never modified;
every helper returns a new statement.
"""

from typing import Any

from sqlalchemy import Column, Select, inspect
from sqlalchemy.sql.selectable import Join

from sqlpager.exceptions import MissingPrimaryKeyError
from sqlpager.logging import logger


def _root_from(query: Select) -> Any:
    froms = query.get_final_froms()
    if not froms:
        return None
    root = froms[0]
    while isinstance(root, Join):
        root = root.left
    return root


def primary_key_of(query: Select) -> Column[Any]:
    """
    Primary key column of the query's base entity.

    The base entity is the first mapped class selected by the query, or the
    root table of its FROM clause when no mapped class is selected.

    Args:
        query: Structured query being paginated.

    Returns:
        The first primary key column of the base entity.

    Raises:
        MissingPrimaryKeyError: If the base entity declares no primary key.
    """
    descriptions = query.column_descriptions
    entity = descriptions[0].get("entity") if descriptions else None

    if entity is not None:
        columns = tuple(inspect(entity).mapper.primary_key)
        name = getattr(entity, "__name__", repr(entity))
    else:
        root = _root_from(query)
        columns = tuple(getattr(root, "primary_key", ()))
        name = getattr(root, "name", repr(root))

    if not columns:
        logger.error(f"Cannot paginate {name}: no primary key declared")
        raise MissingPrimaryKeyError(
            f"{name} has no primary key; pagination needs one to count "
            f"and deduplicate entries"
        )
    return columns[0]


def has_joins(query: Select) -> bool:
    """Whether the query's FROM clause contains at least one join."""
    return any(isinstance(from_, Join) for from_ in query.get_final_froms())


def remove_clauses(query: Select) -> Select:
    """
    Drop eager-load options and GROUP BY from a query.

    Projection is replaced by the callers with with_only_columns().

    Args:
        query: Structured query being paginated.

    Returns:
        New Select without loader options and grouping.
    """
    stripped = query.group_by(None)
    # Select has no public way to reset .options(); the copy is private to us
    stripped._with_options = ()
    return stripped
