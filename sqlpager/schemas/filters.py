"""
Type-safe filter schemas for raw-SQL receipt pagination.

The receipt dialects render their WHERE clause from a fixed set of named
filters. Every filter has a blank value (empty string, the "todos"/"all"
document type, the zero date) that means "do not filter".
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Sequence

from pydantic import BaseModel, Field, ValidationError

from sqlpager.constants import (
    ALL_DOCUMENT_TYPES,
    END_OF_DAY,
    POSITIONAL_FILTER_LAYOUT,
    ZERO_DATE,
    ZERO_DATETIME,
)
from sqlpager.exceptions import FilterExtractionError


class BaseFilter(BaseModel):  # type: ignore[misc]
    """Base class for filter schemas: immutable, unknown fields rejected."""

    model_config = {
        "extra": "forbid",  # Reject unexpected fields
        "frozen": True,
    }


def _as_datetime(value: date | datetime | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return None if value == ZERO_DATETIME else value
    if value == ZERO_DATE:
        return None
    return datetime.combine(value, datetime.min.time())


class ReceiptFilters(BaseFilter):
    """
    Named filters for receipt queries.

    Replaces positional extraction of bound parameters: callers pass the
    filters explicitly and each one is rendered only when it carries a
    value.

    Example:
        >>> filters = ReceiptFilters(
        ...     emitter_rfc="AAA010101AAA",
        ...     start_date=date(2024, 1, 1),
        ...     document_type="todos",  # blank, omitted
        ... )
        >>> filters.active_fields()
        ['emitter_rfc', 'start_date']
    """

    emitter_rfc: str | None = Field(
        default="", description="Exact RFC of the issuer"
    )
    receiver_rfc: str | None = Field(
        default="", description="Exact RFC of the receiver"
    )
    series: str | None = Field(default="", description="Receipt series code")
    folio: str | None = Field(
        default="", description="Receipt folio (sequence number)"
    )
    start_date: datetime | date | None = Field(
        default=None, description="Issued on or after this day"
    )
    end_date: datetime | date | None = Field(
        default=None, description="Issued on or before the end of this day"
    )
    limit_date: datetime | date | None = Field(
        default=None,
        description="Additional lower bound on the issue day",
    )
    document_type: str | None = Field(
        default="", description="Receipt type code, 'todos'/'all' for any"
    )
    amount: Decimal | str | None = Field(
        default="", description="Exact receipt total"
    )

    @classmethod
    def from_parameters(cls, values: Sequence[Any]) -> "ReceiptFilters":
        """
        Build filters from the ordered bound values of a structured query.

        Legacy callers build receipt queries with their WHERE predicates in
        a fixed order (see POSITIONAL_FILTER_LAYOUT). Trailing values, such
        as LIMIT/OFFSET binds, are ignored.

        Args:
            values: Bound parameter values in statement order.

        Returns:
            ReceiptFilters populated by position.

        Raises:
            FilterExtractionError: If fewer values than the layout needs, or
                a value has the wrong type for its slot.
        """
        expected = len(POSITIONAL_FILTER_LAYOUT)
        if len(values) < expected:
            raise FilterExtractionError(
                f"Expected at least {expected} filter parameters, got {len(values)}"
            )
        try:
            return cls(**dict(zip(POSITIONAL_FILTER_LAYOUT, values)))
        except ValidationError as ex:
            raise FilterExtractionError(
                f"Query parameters do not match the receipt filter layout: {ex}"
            ) from ex

    def text_value(self, name: str) -> str | None:
        """Return a text filter value, or None when it is blank."""
        value = getattr(self, name)
        if value is None or value == "":
            return None
        if (
            name == "document_type"
            and value.strip().lower() in ALL_DOCUMENT_TYPES
        ):
            return None
        return value

    @property
    def start_bound(self) -> datetime | None:
        return _as_datetime(self.start_date)

    @property
    def end_bound(self) -> datetime | None:
        bound = _as_datetime(self.end_date)
        if bound is None:
            return None
        return datetime.combine(bound.date(), END_OF_DAY)

    @property
    def limit_bound(self) -> datetime | None:
        return _as_datetime(self.limit_date)

    @property
    def amount_value(self) -> Decimal | str | None:
        if self.amount is None or self.amount == "":
            return None
        return self.amount

    def bound_values(self) -> dict[str, Any]:
        """
        Value each filter binds, keyed in render order.

        Blank filters map to None. This is the single place the blank rules
        are applied; the predicate compiler renders exactly these values.
        """
        return {
            "emitter_rfc": self.text_value("emitter_rfc"),
            "receiver_rfc": self.text_value("receiver_rfc"),
            "series": self.text_value("series"),
            "folio": self.text_value("folio"),
            "start_date": self.start_bound,
            "end_date": self.end_bound,
            "limit_date": self.limit_bound,
            "document_type": self.text_value("document_type"),
            "amount": self.amount_value,
        }

    def active_fields(self) -> list[str]:
        """Names of the filters that will be rendered, in render order."""
        return [
            name for name, value in self.bound_values().items() if value is not None
        ]
