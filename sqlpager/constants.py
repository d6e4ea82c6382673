"""
Library-level constants for hardcoded pagination behavior.

These values define the raw-SQL contract of the two receipt dialects and
should NEVER be changed via environment variables. For configurable values
(default page size, page size ceiling, logging), see sqlpager/settings.py.
"""

from datetime import date, datetime, time

# ============================================================================
# Filter Sentinels
# ============================================================================

# Document type values meaning "every document type" (filter omitted)
# Compared case-insensitively
ALL_DOCUMENT_TYPES = frozenset({"todos", "all"})

# Zero dates sent by clients that leave a date filter empty
ZERO_DATETIME = datetime.min
ZERO_DATE = date.min

# Inclusive upper bound applied to end date filters
END_OF_DAY = time(23, 59, 59)


# ============================================================================
# Positional Filter Layout
# ============================================================================

# Order of bound parameters in a receipt query built by legacy callers.
# Index 0 is the first WHERE predicate of the structured query.
POSITIONAL_FILTER_LAYOUT = (
    "emitter_rfc",
    "receiver_rfc",
    "series",
    "folio",
    "start_date",
    "end_date",
    "limit_date",
    "document_type",
    "amount",
)


# ============================================================================
# Windowed Queries
# ============================================================================

# Alias of the ROW_NUMBER() ranking column inside the CTE
ROW_NUMBER_COLUMN = "row_num"

# Bound parameter names for the window slice (row_num > lower AND <= upper)
WINDOW_LOWER_PARAM = "window_lower"
WINDOW_UPPER_PARAM = "window_upper"
