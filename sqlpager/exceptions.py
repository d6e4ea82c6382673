"""
Custom exception classes for pagination.

Database failures are not wrapped: SQLAlchemyError and driver errors
propagate unchanged from the executor.
"""


class PaginationError(Exception):
    """
    Pagination request cannot proceed.

    Base class for every error raised by sqlpager itself.
    """

    pass


class InvalidPageParameterError(PaginationError, ValueError):
    """
    Page parameters are malformed.

    Raised when page or page_size is a non-numeric string, an unsupported
    type, or lower than 1.
    """

    pass


class MissingPrimaryKeyError(PaginationError):
    """
    Paginated entity has no primary key.

    Counting distinct entities and the join-safe fetch both need a primary
    key column. This is a configuration error and is never retried.
    """

    pass


class FilterExtractionError(PaginationError, LookupError):
    """
    Positional filter extraction failed.

    Raised when a structured query carries fewer bound parameters than the
    positional receipt filter layout expects, or a value does not fit its
    slot.
    """

    pass
