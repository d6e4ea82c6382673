"""
Page request resolution.

Turns caller supplied page options (query-string values, keyword
arguments) and repository defaults into a validated, immutable
PaginationConfig.
"""

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Annotated

from sqlpager.exceptions import InvalidPageParameterError
from sqlpager.logging import logger
from sqlpager.schemas.filters import ReceiptFilters
from sqlpager.settings import app_settings
from sqlpager.storage.dialects import Dialect


class PageParam(str, Enum):
    """Option keys understood by the resolver."""

    PAGE = "page"
    PAGE_SIZE = "page_size"


def _normalize_keys(options: Mapping[Any, Any] | None) -> dict[str, Any]:
    if not options:
        return {}
    return {
        (key.value if isinstance(key, Enum) else str(key)): value
        for key, value in options.items()
    }


def parse_page_value(name: str, value: Any) -> int:
    """
    Parse a page option given as an integer or a decimal string.

    Args:
        name: Option name (used in error messages).
        value: Raw option value.

    Returns:
        Parsed integer, at least 1.

    Raises:
        InvalidPageParameterError: If the value is not an integer or a
            decimal string, or is lower than 1.
    """
    if isinstance(value, bool):
        raise InvalidPageParameterError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = int(value.strip(), 10)
        except ValueError as ex:
            raise InvalidPageParameterError(
                f"{name} must be a decimal integer, got {value!r}"
            ) from ex
    else:
        raise InvalidPageParameterError(
            f"{name} must be an integer or a decimal string, got {type(value).__name__}"
        )

    if parsed < 1:
        raise InvalidPageParameterError(f"{name} must be >= 1, got {parsed}")
    return parsed


class PaginationConfig(BaseModel):  # type: ignore[misc]
    """
    Resolved parameters of one page request.

    Attributes:
        page_number: 1-indexed page to fetch.
        page_size: Number of root entities per page.
        max_page_size: Hard ceiling for page_size, if any.
        source: Relation executor the queries run against.
        dialect: Raw-SQL receipt dialect of the source, if any.
        filters: Named receipt filters for the dialect path. When None,
            filters are read positionally from the query parameters.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_number: Annotated[int, Field(ge=1)] = 1
    page_size: Annotated[int, Field(ge=1)]
    max_page_size: Annotated[int | None, Field(ge=1)] = None
    source: Any
    dialect: Dialect | None = None
    filters: ReceiptFilters | None = None

    @model_validator(mode="after")
    def _check_max_page_size(self) -> "PaginationConfig":
        if self.max_page_size is not None and self.page_size > self.max_page_size:
            raise ValueError(
                f"page_size {self.page_size} exceeds max_page_size {self.max_page_size}"
            )
        return self

    @property
    def offset(self) -> int:
        return self.page_size * (self.page_number - 1)

    @classmethod
    def new(
        cls,
        source: Any,
        defaults: Mapping[str, Any] | None = None,
        options: Mapping[Any, Any] | None = None,
    ) -> "PaginationConfig":
        """
        Merge repository defaults with caller options.

        Args:
            source: Relation executor the queries run against.
            defaults: Repository defaults: page_size, max_page_size,
                dialect, filters. Missing sizes fall back to settings.
            options: Caller options keyed by "page"/"page_size" strings or
                PageParam members. Values are integers or decimal strings.
                A "filters" option overrides the default filters.

        Returns:
            Validated PaginationConfig.

        Raises:
            InvalidPageParameterError: If page or page_size is malformed.

        Example:
            >>> config = PaginationConfig.new(
            ...     executor, {"page_size": 10, "max_page_size": 50},
            ...     {"page": "3", "page_size": "100"},
            ... )
            >>> config.page_number, config.page_size
            (3, 50)
        """
        defaults = dict(defaults or {})
        options = _normalize_keys(options)

        page_number = parse_page_value(
            PageParam.PAGE.value, options.get(PageParam.PAGE.value, 1)
        )

        default_size = defaults.get("page_size") or app_settings.DEFAULT_PAGE_SIZE
        page_size = parse_page_value(
            PageParam.PAGE_SIZE.value,
            options.get(PageParam.PAGE_SIZE.value, default_size),
        )

        max_page_size = defaults.get("max_page_size", app_settings.MAX_PAGE_SIZE)
        if max_page_size is not None and page_size > max_page_size:
            logger.debug(
                f"Requested page_size {page_size} clamped to {max_page_size}"
            )
            page_size = max_page_size

        return cls(
            page_number=page_number,
            page_size=page_size,
            max_page_size=max_page_size,
            source=source,
            dialect=defaults.get("dialect"),
            filters=options.get("filters", defaults.get("filters")),
        )
