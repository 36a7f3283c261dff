"""Error taxonomy for catalog provider failures.

Controllers never let provider failures escape: every failure is converted
into one of three categories at the provider boundary and then painted as a
fallback state (placeholder slide, "no results", "failed to load").

Example:
    from fossbox.core.errors import CatalogError, NetworkError

    try:
        page = await provider.fetch_by_category(Category.MOVIE_POPULAR, 1)
    except CatalogError as ex:
        view.show_message(messages[ex.category])
"""

import asyncio
from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of provider failures for fallback decisions."""

    PROVIDER_UNAVAILABLE = auto()  # Missing credential or configuration
    NETWORK = auto()  # Non-success status, transport failure, bad payload
    EMPTY_RESULT = auto()  # Valid response with zero items


class CatalogError(Exception):
    """Base class for every failure a ContentProvider may raise.

    Attributes:
        category: The failure category.
        original_error: The underlying exception that was classified.
    """

    default_category = ErrorCategory.NETWORK

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(cls, ex: Exception) -> "CatalogError":
        """Wrap an arbitrary exception in the matching CatalogError subclass."""
        if isinstance(ex, CatalogError):
            return ex
        category = classify_error(ex)
        error_class = _CLASS_BY_CATEGORY[category]
        return error_class(str(ex) or type(ex).__name__, category, ex)


class ProviderUnavailable(CatalogError):
    """The provider cannot be used at all (no API key, no base URL)."""

    default_category = ErrorCategory.PROVIDER_UNAVAILABLE


class NetworkError(CatalogError):
    """The request failed in transit or the response was unusable."""

    default_category = ErrorCategory.NETWORK


class EmptyResult(CatalogError):
    """The provider answered correctly but returned no items."""

    default_category = ErrorCategory.EMPTY_RESULT


_CLASS_BY_CATEGORY: dict[ErrorCategory, type[CatalogError]] = {
    ErrorCategory.PROVIDER_UNAVAILABLE: ProviderUnavailable,
    ErrorCategory.NETWORK: NetworkError,
    ErrorCategory.EMPTY_RESULT: EmptyResult,
}


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error. Anything that is not
        recognisably a configuration problem counts as a network failure.
    """
    if isinstance(error, CatalogError):
        return error.category

    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCategory.NETWORK

    error_str = str(error).lower()

    if "not configured" in error_str or "configuration" in error_str:
        return ErrorCategory.PROVIDER_UNAVAILABLE
    if "api key" in error_str or "api_key" in error_str:
        return ErrorCategory.PROVIDER_UNAVAILABLE
    if "401" in error_str or "unauthorized" in error_str:
        return ErrorCategory.PROVIDER_UNAVAILABLE

    return ErrorCategory.NETWORK
