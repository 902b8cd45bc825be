class SearchError(Exception):
    """Base class for failures that abort a search call.

    partial_result is only populated when the caller opted into
    partial_on_error; otherwise the accumulated pages are discarded.
    """

    partial_result = None


class InputValidationError(SearchError):
    """Raised when search arguments have the wrong type. No request is made."""

    @classmethod
    def for_type(cls, key: str, expected: str, received: object) -> "InputValidationError":
        return cls(f'Expected "{key}" to be "{expected}" but received "{type(received).__name__}".')


class FetchError(SearchError):
    """Raised when a results page cannot be fetched (transport failure or non-2xx status)."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RateLimitError(FetchError):
    """Raised when YouTube answers with HTTP 429."""


class ParseError(SearchError):
    """Raised when the embedded results data cannot be located or decoded."""
