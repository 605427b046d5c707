"""Domain errors — locator exception hierarchy."""


class LocatorError(Exception):
    """Base error for all code object discovery operations.

    Use ``raise LocatorError("msg") from cause`` for exception chaining.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(LocatorError):
    """Invalid settings or a malformed convention catalog."""


class SearchError(LocatorError):
    """The file search primitive failed — root missing or unreadable."""


class InvalidPatternError(SearchError):
    """Malformed or unsafe glob pattern (unbalanced braces, absolute path, ``..``)."""


class StatError(LocatorError):
    """A single candidate could not be resolved to a modification time.

    Never escapes the locator: the candidate is dropped instead.
    """
