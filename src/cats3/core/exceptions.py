"""Exception hierarchy for cats3."""


class Cats3Error(Exception):
    """Base exception for all cats3 errors."""

    pass


class ConfigurationError(Cats3Error):
    """Raised when invocation options are missing or invalid."""

    pass


class ListingError(Cats3Error):
    """Raised when a prefix listing call fails."""

    pass


class RetrievalError(Cats3Error):
    """Raised when an object cannot be fetched."""

    pass


class OutputError(Cats3Error):
    """Raised when object bytes cannot be written to the output stream."""

    pass
