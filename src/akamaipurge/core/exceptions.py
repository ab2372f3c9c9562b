"""Exception hierarchy for akamaipurge."""


class PurgeError(Exception):
    """Base class for all akamaipurge errors."""

    pass


class ValidationError(PurgeError):
    """Raised when a purge request fails a precondition.

    Validation errors are detected before any network I/O and are
    always fatal for the attempt.
    """

    pass


class ConfigurationError(ValidationError):
    """Raised when agent configuration holds an unknown or malformed value."""

    pass


class UnsupportedOperationError(PurgeError):
    """Raised for replication action types the handler does not support."""

    pass


class TransportError(PurgeError):
    """Raised by transports when a request could not be sent or read.

    Wraps the underlying network error, available as ``cause``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ExternalizationError(PurgeError):
    """Raised when an internal path cannot be mapped to an external URL."""

    pass


class RepositoryUnavailableError(PurgeError):
    """Raised when the content repository cannot be reached."""

    pass


class SerializationError(PurgeError):
    """Raised when a purge payload cannot be encoded or decoded."""

    pass
