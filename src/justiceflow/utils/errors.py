"""Shared error definitions for JusticeFlow."""


class JusticeFlowError(Exception):
    """Base exception for JusticeFlow."""
    pass


class PermanentError(JusticeFlowError):
    """Error that should not be retried."""
    pass


class RetryableError(JusticeFlowError):
    """Error that can be retried with backoff."""
    pass


class ValidationFailed(PermanentError):
    """Input rejected before any store mutation."""
    pass


class AccessDenied(PermanentError):
    """Record exists but lies outside the acting user's jurisdiction."""
    pass


class RecordNotFound(PermanentError):
    """No record with the requested identifier."""
    pass


class VersionConflict(PermanentError):
    """Stored record changed since the caller read it."""
    pass


class StorageUnavailable(RetryableError):
    """Storage backend could not be reached."""
    pass
