from .errors import (
    JusticeFlowError,
    PermanentError,
    RetryableError,
    ValidationFailed,
    AccessDenied,
    RecordNotFound,
    VersionConflict,
    StorageUnavailable,
)
from .logging import setup_logging, JSONFormatter
from .redis import get_redis_client, close_redis

__all__ = [
    "JusticeFlowError",
    "PermanentError",
    "RetryableError",
    "ValidationFailed",
    "AccessDenied",
    "RecordNotFound",
    "VersionConflict",
    "StorageUnavailable",
    "setup_logging",
    "JSONFormatter",
    "get_redis_client",
    "close_redis",
]
