"""Domain errors raised by services and mapped to HTTP responses by the controllers."""

from fastapi import status


class ChatSystemError(Exception):
    """Base class for every error surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(ChatSystemError):
    """Unknown application token or unknown parent scope."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailure(ChatSystemError):
    """Missing required field or uniqueness violation on a client-supplied value."""

    status_code = 422


class ConstraintViolation(ChatSystemError):
    """A sequence number collision that could not be resolved by retrying."""

    status_code = status.HTTP_409_CONFLICT


class SearchUnavailable(ChatSystemError):
    """The external search index failed to answer a query."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class CacheUnavailable(ChatSystemError):
    """The cache store is unreachable and the cache runs in strict mode."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
