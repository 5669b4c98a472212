# /portal/core/errors.py

"""
Domain exceptions raised by the service and repository layers.

Services never raise `HTTPException` directly. Routers catch `PortalError`
and hand it to `to_http_exception`, which picks the status code declared on
the exception class. The error message is surfaced to the client verbatim.
"""

from fastapi import HTTPException, status


class PortalError(Exception):
    """Base class for every error the portal reports to a caller."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordNotFoundError(PortalError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidRecordError(PortalError):
    status_code = 422


class ConflictError(PortalError):
    """The write collides with data already in the store."""
    status_code = status.HTTP_409_CONFLICT


class DuplicateRecordError(ConflictError):
    pass


class InvalidTransitionError(ConflictError):
    """A submission was asked to move to a status its lifecycle does not allow."""
    pass


class StorageError(PortalError):
    """Any failure reported by the underlying store. Nothing was written."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: PortalError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)
