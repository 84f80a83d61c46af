"""Mapping of domain errors to HTTP errors - Presentation Layer."""

from fastapi import HTTPException, status

from govee_web.domain.entities.errors import DeviceNotFoundError, InvalidColorError

UNHANDLED_SERVER_ERROR = "UNHANDLED_SERVER_ERROR"


def to_http_exception(exc: Exception) -> HTTPException:
    """
    Translate an exception raised by the application layer.

    Unknown devices map to 404 and unparsable colors to 400. Everything
    else is a 500 that does not expose internal details.
    """
    if isinstance(exc, DeviceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, InvalidColorError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=UNHANDLED_SERVER_ERROR,
    )
