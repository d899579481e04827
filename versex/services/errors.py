"""Service-layer error raised for rejected requests and database failures."""

from fastapi import HTTPException, status


class ServiceError(Exception):
    """Raised when a service operation cannot be completed (bad id, missing row, DB constraint)."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def to_http_exception(e: ServiceError) -> HTTPException:
    """Map a ServiceError onto the HTTPException the route raises."""
    return HTTPException(status_code=e.status_code, detail=e.message)


def parse_id(raw_id: str, message: str) -> int:
    """Parse a path identifier; raises ServiceError(message) when it is not an integer."""
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        raise ServiceError(message) from None
