from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors that map onto a structured HTTP response.

    Attributes:
        message: human-readable message
        error: optional diagnostic detail (underlying error text)
        details: optional mapping with extra context (field errors, validation info)
        http_status: HTTP status code for handlers
    """

    http_status = 500

    def __init__(
        self,
        message: str = "Internal error",
        error: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error = error
        self.details = details

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.error:
            payload["error"] = self.error
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400

    def __init__(self, message: str = "Invalid input", error=None, details=None):
        super().__init__(message, error, details)


class NotFoundError(ServiceError):
    """Raised when a record does not exist (failed existence condition)."""

    http_status = 404

    def __init__(self, message: str = "Not found", error=None, details=None):
        super().__init__(message, error, details)


class RouteNotFoundError(NotFoundError):
    """Raised when no handler matches the request method and path."""

    def __init__(
        self, method: str, path: str, message: Optional[str] = None, resource: str = ""
    ):
        what = f"{resource} resource" if resource else "resource"
        super().__init__(
            message
            or f"Not Found: The requested {what} or method ({method} {path}) was not found."
        )
        self.method = method
        self.path = path


class StoreError(ServiceError):
    """Raised when the record store fails for any reason other than a missing record."""

    http_status = 500

    def __init__(self, message: str = "Record store failure", error=None, details=None):
        super().__init__(message, error, details)


class UpstreamError(ServiceError):
    """Raised when the external classification API fails.

    http_status carries the upstream status when there is one, otherwise 500.
    """

    def __init__(
        self,
        message: str = "Upstream service failure",
        error=None,
        details=None,
        http_status: int = 500,
    ):
        super().__init__(message, error, details)
        self.http_status = http_status
