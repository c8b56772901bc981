class ServiceError(Exception):
    """
    Base class for failures a service reports back to its caller.

    ``code`` and ``status_code`` let the API layer render the error without
    knowing which service raised it.
    """

    code: str = "error"
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Invalid input, e.g. coordinates out of range or an unknown vote type."""

    code = "bad_request"
    status_code = 400


class RateLimitError(ServiceError):
    code = "too_many_requests"
    status_code = 429


class NotFoundError(ServiceError):
    code = "not_found"
    status_code = 404


class PermissionDeniedError(ServiceError):
    code = "forbidden"
    status_code = 403
