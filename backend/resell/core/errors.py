"""Error hierarchy for the Resell API.

Every error carries a machine-readable ``code``, the HTTP status it maps to
and a user-facing ``message``. Conflicts are raised by the data layer and
turned into ``{"acknowledged": false, "message": ...}`` by the routes, so
they never reach the global handlers in normal operation.
"""


class ResellError(Exception):
    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message, "code": self.code}


class ValidationError(ResellError):
    code = "VALIDATION_ERROR"
    http_status = 400


class NotFoundError(ResellError):
    code = "NOT_FOUND"
    http_status = 404


class ConflictError(ResellError):
    code = "CONFLICT"
    http_status = 409


class UserExistsError(ConflictError):
    code = "USER_EXISTS"

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class DuplicateOrderError(ConflictError):
    code = "ALREADY_ORDERED"

    def __init__(self, message: str = "Already ordered this product!"):
        super().__init__(message)


class UpstreamError(ResellError):
    code = "UPSTREAM_ERROR"
    http_status = 502


class ServiceUnavailableError(ResellError):
    code = "SERVICE_UNAVAILABLE"
    http_status = 503
