"""Domain errors raised by services and mapped to HTTP responses in api.error_handlers."""


class DietplanError(Exception):
    """Base exception for all expected service failures."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "statusCode": self.status_code,
            "error": self.error,
            "message": self.message,
        }


class BadRequestError(DietplanError):
    """Malformed identifier or invalid input."""
    status_code = 400
    error = "Bad Request"


class UnauthorizedError(DietplanError):
    """Missing, invalid or expired credentials."""
    status_code = 401
    error = "Unauthorized"


class ForbiddenError(DietplanError):
    """Authenticated caller does not own the referenced patient."""
    status_code = 403
    error = "Forbidden"


class NotFoundError(DietplanError):
    """Owner, parent document or sub-item does not exist."""
    status_code = 404
    error = "Not Found"


class ConflictError(DietplanError):
    """Unique field already taken."""
    status_code = 409
    error = "Conflict"
