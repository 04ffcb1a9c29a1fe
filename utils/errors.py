class ClassroomError(Exception):
    """Base error carrying a client-safe message and the HTTP status it maps to."""

    status_code = 500
    message = "An unexpected error occurred"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class StoreError(ClassroomError):
    message = "A database error occurred"


class StoreConnectionError(StoreError):
    message = "The database is unreachable"


class NotFoundError(ClassroomError):
    status_code = 404
    message = "Resource not found"


class InvalidIdError(ClassroomError):
    status_code = 400
    message = "Invalid ID format"


class ValidationError(ClassroomError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, errors, message=None):
        super().__init__(message)
        self.errors = errors


class TransportError(ClassroomError):
    message = "Network error while contacting the server"
