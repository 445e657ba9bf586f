"""Module: errors."""


class RecordError(Exception):
    """Base for failures that end a request with a plain-text status."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


# Missing or malformed form/query/path input. Raised before any store access.
class ValidationError(RecordError):
    status_code = 400
    message = "Invalid input data"


class NotFoundError(RecordError):
    status_code = 404
    message = "Pet not found"


# Anything the persistence layer raises: connectivity, constraints, timeouts.
class StoreError(RecordError):
    status_code = 500
    message = "Internal Server Error"
