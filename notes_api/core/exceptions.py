"""
Custom Exceptions.

Error taxonomy for the notes pipeline. The validator and the store raise
these synchronously, before any state change; the exception handlers map
each one to an HTTP status code and a category string.
"""

BAD_REQUEST = "Bad Request"
VALIDATION_ERROR = "Validation Error"
NOT_FOUND = "Not Found"
INTERNAL_SERVER_ERROR = "Internal Server Error"


class ApplicationError(Exception):
    """Base exception for all application errors."""

    category: str = INTERNAL_SERVER_ERROR

    def __init__(self, message: str, code: str = "INTERNAL") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class EmptyBodyError(ApplicationError):
    """Raised when a create request carries no payload."""

    category = BAD_REQUEST

    def __init__(self, message: str = "Request body is required") -> None:
        super().__init__(message, code="EMPTY_BODY")


class MalformedBodyError(ApplicationError):
    """Raised when the request body cannot be decoded."""

    category = BAD_REQUEST

    def __init__(self, message: str = "Invalid JSON in request body") -> None:
        super().__init__(message, code="MALFORMED_BODY")


class InvalidTitleError(ApplicationError):
    """Title missing, not a string, or blank after trimming."""

    category = VALIDATION_ERROR

    def __init__(
        self, message: str = "Title is required and must be a non-empty string",
    ) -> None:
        super().__init__(message, code="INVALID_TITLE")


class InvalidContentError(ApplicationError):
    """Content missing, not a string, or blank after trimming."""

    category = VALIDATION_ERROR

    def __init__(
        self, message: str = "Content is required and must be a non-empty string",
    ) -> None:
        super().__init__(message, code="INVALID_CONTENT")


class TitleTooLongError(ApplicationError):
    """Trimmed title exceeds the configured maximum."""

    category = VALIDATION_ERROR

    def __init__(self, max_length: int = 200) -> None:
        self.max_length = max_length
        super().__init__(
            f"Title must be {max_length} characters or less", code="TITLE_TOO_LONG",
        )


class ContentTooLongError(ApplicationError):
    """Trimmed content exceeds the configured maximum."""

    category = VALIDATION_ERROR

    def __init__(self, max_length: int = 5000) -> None:
        self.max_length = max_length
        super().__init__(
            f"Content must be {max_length} characters or less", code="CONTENT_TOO_LONG",
        )


class NoFieldsProvidedError(ApplicationError):
    """Raised when an update names neither title nor content."""

    category = BAD_REQUEST

    def __init__(
        self,
        message: str = "At least one field (title or content) must be provided",
    ) -> None:
        super().__init__(message, code="NO_FIELDS_PROVIDED")


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    category = NOT_FOUND

    def __init__(self, message: str = "Note not found") -> None:
        super().__init__(message, code="NOT_FOUND")


class InternalError(ApplicationError):
    """Unexpected failure in the request-handling layer."""

    category = INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(message, code="INTERNAL")
