"""Custom exception classes"""

from typing import Any, Optional


class SkillMatchException(Exception):
    """Base exception for SkillMatch Agency"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(SkillMatchException):
    """Exception for validation errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class MissingFieldException(ValidationException):
    """Exception for required fields that were not supplied"""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}",
            details={"missing_fields": self.fields}
        )


class InvalidLevelException(SkillMatchException):
    """Exception for proficiency labels outside the known scale.

    Raised when stored or supplied data carries a level the scale cannot rank.
    This is a data-integrity failure, so it maps to a server error.
    """

    def __init__(self, level: Any):
        self.level = level
        super().__init__(
            f"Invalid proficiency level: {level!r}",
            status_code=500,
            details={"level": str(level)}
        )


class NotFoundException(SkillMatchException):
    """Exception for resource not found errors"""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConflictException(SkillMatchException):
    """Exception for resource conflict errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


class RateLimitException(SkillMatchException):
    """Exception for rate limit errors"""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class StorageException(SkillMatchException):
    """Exception for failed data access"""

    def __init__(self, operation: str, message: str):
        full_message = f"Storage error during {operation}: {message}"
        super().__init__(full_message, status_code=503, details={"operation": operation})
