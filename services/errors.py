# services/errors.py
"""
Errors raised by the record service.

Each error carries the HTTP status it maps to and renders its own response
envelope; ``main.py`` registers one handler for the whole hierarchy.
"""
from typing import Any, Dict, List, Optional


class RecordError(Exception):
    """Base error for record operations"""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class RecordValidationError(RecordError):
    """One or more field rules were violated"""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message, "errors": self.errors}


class MalformedIdentifier(RecordError):
    status_code = 400
    default_message = "Invalid student ID format"

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__()


class RecordNotFound(RecordError):
    status_code = 404
    default_message = "Student not found"

    def __init__(self, record_id: Any = None):
        self.record_id = record_id
        super().__init__()


class DuplicateEmail(RecordError):
    status_code = 409
    default_message = "A student with this email already exists"

    def __init__(self, email: Optional[str] = None):
        self.email = email
        super().__init__()
