"""
Notebox - Custom Exception Hierarchy
====================================

What:  Application-specific exceptions for the two failure kinds the service
       knows about: a name that matched nothing, and a store that could not
       be read or written.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) translate them into
       HTTP responses.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    NoteboxError (base)
    ├── NoteNotFoundError        → 404 Not Found (empty body)
    ├── NoteAlreadyExistsError   → 400 Bad Request (empty body)
    ├── StoreError               → 500 Internal Server Error
    │   └── StoreCorruptedError  → 500 Internal Server Error
    └── FileStorageError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NoteboxError(Exception):
    """
    Base exception for all Notebox application errors.

    Attributes:
        message:  Description of the failure (safe to log)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NoteNotFoundError(NoteboxError):
    """
    Raised when no note carries the requested name.

    When:    GET, PUT or DELETE /notes/{name} with a name absent from the store.
    HTTP:    404 Not Found, empty body.
    """

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(message=f"Note '{name}' was not found", context=ctx)
        self.name = name


class NoteAlreadyExistsError(NoteboxError):
    """
    Raised when a create would introduce a second note with the same name.

    When:    POST /write with a note_name already in the store.
    HTTP:    400 Bad Request, empty body.
    """

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["name"] = name
        super().__init__(message=f"Note '{name}' already exists", context=ctx)
        self.name = name


class StoreError(NoteboxError):
    """
    Raised when the store file cannot be read or written.

    When:    Permission denied, disk full, file removed after startup.
    HTTP:    500 Internal Server Error.

    The response message is always generic; the path and OS error live in
    the context and reach the server log only.
    """

    def __init__(
        self,
        message: str = "The note store could not be accessed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreCorruptedError(StoreError):
    """
    Raised when the store file is readable but is not a JSON array of
    {name, text} objects.
    """

    def __init__(
        self,
        message: str = "The note store contains malformed data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(NoteboxError):
    """
    Raised when a static file (the upload form) cannot be read.

    HTTP:    500 Internal Server Error.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
