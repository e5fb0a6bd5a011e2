"""Typed exception hierarchy for plugin option errors."""

from typing import Optional

from src.content_store.errors import MobilePackError


class OptionsError(MobilePackError):
    """Raised when the options file contents are invalid."""

    def __init__(self, message: str, option_field: Optional[str] = None):
        if option_field:
            full_message = f"Options error in field '{option_field}': {message}"
        else:
            full_message = f"Options error: {message}"
        super().__init__(full_message)
        self.option_field = option_field
        self.original_message = message


class OptionsFilesystemError(MobilePackError):
    """Raised when the options file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Options file operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
