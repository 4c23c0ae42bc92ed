#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the Kwaxel editor.

Color parsing and out-of-bounds pixel access are fail-soft and never raise;
these exceptions cover the boundaries where a failure has to reach the user
(image decoding, file access) or indicates a programming error (unknown tool,
invalid export multiplier).
"""


class KwaxelError(Exception):
    """Base exception for all Kwaxel editor errors"""


class FileOperationError(KwaxelError):
    """Raised when file operations fail"""


class ImageFormatError(FileOperationError):
    """Raised when image data is corrupt, unsupported or malformed"""


class ToolError(KwaxelError):
    """Raised when an unknown tool is requested"""


class ValidationError(KwaxelError):
    """Raised when input validation fails"""


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for user display.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    if isinstance(error, FileNotFoundError):
        return f"File not found during {operation}"
    elif isinstance(error, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(error, MemoryError):
        return f"Out of memory during {operation}"
    elif isinstance(error, ImageFormatError):
        return f"Invalid image format: {error}"
    elif isinstance(error, ValidationError):
        return f"Invalid input: {error}"
    else:
        return f"Failed to {operation}: {error}"
