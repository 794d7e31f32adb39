# -*- coding: utf-8 -*-
"""
LangRepo Exceptions Module
Custom exception classes for structured error handling across the package.
"""


class LangRepoError(Exception):
    """
    Base exception class for all LangRepo-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Parser Exceptions
# =============================================================================

class ParserError(LangRepoError):
    """Base exception for section file parser errors."""
    pass


class IniParseError(ParserError):
    """Raised when a section file line or its encoding cannot be parsed."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        super().__init__(message, details={'line_number': line_number, 'content': line_content})
        self.line_number = line_number
        self.line_content = line_content


# =============================================================================
# Core/File Exceptions
# =============================================================================

class CoreError(LangRepoError):
    """Base exception for core module errors."""
    pass


class FileOperationError(CoreError):
    """Raised when a file operation (read/write) fails."""

    def __init__(self, message: str, file_path: str = None, operation: str = None):
        super().__init__(message, details={'file_path': file_path, 'operation': operation})
        self.file_path = file_path
        self.operation = operation


class ResourceNotFoundError(FileOperationError):
    """Raised when no mounted root contains the requested resource."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, file_path=file_path, operation='read')


class SaveError(CoreError):
    """Raised when writing a language file fails."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# Settings Exceptions
# =============================================================================

class SettingsError(LangRepoError):
    """Base exception for settings-related errors."""
    pass


class SettingsLoadError(SettingsError):
    """Raised when reading the settings file fails."""
    pass
