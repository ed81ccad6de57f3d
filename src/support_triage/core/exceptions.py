"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional, List


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationException(ApplicationException):
    """Exception for validation errors."""


class InvalidInputException(ValidationException):
    """
    Raised when a classification handed to the formatter is malformed.

    Carries the names of the offending fields so callers can report them.
    """

    def __init__(
        self,
        message: str,
        fields: Optional[List[str]] = None,
        details: Optional[dict] = None
    ):
        self.fields = fields or []
        super().__init__(message, details or {"fields": self.fields})


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""
