"""Custom exceptions for classwalk."""


class ClasswalkError(Exception):
    """Base exception for classwalk."""


class InvalidPathError(ClasswalkError, ValueError):
    """Path does not match the package or lies outside the root."""
