"""Filesystem traversal for classwalk."""

from classwalk.files.discover import ClassFileVisitor
from classwalk.files.discover import discover_classes
from classwalk.files.names import normalize_path
from classwalk.files.names import to_qualified_name
from classwalk.files.names import validate_root
from classwalk.files.visitor import FileVisitor
from classwalk.files.visitor import PathVisitor

__all__ = [
    "ClassFileVisitor",
    "FileVisitor",
    "PathVisitor",
    "discover_classes",
    "normalize_path",
    "to_qualified_name",
    "validate_root",
]
