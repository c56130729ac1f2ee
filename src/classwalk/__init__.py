"""Discover class files under a package root and name them."""

from classwalk.exceptions import ClasswalkError
from classwalk.exceptions import InvalidPathError
from classwalk.files import ClassFileVisitor
from classwalk.files import FileVisitor
from classwalk.files import PathVisitor
from classwalk.files import discover_classes
from classwalk.models import ClassEntry
from classwalk.models import TraversalContext

__version__ = "0.1.0"

__all__ = [
    "ClassEntry",
    "ClassFileVisitor",
    "ClasswalkError",
    "FileVisitor",
    "InvalidPathError",
    "PathVisitor",
    "TraversalContext",
    "__version__",
    "discover_classes",
]
