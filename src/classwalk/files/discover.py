"""Class file discovery."""

import os
from pathlib import Path

from classwalk.files.names import CLASS_SUFFIX
from classwalk.files.visitor import PathVisitor
from classwalk.models import ClassEntry
from classwalk.models import TraversalContext


class ClassFileVisitor:
    """Record files ending in .class as ClassEntry objects."""

    def visit(self, path: Path, context: TraversalContext) -> ClassEntry | None:
        if not path.name.endswith(CLASS_SUFFIX):
            return None
        return ClassEntry(qualified_name=context.to_qualified_name(path), path=path)


def discover_classes(
    root_path: str | os.PathLike[str], package_name: str
) -> list[ClassEntry]:
    """Discover all class files below a package root.

    Args:
        root_path: Directory corresponding to package_name
        package_name: Dotted package name, e.g. com.example.pkg

    Returns:
        Class entries in walk order: each directory's files sorted by name,
        then its subdirectories in sorted order.

    Raises:
        InvalidPathError: If root_path does not end with package_name
        OSError: If a directory cannot be listed
    """
    visitor = PathVisitor(root_path, package_name, ClassFileVisitor())
    return list(visitor.walk())
