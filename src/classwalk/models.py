"""Data models for classwalk."""

import os
from dataclasses import dataclass
from pathlib import Path

from classwalk.files.names import to_qualified_name
from classwalk.files.names import validate_root


@dataclass(frozen=True)
class TraversalContext:
    """Root directory of a walk and the package it corresponds to."""

    root_path: str | os.PathLike[str]  # Top of the walk, exactly as given
    package_name: str  # Dotted package the root's last segments mirror

    def __post_init__(self) -> None:
        validate_root(self.root_path, self.package_name)

    def to_qualified_name(self, path: str | os.PathLike[str]) -> str:
        """Convert a path under root_path to a dotted qualified name.

        Args:
            path: File or directory equal to or below root_path

        Returns:
            package_name followed by the dotted relative path, with any
            ".class" removed

        Raises:
            InvalidPathError: If path is not root_path or below it
        """
        return to_qualified_name(self.root_path, self.package_name, path)


@dataclass(frozen=True)
class ClassEntry:
    """A class file found during a walk."""

    qualified_name: str  # e.g. com.example.pkg.sub.Bar
    path: Path  # Where the file was found
