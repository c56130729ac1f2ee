"""Directory traversal with a pluggable per-file visitor."""

import logging
import os
import threading
from pathlib import Path
from typing import Generic
from typing import Protocol
from typing import TypeVar

from classwalk.models import TraversalContext

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class FileVisitor(Protocol[T_co]):
    """Decides what, if anything, to record for a visited file."""

    def visit(self, path: Path, context: TraversalContext) -> T_co | None:
        """Produce a result for path, or None to ignore it.

        Args:
            path: File found during the walk
            context: Root and package of the walk; use
                context.to_qualified_name(path) to name the file
        """
        ...


def _raise_walk_error(error: OSError) -> None:
    raise error


class PathVisitor(Generic[T]):
    """Walk a package root and collect what a FileVisitor produces.

    The root must correspond to the package: with separators normalized to
    '/', root_path has to end with package_name's dots turned into slashes.
    Results are kept in visitation order and are only added through
    visit_file().
    """

    def __init__(
        self,
        root_path: str | os.PathLike[str],
        package_name: str,
        visitor: FileVisitor[T],
    ) -> None:
        """Create a visitor for root_path.

        Args:
            root_path: Directory to walk (need not exist yet)
            package_name: Dotted package name root_path corresponds to
            visitor: Per-file hook producing results

        Raises:
            InvalidPathError: If root_path does not end with package_name
        """
        self._context = TraversalContext(root_path, package_name)
        self._visitor = visitor
        self._results: list[T] = []
        self._lock = threading.Lock()

    @property
    def context(self) -> TraversalContext:
        return self._context

    @property
    def root_path(self) -> str | os.PathLike[str]:
        return self._context.root_path

    @property
    def package_name(self) -> str:
        return self._context.package_name

    @property
    def results(self) -> tuple[T, ...]:
        """Snapshot of results collected so far, in visitation order."""
        with self._lock:
            return tuple(self._results)

    def to_qualified_name(self, path: str | os.PathLike[str]) -> str:
        """Convert a path under root_path to a dotted qualified name.

        Raises:
            InvalidPathError: If path is not root_path or below it
        """
        return self._context.to_qualified_name(path)

    def visit_file(self, path: Path) -> T | None:
        """Offer one file to the visitor and record its result.

        Args:
            path: File under root_path

        Returns:
            The recorded result, or None if the visitor ignored the file
        """
        result = self._visitor.visit(path, self._context)
        if result is not None:
            with self._lock:
                self._results.append(result)
        return result

    def walk(self) -> tuple[T, ...]:
        """Visit every file under root_path.

        Directories are walked top-down with entries in sorted order.
        Symlinks to directories are reported as files, not descended into.

        Returns:
            Snapshot of all results, in visitation order

        Raises:
            OSError: If a directory cannot be listed (including a missing
                root). Results recorded before the failure are kept.
        """
        root = Path(self._context.root_path)
        logger.debug("Walking %s as package %s", root, self._context.package_name)

        for dirpath, dirnames, filenames in root.walk(on_error=_raise_walk_error):
            # Sorting dirnames in place fixes the order subdirectories are walked
            dirnames.sort()
            logger.debug("Entering %s (%d files)", dirpath, len(filenames))
            for filename in sorted(filenames):
                self.visit_file(dirpath / filename)

        results = self.results
        logger.debug("Walk of %s collected %d results", root, len(results))
        return results
