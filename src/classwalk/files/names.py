"""Path normalization and qualified-name conversion."""

import os
from pathlib import Path

from classwalk.exceptions import InvalidPathError

CLASS_SUFFIX = ".class"


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Render a path as a string with forward-slash separators.

    Args:
        path: Path using '/' and/or '\\' as separators

    Returns:
        String form of path with every backslash replaced by '/'
    """
    return os.fspath(path).replace("\\", "/")


def package_to_path(package_name: str) -> str:
    """Convert a dotted package name to slash-separated segments."""
    return package_name.replace(".", "/")


def validate_root(root_path: str | os.PathLike[str], package_name: str) -> None:
    """Validate that root_path is the directory of package_name.

    Args:
        root_path: Directory the walk starts from
        package_name: Dotted package name, e.g. com.example.pkg

    Raises:
        InvalidPathError: If package_name is empty, or if the normalized
            root_path does not end with the package's path segments
    """
    if not package_name:
        raise InvalidPathError(f"Package name for {os.fspath(root_path)} is empty")

    if not normalize_path(root_path).endswith(package_to_path(package_name)):
        raise InvalidPathError(
            f"Path {os.fspath(root_path)} does not end with {package_name}"
        )


def render_path(path: str | os.PathLike[str]) -> str:
    """Render a path the way pathlib spells it, with '/' separators.

    "./build/pkg", "build//pkg" and Path("build/pkg") all render as
    "build/pkg", so raw caller strings and paths produced by Path.walk()
    compare equal.
    """
    return normalize_path(Path(path))


def is_within(path: str | os.PathLike[str], root_path: str | os.PathLike[str]) -> bool:
    """Check if path is root_path itself or lies below it.

    Both sides are compared in their rendered form, so '/' and '\\' match
    each other and "./" prefixes are ignored. A sibling sharing a name
    prefix (pkg2 vs pkg) is not within.
    """
    rendered = render_path(path)
    rendered_root = render_path(root_path)
    if rendered == rendered_root:
        return True
    return rendered.startswith(rendered_root.rstrip("/") + "/")


def to_qualified_name(
    root_path: str | os.PathLike[str],
    package_name: str,
    path: str | os.PathLike[str],
) -> str:
    """Convert a path below root_path to a fully-qualified dotted name.

    Unlike a plain prefix test, a sibling directory whose name merely
    starts with the root's last segment (.../pkg2 for root .../pkg) is
    rejected instead of producing a bogus name.

    Args:
        root_path: Directory corresponding to package_name
        package_name: Dotted package name of root_path
        path: File or directory equal to or below root_path

    Returns:
        package_name + "." + the relative path with every ".class" removed
        and separators turned into dots. Passing root_path itself yields
        package_name followed by a bare trailing dot.

    Raises:
        InvalidPathError: If path is not root_path or below it
    """
    if not is_within(path, root_path):
        raise InvalidPathError(
            f"Path {os.fspath(path)} is not a child of {os.fspath(root_path)}"
        )

    # Cut on the rendered forms so the prefix length matches what was compared
    name = render_path(path)[len(render_path(root_path)) :]
    if name.startswith("/"):
        name = name[1:]

    name = name.replace(CLASS_SUFFIX, "")
    name = name.replace("/", ".")

    return f"{package_name}.{name}"
