"""Tests for classwalk data models."""

import dataclasses
from pathlib import Path

import pytest

from classwalk.exceptions import InvalidPathError
from classwalk.models import ClassEntry
from classwalk.models import TraversalContext


class TestTraversalContext:
    """Tests for TraversalContext."""

    def test_validates_on_creation(self):
        with pytest.raises(InvalidPathError):
            TraversalContext(Path("/proj/build/other/pkg"), "com.example.pkg")

    def test_keeps_windows_root_verbatim(self):
        """Test that the stored root keeps its backslash separators."""
        root = "C:\\proj\\build\\com\\example\\pkg"

        context = TraversalContext(root, "com.example.pkg")

        assert context.root_path == root
        assert context.package_name == "com.example.pkg"

    def test_keeps_dot_slash_root_verbatim(self):
        """Test that a non-canonical root string is stored unchanged."""
        context = TraversalContext("./build/com/example/pkg", "com.example.pkg")

        assert context.root_path == "./build/com/example/pkg"
        assert context.to_qualified_name("./build/com/example/pkg/Foo.class") == (
            "com.example.pkg.Foo"
        )

    def test_rejects_root_ending_in_dot_segment(self):
        with pytest.raises(InvalidPathError):
            TraversalContext("build/com/example/pkg/.", "com.example.pkg")

    def test_is_immutable(self):
        context = TraversalContext(Path("/proj/com/example"), "com.example")

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.package_name = "org.other"  # type: ignore[misc]

    def test_to_qualified_name(self):
        context = TraversalContext(Path("/proj/com/example"), "com.example")

        assert context.to_qualified_name("/proj/com/example/Foo.class") == (
            "com.example.Foo"
        )


class TestClassEntry:
    """Tests for ClassEntry."""

    def test_is_hashable(self):
        entry = ClassEntry(qualified_name="com.example.Foo", path=Path("Foo.class"))

        assert entry in {entry}
