"""Unit tests for the mixin registry and compiler context."""

from __future__ import annotations

from io import StringIO

import pytest

from vjade.compiler import MixinRegistry, MixinSignature
from vjade.compiler.context import CompilerContext
from vjade.emitter import JSEmitter
from vjade.errors import DuplicateMixinError, UnknownMixinError
from vjade.options import CompilerOptions


class TestMixinRegistry:
    """Tests for MixinRegistry."""

    def test_declare_and_lookup(self) -> None:
        """Test declaring and looking up a mixin."""
        registry = MixinRegistry()
        registry.declare(MixinSignature("item", ("x",)))
        signature = registry.lookup("item")
        assert signature.params == ("x",)
        assert not signature.has_rest

    def test_rest_parameter(self) -> None:
        """Test signatures with a rest parameter."""
        signature = MixinSignature("list", ("title",), rest="items")
        assert signature.has_rest

    def test_duplicate_declaration(self) -> None:
        """Test that a name can only be declared once."""
        registry = MixinRegistry()
        registry.declare(MixinSignature("item"))
        with pytest.raises(DuplicateMixinError, match="item"):
            registry.declare(MixinSignature("item", ("x",)))

    def test_unknown_lookup(self) -> None:
        """Test looking up an undeclared mixin."""
        registry = MixinRegistry()
        with pytest.raises(UnknownMixinError, match="missing"):
            registry.lookup("missing")

    def test_contains_and_len(self) -> None:
        """Test membership and size."""
        registry = MixinRegistry()
        registry.declare(MixinSignature("a"))
        registry.declare(MixinSignature("b"))
        assert registry.contains("a")
        assert not registry.contains("c")
        assert len(registry) == 2

    def test_keeps_declaration_order(self) -> None:
        """Test that iteration follows declaration order."""
        registry = MixinRegistry()
        for name in ["z", "a", "m"]:
            registry.declare(MixinSignature(name))
        assert list(registry.signatures) == ["z", "a", "m"]


class TestCompilerContext:
    """Tests for CompilerContext."""

    def test_parent_stack(self) -> None:
        """Test pushing and popping child arrays."""
        ctx = CompilerContext(emitter=JSEmitter(StringIO()), options=CompilerOptions())
        ctx.push_parent("n0Child")
        ctx.push_parent("n1Child")
        assert ctx.parent == "n1Child"
        ctx.pop_parent()
        assert ctx.parent == "n0Child"

    def test_registry_is_per_context(self) -> None:
        """Test that each context gets its own registry."""
        first = CompilerContext(emitter=JSEmitter(StringIO()), options=CompilerOptions())
        second = CompilerContext(emitter=JSEmitter(StringIO()), options=CompilerOptions())
        first.mixins.declare(MixinSignature("item"))
        assert not second.mixins.contains("item")
