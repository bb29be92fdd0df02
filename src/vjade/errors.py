"""Compilation errors.

Every error aborts the whole compile; ``compile_to_js`` never returns
partial output.
"""

from __future__ import annotations


class CompileError(Exception):
    """Base class for all errors raised while compiling a node tree."""


class RootCountError(CompileError):
    """The top level does not hold exactly one tag."""


class DuplicateMixinError(CompileError):
    """A mixin name is declared more than once."""


class UnknownMixinError(CompileError):
    """A mixin call references an undeclared mixin."""


class UnsupportedNodeError(CompileError):
    """A node kind the compiler does not know how to emit."""


__all__ = [
    "CompileError",
    "DuplicateMixinError",
    "RootCountError",
    "UnknownMixinError",
    "UnsupportedNodeError",
]
