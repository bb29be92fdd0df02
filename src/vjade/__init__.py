"""vjade: compile Jade/Pug node trees to virtual-dom hyperscript."""

from __future__ import annotations

from vjade.compiler import compile, compile_to_js  # noqa: A004
from vjade.errors import (
    CompileError,
    DuplicateMixinError,
    RootCountError,
    UnknownMixinError,
    UnsupportedNodeError,
)
from vjade.options import CompilerOptions

__all__ = [
    "CompileError",
    "CompilerOptions",
    "DuplicateMixinError",
    "RootCountError",
    "UnknownMixinError",
    "UnsupportedNodeError",
    "compile",
    "compile_to_js",
]
