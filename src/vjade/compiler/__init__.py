"""vjade compiler package - template node tree to virtual-dom JavaScript."""

from __future__ import annotations

from vjade.compiler.compiler import compile, compile_to_js  # noqa: A004
from vjade.compiler.context import MixinRegistry, MixinSignature

__all__ = [
    "MixinRegistry",
    "MixinSignature",
    "compile",
    "compile_to_js",
]
