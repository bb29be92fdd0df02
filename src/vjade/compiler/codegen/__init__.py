"""Code generation module - compiles template nodes to JavaScript."""
# ruff: noqa: I001 - Import order is intentional (handlers must follow dispatchers)

from __future__ import annotations

# Import the dispatcher first
from vjade.compiler.codegen.statements import compile_children, compile_node

# Import handlers to register them with the dispatcher
from vjade.compiler.codegen import control as _control  # noqa: F401
from vjade.compiler.codegen import mixins as _mixins  # noqa: F401
from vjade.compiler.codegen import node_handlers as _node_handlers  # noqa: F401
from vjade.compiler.codegen.mixins import compile_scope_mixins

__all__ = ["compile_children", "compile_node", "compile_scope_mixins"]
