"""Node compilation dispatcher.

This module contains the singledispatch function and the child-list
walker. Handlers are registered in node_handlers.py, control.py and
mixins.py, which must be imported to activate them.
"""

from __future__ import annotations

from functools import singledispatch
from typing import TYPE_CHECKING

from vjade.compiler.codegen.interpolation import compile_text_run
from vjade.errors import UnsupportedNodeError
from vjade.nodes import Text

if TYPE_CHECKING:
    from vjade.compiler.context import CompilerContext
    from vjade.nodes import Node


@singledispatch
def compile_node(node: Node, ctx: CompilerContext) -> None:
    """Compile a node, pushing its value (if any) onto ``ctx.parent``."""
    msg = f"Node not supported: {type(node).__name__}"
    raise UnsupportedNodeError(msg)


def compile_children(nodes: list[Node], ctx: CompilerContext) -> None:
    """Compile a child list in document order.

    Runs of adjacent Text nodes become one child entry joined by newlines.
    """
    texts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            texts.append(node.value)
            continue
        _flush_texts(texts, ctx)
        compile_node(node, ctx)
    _flush_texts(texts, ctx)


def _flush_texts(texts: list[str], ctx: CompilerContext) -> None:
    if texts:
        ctx.emitter.emit_push(ctx.parent, compile_text_run(texts))
        texts.clear()
