"""Compile entry point: validation, mixin pre-pass and module layout."""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING, Any

from vjade.compiler.analysis import check_root, collect_mixin_declarations
from vjade.compiler.codegen import compile_children, compile_scope_mixins
from vjade.compiler.context import MIXINS_VAR, CompilerContext, MixinSignature
from vjade.emitter import JSEmitter
from vjade.errors import UnsupportedNodeError
from vjade.nodes import Node
from vjade.options import CompilerOptions, resolve_options
from vjade.runtime import RUNTIME_CODE

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


def compile_to_js(
    nodes: Node | Iterable[Node],
    options: CompilerOptions | Mapping[str, Any] | None = None,
) -> str:
    """Compile a template node tree to JavaScript.

    Args:
        nodes: Top-level nodes of the template (or a single node).
        options: CompilerOptions, a mapping of option names, or None.

    Returns:
        The body of a function that returns the root virtual-dom node.

    Raises:
        CompileError: on any invalid input; nothing is returned in that case.
    """
    opts = resolve_options(options)
    top = [nodes] if isinstance(nodes, Node) else list(nodes)
    for node in top:
        if not isinstance(node, Node):
            msg = f"Node not supported: {type(node).__name__}"
            raise UnsupportedNodeError(msg)
    check_root(top)

    output = StringIO()
    ctx = CompilerContext(emitter=JSEmitter(output, pretty=opts.pretty), options=opts)
    compile_module(top, ctx)

    source = output.getvalue()
    if opts.pretty and opts.formatter is not None:
        source = opts.formatter(source)
    logger.debug(
        "Compiled template: %d mixin(s), %d characters", len(ctx.mixins), len(source)
    )
    return source


def compile_module(nodes: list[Node], ctx: CompilerContext) -> None:
    """Compile validated top-level nodes into ``ctx.emitter``."""
    emitter = ctx.emitter

    # Pre-pass: register every mixin so calls resolve in any order
    declarations = collect_mixin_declarations(nodes)
    for decl in declarations:
        ctx.mixins.declare(
            MixinSignature(name=decl.name, params=tuple(decl.params), rest=decl.rest)
        )

    if ctx.options.runtime:
        emitter.text(RUNTIME_CODE)
    emitter.line(f"var {MIXINS_VAR} = {{}};")

    root = emitter.new_array_name()
    compile_scope_mixins(nodes, ctx)

    emitter.emit_array_decl(root)
    ctx.push_parent(root)
    compile_children(nodes, ctx)
    ctx.pop_parent()
    emitter.emit_return(f"{root}[0]")


# Name used by the JavaScript tooling
compile = compile_to_js  # noqa: A001

__all__ = ["compile", "compile_module", "compile_to_js"]
