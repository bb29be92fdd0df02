"""Node compilation handlers for elements, text, code and comments.

This module registers handlers for compile_node.
Import this module to activate the handlers.
"""

from __future__ import annotations

from vjade.compiler.codegen.attributes import compile_attributes, compile_tag_name
from vjade.compiler.codegen.interpolation import compile_text
from vjade.compiler.codegen.statements import compile_children, compile_node
from vjade.compiler.context import CompilerContext  # noqa: TC001
from vjade.nodes import Code, Comment, Tag, Text


@compile_node.register
def _tag(node: Tag, ctx: CompilerContext) -> None:
    """Compile an element to an ``h(...)`` call pushed onto the parent."""
    name = compile_tag_name(node.name, ctx.options)
    attrs = compile_attributes(node.attrs, node.attribute_blocks, ctx.options)

    if not node.children:
        args = name if attrs is None else f"{name}, {attrs}"
        ctx.emitter.emit_push(ctx.parent, f"h({args})")
        return

    array = ctx.emitter.new_array_name()
    ctx.emitter.emit_array_decl(array)
    ctx.push_parent(array)
    ctx.emitter.indent_inc()
    compile_children(node.children, ctx)
    ctx.emitter.indent_dec()
    ctx.pop_parent()
    ctx.emitter.emit_push(ctx.parent, f"h({name}, {attrs or '{}'}, {array})")


@compile_node.register
def _text(node: Text, ctx: CompilerContext) -> None:
    ctx.emitter.emit_push(ctx.parent, compile_text(node.value))


@compile_node.register
def _code(node: Code, ctx: CompilerContext) -> None:
    """Compile embedded code.

    Buffered code pushes its value. Unbuffered code is spliced verbatim,
    wrapping its block (if any) in braces: ``- for (...)`` + block.
    """
    if node.buffer:
        ctx.emitter.emit_push(ctx.parent, f"({node.value})")
        if node.children:
            compile_children(node.children, ctx)
        return

    if node.children is None:
        ctx.emitter.text(node.value)
        return

    ctx.emitter.text(f"{node.value} {{")
    ctx.emitter.indent_inc()
    compile_children(node.children, ctx)
    ctx.emitter.block_end()


@compile_node.register
def _comment(node: Comment, ctx: CompilerContext) -> None:
    """Comments have no virtual-dom counterpart."""
