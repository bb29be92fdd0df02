"""Mixin compilation - declarations, calls and block placeholders.

Declarations are registered by a pre-pass. Each definition is emitted at
the start of its enclosing function scope (the template body, an ``each``
loop, a mixin body or a call block), so a call may appear before the
declaration and the body still sees the variables of that scope.
"""

from __future__ import annotations

from vjade.compiler.analysis import scope_mixin_declarations
from vjade.compiler.codegen.attributes import compile_attributes
from vjade.compiler.codegen.statements import compile_children, compile_node
from vjade.compiler.context import MIXINS_VAR, CompilerContext
from vjade.errors import UnsupportedNodeError
from vjade.nodes import Block, MixinCall, MixinDeclaration, Node


def mixin_ref(name: str) -> str:
    """``jade_mixins['name']``"""
    quoted = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"{MIXINS_VAR}['{quoted}']"


def compile_scope_mixins(nodes: list[Node], ctx: CompilerContext) -> None:
    """Emit the definitions of the mixins declared in this function scope."""
    for decl in scope_mixin_declarations(nodes):
        compile_mixin_definition(decl, ctx)


def _compile_returning_array(nodes: list[Node], ctx: CompilerContext) -> None:
    """Compile ``nodes`` into a fresh child array and return it."""
    array = ctx.emitter.new_array_name()
    compile_scope_mixins(nodes, ctx)
    ctx.emitter.emit_array_decl(array)
    ctx.push_parent(array)
    compile_children(nodes, ctx)
    ctx.pop_parent()
    ctx.emitter.emit_return(array)


def compile_mixin_definition(node: MixinDeclaration, ctx: CompilerContext) -> None:
    """Emit ``jade_mixins['name'] = function(params) {...};``.

    ``block`` and ``attributes`` come from the call context (``this``); a
    rest parameter collects the arguments after the positional ones.
    """
    emitter = ctx.emitter
    params = ", ".join(node.params)
    emitter.line(f"{mixin_ref(node.name)} = function({params}) {{")
    emitter.indent_inc()
    emitter.line(
        "var block = (this && this.block), "
        "attributes = (this && this.attributes) || {};"
    )
    if node.rest is not None:
        emitter.line(
            f"var {node.rest} = "
            f"Array.prototype.slice.call(arguments, {len(node.params)});"
        )
    ctx.mixin_depth += 1
    _compile_returning_array(node.children, ctx)
    ctx.mixin_depth -= 1
    emitter.block_end("};")


@compile_node.register
def _mixin_declaration(node: MixinDeclaration, ctx: CompilerContext) -> None:
    """Nothing to do in place: the definition opens its enclosing scope."""


@compile_node.register
def _mixin_call(node: MixinCall, ctx: CompilerContext) -> None:
    """Compile ``+name(args)`` to ``jade_mixins['name'].call(context, args)``.

    The context is ``this`` unless the call passes a block or attributes,
    in which case it is an object carrying ``block`` and/or ``attributes``.
    """
    ctx.mixins.lookup(node.name)
    emitter = ctx.emitter
    parent = ctx.parent

    attrs = compile_attributes(node.attrs, node.attribute_blocks, ctx.options)
    args = f", {node.args.strip()}" if node.args.strip() else ""
    call = f"{parent}.push.apply({parent}, {mixin_ref(node.name)}.call("

    if node.children is None:
        context = "this" if attrs is None else f"{{attributes: {attrs}}}"
        emitter.line(f"{call}{context}{args}));")
        return

    emitter.line(f"{call}{{block: function() {{")
    emitter.indent_inc()
    _compile_returning_array(node.children, ctx)
    emitter.indent_dec()
    attributes = "" if attrs is None else f", attributes: {attrs}"
    emitter.line(f"}}{attributes}}}{args}));")


@compile_node.register
def _block(node: Block, ctx: CompilerContext) -> None:
    """Insert the children produced by the block passed to this mixin."""
    if ctx.mixin_depth == 0:
        msg = "A block placeholder is only allowed inside a mixin"
        raise UnsupportedNodeError(msg)
    ctx.emitter.block_start("if (block)")
    ctx.emitter.emit_push_all(ctx.parent, "block.call(this)")
    ctx.emitter.block_end()
