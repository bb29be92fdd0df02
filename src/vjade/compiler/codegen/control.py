"""Control flow compilation - if, case, each, while.

Branches and loop bodies push into the enclosing child array, so a branch
that does not run simply contributes nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vjade.compiler.codegen.mixins import compile_scope_mixins
from vjade.compiler.codegen.statements import compile_children, compile_node
from vjade.compiler.context import CompilerContext  # noqa: TC001
from vjade.errors import UnsupportedNodeError
from vjade.nodes import Case, Conditional, Each, When, While

if TYPE_CHECKING:
    from vjade.nodes import Node

# Default index binding for ``each val in obj``
DEFAULT_EACH_KEY = "$index"


@compile_node.register
def _conditional(node: Conditional, ctx: CompilerContext) -> None:
    """Compile an if / else if / else chain."""
    emitter = ctx.emitter
    emitter.block_start(f"if ({node.test})")
    compile_children(node.consequent, ctx)

    alternate: Conditional | list[Node] | None = node.alternate
    while isinstance(alternate, Conditional):
        emitter.block_continue(f"else if ({alternate.test})")
        compile_children(alternate.consequent, ctx)
        alternate = alternate.alternate

    if alternate:
        emitter.block_continue("else")
        compile_children(alternate, ctx)
    emitter.block_end()


@compile_node.register
def _case(node: Case, ctx: CompilerContext) -> None:
    """Compile case/when to a switch.

    A ``when`` without a body falls through to the next branch.
    """
    emitter = ctx.emitter
    emitter.block_start(f"switch ({node.expr})")
    for when in node.whens:
        if not isinstance(when, When):
            msg = f"Case branches must be When nodes, got {type(when).__name__}"
            raise UnsupportedNodeError(msg)
        emitter.line("default:" if when.expr is None else f"case {when.expr}:")
        if when.children is None:
            continue
        emitter.indent_inc()
        compile_children(when.children, ctx)
        emitter.line("break;")
        emitter.indent_dec()
    emitter.block_end()


def _compile_each_body(node: Each, key: str, ctx: CompilerContext) -> None:
    ctx.emitter.line(f"var {node.val} = $$obj[{key}];")
    compile_children(node.children, ctx)


def _compile_each_alternate(node: Each, test: str, ctx: CompilerContext) -> None:
    if node.alternate is None:
        return
    ctx.emitter.block_start(f"if ({test})")
    compile_children(node.alternate, ctx)
    ctx.emitter.block_end()


@compile_node.register
def _each(node: Each, ctx: CompilerContext) -> None:
    """Compile each over an array-like or a plain object.

    The loop runs in an IIFE so ``$$obj`` and ``$$l`` stay local. Mixins declared
    in the body are defined at the top of the IIFE, next to the loop bindings.
    """
    emitter = ctx.emitter
    key = node.key or DEFAULT_EACH_KEY

    emitter.line(";(function(){")
    emitter.indent_inc()
    emitter.line(f"var $$obj = {node.obj};")
    compile_scope_mixins(node.children + (node.alternate or []), ctx)

    emitter.block_start("if ('number' == typeof $$obj.length)")
    emitter.block_start(
        f"for (var {key} = 0, $$l = $$obj.length; {key} < $$l; {key}++)"
    )
    _compile_each_body(node, key, ctx)
    emitter.block_end()
    _compile_each_alternate(node, "$$l === 0", ctx)

    emitter.block_continue("else")
    emitter.line("var $$l = 0;")
    emitter.block_start(f"for (var {key} in $$obj)")
    emitter.line("$$l++;")
    _compile_each_body(node, key, ctx)
    emitter.block_end()
    _compile_each_alternate(node, "$$l === 0", ctx)
    emitter.block_end()

    emitter.indent_dec()
    emitter.line("}).call(this);")


@compile_node.register
def _while(node: While, ctx: CompilerContext) -> None:
    ctx.emitter.block_start(f"while ({node.test})")
    compile_children(node.children, ctx)
    ctx.emitter.block_end()
