"""Pre-compilation analysis for vjade.

This module inspects the node tree before anything is emitted:
- Root validation (exactly one top-level tag)
- Mixin declaration collection for the two-pass mixin strategy
"""

from __future__ import annotations

from collections.abc import Iterator

from vjade.errors import RootCountError
from vjade.nodes import (
    Case,
    Code,
    Comment,
    Conditional,
    Each,
    MixinCall,
    MixinDeclaration,
    Node,
    Tag,
    When,
    While,
)


def child_lists(node: Node) -> Iterator[list[Node]]:
    """Yield every child list owned by ``node``, in document order."""
    match node:
        case Tag(children=children) | Each(children=children) | While(
            children=children
        ) | MixinDeclaration(children=children):
            yield children
            if isinstance(node, Each) and node.alternate is not None:
                yield node.alternate
        case Code(children=children) | MixinCall(children=children) | When(
            children=children
        ) if children is not None:
            yield children
        case Conditional(consequent=consequent, alternate=alternate):
            yield consequent
            match alternate:
                case Conditional():
                    yield [alternate]
                case list():
                    yield alternate
        case Case(whens=whens):
            yield list(whens)


def walk(nodes: list[Node]) -> Iterator[Node]:
    """Yield all nodes depth-first in document order."""
    for node in nodes:
        yield node
        for children in child_lists(node):
            yield from walk(children)


def collect_mixin_declarations(nodes: list[Node]) -> list[MixinDeclaration]:
    """Collect every mixin declaration in the tree, in document order."""
    return [node for node in walk(nodes) if isinstance(node, MixinDeclaration)]


# Their children compile into a separate JavaScript function
_FUNCTION_SCOPES = (Each, MixinCall, MixinDeclaration)


def walk_scope(nodes: list[Node]) -> Iterator[Node]:
    """Like ``walk`` but without entering nodes that open a function scope."""
    for node in nodes:
        yield node
        if isinstance(node, _FUNCTION_SCOPES):
            continue
        for children in child_lists(node):
            yield from walk_scope(children)


def scope_mixin_declarations(nodes: list[Node]) -> list[MixinDeclaration]:
    """Collect the mixin declarations defined in the function scope of ``nodes``.

    Declarations nested in an ``each`` body, a mixin body or a call block
    belong to that inner scope, where their free variables are bound.
    """
    return [node for node in walk_scope(nodes) if isinstance(node, MixinDeclaration)]


def _is_silent(node: Node) -> bool:
    """True for top-level nodes that add nothing to the tree."""
    match node:
        case Code(buffer=False, children=None) | MixinDeclaration() | Comment():
            return True
    return False


def check_root(nodes: list[Node]) -> Tag:
    """Return the single root tag.

    Raises RootCountError unless the top level holds exactly one Tag and
    otherwise only statements (unbuffered code without a block, mixin
    declarations and comments).
    """
    tags = [node for node in nodes if isinstance(node, Tag)]
    others = [
        node for node in nodes if not isinstance(node, Tag) and not _is_silent(node)
    ]
    if others:
        kind = type(others[0]).__name__
        msg = f"Only one tag is allowed at the top level, found a {kind} node"
        raise RootCountError(msg)
    if len(tags) != 1:
        msg = f"Expected exactly 1 top-level tag, found {len(tags)}"
        raise RootCountError(msg)
    return tags[0]


__all__ = [
    "check_root",
    "child_lists",
    "collect_mixin_declarations",
    "scope_mixin_declarations",
    "walk",
    "walk_scope",
]
