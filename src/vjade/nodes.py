"""Template node tree consumed by the compiler.

The tree is produced by an external Jade/Pug parser (or by
``vjade.loader`` from a serialized pug AST). Every node owns its children
as a plain list; the compiler never mutates the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Attribute:
    """A single attribute as written on a tag or mixin call.

    ``value is True`` marks a boolean attribute (``input(checked)``).
    A static string value is a literal; a dynamic value is an expression
    fragment spliced verbatim into the generated code.
    """

    name: str
    value: str | bool
    dynamic: bool = False
    # Parser flag kept with the attribute; virtual-dom sets properties, so
    # escaped and unescaped values compile alike
    escaped: bool = True


@dataclass
class Node:
    """Base class for template nodes."""


@dataclass
class Tag(Node):
    """An element: ``h(name, attrs, children)``."""

    name: str
    attrs: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    # Expressions from ``&attributes(...)``
    attribute_blocks: list[str] = field(default_factory=list)


@dataclass
class Text(Node):
    """Plain text, possibly containing ``#{expr}`` interpolation spans."""

    value: str


@dataclass
class Code(Node):
    """Embedded JavaScript.

    Unbuffered code (``- var a = 1``) is spliced as a statement. Buffered
    code (``= expr``) contributes its value as a child. ``=`` and ``!=``
    compile alike since virtual-dom creates text nodes, not parsed HTML.
    """

    value: str
    buffer: bool = False
    children: list[Node] | None = None


@dataclass
class Comment(Node):
    """A template comment. Virtual trees carry no comment nodes."""

    value: str = ""
    buffer: bool = False


@dataclass
class Conditional(Node):
    """``if``/``else if``/``else`` chain.

    ``alternate`` is another Conditional for ``else if``, a node list for
    ``else``, or None.
    """

    test: str
    consequent: list[Node] = field(default_factory=list)
    alternate: Conditional | list[Node] | None = None


@dataclass
class When(Node):
    """One branch of a Case; ``expr=None`` is the ``default`` branch."""

    expr: str | None
    # None means the branch falls through to the next one
    children: list[Node] | None = None


@dataclass
class Case(Node):
    expr: str
    whens: list[When] = field(default_factory=list)


@dataclass
class Each(Node):
    """Iteration over an array-like or object, with optional index binding."""

    obj: str
    val: str
    key: str | None = None
    children: list[Node] = field(default_factory=list)
    alternate: list[Node] | None = None


@dataclass
class While(Node):
    test: str
    children: list[Node] = field(default_factory=list)


@dataclass
class MixinDeclaration(Node):
    """``mixin name(a, b, ...rest)`` with its body."""

    name: str
    params: list[str] = field(default_factory=list)
    rest: str | None = None
    children: list[Node] = field(default_factory=list)


@dataclass
class MixinCall(Node):
    """``+name(args)(attrs)`` with an optional child block.

    ``args`` is the verbatim argument list, passed through unchanged.
    """

    name: str
    args: str = ""
    attrs: list[Attribute] = field(default_factory=list)
    attribute_blocks: list[str] = field(default_factory=list)
    children: list[Node] | None = None


@dataclass
class Block(Node):
    """Placeholder for the block passed to the enclosing mixin."""


__all__ = [
    "Attribute",
    "Block",
    "Case",
    "Code",
    "Comment",
    "Conditional",
    "Each",
    "MixinCall",
    "MixinDeclaration",
    "Node",
    "Tag",
    "Text",
    "When",
    "While",
]
