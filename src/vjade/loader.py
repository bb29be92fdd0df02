"""Load serialized pug/jade ASTs into vjade nodes.

The input follows the JSON shape produced by pug-parser: every node is a
mapping with a ``type`` key, and child sequences are ``Block`` mappings
with a ``nodes`` list. Files are read with PyYAML, which also accepts JSON.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from vjade.errors import UnsupportedNodeError
from vjade.nodes import (
    Attribute,
    Block,
    Case,
    Code,
    Comment,
    Conditional,
    Each,
    MixinCall,
    MixinDeclaration,
    Node,
    Tag,
    Text,
    When,
    While,
)

# A quoted string without escapes or interpolation is a static value
_STATIC_LITERAL = re.compile(r"""\A(?:'([^'\\]*)'|"([^"\\]*)")\Z""")

Data = Mapping[str, Any]


def load_attribute(data: Data) -> Attribute:
    """Load one ``{name, val, mustEscape}`` attribute."""
    name = data["name"]
    escaped = bool(data.get("mustEscape", True))
    val = data.get("val", True)
    if isinstance(val, bool):
        return Attribute(name, val, escaped=escaped)
    val = str(val)
    match = _STATIC_LITERAL.match(val)
    if match:
        literal = match.group(1) if match.group(1) is not None else match.group(2)
        return Attribute(name, literal, escaped=escaped)
    return Attribute(name, val, dynamic=True, escaped=escaped)


def _attributes(data: Data) -> list[Attribute]:
    return [load_attribute(attr) for attr in data.get("attrs") or []]


def _attribute_blocks(data: Data) -> list[str]:
    # pug-parser wraps each block in an object; older jade used plain strings
    return [
        block["val"] if isinstance(block, Mapping) else str(block)
        for block in data.get("attributeBlocks") or []
    ]


def load_block(data: Data | None) -> list[Node]:
    """Load a ``Block`` mapping into a child list."""
    if data is None:
        return []
    if not isinstance(data, Mapping):
        msg = f"Expected a Block mapping, got {type(data).__name__}"
        raise TypeError(msg)
    return [load_node(node) for node in data.get("nodes") or []]


def _optional_block(data: Data, key: str = "block") -> list[Node] | None:
    block = data.get(key)
    return None if block is None else load_block(block)


def split_mixin_args(args: str | None) -> tuple[list[str], str | None]:
    """Split ``"a, b, ...rest"`` into positional params and the rest param."""
    params = [param.strip() for param in (args or "").split(",") if param.strip()]
    if params and params[-1].startswith("..."):
        return params[:-1], params[-1][3:].strip()
    return params, None


def _tag(data: Data) -> Node:
    return Tag(
        name=data["name"],
        attrs=_attributes(data),
        children=load_block(data.get("block")),
        attribute_blocks=_attribute_blocks(data),
    )


def _text(data: Data) -> Node:
    return Text(data.get("val", ""))


def _code(data: Data) -> Node:
    return Code(
        value=data["val"],
        buffer=bool(data.get("buffer", False)),
        children=_optional_block(data),
    )


def _comment(data: Data) -> Node:
    return Comment(value=data.get("val", ""), buffer=bool(data.get("buffer", False)))


def _conditional(data: Data) -> Conditional:
    alternate = data.get("alternate")
    match alternate:
        case None:
            loaded: Conditional | list[Node] | None = None
        case {"type": "Conditional"}:
            loaded = _conditional(alternate)
        case _:
            loaded = load_block(alternate)
    return Conditional(
        test=data["test"],
        consequent=load_block(data.get("consequent")),
        alternate=loaded,
    )


def _when(data: Data) -> When:
    expr = data["expr"]
    return When(
        expr=None if expr == "default" else expr,
        children=_optional_block(data),
    )


def _case(data: Data) -> Node:
    whens = []
    for node in (data.get("block") or {}).get("nodes") or []:
        if node.get("type") != "When":
            msg = f"Case branches must be When nodes, got {node.get('type')!r}"
            raise UnsupportedNodeError(msg)
        whens.append(_when(node))
    return Case(expr=data["expr"], whens=whens)


def _each(data: Data) -> Node:
    return Each(
        obj=data["obj"],
        val=data["val"],
        key=data.get("key"),
        children=load_block(data.get("block")),
        alternate=_optional_block(data, "alternate"),
    )


def _while(data: Data) -> Node:
    return While(test=data["test"], children=load_block(data.get("block")))


def _mixin(data: Data) -> Node:
    if data.get("call"):
        return MixinCall(
            name=data["name"],
            args=data.get("args") or "",
            attrs=_attributes(data),
            attribute_blocks=_attribute_blocks(data),
            children=_optional_block(data),
        )
    params, rest = split_mixin_args(data.get("args"))
    return MixinDeclaration(
        name=data["name"],
        params=params,
        rest=rest,
        children=load_block(data.get("block")),
    )


def _mixin_block(data: Data) -> Node:
    return Block()


_LOADERS: dict[str, Callable[[Data], Node]] = {
    "Tag": _tag,
    "Text": _text,
    "Code": _code,
    "Comment": _comment,
    "BlockComment": _comment,
    "Conditional": _conditional,
    "Case": _case,
    "Each": _each,
    "While": _while,
    "Mixin": _mixin,
    "MixinBlock": _mixin_block,
}


def load_node(data: Data) -> Node:
    """Load a single node mapping.

    Raises TypeError when ``data`` is not a mapping, and UnsupportedNodeError
    for node types the compiler cannot emit.
    """
    if not isinstance(data, Mapping):
        msg = f"Expected a node mapping, got {type(data).__name__}"
        raise TypeError(msg)
    kind = data.get("type")
    loader = _LOADERS.get(kind)
    if loader is None:
        msg = f"Node type not supported: {kind!r}"
        raise UnsupportedNodeError(msg)
    return loader(data)


def load_tree(data: Any) -> list[Node]:
    """Load a whole document: a Block mapping, a node mapping or a list."""
    if isinstance(data, list):
        return [load_node(node) for node in data]
    if isinstance(data, Mapping) and data.get("type") == "Block":
        return load_block(data)
    if isinstance(data, Mapping):
        return [load_node(data)]
    msg = f"Expected a node tree, got {type(data).__name__}"
    raise TypeError(msg)


def load_file(path: Path | str) -> list[Node]:
    """Read a JSON or YAML AST file."""
    with Path(path).open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return load_tree(data)


__all__ = [
    "load_attribute",
    "load_block",
    "load_file",
    "load_node",
    "load_tree",
    "split_mixin_args",
]
