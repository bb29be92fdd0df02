"""Attribute normalization.

Maps template attributes onto the virtual-dom properties object:
- ``class`` becomes ``className``
- ``data-*`` entries are gathered into a nested ``dataset`` object
- static values become string literals, dynamic values are spliced
  verbatim in parentheses, boolean attributes become ``true``

Attributes are emitted in source order; when two map to the same key the
object literal keeps the last one at render time.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from vjade.emitter import js_key, js_string

if TYPE_CHECKING:
    from vjade.nodes import Attribute
    from vjade.options import CompilerOptions

DATA_PREFIX = "data-"

# Template attribute name -> virtual-dom property name
PROPERTY_NAMES: dict[str, str] = {
    "class": "className",
}

_CONSTRUCTOR_NAME = re.compile(r"[A-Z][A-Za-z0-9_$]*\Z")
_DASHED_LETTER = re.compile(r"-([a-z])")


def compile_tag_name(name: str, options: CompilerOptions) -> str:
    """Compile the first argument of ``h``."""
    if options.capital_constructors and _CONSTRUCTOR_NAME.match(name):
        return f"{name}.tagName"
    return js_string(name)


def compile_attribute_value(attr: Attribute) -> str:
    match attr.value:
        case bool(flag):
            return "true" if flag else "false"
        case str(expr) if attr.dynamic:
            return f"({expr})"
        case str(literal):
            return js_string(literal)
    msg = f"Invalid value for attribute {attr.name!r}: {attr.value!r}"
    raise TypeError(msg)


def dataset_key(name: str) -> str:
    """``data-foo-bar`` -> ``fooBar``, as the DOM exposes it on ``dataset``."""
    return _DASHED_LETTER.sub(lambda m: m.group(1).upper(), name[len(DATA_PREFIX) :])


def _is_data_attribute(name: str) -> bool:
    return name.startswith(DATA_PREFIX) and len(name) > len(DATA_PREFIX)


def compile_attribute_object(
    attrs: list[Attribute], options: CompilerOptions
) -> str:
    """Compile attributes to an object literal (``{}`` when empty)."""
    entries: list[str] = []
    dataset: list[str] = []
    dataset_index: int | None = None

    for attr in attrs:
        value = compile_attribute_value(attr)
        if options.marshal_dataset and _is_data_attribute(attr.name):
            if dataset_index is None:
                dataset_index = len(entries)
                entries.append("")
            dataset.append(f"{js_key(dataset_key(attr.name))}: {value}")
            continue
        name = PROPERTY_NAMES.get(attr.name, attr.name)
        entries.append(f"{js_key(name)}: {value}")

    if dataset_index is not None:
        entries[dataset_index] = f'{js_key("dataset")}: {{{", ".join(dataset)}}}'
    return "{" + ", ".join(entries) + "}"


def compile_attributes(
    attrs: list[Attribute],
    attribute_blocks: list[str],
    options: CompilerOptions,
) -> str | None:
    """Compile a tag's attributes, or None when it has none at all.

    ``&attributes(...)`` blocks are merged over the literal at render time.
    """
    if not attrs and not attribute_blocks:
        return None
    literal = compile_attribute_object(attrs, options)
    if not attribute_blocks:
        return literal
    blocks = ", ".join(f"({block})" for block in attribute_blocks)
    return f"Object.assign({{}}, {literal}, {blocks})"


__all__ = [
    "compile_attribute_object",
    "compile_attribute_value",
    "compile_attributes",
    "compile_tag_name",
    "dataset_key",
]
