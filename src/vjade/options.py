"""Compiler options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any

# camelCase names accepted for compatibility with the JavaScript tooling
_CAMEL_CASE_NAMES: dict[str, str] = {
    "marshalDataset": "marshal_dataset",
    "capitalConstructors": "capital_constructors",
}


@dataclass(frozen=True)
class CompilerOptions:
    """Options for a single compile.

    Attributes:
        pretty: Indent the emitted source and run ``formatter`` over it.
        runtime: Prepend the ``require`` bindings for the virtual-dom runtime.
        marshal_dataset: Rewrite ``data-*`` attributes into ``dataset``.
        capital_constructors: Emit capitalized tag names as constructor
            references (``Name.tagName``) instead of string literals.
        formatter: Optional beautifier applied to the output when ``pretty``.
    """

    pretty: bool = False
    runtime: bool = True
    marshal_dataset: bool = True
    capital_constructors: bool = False
    formatter: Callable[[str], str] | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompilerOptions:
        """Build options from a mapping using camelCase or snake_case keys."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_CASE_NAMES.get(key, key)
            if name not in known:
                msg = f"Unknown compile option: {key!r}"
                raise TypeError(msg)
            kwargs[name] = value
        return cls(**kwargs)


def resolve_options(
    options: CompilerOptions | Mapping[str, Any] | None,
) -> CompilerOptions:
    """Normalize the ``options`` argument of ``compile_to_js``."""
    if options is None:
        return CompilerOptions()
    if isinstance(options, CompilerOptions):
        return options
    return CompilerOptions.from_mapping(options)


__all__ = ["CompilerOptions", "resolve_options"]
