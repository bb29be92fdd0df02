"""Text interpolation compilation.

``#{expr}`` and ``!{expr}`` spans are spliced verbatim into a string
concatenation evaluated at render time. ``\\#{`` stays literal. Virtual-dom
text nodes are never parsed as HTML, so escaped and unescaped spans
compile the same way.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from vjade.emitter import js_string

_SPAN_START = re.compile(r"(\\)?([#!])\{")

_QUOTES = "'\"`"


@dataclass(frozen=True)
class Span:
    """An embedded expression fragment."""

    expr: str
    escaped: bool = True


def find_closing_brace(text: str, start: int) -> int:
    """Return the index of the ``}`` closing a span opened before ``start``.

    Nested brackets and quoted strings are skipped. Returns -1 when the
    span is never closed.
    """
    depth = 0
    quote: str | None = None
    i = start
    while i < len(text):
        char = text[i]
        if quote is not None:
            if char == "\\":
                i += 1
            elif char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in "([{":
            depth += 1
        elif char in ")]}":
            if depth == 0:
                return i if char == "}" else -1
            depth -= 1
        i += 1
    return -1


def split_interpolation(text: str) -> list[str | Span]:
    """Split text into literal strings and spans.

    The result alternates literal, span, literal, ... and always starts
    and ends with a (possibly empty) literal. An unclosed span is kept as
    literal text.
    """
    parts: list[str | Span] = []
    literal: list[str] = []
    pos = 0
    while True:
        match = _SPAN_START.search(text, pos)
        if match is None:
            literal.append(text[pos:])
            break
        literal.append(text[pos : match.start()])
        if match.group(1):
            literal.append(match.group(0)[1:])
            pos = match.end()
            continue
        end = find_closing_brace(text, match.end())
        if end < 0:
            literal.append(text[match.start() :])
            break
        expr = text[match.end() : end].strip()
        pos = end + 1
        if not expr:
            continue
        parts.append("".join(literal))
        parts.append(Span(expr, escaped=match.group(2) == "#"))
        literal = []
    parts.append("".join(literal))
    return parts


def compile_parts(parts: list[str | Span]) -> str:
    """Compile split parts to a JavaScript expression."""
    if len(parts) == 1 and isinstance(parts[0], str):
        return js_string(parts[0])
    terms = [
        js_string(part) if isinstance(part, str) else f"({part.expr})"
        for part in parts
    ]
    return " + ".join(terms)


def compile_text(text: str) -> str:
    """Compile one text value to a JavaScript expression."""
    return compile_parts(split_interpolation(text))


def compile_text_run(texts: list[str]) -> str:
    """Compile adjacent text values into a single expression."""
    parts: list[str | Span] = []
    for i, text in enumerate(texts):
        if i:
            parts[-1] = f"{parts[-1]}\n"
        split = split_interpolation(text)
        if parts:
            # Both ends of a split are literals, so merge across the seam
            split[0] = f"{parts.pop()}{split[0]}"
        parts.extend(split)
    return compile_parts(parts)


__all__ = [
    "Span",
    "compile_parts",
    "compile_text",
    "compile_text_run",
    "find_closing_brace",
    "split_interpolation",
]
