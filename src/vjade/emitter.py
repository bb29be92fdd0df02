"""JavaScript emitter for vjade.

Provides the JSEmitter class that handles all JavaScript text generation.
The compiler walks the node tree and calls Emitter methods to write code,
keeping tree traversal separate from the syntax of the generated source.
"""

from __future__ import annotations

import json
from typing import TextIO


def js_string(value: str) -> str:
    """Quote a Python string as a JavaScript string literal."""
    return json.dumps(value)


def js_key(name: str) -> str:
    """Quote a property name for an object literal."""
    return json.dumps(name)


class JSEmitter:
    """Generates JavaScript source one line at a time.

    Handles:
    - Line emission, with indentation when ``pretty`` is set
    - Block open/close bookkeeping
    - Unique child-array names (``n0Child``, ``n1Child``, ...)

    Without ``pretty`` every line still ends in a newline, so spliced
    statements that omit their semicolon stay separate.
    """

    def __init__(self, stream: TextIO, pretty: bool = False) -> None:
        """Initialize the emitter.

        Args:
            stream: Output stream where code is written.
            pretty: Track indentation for human-readable output.
        """
        self.stream = stream
        self.pretty = pretty
        self.indent = 0
        self._array_counter = 0

    # =========================================================================
    # Core Emission
    # =========================================================================

    def line(self, code: str) -> None:
        """Emit a single line of code."""
        prefix = " " * self.indent if self.pretty else ""
        self.stream.write(prefix + code + "\n")

    def text(self, code: str) -> None:
        """Emit multi-line code, one emitted line per source line."""
        for ln in code.strip("\n").split("\n"):
            self.line(ln)

    def indent_inc(self, amount: int = 2) -> None:
        """Increase indentation level."""
        self.indent += amount

    def indent_dec(self, amount: int = 2) -> None:
        """Decrease indentation level."""
        self.indent -= amount

    # =========================================================================
    # Blocks
    # =========================================================================

    def block_start(self, header: str) -> None:
        """Emit ``header {`` and indent."""
        self.line(f"{header} {{")
        self.indent_inc()

    def block_end(self, trailer: str = "}") -> None:
        """Dedent and emit the closing line."""
        self.indent_dec()
        self.line(trailer)

    def block_continue(self, header: str) -> None:
        """Close the current block and open the next one (``} else {``)."""
        self.indent_dec()
        self.line(f"}} {header} {{")
        self.indent_inc()

    # =========================================================================
    # Child Arrays
    # =========================================================================

    def new_array_name(self) -> str:
        """Return a fresh child-array variable name."""
        name = f"n{self._array_counter}Child"
        self._array_counter += 1
        return name

    def emit_array_decl(self, name: str) -> None:
        """Emit ``var name = [];``."""
        self.line(f"var {name} = [];")

    def emit_push(self, array: str, value: str) -> None:
        """Emit a push of one value onto a child array."""
        self.line(f"{array}.push({value});")

    def emit_push_all(self, array: str, values: str) -> None:
        """Emit a push of every element of an array expression."""
        self.line(f"{array}.push.apply({array}, {values});")

    def emit_return(self, value: str) -> None:
        """Emit a return statement."""
        self.line(f"return {value};")


__all__ = ["JSEmitter", "js_key", "js_string"]
