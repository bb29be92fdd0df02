"""Testing utilities for vjade."""

from __future__ import annotations

import subprocess
from typing import Any

from vjade.compiler import compile_to_js
from vjade.nodes import Node
from vjade.runner import check_syntax, render


def has_node() -> bool:
    """Check if Node.js is available."""
    try:
        subprocess.run(
            ["node", "--version"],
            check=True,
            capture_output=True,
        )
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


def check_js_valid(js_code: str) -> tuple[bool, str]:
    """Check if compiled code parses as a function body.

    Returns:
        Tuple of (valid, error_message).
    """
    try:
        check_syntax(js_code)
        return True, ""
    except subprocess.CalledProcessError as e:
        return False, e.stderr


def compile_and_render(
    nodes: list[Node],
    local_vars: dict[str, Any] | None = None,
    **options: Any,
) -> Any:
    """Compile a node tree and render it with the stub runtime."""
    return render(compile_to_js(nodes, options), local_vars)


def text_content(vnode: Any) -> str:
    """Concatenate the text children of a rendered vnode, depth-first."""
    if isinstance(vnode, str):
        return vnode
    if isinstance(vnode, dict):
        return "".join(text_content(child) for child in vnode.get("children", []))
    return "" if vnode is None else str(vnode)


__all__ = ["check_js_valid", "compile_and_render", "has_node", "text_content"]
