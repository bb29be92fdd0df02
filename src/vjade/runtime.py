"""Runtime bindings prepended to compiled templates.

The generated code calls ``h`` from virtual-dom. A host may instead
provide a conforming module under the same name and leave ``runtime`` off.
"""

from __future__ import annotations

# (local name, module) pairs required by the generated code
RUNTIME_BINDINGS: tuple[tuple[str, str], ...] = (("h", "virtual-dom/h"),)

RUNTIME_CODE = "\n".join(
    f'var {name} = require("{module}");' for name, module in RUNTIME_BINDINGS
)

__all__ = ["RUNTIME_BINDINGS", "RUNTIME_CODE"]
