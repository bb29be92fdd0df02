"""Template runner: evaluate compiled templates with Node.js.

Used by the test-suite to check that generated code parses and renders.
The runner supplies a stub ``h`` that returns plain objects, so no
virtual-dom installation is needed.
"""

from __future__ import annotations

import json
import subprocess
import tempfile
from pathlib import Path
from typing import Any

# JavaScript runner (ES module syntax). argv: mode, source file, locals JSON
_JS_RUNNER = """\
import { readFileSync } from 'fs';

const mode = process.argv[2];
const source = readFileSync(process.argv[3], 'utf8');
const locals = JSON.parse(process.argv[4] || '{}');

// Stub hyperscript constructor: vnodes as plain JSON-friendly objects
function h(tagName, properties, children) {
  return {
    tagName: tagName,
    properties: properties || {},
    children: children || [],
  };
}
globalThis.h = h;
const stubRequire = () => h;

const names = Object.keys(locals);
let render;
try {
  render = new Function('require', ...names, source);
} catch (err) {
  console.error(err.message);
  process.exit(1);
}

if (mode === 'render') {
  const root = render.call(undefined, stubRequire, ...names.map((n) => locals[n]));
  process.stdout.write(JSON.stringify(root));
}
"""


def _run_node(mode: str, js_code: str, local_vars: dict[str, Any]) -> str:
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".js", delete=False, encoding="utf-8"
    ) as src_file:
        src_file.write(js_code)
        src_path = Path(src_file.name)

    with tempfile.NamedTemporaryFile(mode="w", suffix=".mjs", delete=False) as js_file:
        js_file.write(_JS_RUNNER)
        js_path = Path(js_file.name)

    try:
        result = subprocess.run(
            ["node", str(js_path), mode, str(src_path), json.dumps(local_vars)],
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
        return result.stdout
    finally:
        src_path.unlink(missing_ok=True)
        js_path.unlink(missing_ok=True)


def check_syntax(js_code: str) -> None:
    """Parse compiled code as a function body.

    Raises:
        subprocess.CalledProcessError: If Node.js rejects the code.
    """
    _run_node("check", js_code, {})


def render(js_code: str, local_vars: dict[str, Any] | None = None) -> Any:
    """Run compiled code and return the root vnode as plain data.

    Args:
        js_code: Output of ``compile_to_js``.
        local_vars: Values for free variables referenced by the template.

    Returns:
        The root node as ``{"tagName", "properties", "children"}``.

    Raises:
        subprocess.CalledProcessError: If Node.js execution fails.
    """
    output = _run_node("render", js_code, local_vars or {})
    return json.loads(output)


__all__ = ["check_syntax", "render"]
