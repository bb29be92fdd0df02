"""Unit tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vjade.cli import main

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestCli:
    """Tests for the vjade command."""

    def test_compile_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that compiled code goes to stdout by default."""
        assert main([str(FIXTURES / "list.json")]) == 0
        out = capsys.readouterr().out
        assert out.startswith('var h = require("virtual-dom/h");')
        assert out.rstrip().endswith("return n0Child[0];")

    def test_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that flags map to compiler options."""
        args = [str(FIXTURES / "list.json"), "--no-runtime", "--no-marshal-dataset"]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "require(" not in out
        assert '"data-count"' in out

    def test_output_file(self, tmp_path: Path) -> None:
        """Test writing the result to a file."""
        target = tmp_path / "out.js"
        assert main([str(FIXTURES / "case.yaml"), "--pretty", "-o", str(target)]) == 0
        assert "switch (n) {" in target.read_text(encoding="utf-8")

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a missing tree file is reported."""
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_compile_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that compile errors are reported without a traceback."""
        tree = tmp_path / "two.json"
        tree.write_text(
            json.dumps([{"type": "Tag", "name": "a"}, {"type": "Tag", "name": "b"}])
        )
        assert main([str(tree)]) == 1
        assert "Error:" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "data",
        [["div", "span"], {"type": "Tag", "name": "div", "block": "oops"}],
    )
    def test_malformed_tree(
        self, data: object, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a tree of the wrong shape is reported as an error."""
        tree = tmp_path / "bad.json"
        tree.write_text(json.dumps(data))
        assert main([str(tree)]) == 1
        assert "Error: Expected a" in capsys.readouterr().err
