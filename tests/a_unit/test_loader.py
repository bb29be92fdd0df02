"""Unit tests for loading pug-parser ASTs."""

from __future__ import annotations

from pathlib import Path

import pytest

from vjade import compile_to_js
from vjade.errors import UnsupportedNodeError
from vjade.loader import (
    load_attribute,
    load_file,
    load_node,
    load_tree,
    split_mixin_args,
)
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
    Tag,
    Text,
    When,
    While,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestLoadAttribute:
    """Tests for load_attribute."""

    def test_single_quoted_literal(self) -> None:
        """Test that a single-quoted literal is static."""
        attr = load_attribute({"name": "class", "val": "'active'", "mustEscape": True})
        assert attr == Attribute("class", "active")

    def test_double_quoted_literal(self) -> None:
        """Test that a double-quoted literal is static."""
        assert load_attribute({"name": "id", "val": '"main"'}).value == "main"

    def test_expression(self) -> None:
        """Test that an expression is dynamic."""
        attr = load_attribute({"name": "href", "val": "'/u/' + id"})
        assert attr == Attribute("href", "'/u/' + id", dynamic=True)

    def test_literal_with_escape_is_dynamic(self) -> None:
        """Test that a literal with escapes stays an expression."""
        attr = load_attribute({"name": "title", "val": "'it\\'s'"})
        assert attr.dynamic

    def test_boolean(self) -> None:
        """Test boolean attributes and the escape flag."""
        attr = load_attribute({"name": "checked", "val": True, "mustEscape": False})
        assert attr == Attribute("checked", True, escaped=False)


class TestSplitMixinArgs:
    """Tests for split_mixin_args."""

    def test_no_args(self) -> None:
        """Test a mixin without parameters."""
        assert split_mixin_args(None) == ([], None)

    def test_positional(self) -> None:
        """Test positional parameters."""
        assert split_mixin_args("a, b") == (["a", "b"], None)

    def test_rest(self) -> None:
        """Test positional parameters followed by a rest parameter."""
        assert split_mixin_args("x, ...items") == (["x"], "items")

    def test_rest_only(self) -> None:
        """Test a rest parameter on its own."""
        assert split_mixin_args("...items") == ([], "items")


class TestLoadNode:
    """Tests for load_node."""

    def test_text(self) -> None:
        """Test loading text."""
        assert load_node({"type": "Text", "val": "hi"}) == Text("hi")

    def test_comments(self) -> None:
        """Test that both comment kinds load as Comment."""
        assert isinstance(load_node({"type": "Comment", "val": "x"}), Comment)
        assert isinstance(load_node({"type": "BlockComment", "val": "x"}), Comment)

    def test_code_without_block(self) -> None:
        """Test that code without a block has no children."""
        node = load_node({"type": "Code", "val": "x = 1", "buffer": False})
        assert node == Code("x = 1")

    def test_mixin_declaration_and_call(self) -> None:
        """Test that the call flag selects declaration or call."""
        decl = load_node({"type": "Mixin", "name": "m", "args": "a", "call": False})
        call = load_node({"type": "Mixin", "name": "m", "args": "1", "call": True})
        assert decl == MixinDeclaration("m", params=["a"])
        assert call == MixinCall("m", args="1")

    def test_mixin_block(self) -> None:
        """Test that MixinBlock loads as a block placeholder."""
        assert load_node({"type": "MixinBlock"}) == Block()

    def test_else_if_chain(self) -> None:
        """Test that else-if alternates load as nested conditionals."""
        node = load_node(
            {
                "type": "Conditional",
                "test": "a",
                "consequent": {"type": "Block", "nodes": []},
                "alternate": {
                    "type": "Conditional",
                    "test": "b",
                    "consequent": {"type": "Block", "nodes": []},
                    "alternate": None,
                },
            }
        )
        assert node == Conditional("a", [], Conditional("b", [], None))

    def test_unsupported_type(self) -> None:
        """Test that unknown node types are rejected."""
        with pytest.raises(UnsupportedNodeError, match="Doctype"):
            load_node({"type": "Doctype", "val": "html"})

    def test_case_with_non_when(self) -> None:
        """Test that case branches must be when nodes."""
        data = {
            "type": "Case",
            "expr": "x",
            "block": {"type": "Block", "nodes": [{"type": "Text", "val": "a"}]},
        }
        with pytest.raises(UnsupportedNodeError):
            load_node(data)


class TestLoadTree:
    """Tests for load_tree."""

    def test_list(self) -> None:
        """Test loading a list of nodes."""
        assert load_tree([{"type": "Tag", "name": "div"}]) == [Tag("div")]

    def test_single_node(self) -> None:
        """Test loading a single node mapping."""
        assert load_tree({"type": "Tag", "name": "div"}) == [Tag("div")]

    def test_invalid(self) -> None:
        """Test that a scalar document is rejected."""
        with pytest.raises(TypeError):
            load_tree("div")

    def test_node_that_is_not_a_mapping(self) -> None:
        """Test that list entries must be node mappings."""
        with pytest.raises(TypeError, match="node mapping"):
            load_tree(["div"])

    def test_block_that_is_not_a_mapping(self) -> None:
        """Test that a child block must be a Block mapping."""
        with pytest.raises(TypeError, match="Block mapping"):
            load_tree({"type": "Tag", "name": "div", "block": ["x"]})


class TestLoadFile:
    """Tests for load_file on the fixture files."""

    def test_json_fixture(self) -> None:
        """Test loading the JSON fixture."""
        nodes = load_file(FIXTURES / "list.json")
        decl, root = nodes
        assert decl == MixinDeclaration(
            "item",
            params=["label"],
            rest="extra",
            children=[
                Tag(
                    "li",
                    attribute_blocks=["attributes"],
                    children=[Text("#{label} (#{extra.length})"), Block()],
                )
            ],
        )
        assert isinstance(root, Tag)
        assert root.attrs == [
            Attribute("class", "list"),
            Attribute("data-count", "items.length", dynamic=True),
        ]
        conditional = root.children[1]
        assert isinstance(conditional, Conditional)
        each = conditional.consequent[0].children[0]  # type: ignore[union-attr]
        assert isinstance(each, Each)
        assert each.key == "i"
        call = each.children[0]
        assert isinstance(call, MixinCall)
        assert call.children == [Code("item.note", buffer=True)]

    def test_yaml_fixture(self) -> None:
        """Test loading the YAML fixture."""
        code, root = load_file(FIXTURES / "case.yaml")
        assert code == Code("var n = 2")
        assert isinstance(root, Tag)
        case, loop = root.children
        assert isinstance(case, Case)
        assert [when.expr for when in case.whens] == ["1", "2", "3", None]
        assert case.whens[1] == When("2")
        assert isinstance(loop, While)

    def test_fixture_compiles(self) -> None:
        """Test that a loaded fixture compiles."""
        js = compile_to_js(load_file(FIXTURES / "list.json"))
        assert "jade_mixins['item'].call({block: function()" in js
        assert '"dataset": {"count": (items.length)}' in js
        assert '"hidden": true' in js
