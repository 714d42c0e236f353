#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_nodes.py
"""Unit tests for AST node classes and helpers."""

import pytest

from orgwriter.ast import (
    NODE_TYPES,
    Block,
    Document,
    FootnoteDefinition,
    FootnoteTable,
    Headline,
    LineBreak,
    NodeVisitor,
    Paragraph,
    Text,
    is_empty_line_paragraph,
    is_raw_text_block,
)


def _definition(name: str, body: str, inline: bool = False) -> FootnoteDefinition:
    return FootnoteDefinition(name=name, inline=inline, children=[Paragraph(children=[Text(content=body)])])


@pytest.mark.unit
class TestNodeVariants:
    """Tests for the closed set of node variants."""

    def test_every_variant_has_a_visit_method(self) -> None:
        abstract = set(NodeVisitor.__abstractmethods__)
        assert len(abstract) == len(NODE_TYPES) == 20

        recorder = type("Recorder", (NodeVisitor,), {name: (lambda n: lambda self, node: n)(name) for name in abstract})()
        visited = {node_type().accept(recorder) for node_type in NODE_TYPES}
        assert visited == abstract

    def test_accept_calls_matching_visit_method(self) -> None:
        calls = []

        class Recorder:
            def visit_text(self, node):
                calls.append(("text", node))
                return "ok"

        node = Text(content="x")
        assert node.accept(Recorder()) == "ok"
        assert calls == [("text", node)]

    def test_document_is_not_a_node(self) -> None:
        assert Document not in NODE_TYPES
        assert FootnoteTable not in NODE_TYPES

    def test_defaults(self) -> None:
        headline = Headline()
        assert headline.level == 1
        assert headline.tags == []
        assert LineBreak().count == 1
        assert Document().footnotes.title == "Footnotes"

    @pytest.mark.parametrize("level", [0, -2])
    def test_headline_level_validated(self, level) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            Headline(level=level)

    def test_mutable_defaults_not_shared(self) -> None:
        first, second = Block(name="QUOTE"), Block(name="QUOTE")
        first.children.append(Text(content="x"))
        assert second.children == []


@pytest.mark.unit
class TestHelpers:
    """Tests for node classification helpers."""

    @pytest.mark.parametrize("name", ["SRC", "src", "Example", "EXPORT"])
    def test_raw_text_blocks(self, name) -> None:
        assert is_raw_text_block(name)

    @pytest.mark.parametrize("name", ["QUOTE", "CENTER", "VERSE", ""])
    def test_structural_blocks(self, name) -> None:
        assert not is_raw_text_block(name)

    def test_empty_line_paragraph(self) -> None:
        assert is_empty_line_paragraph(Paragraph(children=[LineBreak()]))
        assert is_empty_line_paragraph(Paragraph(children=[LineBreak(count=2)]))

    def test_not_empty_line_paragraph(self) -> None:
        assert not is_empty_line_paragraph(Paragraph(children=[]))
        assert not is_empty_line_paragraph(Paragraph(children=[LineBreak(), Text(content="x")]))
        assert not is_empty_line_paragraph(LineBreak())
        assert not is_empty_line_paragraph(None)


@pytest.mark.unit
class TestFootnoteTable:
    """Tests for footnote ordering."""

    def test_registration_order_kept(self) -> None:
        table = FootnoteTable(definitions=[_definition("b", "1"), _definition("a", "2")])
        assert [d.name for d in table.ordered()] == ["b", "a"]

    def test_redefinition_keeps_first_position_latest_body(self) -> None:
        latest = _definition("a", "new")
        table = FootnoteTable(definitions=[_definition("a", "old"), _definition("b", "b"), latest])

        ordered = table.ordered()
        assert [d.name for d in ordered] == ["a", "b"]
        assert ordered[0] is latest

    def test_inline_definitions_follow_block_ones(self) -> None:
        table = FootnoteTable(
            definitions=[_definition("i", "x", inline=True), _definition("a", "y"), _definition("b", "z")]
        )
        assert [d.name for d in table.ordered()] == ["a", "b", "i"]

    def test_empty(self) -> None:
        assert FootnoteTable().ordered() == []

    def test_ordered_does_not_mutate(self) -> None:
        definitions = [_definition("a", "1"), _definition("a", "2")]
        table = FootnoteTable(definitions=list(definitions))
        table.ordered()
        assert table.definitions == definitions
