"""Property-based tests for the Org renderer.

Test Coverage:
- Property: Tagged headlines end at the tag column or carry a single space
- Property: List continuation lines align under the item text
- Property: Raw block content is copied byte for byte
- Property: Rendering is deterministic and independent of previous renders
- Property: JSON serialization preserves the rendered output
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from orgwriter.ast import (
    Block,
    Document,
    Emphasis,
    Headline,
    LineBreak,
    List,
    ListItem,
    Paragraph,
    Text,
    ast_to_json,
    json_to_ast,
)
from orgwriter.options.org import OrgRendererOptions
from orgwriter.renderers.org import EMPHASIS_ORG_BORDERS, OrgRenderer

words = st.text(alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd")), min_size=1, max_size=12)
line_text = st.text(alphabet=st.characters(blacklist_characters="\n\r", blacklist_categories=("Cs",)), max_size=40)


@st.composite
def inline_nodes(draw, depth: int = 2):
    if depth == 0 or draw(st.booleans()):
        return Text(content=draw(line_text))
    kind = draw(st.sampled_from(sorted(EMPHASIS_ORG_BORDERS)))
    children = draw(st.lists(inline_nodes(depth=depth - 1), max_size=3))
    return Emphasis(kind=kind, content=children)


@st.composite
def documents(draw):
    headlines = []
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        headlines.append(
            Headline(
                level=draw(st.integers(min_value=1, max_value=4)),
                status=draw(st.sampled_from(["", "TODO", "DONE"])),
                title=draw(st.lists(inline_nodes(), max_size=3)),
                tags=draw(st.lists(words, max_size=3)),
                children=[Paragraph(children=draw(st.lists(inline_nodes(), max_size=4)))],
            )
        )
    return Document(children=headlines)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestOrgRendererProperties:
    """Property-based tests for rendering invariants."""

    @given(
        level=st.integers(min_value=1, max_value=6),
        title=line_text,
        tags=st.lists(words, min_size=1, max_size=4),
        column=st.integers(min_value=0, max_value=120),
    )
    def test_headline_tag_alignment(self, level, title, tags, column):
        """Property: Tags end exactly at the column unless the title is too long."""
        headline = Headline(level=level, title=[Text(content=title)], tags=tags)
        renderer = OrgRenderer(OrgRendererOptions(tags_column=column))
        line = renderer.render_to_string(Document(children=[headline]))

        title_line = "*" * level + " " + title
        tag_string = ":" + ":".join(tags) + ":"
        assert line.endswith(tag_string + "\n")

        if column - len(tag_string) - len(title_line) > 0:
            assert len(line) - 1 == column
            assert line.startswith(title_line + " ")
        else:
            assert line == title_line + " " + tag_string + "\n"

    @given(
        bullet=st.sampled_from(["-", "+", "*", "1.", "12)", "a."]),
        lines=st.lists(words, min_size=1, max_size=5),
    )
    def test_list_continuation_indent(self, bullet, lines):
        """Property: Every continuation line is indented by len(bullet) + 1."""
        children = [Text(content=lines[0])]
        for line in lines[1:]:
            children.extend([LineBreak(), Text(content=line)])
        item = ListItem(bullet=bullet, children=[Paragraph(children=children)])

        output = OrgRenderer().render_to_string(Document(children=[List(items=[item])]))
        rendered_lines = output.split("\n")[:-1]

        assert rendered_lines[0] == bullet + " " + lines[0]
        prefix = " " * (len(bullet) + 1)
        assert rendered_lines[1:] == [prefix + line for line in lines[1:]]

    @given(content=st.text(), name=st.sampled_from(["SRC", "src", "EXAMPLE", "Export"]))
    def test_raw_block_fidelity(self, content, name):
        """Property: Raw block bodies are emitted unchanged."""
        block = Block(name=name, children=[Text(content=content)])
        output = OrgRenderer().render_to_string(Document(children=[block]))
        assert output == f"#+BEGIN_{name}\n{content}\n#+END_{name}\n"

    @given(doc=documents(), column=st.integers(min_value=0, max_value=100))
    def test_deterministic_and_isolated(self, doc, column):
        """Property: A reused renderer gives the same text as a fresh one."""
        options = OrgRendererOptions(tags_column=column)
        reused = OrgRenderer(options)
        reused.render_to_string(Document(children=[Paragraph(children=[Text(content="warm up")])]))

        assert reused.render_to_string(doc) == OrgRenderer(options).render_to_string(doc)

    @given(doc=documents())
    def test_json_round_trip_preserves_output(self, doc):
        """Property: Rendering survives a trip through the JSON form."""
        restored = json_to_ast(ast_to_json(doc))
        assert OrgRenderer().render_to_string(restored) == OrgRenderer().render_to_string(doc)
