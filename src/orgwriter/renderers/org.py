#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/renderers/org.py
"""Org-Mode rendering from AST.

This module provides the OrgRenderer class which writes an Org document tree
back to its canonical source text. It is the write side of a
parse -> render -> parse round trip, so every node is reproduced exactly and
nothing is escaped or normalised.

The renderer walks the tree with the visitor pattern. Whenever a parent needs
the rendered text of a subtree as a value (a headline title for tag
alignment, a list item body for indentation, a link description) it renders
that subtree through an isolated child renderer that shares the options and
indentation but writes to its own buffer.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from orgwriter.ast.nodes import (
    NODE_TYPES,
    Block,
    Comment,
    Document,
    Emphasis,
    ExplicitLineBreak,
    FootnoteDefinition,
    FootnoteLink,
    Headline,
    HorizontalRule,
    Keyword,
    LineBreak,
    List,
    ListItem,
    Node,
    NodeWithMeta,
    Paragraph,
    RegularLink,
    Table,
    TableHeader,
    TableRow,
    TableSeparator,
    Text,
    is_empty_line_paragraph,
    is_raw_text_block,
)
from orgwriter.ast.visitors import NodeVisitor
from orgwriter.exceptions import RenderingError, UnknownEmphasisError, UnknownNodeError
from orgwriter.options.org import OrgRendererOptions
from orgwriter.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

EMPHASIS_ORG_BORDERS: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "_": ("_", "_"),
        "*": ("*", "*"),
        "/": ("/", "/"),
        "+": ("+", "+"),
        "~": ("~", "~"),
        "=": ("=", "="),
        "_{}": ("_{", "}"),
        "^{}": ("^{", "}"),
    }
)


class OrgRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Org-Mode source text.

    A renderer instance is a buffer context: an append-only output buffer,
    the current indentation prefix, and the options (notably the tag
    alignment column). ``render_to_string`` resets the buffer, so one
    instance can render several documents in sequence.

    Parameters
    ----------
    options : OrgRendererOptions or None, default = None
        Org formatting options

    Examples
    --------
    Basic usage:

        >>> from orgwriter.ast import Document, Headline, Text
        >>> doc = Document(children=[
        ...     Headline(level=1, title=[Text(content="Title")], tags=["work"])
        ... ])
        >>> OrgRenderer(OrgRendererOptions(tags_column=20)).render_to_string(doc)
        '* Title       :work:\\n'

    """

    def __init__(self, options: OrgRendererOptions | None = None):
        """Initialize the Org renderer with options."""
        BaseRenderer._validate_options_type(options, OrgRendererOptions, "org")
        options = options or OrgRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: OrgRendererOptions = options
        self._output: list[str] = []
        self._indent: str = options.base_indent

    # ------------------------------------------------------------------
    # Document driver
    # ------------------------------------------------------------------

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an Org string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            Org source text

        Raises
        ------
        UnknownNodeError
            If the tree contains a value outside the known node variants
        UnknownEmphasisError
            If an emphasis node carries an unknown kind
        RenderingError
            If a raw block or inline footnote has the wrong child shape

        """
        self._output = []
        self._indent = self.options.base_indent
        logger.debug("Rendering document with %d top-level nodes", len(doc.children))

        self.before(doc)
        self._write_nodes(doc.children)
        self.after(doc)

        result = self._finalize()
        logger.debug("Rendered %d characters", len(result))
        return result

    def before(self, doc: Document) -> None:
        """Hook run before the document body; writes nothing for Org."""

    def after(self, doc: Document) -> None:
        """Hook run after the document body; writes the footnote section."""
        self._write_footnotes(doc)

    # ------------------------------------------------------------------
    # Buffer context
    # ------------------------------------------------------------------

    def _append(self, text: str) -> None:
        self._output.append(text)

    def _isolated_child(self, indent: Optional[str] = None) -> OrgRenderer:
        """Return a renderer sharing options and indentation with an empty buffer.

        Parameters
        ----------
        indent : str or None, default = None
            Indentation for the child; defaults to the current indentation

        Returns
        -------
        OrgRenderer
            Independent renderer whose output never reaches this one unless
            the caller appends its finalized text

        """
        child = OrgRenderer(self.options)
        child._indent = self._indent if indent is None else indent
        return child

    def _finalize(self) -> str:
        return "".join(self._output)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------

    def _write_nodes(self, nodes: Iterable[Optional[Node]]) -> None:
        """Dispatch each node to its visit method in the current context.

        ``None`` entries are skipped. Any other value must be an instance of
        one of the known node variants.

        Raises
        ------
        UnknownNodeError
            If a value is not one of the known node variants

        """
        for node in nodes:
            if node is None:
                continue
            if type(node) not in NODE_TYPES:
                raise UnknownNodeError(node)
            node.accept(self)

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_headline(self, node: Headline) -> None:
        """Render a Headline node.

        The headline line is rendered in isolation first so that the tag
        padding is computed from the rendered title length.

        Parameters
        ----------
        node : Headline
            Headline to render

        """
        title_writer = self._isolated_child()
        title_writer._append("*" * node.level)
        if node.status:
            title_writer._append(" " + node.status)
        if node.priority:
            title_writer._append(" [#" + node.priority + "]")
        title_writer._append(" ")
        title_writer._write_nodes(node.title)
        title_line = title_writer._finalize()

        if node.tags:
            tag_string = ":" + ":".join(node.tags) + ":"
            pad = self.options.tags_column - len(tag_string) - len(title_line)
            if pad > 0:
                self._append(title_line + " " * pad + tag_string)
            else:
                self._append(title_line + " " + tag_string)
        else:
            self._append(title_line)

        self._append("\n")
        if node.children:
            self._append(self._indent)
        self._write_nodes(node.children)

    def visit_block(self, node: Block) -> None:
        """Render a Block node.

        Raw blocks (``SRC``, ``EXAMPLE``, ``EXPORT``) copy their text line by
        line under the current indentation; other blocks dispatch their
        children.

        Parameters
        ----------
        node : Block
            Block to render

        Raises
        ------
        RenderingError
            If a raw block does not start with a Text child

        """
        self._append(self._indent + "#+BEGIN_" + node.name)
        if node.parameters:
            self._append(" " + " ".join(node.parameters))
        self._append("\n")

        if is_raw_text_block(node.name):
            if not node.children or not isinstance(node.children[0], Text):
                raise RenderingError(
                    f"raw block {node.name!r} must contain a single Text child, got {node.children!r}",
                    rendering_stage="block",
                )
            for line in node.children[0].content.split("\n"):
                self._append(self._indent + line + "\n")
        else:
            self._write_nodes(node.children)

        self._append(self._indent + "#+END_" + node.name + "\n")

    def visit_list(self, node: List) -> None:
        """Render a List node; each item writes its own trailing newline."""
        self._write_nodes(node.items)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        The bullet goes straight into the current buffer. The body is rendered
        with indentation extended by ``len(bullet) + 1`` spaces so continuation
        lines align under the item text; its first line already follows the
        bullet, so one leading copy of that indentation is removed.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        self._append(self._indent + node.bullet + " ")
        item_writer = self._isolated_child(indent=self._indent + " " * (len(node.bullet) + 1))
        item_writer._write_nodes(node.children)
        self._append(item_writer._finalize().removeprefix(item_writer._indent))

    def visit_table(self, node: Table) -> None:
        """Render a Table node: header first, then rows."""
        self._write_nodes([node.header])
        self._write_nodes(node.rows)

    def visit_table_header(self, node: TableHeader) -> None:
        """Render a TableHeader node followed by its separator."""
        self._write_table_columns(node.columns)
        self._write_nodes([node.separator])

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        self._write_table_columns(node.columns)

    def visit_table_separator(self, node: TableSeparator) -> None:
        """Render a TableSeparator node."""
        self._append(self._indent + node.content + "\n")

    def _write_table_columns(self, columns: list[list[Node]]) -> None:
        # cells are not padded to a common width
        self._append(self._indent + "| ")
        for i, column_nodes in enumerate(columns):
            self._write_nodes(column_nodes)
            self._append(" |")
            if i < len(columns) - 1:
                self._append(" ")
        self._append("\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._write_nodes(node.children)
        self._append("\n")

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._append(self._indent + "-----\n")

    def visit_comment(self, node: Comment) -> None:
        """Render a Comment node; the content is everything after ``#``."""
        self._append(self._indent + "#" + node.content + "\n")

    def visit_keyword(self, node: Keyword) -> None:
        """Render a Keyword node."""
        self._append(self._indent + f"#+{node.key}: {node.value}\n")

    def visit_node_with_meta(self, node: NodeWithMeta) -> None:
        """Render a NodeWithMeta node.

        Each caption becomes a ``#+CAPTION:`` line and each attribute list a
        ``#+ATTR_HTML:`` line of ``key value`` pairs; values containing a space
        or tab are double-quoted. The wrapped node follows.

        Parameters
        ----------
        node : NodeWithMeta
            Annotated node to render

        """
        # meta lines follow the current indentation, like every other block line
        for caption in node.meta.caption:
            self._append(self._indent + "#+CAPTION: ")
            self._write_nodes(caption)
            self._append("\n")

        for attributes in node.meta.html_attributes:
            pairs = []
            for i in range(0, len(attributes) - 1, 2):
                key, value = attributes[i], attributes[i + 1]
                if " " in value or "\t" in value:
                    value = f'"{value}"'
                pairs.append(f"{key} {value}")
            self._append(self._indent + "#+ATTR_HTML: " + " ".join(pairs) + "\n")

        self._write_nodes([node.node])

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node.

        Parameters
        ----------
        node : FootnoteDefinition
            Footnote definition to render

        """
        self._append(f"[fn:{node.name}]")
        if not (node.children and is_empty_line_paragraph(node.children[0])):
            self._append(" ")
        self._write_nodes(node.children)

    def _write_footnotes(self, doc: Document) -> None:
        """Write the footnote section after the document body.

        Inline definitions are skipped; they were already written at their
        point of reference.
        """
        footnotes = doc.footnotes
        if not footnotes.definitions:
            return

        definitions = [d for d in footnotes.ordered() if not d.inline]
        logger.debug(
            "Writing footnote section with %d of %d definitions", len(definitions), len(footnotes.definitions)
        )
        self._append("* " + footnotes.title + "\n")
        self._write_nodes(definitions)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node verbatim."""
        self._append(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node.

        Raises
        ------
        UnknownEmphasisError
            If the emphasis kind has no entry in ``EMPHASIS_ORG_BORDERS``

        """
        if not isinstance(node.kind, str) or node.kind not in EMPHASIS_ORG_BORDERS:
            raise UnknownEmphasisError(node.kind)
        left, right = EMPHASIS_ORG_BORDERS[node.kind]
        self._append(left)
        self._write_nodes(node.content)
        self._append(right)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node as ``count`` newlines, each followed by the indentation."""
        self._append(("\n" + self._indent) * node.count)

    def visit_explicit_line_break(self, node: ExplicitLineBreak) -> None:
        """Render an ExplicitLineBreak node."""
        self._append("\\\\\n" + self._indent)

    def visit_regular_link(self, node: RegularLink) -> None:
        """Render a RegularLink node.

        Parameters
        ----------
        node : RegularLink
            Link to render

        """
        if node.auto_link:
            self._append(node.url)
        elif node.description is None:
            self._append(f"[[{node.url}]]")
        else:
            description_writer = self._isolated_child()
            description_writer._write_nodes(node.description)
            self._append(f"[[{node.url}][{description_writer._finalize()}]]")

    def visit_footnote_link(self, node: FootnoteLink) -> None:
        """Render a FootnoteLink node, inlining its definition when it carries one.

        Raises
        ------
        RenderingError
            If the inline definition's first child is not a Paragraph

        """
        self._append("[fn:" + node.name)
        if node.definition is not None:
            self._append(":")
            if node.definition.children:
                first = node.definition.children[0]
                if not isinstance(first, Paragraph):
                    raise RenderingError(
                        f"inline footnote {node.name!r} must start with a Paragraph, got {type(first).__name__}",
                        rendering_stage="footnote_link",
                    )
                self._write_nodes(first.children)
        self._append("]")
