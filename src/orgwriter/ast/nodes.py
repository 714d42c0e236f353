#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/ast/nodes.py
"""AST node classes for Org document representation.

This module defines the closed set of node variants an Org parser emits and
the Org renderer consumes. Each node represents a structural or inline
element of the document and supports the visitor pattern through
``accept()``.

Node Hierarchy
--------------
Block-level nodes:
    - Headline, Block, List, ListItem
    - Table, TableHeader, TableRow, TableSeparator
    - Paragraph, HorizontalRule, Comment, Keyword
    - NodeWithMeta, FootnoteDefinition

Inline nodes:
    - Text, Emphasis, LineBreak, ExplicitLineBreak
    - RegularLink, FootnoteLink

The variant set is closed: ``NODE_TYPES`` lists every class the renderer
knows how to write, and ``NodeVisitor`` declares one abstract method per
member. Adding a variant means touching all three.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from orgwriter.constants import DEFAULT_FOOTNOTES_TITLE, RAW_TEXT_BLOCK_NAMES

EmphasisKind = Literal["_", "*", "/", "+", "~", "=", "_{}", "^{}"]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Headline(Node):
    """Outline headline (``* TODO [#A] Title :tag:``).

    Parameters
    ----------
    level : int
        Number of leading stars, at least 1
    status : str, default = ""
        TODO keyword such as ``TODO`` or ``DONE``; empty when absent
    priority : str, default = ""
        Priority cookie letter without the ``[#...]`` wrapper; empty when absent
    title : list of Node, default = empty list
        Inline nodes forming the headline text
    tags : list of str, default = empty list
        Tags in source order
    children : list of Node, default = empty list
        Section content below the headline line

    """

    level: int = 1
    status: str = ""
    priority: str = ""
    title: list[Node] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate headline level."""
        if self.level < 1:
            raise ValueError(f"Headline level must be at least 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this headline.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_headline method

        Returns
        -------
        Any
            Result from visitor.visit_headline(self)

        """
        return visitor.visit_headline(self)


@dataclass
class Block(Node):
    """Greater block delimited by ``#+BEGIN_NAME`` / ``#+END_NAME``.

    Raw blocks (see ``is_raw_text_block``) carry exactly one ``Text`` child
    holding the verbatim content; all other blocks hold parsed nodes.

    Parameters
    ----------
    name : str
        Block name as written in the source (``SRC``, ``QUOTE``, ...)
    parameters : list of str, default = empty list
        Words following the name on the ``#+BEGIN_`` line
    children : list of Node, default = empty list
        Block content

    """

    name: str = ""
    parameters: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block."""
        return visitor.visit_block(self)


@dataclass
class List(Node):
    """Plain list owning an ordered sequence of ``ListItem`` nodes.

    Parameters
    ----------
    items : list of Node, default = empty list
        List items in order

    """

    items: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Single list item.

    Parameters
    ----------
    bullet : str, default = "-"
        Bullet exactly as written (``-``, ``+``, ``1.``, ``2)``)
    children : list of Node, default = empty list
        Item content

    """

    bullet: str = "-"
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class TableSeparator(Node):
    """Horizontal table rule such as ``|---+----|``.

    Parameters
    ----------
    content : str, default = ""
        The separator line exactly as it should be written

    """

    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this separator."""
        return visitor.visit_table_separator(self)


@dataclass
class TableHeader(Node):
    """Table header row followed by its separator.

    Parameters
    ----------
    columns : list of list of Node, default = empty list
        One inline node sequence per column
    separator : TableSeparator or None, default = None
        Rule written below the header

    """

    columns: list[list[Node]] = field(default_factory=list)
    separator: Optional[TableSeparator] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header."""
        return visitor.visit_table_header(self)


@dataclass
class TableRow(Node):
    """Table body row.

    Parameters
    ----------
    columns : list of list of Node, default = empty list
        One inline node sequence per column

    """

    columns: list[list[Node]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this row."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """Table with one header and an ordered sequence of rows.

    Parameters
    ----------
    header : TableHeader or None, default = None
        Header row
    rows : list of Node, default = empty list
        ``TableRow`` and ``TableSeparator`` nodes in order

    """

    header: Optional[TableHeader] = None
    rows: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule (five or more dashes)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class Comment(Node):
    """Line comment.

    Parameters
    ----------
    content : str, default = ""
        Everything after the ``#``, including the space that usually follows it

    """

    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this comment."""
        return visitor.visit_comment(self)


@dataclass
class Keyword(Node):
    """In-buffer setting such as ``#+TITLE: value``.

    Parameters
    ----------
    key : str
        Keyword name without ``#+`` and colon
    value : str, default = ""
        Everything after ``: ``

    """

    key: str = ""
    value: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this keyword."""
        return visitor.visit_keyword(self)


@dataclass
class Metadata:
    """Affiliated keywords attached to a ``NodeWithMeta``.

    Parameters
    ----------
    caption : list of list of Node, default = empty list
        One inline node sequence per ``#+CAPTION:`` line
    html_attributes : list of list of str, default = empty list
        One flat ``[key, value, key, value, ...]`` list per ``#+ATTR_HTML:`` line

    """

    caption: list[list[Node]] = field(default_factory=list)
    html_attributes: list[list[str]] = field(default_factory=list)


@dataclass
class NodeWithMeta(Node):
    """Node preceded by affiliated keywords.

    Parameters
    ----------
    node : Node or None, default = None
        Wrapped node
    meta : Metadata, default = empty Metadata
        Captions and attributes written before the wrapped node

    """

    node: Optional[Node] = None
    meta: Metadata = field(default_factory=Metadata)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this annotated node."""
        return visitor.visit_node_with_meta(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition.

    Parameters
    ----------
    name : str
        Footnote label (``1``, ``note``, ...)
    inline : bool, default = False
        True when the definition was written at its point of reference
        (``[fn:name:text]``); inline definitions are not repeated in the
        footnote section
    children : list of Node, default = empty list
        Definition content; for inline definitions the first child is a
        ``Paragraph``

    """

    name: str = ""
    inline: bool = False
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text, written verbatim.

    Parameters
    ----------
    content : str, default = ""
        Text content

    """

    content: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasized span.

    Parameters
    ----------
    kind : EmphasisKind
        Org marker identifying the span: ``_`` underline, ``*`` bold,
        ``/`` italic, ``+`` strike-through, ``~`` and ``=`` verbatim,
        ``_{}`` subscript, ``^{}`` superscript
    content : list of Node, default = empty list
        Inline nodes inside the span

    """

    kind: EmphasisKind = "*"
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class LineBreak(Node):
    """Run of newlines inside inline content.

    Parameters
    ----------
    count : int, default = 1
        Number of newlines; 1 continues the paragraph on the next line,
        N > 1 leaves N - 1 blank lines

    """

    count: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class ExplicitLineBreak(Node):
    """Forced line break written as ``\\\\`` at the end of a line."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this explicit line break."""
        return visitor.visit_explicit_line_break(self)


@dataclass
class RegularLink(Node):
    """Link in bracket form or as a bare URL.

    Parameters
    ----------
    url : str
        Link target
    description : list of Node or None, default = None
        Description nodes; None for ``[[url]]`` links
    auto_link : bool, default = False
        True for bare URLs recognised in running text

    """

    url: str = ""
    description: Optional[list[Node]] = None
    auto_link: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_regular_link(self)


@dataclass
class FootnoteLink(Node):
    """Footnote reference.

    Parameters
    ----------
    name : str
        Footnote label
    definition : FootnoteDefinition or None, default = None
        Inline definition carried by the reference (``[fn:name:text]``)

    """

    name: str = ""
    definition: Optional[FootnoteDefinition] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_link(self)


# ============================================================================
# Document
# ============================================================================


@dataclass
class FootnoteTable:
    """Footnote definitions collected by the parser.

    Parameters
    ----------
    title : str, default = "Footnotes"
        Caption of the footnote section headline
    definitions : list of FootnoteDefinition, default = empty list
        Definitions in the order the parser registered them; a name may
        appear more than once when a footnote was redefined

    """

    title: str = DEFAULT_FOOTNOTES_TITLE
    definitions: list[FootnoteDefinition] = field(default_factory=list)

    def ordered(self) -> list[FootnoteDefinition]:
        """Return definitions in footnote-section order.

        Each name appears once, at the position it was first registered,
        carrying its most recent definition. Block definitions come first,
        followed by inline ones.

        Returns
        -------
        list of FootnoteDefinition
            De-duplicated definitions

        """
        latest: dict[str, FootnoteDefinition] = {}
        for definition in self.definitions:
            latest[definition.name] = definition

        block: list[FootnoteDefinition] = []
        inline: list[FootnoteDefinition] = []
        for definition in latest.values():
            (inline if definition.inline else block).append(definition)
        return block + inline


@dataclass
class Document:
    """Root value: top-level nodes plus the footnote table.

    ``Document`` is not a ``Node``; it is only ever handed to a renderer's
    document driver and never appears inside a node sequence.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes
    footnotes : FootnoteTable, default = empty table
        Footnote definitions for the trailing section

    """

    children: list[Node] = field(default_factory=list)
    footnotes: FootnoteTable = field(default_factory=FootnoteTable)


NODE_TYPES: frozenset[type[Node]] = frozenset(
    {
        Headline,
        Block,
        List,
        ListItem,
        Table,
        TableHeader,
        TableRow,
        TableSeparator,
        Paragraph,
        HorizontalRule,
        Comment,
        Keyword,
        NodeWithMeta,
        FootnoteDefinition,
        Text,
        Emphasis,
        LineBreak,
        ExplicitLineBreak,
        RegularLink,
        FootnoteLink,
    }
)


def is_raw_text_block(name: str) -> bool:
    """Return True when a block's content is kept verbatim.

    Parameters
    ----------
    name : str
        Block name, compared case-insensitively

    Returns
    -------
    bool
        True for ``SRC``, ``EXAMPLE`` and ``EXPORT`` blocks

    """
    return name.upper() in RAW_TEXT_BLOCK_NAMES


def is_empty_line_paragraph(node: Optional[Node]) -> bool:
    """Return True for a paragraph consisting of a single line break."""
    return isinstance(node, Paragraph) and len(node.children) == 1 and isinstance(node.children[0], LineBreak)
