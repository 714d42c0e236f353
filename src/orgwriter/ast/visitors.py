#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

``NodeVisitor`` declares one abstract ``visit_*`` method per member of
``NODE_TYPES``. A renderer that forgets a variant cannot be instantiated,
so the dispatcher and the data model stay in lock-step.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from orgwriter.ast.nodes import (
    Block,
    Comment,
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
    NodeWithMeta,
    Paragraph,
    RegularLink,
    Table,
    TableHeader,
    TableRow,
    TableSeparator,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node variant.
    Visit methods return Any (typically None for side-effect visitors such
    as renderers).

    Examples
    --------
    Collect all text content:

        >>> class TextCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def visit_text(self, node):
        ...         self.parts.append(node.content)
        ...     # ... remaining visit_* methods

    """

    # Block-level nodes

    @abstractmethod
    def visit_headline(self, node: Headline) -> Any:
        """Visit a Headline node.

        Parameters
        ----------
        node : Headline
            The headline node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_header(self, node: TableHeader) -> Any:
        """Visit a TableHeader node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_separator(self, node: TableSeparator) -> Any:
        """Visit a TableSeparator node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_keyword(self, node: Keyword) -> Any:
        """Visit a Keyword node."""
        pass

    @abstractmethod
    def visit_node_with_meta(self, node: NodeWithMeta) -> Any:
        """Visit a NodeWithMeta node.

        Parameters
        ----------
        node : NodeWithMeta
            Wrapper carrying captions and attributes for its inner node

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node."""
        pass

    # Inline nodes

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_explicit_line_break(self, node: ExplicitLineBreak) -> Any:
        """Visit an ExplicitLineBreak node."""
        pass

    @abstractmethod
    def visit_regular_link(self, node: RegularLink) -> Any:
        """Visit a RegularLink node."""
        pass

    @abstractmethod
    def visit_footnote_link(self, node: FootnoteLink) -> Any:
        """Visit a FootnoteLink node.

        Parameters
        ----------
        node : FootnoteLink
            The footnote reference to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass


__all__ = ["NodeVisitor"]
