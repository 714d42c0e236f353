#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Org documents.

The module consists of:

- nodes: the closed set of node variants plus Document and FootnoteTable
- visitors: the visitor base class every renderer implements
- serialization: JSON serialization and deserialization of AST structures

Examples
--------
    >>> from orgwriter.ast import Document, Headline, Text
    >>> from orgwriter.renderers.org import OrgRenderer
    >>> doc = Document(children=[Headline(level=1, title=[Text(content="Title")])])
    >>> OrgRenderer().render_to_string(doc)
    '* Title\\n'

"""

from __future__ import annotations

from orgwriter.ast.nodes import (
    NODE_TYPES,
    Block,
    Comment,
    Document,
    Emphasis,
    EmphasisKind,
    ExplicitLineBreak,
    FootnoteDefinition,
    FootnoteLink,
    FootnoteTable,
    Headline,
    HorizontalRule,
    Keyword,
    LineBreak,
    List,
    ListItem,
    Metadata,
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
from orgwriter.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from orgwriter.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "Block",
    "Comment",
    "Document",
    "Emphasis",
    "EmphasisKind",
    "ExplicitLineBreak",
    "FootnoteDefinition",
    "FootnoteLink",
    "FootnoteTable",
    "Headline",
    "HorizontalRule",
    "Keyword",
    "LineBreak",
    "List",
    "ListItem",
    "Metadata",
    "Node",
    "NodeWithMeta",
    "NodeVisitor",
    "Paragraph",
    "RegularLink",
    "Table",
    "TableHeader",
    "TableRow",
    "TableSeparator",
    "Text",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    "is_empty_line_paragraph",
    "is_raw_text_block",
]
