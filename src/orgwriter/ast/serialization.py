#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts AST structures to and from JSON, the interchange format
through which an external Org parser (or a fuzzing driver) hands trees to
the renderer.

Every node becomes an object with a ``node_type`` field naming its class,
plus one field per dataclass attribute. Node sequences become arrays and
table columns become arrays of arrays. A ``Document`` additionally carries
``footnotes: {"title": ..., "definitions": [...]}``.

Examples
--------
Serialize AST to JSON:

    >>> from orgwriter.ast import Document, Headline, Text
    >>> from orgwriter.ast.serialization import ast_to_json
    >>> doc = Document(children=[Headline(level=1, title=[Text(content="Title")])])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from orgwriter.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Union

from orgwriter.ast.nodes import (
    Block,
    Comment,
    Document,
    Emphasis,
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
)
from orgwriter.constants import DEFAULT_FOOTNOTES_TITLE
from orgwriter.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


# ============================================================================
# Serialization
# ============================================================================


def _nodes_to_list(nodes: Optional[list[Node]]) -> Optional[list[Optional[dict[str, Any]]]]:
    if nodes is None:
        return None
    return [None if n is None else ast_to_dict(n) for n in nodes]


def _columns_to_list(columns: list[list[Node]]) -> list[Any]:
    return [_nodes_to_list(column) for column in columns]


def _serialize_headline(node: Headline) -> dict[str, Any]:
    return {
        "node_type": "Headline",
        "level": node.level,
        "status": node.status,
        "priority": node.priority,
        "title": _nodes_to_list(node.title),
        "tags": list(node.tags),
        "children": _nodes_to_list(node.children),
    }


def _serialize_block(node: Block) -> dict[str, Any]:
    return {
        "node_type": "Block",
        "name": node.name,
        "parameters": list(node.parameters),
        "children": _nodes_to_list(node.children),
    }


def _serialize_table_header(node: TableHeader) -> dict[str, Any]:
    return {
        "node_type": "TableHeader",
        "columns": _columns_to_list(node.columns),
        "separator": ast_to_dict(node.separator) if node.separator is not None else None,
    }


def _serialize_table(node: Table) -> dict[str, Any]:
    return {
        "node_type": "Table",
        "header": ast_to_dict(node.header) if node.header is not None else None,
        "rows": _nodes_to_list(node.rows),
    }


def _serialize_node_with_meta(node: NodeWithMeta) -> dict[str, Any]:
    return {
        "node_type": "NodeWithMeta",
        "node": ast_to_dict(node.node) if node.node is not None else None,
        "meta": {
            "caption": _columns_to_list(node.meta.caption),
            "html_attributes": [list(attributes) for attributes in node.meta.html_attributes],
        },
    }


def _serialize_footnote_definition(node: FootnoteDefinition) -> dict[str, Any]:
    return {
        "node_type": "FootnoteDefinition",
        "name": node.name,
        "inline": node.inline,
        "children": _nodes_to_list(node.children),
    }


def _serialize_footnote_link(node: FootnoteLink) -> dict[str, Any]:
    return {
        "node_type": "FootnoteLink",
        "name": node.name,
        "definition": _serialize_footnote_definition(node.definition) if node.definition is not None else None,
    }


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Headline: _serialize_headline,
    Block: _serialize_block,
    List: lambda n: {"node_type": "List", "items": _nodes_to_list(n.items)},
    ListItem: lambda n: {"node_type": "ListItem", "bullet": n.bullet, "children": _nodes_to_list(n.children)},
    Table: _serialize_table,
    TableHeader: _serialize_table_header,
    TableRow: lambda n: {"node_type": "TableRow", "columns": _columns_to_list(n.columns)},
    TableSeparator: lambda n: {"node_type": "TableSeparator", "content": n.content},
    Paragraph: lambda n: {"node_type": "Paragraph", "children": _nodes_to_list(n.children)},
    HorizontalRule: lambda n: {"node_type": "HorizontalRule"},
    Comment: lambda n: {"node_type": "Comment", "content": n.content},
    Keyword: lambda n: {"node_type": "Keyword", "key": n.key, "value": n.value},
    NodeWithMeta: _serialize_node_with_meta,
    FootnoteDefinition: _serialize_footnote_definition,
    Text: lambda n: {"node_type": "Text", "content": n.content},
    Emphasis: lambda n: {"node_type": "Emphasis", "kind": n.kind, "content": _nodes_to_list(n.content)},
    LineBreak: lambda n: {"node_type": "LineBreak", "count": n.count},
    ExplicitLineBreak: lambda n: {"node_type": "ExplicitLineBreak"},
    RegularLink: lambda n: {
        "node_type": "RegularLink",
        "url": n.url,
        "description": _nodes_to_list(n.description),
        "auto_link": n.auto_link,
    },
    FootnoteLink: _serialize_footnote_link,
}


def ast_to_dict(node: Union[Node, Document]) -> dict[str, Any]:
    """Convert an AST node (or Document) to a dictionary.

    Parameters
    ----------
    node : Node or Document
        Node to convert

    Returns
    -------
    dict
        JSON-compatible dictionary representation

    Raises
    ------
    ValueError
        If the value is not one of the known node classes

    """
    if isinstance(node, Document):
        return {
            "node_type": "Document",
            "children": _nodes_to_list(node.children),
            "footnotes": {
                "title": node.footnotes.title,
                "definitions": [_serialize_footnote_definition(d) for d in node.footnotes.definitions],
            },
        }

    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise ValueError(f"Unknown node type: {type(node).__name__}")
    return serializer(node)


def ast_to_json(node: Union[Node, Document], indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node or Document
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ParsingError(f"{data.get('node_type')} node is missing required field '{key}'", parsing_stage="fields")
    return data[key]


def _string(data: dict[str, Any], key: str, default: Optional[str] = None) -> str:
    value = _require(data, key) if default is None else data.get(key, default)
    if value is None and default is not None:
        return default
    if not isinstance(value, str):
        raise ParsingError(
            f"Field '{key}' of {data.get('node_type')} must be a string, got {type(value).__name__}",
            parsing_stage="fields",
        )
    return value


def _strings(data: dict[str, Any], key: str) -> list[str]:
    values = data.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ParsingError(f"Field '{key}' must be a list of strings", parsing_stage="fields")
    return list(values)


def _mapping(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ParsingError(f"Field '{key}' must be an object, got {type(value).__name__}", parsing_stage="fields")
    return value


def _nodes(data: dict[str, Any], key: str) -> list[Node]:
    values = data.get(key) or []
    if not isinstance(values, list):
        raise ParsingError(f"Field '{key}' must be a list, got {type(values).__name__}", parsing_stage="fields")
    return [None if v is None else _node(v) for v in values]  # type: ignore[misc]


def _columns(values: Any) -> list[list[Node]]:
    if not isinstance(values, list):
        raise ParsingError(f"Table columns must be a list, got {type(values).__name__}", parsing_stage="fields")
    return [_nodes({"column": column}, "column") for column in values]


def _node(data: Any) -> Node:
    result = dict_to_ast(data)
    if isinstance(result, Document):
        raise ParsingError("Document may only appear at the root", parsing_stage="structure")
    return result


def _deserialize_headline(data: dict[str, Any]) -> Headline:
    level = _require(data, "level")
    if isinstance(level, bool) or not isinstance(level, int) or level < 1:
        raise ParsingError(f"Headline level must be a positive integer, got {level!r}", parsing_stage="fields")
    return Headline(
        level=level,
        status=_string(data, "status", ""),
        priority=_string(data, "priority", ""),
        title=_nodes(data, "title"),
        tags=_strings(data, "tags"),
        children=_nodes(data, "children"),
    )


def _deserialize_table_header(data: dict[str, Any]) -> TableHeader:
    separator = data.get("separator")
    return TableHeader(
        columns=_columns(data.get("columns") or []),
        separator=_node(separator) if separator is not None else None,  # type: ignore[arg-type]
    )


def _deserialize_table(data: dict[str, Any]) -> Table:
    header = data.get("header")
    return Table(
        header=_node(header) if header is not None else None,  # type: ignore[arg-type]
        rows=_nodes(data, "rows"),
    )


def _deserialize_node_with_meta(data: dict[str, Any]) -> NodeWithMeta:
    meta = _mapping(data, "meta")
    inner = data.get("node")
    return NodeWithMeta(
        node=_node(inner) if inner is not None else None,
        meta=Metadata(
            caption=_columns(meta.get("caption") or []),
            html_attributes=[[str(value) for value in attributes] for attributes in meta.get("html_attributes") or []],
        ),
    )


def _deserialize_footnote_definition(data: dict[str, Any]) -> FootnoteDefinition:
    return FootnoteDefinition(
        name=_string(data, "name"),
        inline=bool(data.get("inline", False)),
        children=_nodes(data, "children"),
    )


def _deserialize_regular_link(data: dict[str, Any]) -> RegularLink:
    return RegularLink(
        url=_string(data, "url"),
        description=_nodes(data, "description") if data.get("description") is not None else None,
        auto_link=bool(data.get("auto_link", False)),
    )


def _deserialize_footnote_link(data: dict[str, Any]) -> FootnoteLink:
    definition = data.get("definition")
    return FootnoteLink(
        name=_string(data, "name"),
        definition=_deserialize_footnote_definition(definition) if definition is not None else None,
    )


def _deserialize_line_break(data: dict[str, Any]) -> LineBreak:
    count = data.get("count", 1)
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ParsingError(f"LineBreak count must be a non-negative integer, got {count!r}", parsing_stage="fields")
    return LineBreak(count=count)


def _deserialize_document(data: dict[str, Any]) -> Document:
    footnotes = _mapping(data, "footnotes")
    definitions = footnotes.get("definitions") or []
    if not isinstance(definitions, list):
        raise ParsingError("Footnote definitions must be a list", parsing_stage="fields")
    return Document(
        children=_nodes(data, "children"),
        footnotes=FootnoteTable(
            title=_string(footnotes, "title", DEFAULT_FOOTNOTES_TITLE),
            definitions=[_deserialize_footnote_definition(d) for d in definitions],
        ),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Union[Node, Document]]] = {
    "Document": _deserialize_document,
    "Headline": _deserialize_headline,
    "Block": lambda d: Block(
        name=_string(d, "name"), parameters=_strings(d, "parameters"), children=_nodes(d, "children")
    ),
    "List": lambda d: List(items=_nodes(d, "items")),
    "ListItem": lambda d: ListItem(bullet=_string(d, "bullet"), children=_nodes(d, "children")),
    "Table": _deserialize_table,
    "TableHeader": _deserialize_table_header,
    "TableRow": lambda d: TableRow(columns=_columns(d.get("columns") or [])),
    "TableSeparator": lambda d: TableSeparator(content=_string(d, "content")),
    "Paragraph": lambda d: Paragraph(children=_nodes(d, "children")),
    "HorizontalRule": lambda d: HorizontalRule(),
    "Comment": lambda d: Comment(content=_string(d, "content")),
    "Keyword": lambda d: Keyword(key=_string(d, "key"), value=_string(d, "value", "")),
    "NodeWithMeta": _deserialize_node_with_meta,
    "FootnoteDefinition": _deserialize_footnote_definition,
    "Text": lambda d: Text(content=_string(d, "content")),
    "Emphasis": lambda d: Emphasis(kind=_string(d, "kind"), content=_nodes(d, "content")),
    "LineBreak": _deserialize_line_break,
    "ExplicitLineBreak": lambda d: ExplicitLineBreak(),
    "RegularLink": _deserialize_regular_link,
    "FootnoteLink": _deserialize_footnote_link,
}


def dict_to_ast(data: dict[str, Any]) -> Union[Node, Document]:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node or document

    Returns
    -------
    Node or Document
        Reconstructed AST value

    Raises
    ------
    ParsingError
        If the value is not an object, has no ``node_type``, names an unknown
        node type, or has a missing or mistyped field

    Examples
    --------
    >>> node = dict_to_ast({"node_type": "Text", "content": "Hello"})
    >>> node.content
    'Hello'

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a JSON object for a node, got {type(data).__name__}", parsing_stage="structure")

    node_type = data.get("node_type")
    if not isinstance(node_type, str) or not node_type:
        raise ParsingError("Dictionary must contain 'node_type' field", parsing_stage="structure")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="structure")

    try:
        return deserializer(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise ParsingError(f"Invalid {node_type} node: {e}", parsing_stage="fields", original_error=e) from e


def json_to_ast(json_str: str) -> Union[Node, Document]:
    """Deserialize a JSON string to an AST node or document.

    A missing ``schema_version`` is treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation

    Returns
    -------
    Node or Document
        Reconstructed AST value

    Raises
    ------
    ParsingError
        If the JSON is malformed, the schema version is unsupported, or the
        tree contains unknown node types

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError(f"Expected a JSON object at the root, got {type(data).__name__}", parsing_stage="json")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version!r}. "
            f"This version of orgwriter supports schema version {SCHEMA_VERSION} only.",
            parsing_stage="schema",
        )

    result = dict_to_ast(data)
    logger.debug("Loaded %s from JSON", type(result).__name__)
    return result


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
