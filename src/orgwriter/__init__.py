#  Copyright (c) 2025 Tom Villani, Ph.D.
"""orgwriter - render Org document trees back to canonical Org source.

The package consumes the AST produced by an Org parser and writes the text
that parser would read back into the same tree. It is used as a
pretty-printer and as the write side of parse/render round-trip checks.

Examples
--------
    >>> from orgwriter import render_org
    >>> from orgwriter.ast import Document, Headline, Paragraph, Text
    >>> doc = Document(children=[
    ...     Headline(level=1, title=[Text(content="Notes")], children=[
    ...         Paragraph(children=[Text(content="Hello")]),
    ...     ]),
    ... ])
    >>> print(render_org(doc), end="")
    * Notes
    Hello

"""

from __future__ import annotations

from typing import Any

from orgwriter.ast.nodes import Document
from orgwriter.exceptions import (
    InvalidOptionsError,
    OrgWriterError,
    ParsingError,
    RenderingError,
    UnknownEmphasisError,
    UnknownNodeError,
    ValidationError,
)
from orgwriter.options.org import OrgRendererOptions
from orgwriter.renderers.org import OrgRenderer

__version__ = "0.1.0"


def render_org(doc: Document, options: OrgRendererOptions | None = None, **kwargs: Any) -> str:
    """Render a document to Org source text.

    Parameters
    ----------
    doc : Document
        Document to render
    options : OrgRendererOptions or None, default = None
        Rendering options; defaults are used when omitted
    **kwargs : Any
        Option overrides applied on top of ``options`` (e.g. ``tags_column=60``)

    Returns
    -------
    str
        Org source text

    Raises
    ------
    ValidationError
        If an option override is invalid
    RenderingError
        If the tree violates the renderer's input contract

    """
    options = options or OrgRendererOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return OrgRenderer(options).render_to_string(doc)


__all__ = [
    "__version__",
    "render_org",
    "Document",
    "OrgRenderer",
    "OrgRendererOptions",
    "OrgWriterError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnknownNodeError",
    "UnknownEmphasisError",
]
