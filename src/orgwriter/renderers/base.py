#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from. The
BaseRenderer provides a consistent interface for turning a ``Document``
into text and writing it to a path or stream.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from orgwriter.ast.nodes import Document
from orgwriter.exceptions import InvalidOptionsError
from orgwriter.options.base import BaseRendererOptions
from orgwriter.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class MyRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If the tree violates the renderer's input contract

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document to render
        output : str, Path, IO[bytes], or IO[str]
            File path or file-like object

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If a file path cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        write_text(text, output)
