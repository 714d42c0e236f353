#  Copyright (c) 2025 Tom Villani, Ph.D.

# orgwriter/options/org.py
"""Configuration options for Org-Mode rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from orgwriter.constants import DEFAULT_ORG_BASE_INDENT, DEFAULT_ORG_TAGS_COLUMN
from orgwriter.exceptions import ValidationError
from orgwriter.options.base import BaseRendererOptions


@dataclass(frozen=True)
class OrgRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Org rendering.

    Parameters
    ----------
    tags_column : int, default 77
        Column at which trailing headline tags are right-aligned, the same
        convention as Emacs' ``org-tags-column``. When a headline already
        reaches the column its tags follow after a single space.
    base_indent : str, default ""
        Indentation prefix the top-level render starts with. Must consist of
        whitespace only.

    Examples
    --------
        >>> options = OrgRendererOptions(tags_column=60)
        >>> options.create_updated(tags_column=80).tags_column
        80

    """

    tags_column: int = field(
        default=DEFAULT_ORG_TAGS_COLUMN,
        metadata={
            "help": "Column at which trailing headline tags are right-aligned",
            "cli_name": "tags-column",
            "type": int,
            "importance": "core",
        },
    )
    base_indent: str = field(
        default=DEFAULT_ORG_BASE_INDENT,
        metadata={
            "help": "Whitespace prefix applied to the top-level render",
            "cli_name": "indent",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate tag column and base indentation.

        Raises
        ------
        ValidationError
            If ``tags_column`` is not a non-negative integer or
            ``base_indent`` is not a string of spaces and tabs.

        """
        super().__post_init__()
        if isinstance(self.tags_column, bool) or not isinstance(self.tags_column, int):
            raise ValidationError(
                f"tags_column must be an integer, got {type(self.tags_column).__name__}",
                parameter_name="tags_column",
                parameter_value=self.tags_column,
            )
        if self.tags_column < 0:
            raise ValidationError(
                f"tags_column must be non-negative, got {self.tags_column}",
                parameter_name="tags_column",
                parameter_value=self.tags_column,
            )
        if not isinstance(self.base_indent, str):
            raise ValidationError(
                f"base_indent must be a string, got {type(self.base_indent).__name__}",
                parameter_name="base_indent",
                parameter_value=self.base_indent,
            )
        if self.base_indent.strip(" \t"):
            raise ValidationError(
                f"base_indent must contain only spaces and tabs, got {self.base_indent!r}",
                parameter_name="base_indent",
                parameter_value=self.base_indent,
            )
