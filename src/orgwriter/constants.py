#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/constants.py
"""Default values and fixed lookup sets used across orgwriter."""

from __future__ import annotations

# Column at which trailing headline tags are right-aligned (org-tags-column)
DEFAULT_ORG_TAGS_COLUMN = 77

# Indentation prefix the top-level render starts with
DEFAULT_ORG_BASE_INDENT = ""

# Caption of the level-1 headline that introduces the footnote section
DEFAULT_FOOTNOTES_TITLE = "Footnotes"

# Blocks whose content is kept verbatim instead of being re-dispatched as nodes
RAW_TEXT_BLOCK_NAMES: frozenset[str] = frozenset({"SRC", "EXAMPLE", "EXPORT"})

# Environment variable holding an explicit config file path
CONFIG_ENV_VAR = "ORGWRITER_CONFIG"

# Prefix for environment variables that supply CLI defaults
ENV_VAR_PREFIX = "ORGWRITER_"

CONFIG_FILENAMES = [".orgwriter.toml", ".orgwriter.yaml", ".orgwriter.yml", ".orgwriter.json"]
