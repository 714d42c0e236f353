#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn an AST Document into output text."""

from orgwriter.renderers.base import BaseRenderer
from orgwriter.renderers.org import EMPHASIS_ORG_BORDERS, OrgRenderer

__all__ = ["BaseRenderer", "EMPHASIS_ORG_BORDERS", "OrgRenderer"]
