#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for orgwriter renderers.

Options are frozen dataclasses; use ``create_updated()`` to derive a
modified copy.
"""

from __future__ import annotations

from orgwriter.options.base import BaseRendererOptions, CloneFrozenMixin
from orgwriter.options.org import OrgRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "OrgRendererOptions"]
