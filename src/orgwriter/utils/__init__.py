"""Utility helpers shared by orgwriter renderers and the CLI."""

from orgwriter.utils.io_utils import OutputTarget, write_text

__all__ = ["OutputTarget", "write_text"]
