"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orgwriter/cli/output.py
import argparse
import sys
from typing import TextIO


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set, the output goes to a TTY (or
    ``--force-rich`` is set), and Rich is installed.

    """
    if not getattr(args, "rich", False) or not check_rich_available():
        return False

    if getattr(args, "force_rich", False):
        return True

    isatty = getattr(stream or sys.stdout, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rendered(text: str, title: str, use_rich: bool, stream: TextIO | None = None) -> None:
    """Print rendered Org text, framed in a Rich panel when requested.

    Parameters
    ----------
    text : str
        Rendered Org source
    title : str
        Panel title, usually the input name
    use_rich : bool
        Whether to use Rich
    stream : TextIO, optional
        Destination; defaults to stdout

    """
    target = stream or sys.stdout
    if not use_rich:
        target.write(text)
        return

    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(file=target)
    console.print(Panel(Text(text.rstrip("\n")), title=title, title_align="left", expand=False))


def print_error(message: str, use_rich: bool) -> None:
    """Print an error message to stderr, styled when Rich is in use."""
    if not use_rich:
        print(f"Error: {message}", file=sys.stderr)
        return

    from rich.console import Console
    from rich.text import Text

    Console(stderr=True).print(Text(f"Error: {message}", style="bold red"))
