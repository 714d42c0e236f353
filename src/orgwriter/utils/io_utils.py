#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwriter/utils/io_utils.py
"""I/O utilities for writing rendered text to its destination."""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from orgwriter.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    """Guess whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(content: str, output: OutputTarget, encoding: str = "utf-8") -> None:
    """Write rendered text to a path or a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Destination. Paths are written with ``encoding``; binary streams
        receive encoded bytes; text streams receive the string unchanged.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    OutputWriteError
        If a file path cannot be written
    TypeError
        If ``output`` is neither a path nor a writable object

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("* Title\\n", buffer)
        >>> buffer.getvalue()
        b'* Title\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding=encoding)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode(encoding))
    else:
        cast(IO[str], output).write(content)


__all__ = ["OutputTarget", "write_text"]
