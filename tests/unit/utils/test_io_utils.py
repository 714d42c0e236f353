"""Unit tests for writing rendered output."""

from io import BytesIO, StringIO

import pytest

from orgwriter.exceptions import OutputWriteError, RenderingError
from orgwriter.utils.io_utils import write_text


@pytest.mark.unit
class TestWriteText:
    """Tests for write_text destinations."""

    def test_write_to_str_path(self, tmp_path) -> None:
        target = tmp_path / "a.org"
        write_text("* A\n", str(target))
        assert target.read_text(encoding="utf-8") == "* A\n"

    def test_write_to_path_overwrites(self, tmp_path) -> None:
        target = tmp_path / "a.org"
        target.write_text("old", encoding="utf-8")
        write_text("new", target)
        assert target.read_text(encoding="utf-8") == "new"

    def test_text_stream(self) -> None:
        buffer = StringIO()
        write_text("ü", buffer)
        assert buffer.getvalue() == "ü"

    def test_binary_stream_encoded(self) -> None:
        buffer = BytesIO()
        write_text("ü", buffer, encoding="latin-1")
        assert buffer.getvalue() == b"\xfc"

    def test_binary_file_object(self, tmp_path) -> None:
        target = tmp_path / "b.org"
        with open(target, "wb") as f:
            write_text("x\n", f)
        assert target.read_bytes() == b"x\n"

    def test_unwritable_path(self, tmp_path) -> None:
        target = tmp_path / "missing" / "a.org"
        with pytest.raises(OutputWriteError) as exc_info:
            write_text("x", target)
        assert isinstance(exc_info.value, RenderingError)
        assert isinstance(exc_info.value.original_error, OSError)

    def test_unsupported_target(self) -> None:
        with pytest.raises(TypeError):
            write_text("x", 42)  # type: ignore[arg-type]
