#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/options/test_org_options.py
"""Unit tests for OrgRendererOptions."""

import dataclasses
import logging

import pytest

from orgwriter.exceptions import ValidationError
from orgwriter.options import OrgRendererOptions


@pytest.mark.unit
class TestOrgRendererOptions:
    """Tests for option defaults and validation."""

    def test_defaults(self) -> None:
        options = OrgRendererOptions()
        assert options.tags_column == 77
        assert options.base_indent == ""

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            OrgRendererOptions().tags_column = 10  # type: ignore[misc]

    def test_create_updated_returns_copy(self) -> None:
        options = OrgRendererOptions()
        updated = options.create_updated(tags_column=60, base_indent="\t")
        assert (updated.tags_column, updated.base_indent) == (60, "\t")
        assert options.tags_column == 77

    def test_create_updated_validates(self) -> None:
        with pytest.raises(ValidationError):
            OrgRendererOptions().create_updated(tags_column=-1)

    def test_zero_column_allowed(self) -> None:
        assert OrgRendererOptions(tags_column=0).tags_column == 0

    @pytest.mark.parametrize("value", [-1, "77", 7.5, True])
    def test_bad_tags_column(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            OrgRendererOptions(tags_column=value)
        assert exc_info.value.parameter_name == "tags_column"
        assert exc_info.value.parameter_value == value

    @pytest.mark.parametrize("value", ["  ", "\t", " \t "])
    def test_whitespace_indent_allowed(self, value) -> None:
        assert OrgRendererOptions(base_indent=value).base_indent == value

    @pytest.mark.parametrize("value", ["> ", "x", " \n"])
    def test_non_whitespace_indent_rejected(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            OrgRendererOptions(base_indent=value)
        assert exc_info.value.parameter_name == "base_indent"

    @pytest.mark.parametrize("value", [4, None, [" "]])
    def test_non_string_indent_rejected(self, value) -> None:
        with pytest.raises(ValidationError, match="must be a string") as exc_info:
            OrgRendererOptions(base_indent=value)  # type: ignore[arg-type]
        assert exc_info.value.parameter_value == value

    def test_field_metadata(self) -> None:
        metadata = {f.name: f.metadata for f in dataclasses.fields(OrgRendererOptions)}
        assert metadata["tags_column"]["cli_name"] == "tags-column"
        assert metadata["base_indent"]["cli_name"] == "indent"
        assert all("help" in m for m in metadata.values())


@pytest.mark.unit
class TestFromMapping:
    """Tests for building options from configuration mappings."""

    def test_underscore_keys(self) -> None:
        options = OrgRendererOptions.from_mapping({"tags_column": 60, "base_indent": "  "})
        assert (options.tags_column, options.base_indent) == (60, "  ")

    def test_dashed_and_cli_name_keys(self) -> None:
        options = OrgRendererOptions.from_mapping({"tags-column": 50, "indent": " "})
        assert (options.tags_column, options.base_indent) == (50, " ")

    def test_unknown_keys_ignored_with_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="orgwriter.options.base"):
            options = OrgRendererOptions.from_mapping({"tags_column": 40, "colour": "red"})
        assert options.tags_column == 40
        assert "colour" in caplog.text

    def test_empty_mapping_gives_defaults(self) -> None:
        assert OrgRendererOptions.from_mapping({}) == OrgRendererOptions()

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ValidationError):
            OrgRendererOptions.from_mapping({"tags_column": "wide"})
