"""Tests for YAML option loading."""

from pathlib import Path

import pytest

from asciigrid import ConfigError, InvalidInputError, LayoutOptions
from asciigrid.config import load_options, merge_options


class TestLoadOptions:
    """Tests for load_options."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "options.yaml"
        path.write_text("style: rounded\nmaxColumnWidth: 30\nwrap_words: true\n")
        assert load_options(str(path)) == LayoutOptions(
            style="rounded", max_column_width=30, wrap_words=True
        )

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_options(str(path)) == LayoutOptions()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot load options"):
            load_options(str(tmp_path / "missing.yaml"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- simple\n- double\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_options(str(path))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("style: [unterminated\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_options(str(path))

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("max_column_width: -5\n")
        with pytest.raises(InvalidInputError):
            load_options(str(path))


class TestMergeOptions:
    """Tests for merge_options."""

    def test_none_overrides_are_ignored(self) -> None:
        base = LayoutOptions(style="double", max_column_width=10)
        assert merge_options(base, style=None, max_column_width=None) == base

    def test_overrides_apply(self) -> None:
        base = LayoutOptions(style="double", show_borders=True)
        merged = merge_options(base, show_borders=False, wrap_words=True)
        assert merged == LayoutOptions(style="double", show_borders=False, wrap_words=True)

    def test_default_base(self) -> None:
        assert merge_options(style="rounded") == LayoutOptions(style="rounded")

    def test_overrides_are_validated(self) -> None:
        with pytest.raises(InvalidInputError):
            merge_options(max_column_width=0)
