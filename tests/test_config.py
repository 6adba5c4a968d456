from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from webwriter import WriterConfigError, WriterOptions, load_writer_options


def test_defaults() -> None:
    options = WriterOptions()
    assert options.indent_width == 4
    assert options.indent_unit == "    "
    assert options.encoding == "utf-8"
    assert options.newline is None


def test_alias_and_field_name_are_accepted() -> None:
    assert WriterOptions.model_validate({"indentWidth": 2}).indent_width == 2
    assert WriterOptions.model_validate({"indent_width": 3}).indent_width == 3


@pytest.mark.parametrize("payload", [{"indentWidth": -1}, {"newline": "x"}, {"colour": "red"}])
def test_invalid_options_are_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        WriterOptions.model_validate(payload)


def test_load_writer_options_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "writer.yaml"
    path.write_text(
        yaml.safe_dump({"indentWidth": 2, "encoding": "latin-1", "newline": "\r\n"}),
        encoding="utf-8",
    )
    options = load_writer_options(path)
    assert options.indent_unit == "  "
    assert options.encoding == "latin-1"
    assert options.newline == "\r\n"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "writer.yaml"
    path.write_text("", encoding="utf-8")
    assert load_writer_options(path) == WriterOptions()


@pytest.mark.parametrize(
    "content",
    ["- indentWidth\n", "indentWidth: [1\n", "indentWidth: wide\n", "tabs: true\n"],
)
def test_bad_option_files_raise_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "writer.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(WriterConfigError):
        load_writer_options(path)
