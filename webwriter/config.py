"""Writer options and their YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import WriterConfigError


class WriterOptions(BaseModel):
    """Formatting and encoding settings for a DocumentWriter."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    indent_width: int = Field(
        4,
        ge=0,
        alias="indentWidth",
        description="Number of spaces written per nesting level.",
    )
    encoding: str = Field(
        "utf-8", description="Encoding used for text layers the writer creates."
    )
    errors: str = Field(
        "strict", description="Encoding error handler for internal text layers."
    )
    newline: Optional[Literal["", "\n", "\r\n", "\r"]] = Field(
        None,
        description=(
            "Newline translation for internal text layers; None uses the "
            "platform line terminator."
        ),
    )

    @property
    def indent_unit(self) -> str:
        return " " * self.indent_width


DEFAULT_OPTIONS = WriterOptions()


def load_writer_options(path: Union[str, Path]) -> WriterOptions:
    """Read WriterOptions from a YAML mapping; an empty file gives the defaults."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise WriterConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise WriterConfigError(f"{path} must contain a mapping of writer options.")
    try:
        return WriterOptions.model_validate(data)
    except ValidationError as exc:
        raise WriterConfigError(f"Invalid writer options in {path}: {exc}") from exc


__all__ = ["DEFAULT_OPTIONS", "WriterOptions", "load_writer_options"]
