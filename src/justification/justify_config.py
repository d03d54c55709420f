# This file defines runtime configuration for the text justification transform.
# It exists so the API and the CLI agree on line width and paragraph joining.
# The loader merges YAML defaults with environment overrides and validates both settings.
# Keeping the policy here lets operators switch paragraph separators without code edits.

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.justification.justifier import BLANK_LINE_SEPARATOR, LINE_WIDTH, NEWLINE_SEPARATOR

DEFAULT_CONFIG_PATH = "configs/justify.yaml"

PARAGRAPH_SEPARATORS: dict[str, str] = {
    "blank_line": BLANK_LINE_SEPARATOR,
    "newline": NEWLINE_SEPARATOR,
}


def _load_yaml(path: str) -> dict[str, Any]:
    if not Path(path).exists():
        return {}
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


@dataclass(frozen=True)
class JustifyConfig:
    line_width: int = LINE_WIDTH
    paragraph_separator: str = "blank_line"

    def __post_init__(self) -> None:
        if self.line_width <= 0:
            raise ValueError(f"line_width must be > 0, got {self.line_width}")
        if self.paragraph_separator not in PARAGRAPH_SEPARATORS:
            raise ValueError(
                f"paragraph_separator must be one of {sorted(PARAGRAPH_SEPARATORS)}, "
                f"got {self.paragraph_separator!r}"
            )

    def separator_text(self) -> str:
        return PARAGRAPH_SEPARATORS[self.paragraph_separator]

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_width": self.line_width,
            "paragraph_separator": self.paragraph_separator,
        }


def load_justify_config(*, config_path: str = DEFAULT_CONFIG_PATH) -> JustifyConfig:
    cfg = _load_yaml(config_path)

    line_width = _env_int("JUSTIFY_LINE_WIDTH", int(cfg.get("line_width", LINE_WIDTH)))
    paragraph_separator = str(
        _env_str("JUSTIFY_PARAGRAPH_SEPARATOR", str(cfg.get("paragraph_separator", "blank_line")))
    )

    return JustifyConfig(line_width=line_width, paragraph_separator=paragraph_separator)
