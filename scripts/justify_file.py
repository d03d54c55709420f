#!/usr/bin/env python3
"""
Justify a text file (or stdin) to a fixed column width and print the result.
It runs the same transform as the API without tokens or quotas, for offline use.
Width and paragraph separator default to `configs/justify.yaml` plus environment overrides.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.justification.justifier import justify_text
from src.justification.justify_config import (
    DEFAULT_CONFIG_PATH,
    PARAGRAPH_SEPARATORS,
    JustifyConfig,
    load_justify_config,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fully justify plain text to a fixed width")
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Input file path; '-' or omitted reads stdin",
    )
    parser.add_argument("--width", type=int, default=None, help="Target line width")
    parser.add_argument(
        "--separator",
        choices=sorted(PARAGRAPH_SEPARATORS),
        default=None,
        help="How paragraphs are joined in the output",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Justification YAML config")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> JustifyConfig:
    base = load_justify_config(config_path=args.config)
    return JustifyConfig(
        line_width=args.width if args.width is not None else base.line_width,
        paragraph_separator=args.separator or base.paragraph_separator,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    if args.path == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.path).read_text(encoding="utf-8")

    justified = justify_text(
        text,
        width=config.line_width,
        paragraph_separator=config.separator_text(),
    )
    if justified:
        print(justified)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
