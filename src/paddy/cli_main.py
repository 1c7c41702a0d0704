from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import PaddyConfig, PaddyConfigError, load_config
from .geom.primitives import Rect, RectParseError, parse_rect
from .label import padding_string_from_label
from .padding.condition import ConditionParser
from .padding.geometry import apply_padding
from .padding.model import FIT_TO_CURRENT_OFFSET, Padding, SideValue


def canonical_json_dumps(data: Any) -> str:
    """Serialize JSON with sorted keys and compact separators."""
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paddy", description="Padding label codec and frame calculator")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file (default: ./paddy.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode = subparsers.add_parser("decode", help="Decode a padding string to JSON")
    decode.add_argument("text", help="Padding string, or a full layer label with --label")
    decode.add_argument("--label", action="store_true", default=False, help="Read padding from a layer label")

    encode = subparsers.add_parser("encode", help="Encode side values as a shorthand padding string")
    encode.add_argument("--top", default="0")
    encode.add_argument("--right", default="0")
    encode.add_argument("--bottom", default="0")
    encode.add_argument("--left", default="0")
    encode.add_argument("--condition", default="", help="Condition expression, e.g. 'w>100;h<=40'")

    apply = subparsers.add_parser("apply", help="Compute the padded frame for a container rectangle")
    apply.add_argument("text", help="Padding string, or a full layer label with --label")
    apply.add_argument("--label", action="store_true", default=False, help="Read padding from a layer label")
    apply.add_argument("--container", required=True, help="Container rectangle as X,Y,W,H")
    apply.add_argument("--frame", default=None, help="Current layer frame as X,Y,W,H")

    subparsers.add_parser("default", help="Print the configured default padding string")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except PaddyConfigError as exc:
        sys.stderr.write(f"Failed to load config: {exc}\n")
        return 1

    if args.command == "decode":
        return cmd_decode(args.text, config=config, from_label=args.label)

    if args.command == "encode":
        return cmd_encode(
            (args.top, args.right, args.bottom, args.left),
            args.condition,
            config=config,
        )

    if args.command == "apply":
        try:
            container = parse_rect(args.container)
            frame = parse_rect(args.frame) if args.frame else None
        except RectParseError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
        return cmd_apply(args.text, container, frame, config=config, from_label=args.label)

    if args.command == "default":
        sys.stdout.write(config.codec().encode(config.default()) + "\n")
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def cmd_decode(text: str, *, config: PaddyConfig, from_label: bool = False) -> int:
    padding = _decode(text, config, from_label)
    payload = padding.to_dict() if padding is not None else None
    sys.stdout.write(canonical_json_dumps(payload) + "\n")
    return 0


def cmd_encode(
    sides: tuple[str, str, str, str],
    condition: str,
    *,
    config: PaddyConfig,
) -> int:
    top, right, bottom, left = (_side_from_arg(side, config) for side in sides)
    conditions = ConditionParser(clause_separator=config.expression_separator).parse(condition)
    padding = Padding(top=top, right=right, bottom=bottom, left=left, conditions=conditions)
    sys.stdout.write(config.codec().encode(padding) + "\n")
    return 0


def cmd_apply(
    text: str,
    container: Rect,
    frame: Rect | None,
    *,
    config: PaddyConfig,
    from_label: bool = False,
) -> int:
    padding = _decode(text, config, from_label)
    if padding is None:
        # No padding configured: the container rectangle is returned as-is.
        padding = Padding()
    result = apply_padding(padding, container, frame)
    sys.stdout.write(canonical_json_dumps(result.to_dict()) + "\n")
    return 0


def _decode(text: str, config: PaddyConfig, from_label: bool) -> Padding | None:
    raw = padding_string_from_label(text) if from_label else text
    return config.codec().decode(raw)


def _side_from_arg(value: str, config: PaddyConfig) -> SideValue:
    if value == config.fit_token:
        return FIT_TO_CURRENT_OFFSET
    return value


if __name__ == "__main__":
    raise SystemExit(main())
