from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from . import __version__
from .logs import configure_logging
from .settings import (
    SettingsDeserializationError,
    ValidationResponse,
    dump_settings,
    load_settings_file,
    read_settings_file,
    validate_raw_settings,
)

logger = logging.getLogger(__name__)


def _write_output(payload: Dict[str, Any], *, out_path: str | None) -> None:
    text = json.dumps(payload, indent=2)
    if out_path:
        Path(out_path).write_text(text, encoding="utf-8")
    else:
        print(text)


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        raw = read_settings_file(args.path)
    except SettingsDeserializationError as e:
        response = ValidationResponse(valid=False, message=str(e))
    else:
        response = validate_raw_settings(raw, logger)

    _write_output(response.to_dict(), out_path=args.out)
    return 0 if response.valid else 2


def cmd_show(args: argparse.Namespace) -> int:
    try:
        settings = load_settings_file(args.path)
    except SettingsDeserializationError as e:
        print(f"Invalid settings file: {e}", file=sys.stderr)
        return 2

    _write_output(dump_settings(settings), out_path=args.out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imagesig",
        description="Container image signature policy settings tool.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (default: $LOG_LEVEL or INFO).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    v = sub.add_parser("validate", help="Validate a settings file the way the policy host does.")
    v.add_argument("path", help="Path to settings YAML/JSON file.")
    v.add_argument("--out", default=None, help="Write output to a file instead of stdout.")
    v.set_defaults(func=cmd_validate)

    s = sub.add_parser("show", help="Print the normalized settings as JSON.")
    s.add_argument("path", help="Path to settings YAML/JSON file.")
    s.add_argument("--out", default=None, help="Write output to a file instead of stdout.")
    s.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
