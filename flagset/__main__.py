"""
Flagset CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from flagset.config import loader
from flagset.console import console
from flagset.parser import FlagParser
from flagset.status import ParseStatus
from flagset.utils import setup_logging


def find_flagset_config() -> Path | None:
    candidates = [Path.cwd() / "flagset.yaml", Path.cwd() / "flagset.toml"]
    env_config = os.environ.get("FLAGSET_CONFIG")
    if env_config:
        candidates.append(Path(env_config))
    return next((p for p in candidates if p.is_file()), None)


def demo_parser() -> FlagParser:
    """Build the demo flag set with one flag of every kind."""
    parser = FlagParser("description:")
    parser.add_bool("help", short="h", help="print usage info")
    parser.add_int("some_int", short="i", help="int value", required=True)
    parser.add_long("some_long", help="long value")
    parser.add_long_long("some_ll", help="ll value")
    parser.add_double("some_double", help="double value")
    parser.add_str("some_str", help="string value")

    parser.add_bool("some_bool_d", help="bool value with default", default=True)
    parser.add_int("some_int_d", help="int value with default", default=8000)
    parser.add_long("some_long_d", help="long value with default", default=8)
    parser.add_long_long("some_ll_d", help="ll value with default", default=10)
    parser.add_double("some_double_d", help="double value with default", default=0.1)
    parser.add_str("some_str_d", help="string value with default", default="default")
    return parser


def get_parser() -> FlagParser:
    config_path = find_flagset_config()
    if config_path:
        return loader(config_path)
    return demo_parser()


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    if argv is None:
        argv = sys.argv
    parser = get_parser()

    errors: list[str] = []
    status, _ = parser.parse_status(argv, error_sink=errors)

    help_flag = parser.get_flag("help")
    if help_flag and help_flag.is_bool and parser.first("help", bool):
        parser.render_help()
        return 1

    if status != ParseStatus.OK:
        console.print(f"[error]fail parsing args:[/error] {escape(errors[0])}")
        return 1

    if parser.get_flag("some_double_d"):
        console.print(parser.first("some-double-d", float))
    return 0


if __name__ == "__main__":
    sys.exit(main())
