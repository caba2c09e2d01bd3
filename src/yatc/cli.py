"""Command-line interface for yatc."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from yatc.errors import LexError, ParseError
from yatc.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

CONFIG_NAME = "yatc.toml"


class ConfigError(Exception):
    """Raised when a config file cannot be read or decoded."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    command: str | None
    show_tokens: bool
    max_depth: int | None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="yatc",
        description="Lex and syntax-check a yatc expression",
    )
    p.add_argument("input", nargs="?", help="Input file ('-' for stdin)")
    p.add_argument("-c", "--command", metavar="SOURCE", help="Check SOURCE instead of a file")
    p.add_argument("--tokens", action="store_true", default=None, help="Print the token stream")
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help=f"Parenthesis nesting limit, 0 disables (default: {DEFAULT_MAX_DEPTH})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        if config_path is not None:
            raise ConfigError(f"config file not found: {path}")
        return {}

    logger.debug("loading config from %s", path)
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc


def _depth_limit(value: int) -> int | None:
    return value if value > 0 else None


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.command is not None and args.input is not None:
        raise argparse.ArgumentTypeError("give either an input file or -c SOURCE, not both")
    if args.command is None and args.input is None:
        raise argparse.ArgumentTypeError("no input: give a file, '-' or -c SOURCE")

    input_file = None
    input_dir = Path(".")
    if args.input is not None and args.input != "-":
        input_file = Path(args.input)
        if input_file.parent.parts:
            input_dir = input_file.parent

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Token dump: config < CLI
    show_tokens = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_tokens = cfg_output.get("tokens")
        if isinstance(cfg_tokens, bool):
            show_tokens = cfg_tokens
    if args.tokens is not None:
        show_tokens = args.tokens

    # Nesting limit: config < CLI
    max_depth: int | None = DEFAULT_MAX_DEPTH
    cfg_parser = config.get("parser")
    if isinstance(cfg_parser, dict):
        cfg_depth = cfg_parser.get("max_depth")
        if isinstance(cfg_depth, int) and not isinstance(cfg_depth, bool):
            max_depth = _depth_limit(cfg_depth)
    if args.max_depth is not None:
        max_depth = _depth_limit(args.max_depth)

    return CliOptions(
        input_file=input_file,
        command=args.command,
        show_tokens=show_tokens,
        max_depth=max_depth,
    )


def read_source(options: CliOptions) -> tuple[str, str]:
    """Return (source, display name) for the configured input."""
    if options.command is not None:
        return options.command, "<command>"
    if options.input_file is None:
        return sys.stdin.read(), "<stdin>"
    return options.input_file.read_text(encoding="utf-8"), str(options.input_file)


def check_source(options: CliOptions, source: str) -> None:
    """Tokenize and parse source, dumping tokens first if requested."""
    from yatc.debug import dump_tokens
    from yatc.lexer import tokenize
    from yatc.parser import parse

    tokens = tokenize(source)
    logger.debug("lexed %d tokens", len(tokens))

    if options.show_tokens:
        dump_tokens(tokens, file=sys.stdout)

    parse(tokens, source, max_depth=options.max_depth)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source, name = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    try:
        check_source(options, source)
    except (LexError, ParseError) as exc:
        print(exc.format(name), file=sys.stderr)
        return 1

    print("ok")
    return 0
