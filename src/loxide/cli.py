"""Command-line interface for loxide: interactive prompt or script runner."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxide import interpret
from loxide.reporter import ErrorReporter
from loxide.values import stringify

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

USAGE = "Usage: loxide [script]"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    prompt: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxide",
        description="Lox expression interpreter",
        usage="loxide [--debug] [--config FILE] [script]",
    )
    p.add_argument("scripts", nargs="*", metavar="script", help="Lox source file to run")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxide.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens and AST to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "loxide.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, cwd: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, cwd if cwd is not None else Path("."))

    prompt = "> "
    cfg_prompt = config.get("prompt")
    if isinstance(cfg_prompt, str):
        prompt = cfg_prompt

    debug = False
    cfg_debug = config.get("debug")
    if isinstance(cfg_debug, bool):
        debug = cfg_debug
    if args.debug:
        debug = True

    script = Path(args.scripts[0]) if args.scripts else None
    return CliOptions(script=script, prompt=prompt, debug=debug)


def run_source(
    source: str,
    reporter: ErrorReporter,
    options: CliOptions,
    out: TextIO | None = None,
) -> None:
    """Run one unit of input and print its value if evaluation succeeded."""
    out = out if out is not None else sys.stdout
    trace = sys.stderr if options.debug else None
    value = interpret(source, reporter, trace=trace)
    if value is not None:
        print(stringify(value), file=out)


def run_file(options: CliOptions) -> int:
    """Run a whole script as a single unit. Returns an exit code."""
    assert options.script is not None
    try:
        source = options.script.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EX_NOINPUT

    reporter = ErrorReporter()
    run_source(source, reporter, options)
    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0


def run_prompt(options: CliOptions, stdin: TextIO | None = None) -> int:
    """Read-eval-print loop until end of input or the line ``exit``."""
    stdin = stdin if stdin is not None else sys.stdin
    reporter = ErrorReporter()
    while True:
        sys.stdout.write(options.prompt)
        sys.stdout.flush()
        raw = stdin.readline()
        if not raw:
            break
        line = raw.strip()
        if line == "exit":
            break
        if not line:
            continue
        run_source(line, reporter, options)
        reporter.reset()
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code. Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.scripts) > 1:
        print(USAGE)
        return EX_USAGE

    options = resolve_options(args)

    if options.script is not None:
        return run_file(options)

    try:
        return run_prompt(options)
    except KeyboardInterrupt:
        return 0
