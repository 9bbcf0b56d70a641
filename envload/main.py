"""Command line interface for envload."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys

from envload.application.loader import Loader
from envload.config import Config, require_log_level
from envload.domain.models import LoadFlags
from envload.env import get_with_default
from envload.infrastructure.environments import MemoryEnvironment, OsEnvironment
from envload.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    try:
        return require_log_level(value, "WARNING")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="envload", description="Load NAME=value files into the environment"
    )
    parser.add_argument("--config", default=None, help="Path to envload YAML config")
    parser.add_argument(
        "--log-level",
        default=None,
        type=_log_level,
        help="Python logging level (e.g. DEBUG, WARNING). Overrides the config.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_load_options(p: argparse.ArgumentParser) -> None:
        p.add_argument("--file", default=None, help="File to load (default: .env)")
        p.add_argument(
            "--preserve",
            action="store_true",
            default=None,
            help="Keep names that already exist in the environment",
        )

    load_p = sub.add_parser("load", help="Show the values a file would set")
    add_load_options(load_p)
    load_p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 1 if any line was skipped",
    )

    get_p = sub.add_parser("get", help="Print one variable after loading")
    add_load_options(get_p)
    get_p.add_argument("name")
    get_p.add_argument("--default", default="", help="Printed when NAME is unset")

    run_p = sub.add_parser("run", help="Load the file, then run a command")
    add_load_options(run_p)
    run_p.add_argument("cmd", nargs=argparse.REMAINDER, help="Command to run")

    args = parser.parse_args(argv)
    if args.command == "run":
        if args.cmd and args.cmd[0] == "--":
            args.cmd = args.cmd[1:]
        if not args.cmd:
            parser.error("run requires a command")
    return args


def _flags(preserve: bool) -> LoadFlags:
    return LoadFlags.PRESERVE if preserve else LoadFlags.NONE


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = Config.load(args.config)
    setup_logging(args.log_level or config.log_level)

    env_file = args.file or config.env_file
    preserve = config.preserve if args.preserve is None else args.preserve
    flags = _flags(preserve)

    if args.command == "load":
        # evaluate against a copy so nothing leaks into this process
        env = MemoryEnvironment(dict(os.environ))
        report = Loader(env).load_file(env_file, flags)
        for name in dict.fromkeys(report.applied):
            print(f"{name}={env.lookup(name)}")
        strict = config.strict if args.strict is None else args.strict
        return 1 if strict and not report.ok else 0

    os_env = OsEnvironment()
    Loader(os_env).load_file(env_file, flags)

    if args.command == "get":
        print(get_with_default(args.name, args.default, os_env))
        return 0

    logger.debug("Running %s", args.cmd)
    try:
        return subprocess.run(args.cmd, check=False).returncode
    except FileNotFoundError:
        print(f"envload: command not found: {args.cmd[0]}", file=sys.stderr)
        return 127


if __name__ == "__main__":
    sys.exit(main())
