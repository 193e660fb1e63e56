#!/usr/bin/env python
"""kblo command line: open the shell, or run commands from -c or a script file and exit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from repl.shell import DEFAULT_CONFIG_PATH, KbloShell, _configure_readline


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kblo",
        description="Inspect keyboard hardware: the hand and finger for each key, its physical position and its switch-matrix position.",
        epilog="Examples: `kblo.py -c 'show split_ortho both'`, `kblo.py --hardware ortho_thumb -c keys`.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("script_file", nargs="?", type=Path, help="file of kblo commands, one per line")
    source.add_argument("-c", "--command", action="append", default=[], help="command to run, repeatable")
    parser.add_argument("--hardware", help="keyboard to start on, overrides `hardware` in the config file")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="settings file (default: %(default)s)")
    parser.add_argument("--no-history", action="store_true", help="do not read or write ~/.kblo_history")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        script = args.script_file.read_text(encoding="utf-8") if args.script_file else "\n".join(args.command)
        shell = KbloShell(config_path=args.config, hardware=args.hardware)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if script:
        shell.script(script)
        return 0

    if not args.no_history:
        _configure_readline()
    try:
        shell.cmdloop()
    except KeyboardInterrupt:
        shell._info("\nInterrupted. Bye bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
