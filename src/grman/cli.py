"""CLI argument parsing and page output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from .constants import (
    ARG_GRAMMAR,
    ARG_HELP_LONG,
    ARG_HELP_SHORT,
    ARG_LIST,
    ARG_LOG,
    CLI_HELP_HINT,
    CLI_USAGE,
    STDERR_ERROR_PREFIX,
)
from .errors import GrmanError, StartupValidationError
from .logging import log_event, setup_logging
from .lookup import list_command_names, render_command_page
from .pages import render_program_page
from .store import load_grammar


@dataclass
class AppArgs:
    grammar_path: Path
    log_path: Path | None = None
    command: str | None = None
    list_commands: bool = False


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Parse CLI arguments. Returns None if --help was requested.

    Raises StartupValidationError when the grammar file does not exist.
    """
    args = argv if argv is not None else sys.argv[1:]

    if ARG_HELP_LONG in args or ARG_HELP_SHORT in args:
        print(CLI_USAGE, end="")
        return None

    grammar_raw: str | None = None
    log_raw: str | None = None
    command: str | None = None
    list_commands = False

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in (ARG_GRAMMAR, ARG_LOG):
            if i + 1 >= len(args):
                _die(f"{arg} requires a path argument.")
            if arg == ARG_GRAMMAR:
                grammar_raw = args[i + 1]
            else:
                log_raw = args[i + 1]
            i += 2
        elif arg == ARG_LIST:
            list_commands = True
            i += 1
        elif arg.startswith("-"):
            _die(f"Unknown argument: {arg}")
        elif command is None:
            command = arg
            i += 1
        else:
            _die(f"Unexpected argument: {arg}")

    if grammar_raw is None:
        _die(f"{ARG_GRAMMAR} is required.")

    return AppArgs(
        grammar_path=_resolve_grammar_path(grammar_raw),
        log_path=Path(log_raw).expanduser() if log_raw is not None else None,
        command=command,
        list_commands=list_commands,
    )


def main() -> None:
    """Application entry point."""
    try:
        app_args = parse_args()
    except StartupValidationError as exc:
        _die(str(exc))
    if app_args is None:
        sys.exit(0)

    setup_logging(str(app_args.log_path) if app_args.log_path is not None else None)

    try:
        dump = load_grammar(app_args.grammar_path)
        log_event(
            "grammar_loaded",
            grammar_file=app_args.grammar_path,
            options=len(dump.options.children),
            commands=len(dump.commands.children),
        )

        if app_args.list_commands:
            output = "".join(f"{name}\n" for name in list_command_names(dump.commands))
        elif app_args.command is None:
            output = render_program_page(dump.options, dump.settings)
            log_event(
                "page_rendered", page=dump.settings.program, kind="program", chars=len(output)
            )
        else:
            output = render_command_page(dump.commands, app_args.command, dump.settings)
    except GrmanError as exc:
        print(f"{STDERR_ERROR_PREFIX}{exc}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(output)


def _resolve_grammar_path(raw: str) -> Path:
    path = Path(raw).expanduser()
    if not path.is_file():
        raise StartupValidationError(f"{ARG_GRAMMAR} file not found: {path}")
    return path


def _die(message: str) -> NoReturn:
    print(f"{STDERR_ERROR_PREFIX}{message}", file=sys.stderr)
    print(CLI_HELP_HINT, file=sys.stderr)
    sys.exit(1)
