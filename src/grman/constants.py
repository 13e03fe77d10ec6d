"""Centralized constants for grman."""

from __future__ import annotations

APP_NAME = "grman"

# Grammar identifiers
NO_ID = "no-id"

# Page defaults
DEFAULT_PROGRAM = "grcli"
DEFAULT_PROJECT = "grout"
DEFAULT_SOCK_PATH = "/run/grout.sock"
DEFAULT_BUG_TRACKER = "https://github.com/DPDK/grout/issues"
MAN_SECTION = 1
PROJECT_MAN_SECTION = 8
PROGRAM_TAGLINE = "{project} command line interface"

# Markup
HEADING = "# "
SUBHEADING = "#### "
TITLE_UNDERLINE_CHAR = "="
HELP_INDENT = "    "
SYNOPSIS_CONTINUATION = "..."
NUM_PLACEHOLDER = "NUM"
ARG_PLACEHOLDER = "ARG"

# Section names
SECTION_NAME = "NAME"
SECTION_SYNOPSIS = "SYNOPSIS"
SECTION_OPTIONS = "OPTIONS"
SECTION_ARGUMENTS = "ARGUMENTS"
SECTION_ENVIRONMENT = "ENVIRONMENT"
SECTION_SEE_ALSO = "SEE ALSO"
SECTION_REPORTING_BUGS = "REPORTING BUGS"

# Environment variables documented on the program page
ENV_DPRC = "DPRC"
ENV_DPRC_DESCRIPTION = (
    "Set the DPRC - Datapath Resource Container: This value should match the one used "
    "by DPDK during the scan of the fslmc bus. It is recommended to set this on any NXP "
    "QorIQ targets. This serves as the entry point for grcli to enable autocompletion of "
    "fslmc devices manageable by grout. While grcli can configure grout without this "
    "environment setting, autocompletion of the devargs will not be available."
)
ENV_SOCK_PATH = "GROUT_SOCK_PATH"
ENV_SOCK_PATH_DESCRIPTION = (
    "Path to the control plane API socket. If not set, defaults to _{sock_path}_."
)
REPORTING_BUGS = "Report bugs to the {project} project issue tracker at <{bug_tracker}>."

# Argument body lines when no help text is attached
ARG_TEXT_UNSIGNED_INT = "Unsigned integer."
ARG_TEXT_SIGNED_INT = "Integer."
ARG_TEXT_DYNAMIC_VALUE = "Dynamic value."

# CLI
ARG_HELP_LONG = "--help"
ARG_HELP_SHORT = "-h"
ARG_GRAMMAR = "--grammar"
ARG_LOG = "--log"
ARG_LIST = "--list"
CLI_USAGE = """\
Usage: grman --grammar <path> [--log <path>] [--list] [<command>]

Options:
  --grammar <path>  Path to the JSON grammar dump (required).
  --log <path>      Write structured logs to this file.
  --list            Print the names of all documented commands and exit.
  --help, -h        Show this help message and exit.

Without <command>, the program overview page is printed.

Examples:
  grman --grammar grammar.json
  grman --grammar grammar.json address
"""
CLI_HELP_HINT = "Run 'grman --help' for usage."
STDERR_ERROR_PREFIX = "ERROR: "
