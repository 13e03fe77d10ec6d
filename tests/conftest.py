"""Pytest configuration and fixtures for grman tests."""

import logging

import pytest

from grammar_helpers import alt, cmd, dyn, group, lit, many, opt, seq, subset, uint
from grman.models import GrammarDump, GrammarNode, PageSettings


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo global logging changes made by setup_logging()."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def settings() -> PageSettings:
    return PageSettings(version="25.05")


@pytest.fixture
def address_commands() -> GrammarNode:
    """Command list with a single 'address' group holding one variant."""
    return alt(
        group(
            "address",
            cmd("address add", seq(lit("add"), dyn("ADDR"))),
            help="Manage IP addresses.",
        )
    )


@pytest.fixture
def sample_commands() -> GrammarNode:
    """Command list mixing groups, a standalone command and unrelated nodes."""
    return alt(
        group(
            "interface",
            cmd(
                "interface add",
                seq(lit("add"), dyn("NAME"), opt(lit("vrf"), uint("VRF"))),
                help="Create an interface.",
            ),
            cmd(
                "interface del",
                seq(lit("del"), dyn("NAME", help="Interface name.")),
                help="Delete an interface.",
            ),
            help="Manage interfaces.",
        ),
        group(
            "route",
            cmd(
                "route add",
                seq(lit("add"), dyn("DEST"), lit("via"), dyn("NH"), many(lit("vrf"), uint("VRF"))),
                help="Add a route.",
            ),
            help="Manage routes.",
        ),
        cmd("quit", help="Exit the shell."),
        cmd("show stats", help="Display statistics."),
        lit("ignored"),
    )


@pytest.fixture
def sample_options() -> GrammarNode:
    """Program options: two flags, one option with an argument."""
    return alt(
        opt(alt(lit("-e"), lit("--err-exit")), help="Abort on first error."),
        opt(
            seq(alt(lit("-s"), lit("--socket")), dyn("path")),
            help="Path to the control plane API socket.",
        ),
        opt(lit("-x")),
        subset(),
    )


@pytest.fixture
def grammar_file(tmp_path, settings, sample_options, sample_commands):
    """Grammar dump on disk holding the sample options and commands."""
    dump = GrammarDump(settings=settings, options=sample_options, commands=sample_commands)
    path = tmp_path / "grammar.json"
    path.write_text(dump.model_dump_json(by_alias=True), encoding="utf-8")
    return path
