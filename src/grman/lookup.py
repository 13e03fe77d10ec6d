"""Command lookup among the top-level grammar entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .classifier import classify
from .errors import CommandNotFoundError
from .logging import log_event
from .models import GrammarNode, NodeKind, PageSettings
from .pages import render_group_page, render_standalone_page


class MatchKind(StrEnum):
    GROUP = "group"
    STANDALONE = "standalone"


@dataclass(frozen=True)
class CommandMatch:
    """A top-level grammar entry documenting one command page.

    For a group, node is the alternation of command variants and help_text
    comes from the group's leading literal. For a standalone command, node is
    the command itself.
    """

    name: str
    kind: MatchKind
    node: GrammarNode
    help_text: str | None


def find_command(root: GrammarNode, name: str) -> CommandMatch | None:
    """Return the first top-level entry documenting name, if any."""
    for entry in root.children:
        match = _match_entry(entry)
        if match is not None and match.name == name:
            return match
    return None


def list_command_names(root: GrammarNode) -> list[str]:
    """Return every documented command name in tree order, without duplicates."""
    names: list[str] = []
    for entry in root.children:
        match = _match_entry(entry)
        if match is not None and match.name not in names:
            names.append(match.name)
    return names


def render_command_page(
    root: GrammarNode,
    name: str,
    settings: PageSettings,
    *,
    with_header: bool = False,
) -> str:
    """Render the page of the named command.

    Raises CommandNotFoundError when no top-level entry matches.
    """
    match = find_command(root, name)
    if match is None:
        log_event("command_not_found", level=logging.WARNING, command=name)
        raise CommandNotFoundError(name)

    if match.kind == MatchKind.GROUP:
        page = render_group_page(
            name, match.node, settings, match.help_text, with_header=with_header
        )
    else:
        page = render_standalone_page(name, match.node, settings, with_header=with_header)

    log_event("page_rendered", page=name, kind=match.kind.value, chars=len(page))
    return page


def _match_entry(entry: GrammarNode) -> CommandMatch | None:
    kind = classify(entry)

    if kind == NodeKind.SEQUENCE:
        # seq(str <name>, or <name>): the alternation carries the group name.
        if len(entry.children) < 2:
            return None
        keyword, group = entry.children[0], entry.children[1]
        if not group.has_id:
            return None
        return CommandMatch(
            name=group.node_id,
            kind=MatchKind.GROUP,
            node=group,
            help_text=keyword.help,
        )

    if kind == NodeKind.COMMAND:
        if not entry.has_id:
            return None
        return CommandMatch(
            name=entry.node_id.split(" ", 1)[0],
            kind=MatchKind.STANDALONE,
            node=entry,
            help_text=entry.help,
        )

    return None
