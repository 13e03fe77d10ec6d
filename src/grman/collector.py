"""Argument collection over a grammar subtree."""

from __future__ import annotations

from .classifier import classify, is_argument_kind
from .models import ArgumentEntry, GrammarNode


def collect_arguments(
    node: GrammarNode,
    entries: list[ArgumentEntry] | None = None,
) -> list[ArgumentEntry]:
    """Gather identified argument nodes under node, depth-first pre-order.

    Each identifier is kept once: the first node encountered wins and later
    nodes with the same identifier are skipped without any consistency check.
    Pass an existing list to accumulate across several subtrees.
    """
    if entries is None:
        entries = []
    seen = {entry.identifier for entry in entries}
    _collect(node, entries, seen)
    return entries


def _collect(node: GrammarNode, entries: list[ArgumentEntry], seen: set[str]) -> None:
    if node.has_id and node.node_id not in seen and is_argument_kind(classify(node)):
        entries.append(ArgumentEntry(identifier=node.node_id, node=node))
        seen.add(node.node_id)

    for child in node.children:
        _collect(child, entries, seen)
