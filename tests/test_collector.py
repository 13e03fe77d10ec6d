"""Tests for argument collection."""

from grammar_helpers import alt, cmd, dyn, lit, node, opt, pattern, seq, sint, uint
from grman.collector import collect_arguments
from grman.models import ArgumentEntry


def test_collects_argument_kinds_in_pre_order() -> None:
    tree = seq(
        uint("MTU"),
        opt(sint("METRIC"), seq(dyn("IFACE"), pattern("MAC"))),
        dyn("VRF"),
    )

    entries = collect_arguments(tree)

    assert [e.identifier for e in entries] == ["MTU", "METRIC", "IFACE", "MAC", "VRF"]


def test_parent_is_visited_before_children() -> None:
    inner = dyn("INNER")
    # An identified argument node with children still recurses into them.
    outer = node("dyn", inner, id="OUTER")

    entries = collect_arguments(seq(outer))

    assert [e.identifier for e in entries] == ["OUTER", "INNER"]


def test_skips_nodes_without_identifier() -> None:
    entries = collect_arguments(seq(dyn(), uint(), dyn("ADDR")))
    assert [e.identifier for e in entries] == ["ADDR"]


def test_skips_identified_non_argument_nodes() -> None:
    tree = seq(node("str", id="KEYWORD"), alt(dyn("X"), id="address"), node("file", id="PATH"))

    entries = collect_arguments(tree)

    assert [e.identifier for e in entries] == ["X"]


def test_first_occurrence_wins() -> None:
    first = dyn("IFACE", help="First help.")
    second = dyn("IFACE", help="Second help.")

    entries = collect_arguments(alt(cmd("a", seq(lit("a"), first)), cmd("b", seq(lit("b"), second))))

    assert len(entries) == 1
    assert entries[0].node is first


def test_accumulates_into_existing_entries() -> None:
    entries = collect_arguments(seq(dyn("IFACE"), uint("MTU")))
    later = dyn("IFACE", help="Later.")

    result = collect_arguments(seq(later, dyn("ADDR")), entries)

    assert result is entries
    assert [e.identifier for e in entries] == ["IFACE", "MTU", "ADDR"]
    assert all(e.node is not later for e in entries)


def test_entries_reference_source_nodes() -> None:
    leaf = uint("MTU")
    assert collect_arguments(seq(leaf)) == [ArgumentEntry(identifier="MTU", node=leaf)]


def test_empty_tree_yields_no_entries() -> None:
    assert collect_arguments(seq()) == []
