"""Inline synopsis rendering of grammar nodes.

Every fragment returned by render_synopsis() starts with its own separating
space, so fragments concatenate directly:

    seq(str "add", dyn ADDR)     ->  " add _ADDR_"
    or(str "up", str "down")     ->  " ( up | down )"
    option(uint MTU)             ->  " [ _MTU_ ]"
    subset(a, b)                 ->  " [ a ] [ b ]"
"""

from __future__ import annotations

from enum import Enum

from .classifier import classify
from .constants import ARG_PLACEHOLDER, NUM_PLACEHOLDER, SUBHEADING
from .models import GrammarNode, NodeKind


class SyntaxMode(Enum):
    SYNOPSIS = "synopsis"
    OPTION = "option"


def render_synopsis(node: GrammarNode) -> str:
    """Render node as an inline usage fragment. Unknown kinds render nothing."""
    kind = classify(node)

    if kind == NodeKind.LITERAL:
        return f" {node.desc}" if node.desc is not None else ""

    if kind in (NodeKind.UNSIGNED_INT, NodeKind.SIGNED_INT):
        return f" {placeholder(node, NUM_PLACEHOLDER)}"

    if kind in (NodeKind.DYNAMIC_VALUE, NodeKind.PATTERN):
        return f" {placeholder(node, ARG_PLACEHOLDER)}"

    if kind == NodeKind.ALTERNATION:
        if not node.children:
            return ""
        inner = " |".join(render_synopsis(child) for child in node.children)
        return f" ({inner} )"

    if kind in (NodeKind.SEQUENCE, NodeKind.COMMAND):
        return "".join(render_synopsis(child) for child in node.children)

    if kind in (NodeKind.OPTIONAL, NodeKind.REPETITION):
        if not node.children:
            return ""
        inner = "".join(render_synopsis(child) for child in node.children)
        return f" [{inner} ]"

    if kind == NodeKind.SUBSET:
        return "".join(f" [{render_synopsis(child)} ]" for child in node.children)

    return ""


def placeholder(node: GrammarNode, default: str) -> str:
    """Return the emphasized, uppercased argument name of node."""
    name = node.node_id if node.has_id else default
    return f"_{name.upper()}_"


def render_option(node: GrammarNode, mode: SyntaxMode) -> list[str]:
    """Render one program option as output lines.

    The option's first child is either the flag spellings (a literal or an
    alternation of literals) or a sequence of the spellings followed by the
    argument node. SYNOPSIS mode yields a single bracketed line with the first
    spelling only; OPTION mode yields a heading with every spelling, followed
    by the option's help paragraph. Options of any other shape yield no lines.
    """
    first = node.child(0)
    if first is None:
        return []

    first_kind = classify(first)
    arg_name: str | None = None

    if first_kind == NodeKind.SEQUENCE:
        if len(first.children) < 2:
            return []
        spellings_node = first.children[0]
        arg_node = first.children[1]
        spellings = []
        if classify(spellings_node) in (NodeKind.ALTERNATION, NodeKind.LITERAL):
            spellings = _flag_spellings(spellings_node)
        if arg_node.has_id:
            arg_name = arg_node.node_id
    elif first_kind in (NodeKind.ALTERNATION, NodeKind.LITERAL):
        spellings = _flag_spellings(first)
    else:
        return []

    if mode == SyntaxMode.SYNOPSIS:
        flags = "".join(f"**{s}**" for s in spellings[:1])
    else:
        flags = ", ".join(f"**{s}**" for s in spellings)

    if arg_name is not None:
        flags += f" _{arg_name.upper()}_"

    if mode == SyntaxMode.SYNOPSIS:
        return [f"[{flags}]"]

    lines = [f"{SUBHEADING}{flags}", ""]
    if node.help is not None:
        lines += [node.help, ""]
    return lines


def _flag_spellings(node: GrammarNode) -> list[str]:
    if classify(node) == NodeKind.LITERAL:
        return [node.desc] if node.desc is not None else []
    return [child.desc for child in node.children if child.desc is not None]
