"""Grammar node classification."""

from __future__ import annotations

from .models import GrammarNode, NodeKind

_ARGUMENT_KINDS = frozenset({
    NodeKind.UNSIGNED_INT,
    NodeKind.SIGNED_INT,
    NodeKind.DYNAMIC_VALUE,
    NodeKind.PATTERN,
})


def classify(node: GrammarNode) -> NodeKind:
    """Map a node to its kind from the declared type name.

    Unrecognized type names map to NodeKind.UNKNOWN.
    """
    try:
        kind = NodeKind(node.type_name)
    except ValueError:
        return NodeKind.UNKNOWN
    return kind


def is_argument_kind(kind: NodeKind) -> bool:
    return kind in _ARGUMENT_KINDS
