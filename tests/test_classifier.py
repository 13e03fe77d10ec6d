"""Tests for node classification."""

import pytest

from grammar_helpers import node
from grman.classifier import classify, is_argument_kind
from grman.models import NodeKind


@pytest.mark.parametrize(
    ("type_name", "kind"),
    [
        ("str", NodeKind.LITERAL),
        ("uint", NodeKind.UNSIGNED_INT),
        ("int", NodeKind.SIGNED_INT),
        ("dyn", NodeKind.DYNAMIC_VALUE),
        ("re", NodeKind.PATTERN),
        ("or", NodeKind.ALTERNATION),
        ("seq", NodeKind.SEQUENCE),
        ("cmd", NodeKind.COMMAND),
        ("option", NodeKind.OPTIONAL),
        ("many", NodeKind.REPETITION),
        ("subset", NodeKind.SUBSET),
    ],
)
def test_classify_known_type_names(type_name: str, kind: NodeKind) -> None:
    assert classify(node(type_name)) == kind


@pytest.mark.parametrize("type_name", ["file", "re_lex", "", "STR", "sh_lex"])
def test_classify_unknown_type_names(type_name: str) -> None:
    assert classify(node(type_name)) == NodeKind.UNKNOWN


def test_argument_kinds() -> None:
    arguments = {kind for kind in NodeKind if is_argument_kind(kind)}
    assert arguments == {
        NodeKind.UNSIGNED_INT,
        NodeKind.SIGNED_INT,
        NodeKind.DYNAMIC_VALUE,
        NodeKind.PATTERN,
    }
