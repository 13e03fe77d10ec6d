"""Domain models for grman."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .constants import (
    DEFAULT_BUG_TRACKER,
    DEFAULT_PROGRAM,
    DEFAULT_PROJECT,
    DEFAULT_SOCK_PATH,
    NO_ID,
)


class NodeKind(StrEnum):
    """Syntactic role of a grammar node, keyed by the grammar type name."""

    LITERAL = "str"
    UNSIGNED_INT = "uint"
    SIGNED_INT = "int"
    DYNAMIC_VALUE = "dyn"
    PATTERN = "re"
    ALTERNATION = "or"
    SEQUENCE = "seq"
    COMMAND = "cmd"
    OPTIONAL = "option"
    REPETITION = "many"
    SUBSET = "subset"
    UNKNOWN = "unknown"


class SemanticCategory(StrEnum):
    INTERFACE = "interface"
    ADDRESS = "address"
    NEXTHOP = "nexthop"
    VRF = "vrf"


class GrammarNode(BaseModel):
    """Read-only view of one node of the command grammar tree."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type_name: str = Field(alias="type")
    node_id: str = Field(default=NO_ID, alias="id")
    help: str | None = None
    # Literal text for "str" nodes
    desc: str | None = None
    children: tuple[GrammarNode, ...] = ()

    @property
    def has_id(self) -> bool:
        return bool(self.node_id) and self.node_id != NO_ID

    def child(self, index: int) -> GrammarNode | None:
        """Return the child at index, or None when out of range."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None


@dataclass(frozen=True)
class ArgumentEntry:
    """One uniquely identified argument found under a command."""

    identifier: str
    node: GrammarNode


class PageSettings(BaseModel):
    program: str = DEFAULT_PROGRAM
    project: str = DEFAULT_PROJECT
    version: str = __version__
    sock_path: str = DEFAULT_SOCK_PATH
    bug_tracker: str = DEFAULT_BUG_TRACKER


class GrammarDump(BaseModel):
    """Serialized grammar: program options, command list and page settings."""

    settings: PageSettings = PageSettings()
    options: GrammarNode = GrammarNode(type="or")
    commands: GrammarNode
