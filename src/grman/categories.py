"""Semantic categories inferred from argument identifiers.

A command whose arguments name an interface, an address, a nexthop or a VRF
gets a "see also" reference to the page documenting that object. The tables
below are the only source of that knowledge.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from .models import ArgumentEntry, SemanticCategory

CATEGORY_BY_IDENTIFIER = MappingProxyType({
    "IFACE": SemanticCategory.INTERFACE,
    "NAME": SemanticCategory.INTERFACE,
    "ADDR": SemanticCategory.ADDRESS,
    "IP": SemanticCategory.ADDRESS,
    "DEST": SemanticCategory.ADDRESS,
    "NH": SemanticCategory.NEXTHOP,
    "NH_ID": SemanticCategory.NEXTHOP,
    "SEGLIST": SemanticCategory.NEXTHOP,
    "VRF": SemanticCategory.VRF,
})

# Declaration order is the order of "see also" references.
PAGE_BY_CATEGORY = MappingProxyType({
    SemanticCategory.INTERFACE: "interface",
    SemanticCategory.ADDRESS: "address",
    SemanticCategory.NEXTHOP: "nexthop",
    SemanticCategory.VRF: "route",
})


def infer_category(identifier: str) -> SemanticCategory | None:
    """Return the category of an argument identifier (exact match), if any."""
    return CATEGORY_BY_IDENTIFIER.get(identifier)


def see_also_pages(page_name: str, entries: Iterable[ArgumentEntry]) -> list[str]:
    """Return related page names for the categories touched by entries.

    The page currently being rendered is never referenced.
    """
    matched = {infer_category(entry.identifier) for entry in entries}
    return [
        page
        for category, page in PAGE_BY_CATEGORY.items()
        if category in matched and page != page_name
    ]
