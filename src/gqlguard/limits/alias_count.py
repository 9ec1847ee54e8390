"""Alias count limit"""

from __future__ import annotations

from typing import Optional

from graphql import DocumentNode, FieldNode, FragmentSpreadNode, Node, Source

from ..error import LimitExceededError
from ..fragments import FragmentGraph
from .lookup import (
    FragmentGetter,
    FragmentResults,
    fragment_getter,
    get_operations,
)

__all__ = ["count_aliases", "validate_alias_count"]


def count_aliases(node: Node, get_fragment: FragmentGetter) -> int:
    """Count the aliased fields below the given node, including spread fragments."""
    fragment_counts: FragmentResults[int] = FragmentResults(get_fragment)

    def count(node: Node) -> int:
        aliases = 1 if isinstance(node, FieldNode) and node.alias else 0
        if isinstance(node, FragmentSpreadNode):
            aliases += fragment_counts.get(node.name.value, count) or 0
        else:
            selection_set = getattr(node, "selection_set", None)
            if selection_set:
                aliases += sum(map(count, selection_set.selections))
        return aliases

    return count(node)


def validate_alias_count(
    *,
    source: Optional[Source],
    document: DocumentNode,
    max_alias_count: int,
    fragment_graph: Optional[FragmentGraph] = None,
) -> Optional[LimitExceededError]:
    """Check that no operation of the document uses too many aliases."""
    get_fragment = fragment_getter(document, fragment_graph)
    for operation in get_operations(document):
        alias_count = count_aliases(operation, get_fragment)
        if alias_count > max_alias_count:
            return LimitExceededError(
                f"Too many aliases ({alias_count})."
                f" Maximum allowed is {max_alias_count}",
                operation,
                source,
                "aliases",
                alias_count,
                max_alias_count,
            )
    return None
