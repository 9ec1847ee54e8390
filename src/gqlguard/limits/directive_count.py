"""Directive count limit"""

from __future__ import annotations

from typing import Optional

from graphql import DocumentNode, FragmentSpreadNode, Node, Source

from ..error import LimitExceededError
from ..fragments import FragmentGraph
from .lookup import (
    FragmentGetter,
    FragmentResults,
    fragment_getter,
    get_operations,
)

__all__ = ["count_directives", "validate_directive_count"]


def count_directives(node: Node, get_fragment: FragmentGetter) -> int:
    """Count the directives used on and below the given node.

    Directives on operations, fields, inline fragments and fragment spreads are
    counted, as well as those of the spread fragment definitions.
    """
    fragment_counts: FragmentResults[int] = FragmentResults(get_fragment)

    def count(node: Node) -> int:
        directives = len(getattr(node, "directives", None) or ())
        if isinstance(node, FragmentSpreadNode):
            directives += fragment_counts.get(node.name.value, count) or 0
        else:
            selection_set = getattr(node, "selection_set", None)
            if selection_set:
                directives += sum(map(count, selection_set.selections))
        return directives

    return count(node)


def validate_directive_count(
    *,
    source: Optional[Source],
    document: DocumentNode,
    max_directive_count: int,
    fragment_graph: Optional[FragmentGraph] = None,
) -> Optional[LimitExceededError]:
    """Check that no operation of the document uses too many directives."""
    get_fragment = fragment_getter(document, fragment_graph)
    for operation in get_operations(document):
        directive_count = count_directives(operation, get_fragment)
        if directive_count > max_directive_count:
            return LimitExceededError(
                f"Too many directives ({directive_count})."
                f" Maximum allowed is {max_directive_count}",
                operation,
                source,
                "directives",
                directive_count,
                max_directive_count,
            )
    return None
