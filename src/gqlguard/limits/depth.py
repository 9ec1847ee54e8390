"""Query depth limit"""

from __future__ import annotations

from typing import Optional

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    Node,
    SelectionSetNode,
    Source,
)

from ..error import LimitExceededError
from ..fragments import FragmentGraph
from .lookup import (
    FragmentGetter,
    FragmentResults,
    fragment_getter,
    get_operations,
)

__all__ = ["calculate_depth", "validate_query_depth"]


def calculate_depth(node: Node, get_fragment: FragmentGetter) -> int:
    """Calculate the maximum nesting depth below the given node.

    Root fields have a depth of zero and every field with a selection set moves its
    subfields one level deeper. Fragment spreads and inline fragments are traversed
    as if they were inlined, introspection fields are not traversed.

    For example the depth of ``{ user { friends { name } } }`` is 2.
    """
    fragment_depths: FragmentResults[int] = FragmentResults(get_fragment)

    def selection_set_depth(
        selection_set: Optional[SelectionSetNode], depth: int
    ) -> int:
        if not selection_set:
            return depth
        return max(
            (node_depth(selection, depth) for selection in selection_set.selections),
            default=depth,
        )

    def fragment_depth(fragment: FragmentDefinitionNode) -> int:
        return selection_set_depth(fragment.selection_set, 0)

    def node_depth(node: Node, depth: int) -> int:
        if isinstance(node, FieldNode):
            if node.name.value.startswith("__") or not node.selection_set:
                return depth
            return selection_set_depth(node.selection_set, depth + 1)
        if isinstance(node, FragmentSpreadNode):
            # depth of the fragment relative to where it is spread
            relative_depth = fragment_depths.get(node.name.value, fragment_depth)
            return depth + (relative_depth or 0)
        # operations, fragment definitions and inline fragments
        return selection_set_depth(getattr(node, "selection_set", None), depth)

    if isinstance(node, DocumentNode):
        return max(
            (node_depth(definition, 0) for definition in node.definitions), default=0
        )
    return node_depth(node, 0)


def validate_query_depth(
    *,
    source: Optional[Source],
    document: DocumentNode,
    max_depth: int,
    fragment_graph: Optional[FragmentGraph] = None,
) -> Optional[LimitExceededError]:
    """Check that no operation of the document is nested deeper than allowed."""
    get_fragment = fragment_getter(document, fragment_graph)
    for operation in get_operations(document):
        depth = calculate_depth(operation, get_fragment)
        if depth > max_depth:
            return LimitExceededError(
                f"Query exceeds maximum depth of {max_depth} (actual: {depth})",
                operation,
                source,
                "depth",
                depth,
                max_depth,
            )
    return None
