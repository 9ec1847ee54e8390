"""Query complexity limit"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
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

__all__ = [
    "ComplexityConfig",
    "calculate_operation_complexity",
    "validate_complexity",
]

Number = Union[int, float]


class ComplexityConfig(NamedTuple):
    """Costs used for calculating complexity scores"""

    scalar_cost: Number = 1
    """Cost of a field without selection set"""
    object_cost: Number = 2
    """Base cost of a field with selection set"""
    depth_cost_factor: Number = 1.5
    """Factor applied to the costs of the subfields for every level of nesting"""


def calculate_operation_complexity(
    node: Node, config: ComplexityConfig, get_fragment: FragmentGetter
) -> Number:
    """Calculate the complexity score of an operation or a single field.

    A field without selection set costs the scalar cost. A field with a selection
    set costs the object cost plus the sum of the costs of its subfields multiplied
    by the depth cost factor, so that the cost of a field grows with the power of
    the factor at its depth. The operation itself is costed like a field with
    selection set. Fragment spreads and inline fragments add the cost of their
    selections as if they were inlined.
    """
    scalar_cost, object_cost, depth_cost_factor = config
    fragment_costs: FragmentResults[Number] = FragmentResults(get_fragment)

    def fragment_cost(fragment: FragmentDefinitionNode) -> Number:
        return selections_cost(fragment.selection_set)

    def selections_cost(selection_set: SelectionSetNode) -> Number:
        cost: Number = 0
        for selection in selection_set.selections:
            if isinstance(selection, FieldNode):
                cost += node_cost(selection)
            elif isinstance(selection, InlineFragmentNode):
                cost += selections_cost(selection.selection_set)
            elif isinstance(selection, FragmentSpreadNode):
                cost += fragment_costs.get(selection.name.value, fragment_cost) or 0
        return cost

    def node_cost(node: Node) -> Number:
        selection_set = getattr(node, "selection_set", None)
        if not selection_set:
            return scalar_cost
        return object_cost + depth_cost_factor * selections_cost(selection_set)

    return node_cost(node)


def validate_complexity(
    *,
    source: Optional[Source],
    document: DocumentNode,
    max_complexity_score: Number,
    config: ComplexityConfig = ComplexityConfig(),
    fragment_graph: Optional[FragmentGraph] = None,
) -> Optional[LimitExceededError]:
    """Check that the complexity score of every operation stays within bounds."""
    get_fragment = fragment_getter(document, fragment_graph)
    for operation in get_operations(document):
        score = calculate_operation_complexity(operation, config, get_fragment)
        if score > max_complexity_score:
            return LimitExceededError(
                f"Too high complexity score ({score})."
                f" Maximum allowed complexity score: {max_complexity_score}",
                operation,
                source,
                "complexity",
                score,
                max_complexity_score,
            )
    return None
