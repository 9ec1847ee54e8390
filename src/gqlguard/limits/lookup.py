"""Fragment lookups shared by the limit validators"""

from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    Node,
    OperationDefinitionNode,
)

from ..fragments import FragmentGraph, get_fragment_spread_names

__all__ = [
    "FragmentGetter",
    "FragmentResults",
    "collect_referenced_fragments",
    "fragment_getter",
    "get_operations",
]

FragmentGetter = Callable[[str], Optional[FragmentDefinitionNode]]

T = TypeVar("T")


def fragment_getter(
    document: DocumentNode, fragment_graph: Optional[FragmentGraph] = None
) -> FragmentGetter:
    """Get a function looking up fragments by name.

    Fragments defined in the document take precedence over those in the graph.
    """
    fragments: Dict[str, FragmentDefinitionNode] = {}
    for definition in document.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            fragments.setdefault(definition.name.value, definition)

    def get_fragment(name: str) -> Optional[FragmentDefinitionNode]:
        fragment = fragments.get(name)
        if fragment is None and fragment_graph is not None:
            fragment = fragment_graph.get_fragment(name)
        return fragment

    return get_fragment


def get_operations(document: DocumentNode) -> List[OperationDefinitionNode]:
    return [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode)
    ]


def collect_referenced_fragments(
    node: Node, get_fragment: FragmentGetter
) -> List[FragmentDefinitionNode]:
    """Collect all fragments transitively spread by the given node, each once."""
    collected: Dict[str, FragmentDefinitionNode] = {}
    pending = get_fragment_spread_names(node)
    while pending:
        name = pending.pop(0)
        if name in collected:
            continue
        fragment = get_fragment(name)
        if fragment is None:
            continue
        collected[name] = fragment
        pending.extend(get_fragment_spread_names(fragment))
    return list(collected.values())


class FragmentResults(Generic[T]):
    """Per-fragment results of a metric, computed once for every fragment name.

    A fragment spread while it is already being computed is not followed, and
    :meth:`get` returns ``None`` for it, as for an unknown fragment. A result is
    memoized unless its computation was cut short at a fragment further up the
    current path, since it then depends on where the fragment was spread.
    """

    def __init__(self, get_fragment: FragmentGetter) -> None:
        self.get_fragment = get_fragment
        self._results: Dict[str, T] = {}
        self._path: Dict[str, int] = {}
        self._lowest_cut = 0

    def get(
        self, name: str, compute: Callable[[FragmentDefinitionNode], T]
    ) -> Optional[T]:
        results = self._results
        if name in results:
            return results[name]
        path = self._path
        if name in path:
            self._lowest_cut = min(self._lowest_cut, path[name])
            return None
        fragment = self.get_fragment(name)
        if fragment is None:
            return None
        position = len(path)
        outer_lowest_cut = self._lowest_cut
        self._lowest_cut = position
        path[name] = position
        try:
            result = compute(fragment)
        finally:
            del path[name]
        if self._lowest_cut >= position:
            results[name] = result
        self._lowest_cut = min(outer_lowest_cut, self._lowest_cut)
        return result
