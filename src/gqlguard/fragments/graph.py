"""Fragment dependency graph"""

from __future__ import annotations

from typing import Collection, Dict, Iterable, Iterator, List, Optional

from graphql import FragmentDefinitionNode, FragmentSpreadNode, Node, Visitor, visit

__all__ = ["FragmentGraph", "get_fragment_spread_names", "resolve_fragments"]


class FragmentSpreadCollector(Visitor):
    """Collect the names of all fragment spreads below a node."""

    names: Dict[str, None]

    def __init__(self) -> None:
        super().__init__()
        self.names = {}

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args) -> None:
        self.names[node.name.value] = None


def get_fragment_spread_names(node: Node) -> List[str]:
    """Get the names of the fragments spread anywhere inside the given node.

    Spreads in nested selection sets and inside inline fragments are included. The
    names are unique and listed in order of first appearance.
    """
    collector = FragmentSpreadCollector()
    visit(node, collector)
    return list(collector.names)


class FragmentGraph:
    """Directed graph of fragments

    Each node is a fragment name bound to its definition, an edge from A to B means
    that fragment A spreads fragment B. Cycles are allowed.
    """

    _nodes: Dict[str, FragmentDefinitionNode]
    _edges: Dict[str, Dict[str, None]]

    def __init__(self) -> None:
        self._nodes = {}
        self._edges = {}

    @classmethod
    def from_fragments(
        cls, fragments: Iterable[FragmentDefinitionNode]
    ) -> FragmentGraph:
        """Build the graph of the given fragment definitions.

        When several definitions share a name, the first one is kept.
        """
        graph = cls()
        fragments = list(fragments)
        for fragment in fragments:
            graph.add_node(fragment.name.value, fragment)
        for fragment in fragments:
            from_name = fragment.name.value
            if graph.get_fragment(from_name) is not fragment:
                continue
            for to_name in get_fragment_spread_names(fragment):
                graph.add_dependency(from_name, to_name)
        return graph

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self)} fragments>"

    def add_node(self, name: str, fragment: FragmentDefinitionNode) -> None:
        """Add a fragment unless a fragment with that name is already known."""
        if name not in self._nodes:
            self._nodes[name] = fragment
            self._edges[name] = {}

    def add_dependency(self, from_name: str, to_name: str) -> None:
        """Record that fragment ``from_name`` spreads fragment ``to_name``.

        The dependency does not need to be a known fragment.
        """
        if from_name not in self._nodes:
            raise KeyError(f"Unknown fragment '{from_name}'.")
        self._edges[from_name][to_name] = None

    def dependencies_of(self, name: str) -> List[str]:
        """Get the names of the fragments directly spread by the given fragment."""
        return list(self._edges.get(name, ()))

    def get_fragment(self, name: str) -> Optional[FragmentDefinitionNode]:
        return self._nodes.get(name)

    def resolve(self, name: str) -> List[FragmentDefinitionNode]:
        """Get all fragment definitions needed by the given fragment.

        The fragment itself comes first, followed by its dependencies in depth-first
        order. Every name is expanded only once, so that cyclic fragments terminate.
        Names without a definition are skipped.
        """
        resolved: Dict[str, FragmentDefinitionNode] = {}
        nodes, edges = self._nodes, self._edges

        def collect(from_name: str) -> None:
            fragment = nodes.get(from_name)
            if fragment is None or from_name in resolved:
                return
            resolved[from_name] = fragment
            for to_name in edges[from_name]:
                collect(to_name)

        collect(name)
        return list(resolved.values())


def resolve_fragments(
    names: Collection[str], graph: FragmentGraph
) -> List[FragmentDefinitionNode]:
    """Resolve several fragments, removing duplicates by name.

    The order of first appearance is retained.
    """
    fragments: Dict[str, FragmentDefinitionNode] = {}
    for name in names:
        for fragment in graph.resolve(name):
            fragments.setdefault(fragment.name.value, fragment)
    return list(fragments.values())
