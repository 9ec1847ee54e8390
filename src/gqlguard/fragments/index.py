"""Fragment index"""

from __future__ import annotations

from typing import Collection, Dict, List, NamedTuple

from graphql import FragmentDefinitionNode, Source

from ..error import DuplicateFragmentNameError
from ..language import ParsedDocument

__all__ = [
    "FragmentIndex",
    "IndexedFragment",
    "find_duplicated_fragments",
    "index_fragments",
]


class IndexedFragment(NamedTuple):
    """A fragment definition together with the source defining it"""

    node: FragmentDefinitionNode
    source: Source
    """The source the fragment is defined in, not the one it is spread from"""


class FragmentIndex(NamedTuple):
    """All fragment definitions of a batch of documents"""

    fragments: List[IndexedFragment]
    names: List[str]
    """Fragment names in definition order, including repetitions"""

    def sources_of(self, fragment_name: str) -> List[Source]:
        """Get the sources defining a fragment with the given name, in order."""
        return [
            fragment.source
            for fragment in self.fragments
            if fragment.node.name.value == fragment_name
        ]


def index_fragments(documents: Collection[ParsedDocument]) -> FragmentIndex:
    """Collect the fragment definitions of all documents in document order."""
    fragments: List[IndexedFragment] = []
    names: List[str] = []
    for document in documents:
        for fragment in document.fragments:
            fragments.append(IndexedFragment(fragment, document.source))
            names.append(fragment.name.value)
    return FragmentIndex(fragments, names)


def find_duplicated_fragments(
    fragment_names: Collection[str],
) -> List[DuplicateFragmentNameError]:
    """Report every repeated occurrence of a fragment name.

    A name defined n times results in n - 1 errors.
    """
    seen: Dict[str, None] = {}
    errors: List[DuplicateFragmentNameError] = []
    for name in fragment_names:
        if name in seen:
            errors.append(DuplicateFragmentNameError(name))
        else:
            seen[name] = None
    return errors
