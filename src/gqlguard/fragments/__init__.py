"""Fragment indexing, dependency resolution and document assembly"""

from .index import (
    FragmentIndex,
    IndexedFragment,
    find_duplicated_fragments,
    index_fragments,
)
from .graph import FragmentGraph, get_fragment_spread_names, resolve_fragments
from .assemble import assemble_document, assemble_documents

__all__ = [
    "FragmentGraph",
    "FragmentIndex",
    "IndexedFragment",
    "assemble_document",
    "assemble_documents",
    "find_duplicated_fragments",
    "get_fragment_spread_names",
    "index_fragments",
    "resolve_fragments",
]
