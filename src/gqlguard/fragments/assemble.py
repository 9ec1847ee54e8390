"""Assembly of self-contained documents"""

from __future__ import annotations

from typing import Collection, Iterable, Iterator, Tuple

from graphql import DocumentNode, OperationDefinitionNode

from ..language import ParsedDocument
from .graph import FragmentGraph, get_fragment_spread_names, resolve_fragments

__all__ = ["assemble_document", "assemble_documents"]


def assemble_document(
    operations: Collection[OperationDefinitionNode], graph: FragmentGraph
) -> DocumentNode:
    """Assemble operations with all fragments they transitively depend on.

    The resulting document contains the given operations in their original order,
    followed by every needed fragment definition exactly once, so that it can be
    validated independently of any other document.
    """
    operations_document = DocumentNode(definitions=tuple(operations))
    fragments = resolve_fragments(
        get_fragment_spread_names(operations_document), graph
    )
    return DocumentNode(definitions=(*operations, *fragments))


def assemble_documents(
    documents: Iterable[ParsedDocument], graph: FragmentGraph
) -> Iterator[Tuple[ParsedDocument, DocumentNode]]:
    """Assemble one document for every parsed document with operations."""
    for document in documents:
        if document.has_operations:
            yield document, assemble_document(document.operations, graph)
