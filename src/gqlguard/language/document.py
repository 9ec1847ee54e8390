from __future__ import annotations

from typing import List, NamedTuple

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    Source,
    parse,
)

__all__ = ["ParsedDocument", "read_document"]


class ParsedDocument(NamedTuple):
    """A parsed source split into its executable definitions"""

    source: Source
    document: DocumentNode
    """The complete parsed document, including definitions of other kinds"""
    operations: List[OperationDefinitionNode]
    fragments: List[FragmentDefinitionNode]

    @property
    def has_operations(self) -> bool:
        return bool(self.operations)


def read_document(source: Source) -> ParsedDocument:
    """Parse a source and collect its operations and fragment definitions.

    Definitions of other kinds (type system definitions and extensions) are kept in
    the parsed document but are not collected. Syntax errors are raised as
    :class:`graphql.GraphQLSyntaxError`.
    """
    document = parse(source)
    operations: List[OperationDefinitionNode] = []
    fragments: List[FragmentDefinitionNode] = []
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            operations.append(definition)
        elif isinstance(definition, FragmentDefinitionNode):
            fragments.append(definition)
    return ParsedDocument(source, document, operations, fragments)
