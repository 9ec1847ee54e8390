"""Support for Apollo client directives"""

from __future__ import annotations

from copy import copy
from enum import Enum
from typing import Any

from graphql import DocumentNode, FieldNode, GraphQLSchema, extend_schema, parse
from graphql.language import REMOVE, Visitor, VisitorAction, visit

__all__ = [
    "ApolloTransform",
    "transform_document_with_apollo",
    "transform_schema_with_apollo",
]


APOLLO_DIRECTIVES = {
    "connection": "directive @connection(key: String!, filter: [String]) on FIELD",
    "client": "directive @client on FIELD",
}


class ApolloTransform(Enum):
    """How fields marked as client-only are handled"""

    STRIP_CLIENT_FIELDS = "strip"
    """Remove fields with a ``@client`` directive"""
    KEEP_CLIENT_FIELDS = "keep"
    """Keep fields with a ``@client`` directive, but remove the directive"""

    @classmethod
    def from_options(cls, keep_client_fields: bool = False) -> ApolloTransform:
        return cls.KEEP_CLIENT_FIELDS if keep_client_fields else cls.STRIP_CLIENT_FIELDS


def transform_schema_with_apollo(schema: GraphQLSchema) -> GraphQLSchema:
    """Extend the schema with the Apollo client directives it does not define yet."""
    missing = [
        sdl
        for name, sdl in APOLLO_DIRECTIVES.items()
        if schema.get_directive(name) is None
    ]
    if not missing:
        return schema
    return extend_schema(schema, parse("\n".join(missing)))


class ClientFieldsTransformer(Visitor):
    def __init__(self, transform: ApolloTransform) -> None:
        super().__init__()
        self.transform = transform

    def enter_field(self, node: FieldNode, *_args: Any) -> VisitorAction | FieldNode:
        directives = node.directives or ()
        if not any(directive.name.value == "client" for directive in directives):
            return None
        if self.transform is ApolloTransform.STRIP_CLIENT_FIELDS:
            return REMOVE
        node = copy(node)
        node.directives = tuple(
            directive for directive in directives if directive.name.value != "client"
        )
        return node


def transform_document_with_apollo(
    document: DocumentNode,
    transform: ApolloTransform = ApolloTransform.STRIP_CLIENT_FIELDS,
) -> DocumentNode:
    """Apply the given client fields transform to the document.

    The given document is not changed, a transformed copy is returned.
    """
    return visit(document, ClientFieldsTransformer(transform))
