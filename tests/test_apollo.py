from graphql import build_schema, parse, print_ast

from gqlguard.apollo import (
    ApolloTransform,
    transform_document_with_apollo,
    transform_schema_with_apollo,
)

from .utils import dedent, test_schema


def describe_apollo_transform():
    def is_chosen_from_options():
        assert ApolloTransform.from_options() is ApolloTransform.STRIP_CLIENT_FIELDS
        assert (
            ApolloTransform.from_options(keep_client_fields=True)
            is ApolloTransform.KEEP_CLIENT_FIELDS
        )


def describe_transform_schema_with_apollo():
    def adds_the_client_directives():
        assert test_schema.get_directive("client") is None
        schema = transform_schema_with_apollo(test_schema)
        assert schema is not test_schema
        assert schema.get_directive("client") is not None
        connection = schema.get_directive("connection")
        assert connection is not None
        assert list(connection.args) == ["key", "filter"]
        assert test_schema.get_directive("client") is None

    def keeps_directives_already_defined():
        schema = build_schema(
            """
            directive @client on FIELD
            type Query { a: String }
            """
        )
        extended = transform_schema_with_apollo(schema)
        assert extended.get_directive("connection") is not None
        assert transform_schema_with_apollo(extended) is extended


def describe_transform_document_with_apollo():
    document = parse(
        """
        {
          user {
            id
            isLoggedIn @client
            friends @connection(key: "friends") {
              id
            }
          }
        }
        """
    )

    def strips_client_fields():
        transformed = transform_document_with_apollo(document)
        assert print_ast(transformed) == dedent(
            """
            {
              user {
                id
                friends @connection(key: "friends") {
                  id
                }
              }
            }
            """
        )

    def keeps_client_fields_without_the_directive():
        transformed = transform_document_with_apollo(
            document, ApolloTransform.KEEP_CLIENT_FIELDS
        )
        assert print_ast(transformed) == dedent(
            """
            {
              user {
                id
                isLoggedIn
                friends @connection(key: "friends") {
                  id
                }
              }
            }
            """
        )

    def does_not_change_the_given_document():
        printed = print_ast(document)
        transform_document_with_apollo(document)
        transform_document_with_apollo(document, ApolloTransform.KEEP_CLIENT_FIELDS)
        assert print_ast(document) == printed

    def keeps_other_directives_of_client_fields():
        transformed = transform_document_with_apollo(
            parse("{ user { id @client @include(if: true) } }"),
            ApolloTransform.KEEP_CLIENT_FIELDS,
        )
        assert print_ast(transformed) == dedent(
            """
            {
              user {
                id @include(if: true)
              }
            }
            """
        )
