import logging

from graphql import GraphQLSyntaxError, Source, build_schema
from pytest import raises

from gqlguard.error import DuplicateFragmentNameError, LimitExceededError
from gqlguard.validate import InvalidDocument, ValidateOptions, validate

from .utils import fragment_chain, test_schema


def sources(*bodies: str):
    return [Source(body, f"document{i}.graphql") for i, body in enumerate(bodies)]


def messages(errors):
    return [error.message for error in errors]


def describe_validate_options():
    def has_defaults():
        options = ValidateOptions()
        assert options.strict_fragments is True
        assert options.strict_deprecated is True
        assert options.apollo is False
        assert options.keep_client_fields is False
        assert options.max_depth is None
        assert options.max_alias_count is None
        assert options.max_directive_count is None
        assert options.max_token_count is None
        assert options.max_complexity_score == 1500
        assert options.complexity_config == (1, 2, 1.5)


def describe_validate():
    schema = build_schema(
        """
        type Query { user: User }
        type User { name: String @deprecated id: ID }
        """
    )

    def reports_deprecated_usages_separately():
        (source,) = sources("query { user { id name } }")
        result = validate(schema, [source])
        assert len(result) == 1
        document = result[0]
        assert isinstance(document, InvalidDocument)
        assert document.source is source
        assert document.errors == []
        assert messages(document.deprecated) == [
            "The field User.name is deprecated. No longer supported"
        ]

    def omits_valid_documents():
        assert validate(schema, sources("query { user { id } }")) == []

    def can_ignore_deprecated_usages():
        options = ValidateOptions(strict_deprecated=False)
        assert validate(schema, sources("query { user { id name } }"), options) == []

    def reports_structural_errors():
        (document,) = validate(schema, sources("query { user { id email } }"))
        assert messages(document.errors) == [
            "Cannot query field 'email' on type 'User'."
        ]
        assert document.deprecated == []

    def raises_syntax_errors():
        with raises(GraphQLSyntaxError):
            validate(schema, sources("query { user { id }"))

    def returns_results_in_source_order():
        result = validate(
            schema,
            sources(
                "query A { user { name } }",
                "query B { user { id } }",
                "query C { user { unknown } }",
            ),
        )
        assert [document.source.name for document in result] == [
            "document0.graphql",
            "document2.graphql",
        ]
        for document in result:
            assert document.errors or document.deprecated

    def describe_fragments():
        def uses_fragments_from_other_sources():
            result = validate(
                test_schema,
                sources(
                    "query Q { user { ...UserFields } }",
                    "fragment UserFields on User { id ...Friends }",
                    "fragment Friends on User { friends { fullName } }",
                ),
            )
            assert result == []

        def does_not_validate_fragment_only_sources():
            result = validate(
                test_schema,
                sources(
                    "query Q { user { id } }",
                    "fragment Unused on User { unknownField }",
                ),
            )
            assert result == []

        def reports_undefined_fragments():
            (document,) = validate(test_schema, sources("{ user { ...Missing } }"))
            assert messages(document.errors) == ["Unknown fragment 'Missing'."]

        def reports_cyclic_fragments_as_structural_errors():
            (document,) = validate(
                test_schema,
                sources(
                    "query Q { user { ...A } }",
                    """
                    fragment A on User { friends { ...B } }
                    fragment B on User { friends { ...A } }
                    """,
                ),
            )
            assert any(
                message.startswith("Cannot spread fragment 'A' within itself")
                for message in messages(document.errors)
            )

        def reports_duplicated_fragment_names_in_strict_mode():
            bodies = (
                "query Q { user { ...F } }",
                "fragment F on User { id }",
                "fragment F on User { id }",
            )
            (document,) = validate(test_schema, sources(*bodies))
            assert document.source.name == "document0.graphql"
            assert messages(document.errors) == ["Name of 'F' fragment is not unique"]
            assert isinstance(document.errors[0], DuplicateFragmentNameError)

            options = ValidateOptions(strict_fragments=False)
            assert validate(test_schema, sources(*bodies), options) == []

        def logs_the_sources_of_duplicated_fragments(caplog):
            bodies = (
                "query Q { user { ...F } }",
                "fragment F on User { id }",
                "fragment F on User { id }",
            )
            with caplog.at_level(logging.DEBUG, logger="gqlguard.validate"):
                validate(test_schema, sources(*bodies))
            assert (
                "Fragment 'F' is defined more than once,"
                " in document1.graphql, document2.graphql."
            ) in caplog.messages

    def describe_limits():
        query = "{ user { friends { friends { id } } } }"

        def reports_exactly_one_error_above_the_depth_limit():
            (document,) = validate(
                test_schema, sources(query), ValidateOptions(max_depth=2)
            )
            assert messages(document.errors) == [
                "Query exceeds maximum depth of 2 (actual: 3)"
            ]
            for max_depth in (3, 4):
                assert (
                    validate(
                        test_schema, sources(query), ValidateOptions(max_depth=max_depth)
                    )
                    == []
                )

        def skips_unset_limits():
            options = ValidateOptions(max_complexity_score=None)
            assert validate(test_schema, sources(query), options) == []

        def applies_the_default_complexity_limit():
            deep_query = "{ user " + "{ friends " * 14 + "{ id }" + " }" * 15
            (document,) = validate(test_schema, sources(deep_query))
            assert len(document.errors) == 1
            assert document.errors[0].metric == "complexity"
            assert document.errors[0].value > 1500

        def uses_the_complexity_costs():
            options = ValidateOptions(max_complexity_score=25)
            assert validate(test_schema, sources(query), options) == []
            options = options._replace(complexity_depth_cost_factor=3)
            (document,) = validate(test_schema, sources(query), options)
            assert document.errors[0].metric == "complexity"

        def reports_errors_in_pipeline_order():
            options = ValidateOptions(
                max_depth=0,
                max_complexity_score=1,
                max_alias_count=1,
                max_directive_count=0,
                max_token_count=1,
            )
            (document, *_others) = validate(
                test_schema,
                sources(
                    "{ user { a: id b: id @include(if: true) unknownField } }",
                    "fragment F on User { id }",
                    "fragment F on User { id }",
                ),
                options,
            )
            structural, *limits, duplicated = document.errors
            assert structural.message == (
                "Cannot query field 'unknownField' on type 'User'."
            )
            assert all(isinstance(error, LimitExceededError) for error in limits)
            assert [error.metric for error in limits] == [
                "depth",
                "complexity",
                "aliases",
                "directives",
                "tokens",
            ]
            assert isinstance(duplicated, DuplicateFragmentNameError)

        def attributes_limit_errors_to_the_source():
            (source,) = sources("\n  query Deep { user { friends { id } } }")
            (document,) = validate(test_schema, [source], ValidateOptions(max_depth=1))
            (error,) = document.errors
            assert error.source is source
            assert error.locations == [(2, 3)]

        def scores_doubling_fragment_chains_with_default_options():
            (document,) = validate(
                test_schema,
                sources("query Q { user { ...F0 } }", fragment_chain(30)),
            )
            (error,) = document.errors
            assert error.metric == "complexity"
            assert error.value == 2 + 1.5 * (2 + 1.5 * 2**29)

        def counts_fragments_defined_in_other_sources():
            options = ValidateOptions(max_alias_count=1)
            (document,) = validate(
                test_schema,
                sources(
                    "query Q { user { ...F } }",
                    "fragment F on User { a: id b: fullName }",
                ),
                options,
            )
            assert messages(document.errors) == [
                "Too many aliases (2). Maximum allowed is 1"
            ]

    def describe_apollo():
        query = "{ user { id isLoggedIn @client } }"

        def fails_on_client_directives_by_default():
            (document,) = validate(test_schema, sources(query))
            assert document.errors

        def strips_client_fields():
            options = ValidateOptions(apollo=True)
            assert validate(test_schema, sources(query), options) == []

        def keeps_client_fields_if_asked():
            options = ValidateOptions(apollo=True, keep_client_fields=True)
            (document,) = validate(test_schema, sources(query), options)
            assert messages(document.errors) == [
                "Cannot query field 'isLoggedIn' on type 'User'."
            ]

        def accepts_connection_directives():
            options = ValidateOptions(apollo=True)
            body = '{ user { friends @connection(key: "friends") { id } } }'
            assert validate(test_schema, sources(body), options) == []
