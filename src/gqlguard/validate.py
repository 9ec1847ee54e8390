"""Validation of a batch of GraphQL documents"""

from __future__ import annotations

import logging
from typing import Callable, Collection, List, NamedTuple, Optional, Tuple, Union

from graphql import GraphQLError, GraphQLSchema, Source
from graphql import validate as validate_document

from .apollo import (
    ApolloTransform,
    transform_document_with_apollo,
    transform_schema_with_apollo,
)
from .deprecated import find_deprecated_usages
from .fragments import (
    FragmentGraph,
    assemble_documents,
    find_duplicated_fragments,
    index_fragments,
)
from .language import read_document
from .limits import (
    ComplexityConfig,
    validate_alias_count,
    validate_complexity,
    validate_directive_count,
    validate_query_depth,
    validate_token_count,
)

__all__ = ["InvalidDocument", "ValidateOptions", "validate"]

logger = logging.getLogger(__name__)

Number = Union[int, float]


class ValidateOptions(NamedTuple):
    """Options for validating documents

    Limits set to ``None`` are not checked.
    """

    strict_fragments: bool = True
    """Fail on duplicated fragment names"""
    strict_deprecated: bool = True
    """Report usages of deprecated fields and enum values"""
    apollo: bool = False
    """Support the Apollo client directives ``@client`` and ``@connection``"""
    keep_client_fields: bool = False
    """Keep fields marked with ``@client`` and only remove the directive (Apollo)"""
    max_depth: Optional[int] = None
    """Maximum depth of an operation including referenced fragments"""
    max_alias_count: Optional[int] = None
    """Maximum number of aliases in an operation including referenced fragments"""
    max_directive_count: Optional[int] = None
    """Maximum number of directives in an operation including referenced fragments"""
    max_token_count: Optional[int] = None
    """Maximum number of tokens in an operation including referenced fragments"""
    max_complexity_score: Optional[Number] = 1500
    """Maximum complexity score of an operation including referenced fragments"""
    complexity_scalar_cost: Number = 1
    """Complexity cost of a field without selection set"""
    complexity_object_cost: Number = 2
    """Base complexity cost of a field with selection set"""
    complexity_depth_cost_factor: Number = 1.5
    """Factor applied to the complexity costs of subfields at every level of nesting"""

    @property
    def complexity_config(self) -> ComplexityConfig:
        return ComplexityConfig(
            self.complexity_scalar_cost,
            self.complexity_object_cost,
            self.complexity_depth_cost_factor,
        )


class InvalidDocument(NamedTuple):
    """A source with errors or deprecated usages"""

    source: Source
    errors: List[GraphQLError]
    deprecated: List[GraphQLError]


LimitValidator = Callable[..., Optional[GraphQLError]]


def get_limit_validators(
    options: ValidateOptions,
) -> List[Tuple[str, LimitValidator, dict]]:
    """Get the enabled limit validators with their arguments in pipeline order."""
    limits: List[Tuple[str, LimitValidator, dict]] = []
    if options.max_depth is not None:
        limits.append(
            ("depth", validate_query_depth, dict(max_depth=options.max_depth))
        )
    if options.max_complexity_score is not None:
        limits.append(
            (
                "complexity",
                validate_complexity,
                dict(
                    max_complexity_score=options.max_complexity_score,
                    config=options.complexity_config,
                ),
            )
        )
    if options.max_alias_count is not None:
        limits.append(
            (
                "aliases",
                validate_alias_count,
                dict(max_alias_count=options.max_alias_count),
            )
        )
    if options.max_directive_count is not None:
        limits.append(
            (
                "directives",
                validate_directive_count,
                dict(max_directive_count=options.max_directive_count),
            )
        )
    if options.max_token_count is not None:
        limits.append(
            (
                "tokens",
                validate_token_count,
                dict(max_token_count=options.max_token_count),
            )
        )
    return limits


def validate(
    schema: GraphQLSchema,
    sources: Collection[Source],
    options: Optional[ValidateOptions] = None,
) -> List[InvalidDocument]:
    """Validate the operations of the given sources against the schema.

    Fragments may be defined in any of the sources. Every source containing
    operations is validated as one document made of its operations and all the
    fragments they need, running the structural validation rules, the configured
    limits, the duplicated fragment names check and the search for deprecated
    usages, in that order.

    Returns an :class:`InvalidDocument` for every source with errors or deprecated
    usages, in the order of the given sources. Valid sources are omitted.
    """
    if options is None:
        options = ValidateOptions()
    documents = [read_document(source) for source in sources]
    fragment_index = index_fragments(documents)
    fragment_graph = FragmentGraph.from_fragments(
        fragment.node for fragment in fragment_index.fragments
    )
    logger.debug(
        "Validating %d sources with %d fragments.",
        len(documents),
        len(fragment_graph),
    )

    transform: Optional[ApolloTransform] = None
    if options.apollo:
        transform = ApolloTransform.from_options(options.keep_client_fields)
        schema = transform_schema_with_apollo(schema)

    limit_validators = get_limit_validators(options)
    duplicated_fragments = (
        find_duplicated_fragments(fragment_index.names)
        if options.strict_fragments
        else []
    )
    for fragment_name in {error.fragment_name: None for error in duplicated_fragments}:
        logger.debug(
            "Fragment %r is defined more than once, in %s.",
            fragment_name,
            ", ".join(
                source.name for source in fragment_index.sources_of(fragment_name)
            ),
        )
    invalid_documents: List[InvalidDocument] = []

    for document, assembled in assemble_documents(documents, fragment_graph):
        source = document.source
        if transform is not None:
            assembled = transform_document_with_apollo(assembled, transform)

        errors = list(validate_document(schema, assembled))
        for name, validate_limit, limit_args in limit_validators:
            error = validate_limit(
                source=source,
                document=assembled,
                fragment_graph=fragment_graph,
                **limit_args,
            )
            if error is not None:
                logger.debug("%s: %s limit exceeded.", source.name, name)
                errors.append(error)
        errors.extend(duplicated_fragments)
        deprecated = (
            find_deprecated_usages(schema, assembled)
            if options.strict_deprecated
            else []
        )

        logger.debug(
            "%s: %d errors, %d deprecated usages.",
            source.name,
            len(errors),
            len(deprecated),
        )
        if errors or deprecated:
            invalid_documents.append(InvalidDocument(source, errors, deprecated))

    return invalid_documents

