"""gqlguard

Static validation of GraphQL documents against a schema.

Operations are validated together with all the fragments they need, which may be
defined in any of the validated sources. Besides the rules of the GraphQL
specification, configurable budgets for the depth, complexity score, number of
aliases, number of directives and number of tokens of every operation are enforced,
and usages of deprecated fields and enum values are reported::

    from graphql import Source, build_schema
    from gqlguard import ValidateOptions, validate

    invalid_documents = validate(
        build_schema(sdl), [Source(body, "query.graphql")], ValidateOptions(max_depth=5)
    )

Parsing and the structural validation rules are provided by GraphQL-core.
"""

# The package version
from .version import version, version_info

# Errors
from .error import DuplicateFragmentNameError, LimitExceededError

# Parsed documents
from .language import ParsedDocument, read_document

# Fragments
from .fragments import (
    FragmentGraph,
    FragmentIndex,
    IndexedFragment,
    assemble_document,
    assemble_documents,
    find_duplicated_fragments,
    get_fragment_spread_names,
    index_fragments,
    resolve_fragments,
)

# Limits
from .limits import (
    ComplexityConfig,
    calculate_depth,
    calculate_operation_complexity,
    calculate_token_count,
    count_aliases,
    count_directives,
    count_tokens,
    validate_alias_count,
    validate_complexity,
    validate_directive_count,
    validate_query_depth,
    validate_token_count,
)

# Apollo client directives
from .apollo import (
    ApolloTransform,
    transform_document_with_apollo,
    transform_schema_with_apollo,
)

# Deprecated usages
from .deprecated import find_deprecated_usages

# Validation
from .validate import InvalidDocument, ValidateOptions, validate

# Reporting
from .report import (
    count_deprecated,
    count_errors,
    filter_documents,
    move_deprecated_to_errors,
    report_to_dict,
    use_relative_paths,
)

__all__ = [
    "version",
    "version_info",
    "DuplicateFragmentNameError",
    "LimitExceededError",
    "ParsedDocument",
    "read_document",
    "FragmentGraph",
    "FragmentIndex",
    "IndexedFragment",
    "assemble_document",
    "assemble_documents",
    "find_duplicated_fragments",
    "get_fragment_spread_names",
    "index_fragments",
    "resolve_fragments",
    "ComplexityConfig",
    "calculate_depth",
    "calculate_operation_complexity",
    "calculate_token_count",
    "count_aliases",
    "count_directives",
    "count_tokens",
    "validate_alias_count",
    "validate_complexity",
    "validate_directive_count",
    "validate_query_depth",
    "validate_token_count",
    "ApolloTransform",
    "transform_document_with_apollo",
    "transform_schema_with_apollo",
    "find_deprecated_usages",
    "InvalidDocument",
    "ValidateOptions",
    "validate",
    "count_deprecated",
    "count_errors",
    "filter_documents",
    "move_deprecated_to_errors",
    "report_to_dict",
    "use_relative_paths",
]
