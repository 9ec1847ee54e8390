"""Deprecated usages

Fields and enum values marked with ``@deprecated`` in the schema can still be
used by documents. Their usages are reported apart from the validation errors
and only fail a document if the caller promotes them, see
:func:`gqlguard.report.move_deprecated_to_errors`.
"""

from __future__ import annotations

from typing import List, Tuple, Type

from graphql import DocumentNode, GraphQLError, GraphQLSchema, validate
from graphql.validation import ASTValidationRule, NoDeprecatedCustomRule

__all__ = ["deprecation_rules", "find_deprecated_usages"]


deprecation_rules: Tuple[Type[ASTValidationRule], ...] = (NoDeprecatedCustomRule,)
"""A tuple with the rules reporting usages of deprecated schema elements"""


def find_deprecated_usages(
    schema: GraphQLSchema, document: DocumentNode
) -> List[GraphQLError]:
    """Report every deprecated schema element used by the document.

    Fragments are checked where they are defined, so a fragment spread in several
    places is reported once.
    """
    return validate(schema, document, deprecation_rules)
