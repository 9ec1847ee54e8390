"""Token count limit"""

from __future__ import annotations

from typing import Dict, Optional, Union

from graphql import DocumentNode, Node, Source, print_ast
from graphql.language import Lexer, TokenKind

from ..error import LimitExceededError
from ..fragments import FragmentGraph
from .lookup import (
    FragmentGetter,
    collect_referenced_fragments,
    fragment_getter,
    get_operations,
)

__all__ = [
    "calculate_token_count",
    "count_tokens",
    "validate_token_count",
]


def count_tokens(source: Union[Source, str]) -> int:
    """Count the lexical tokens of a GraphQL source.

    Comments and the start and end of file markers are not counted.
    """
    if not isinstance(source, Source):
        source = Source(source)
    lexer = Lexer(source)
    count = 0
    while lexer.advance().kind != TokenKind.EOF:
        count += 1
    return count


def calculate_token_count(
    node: Node,
    get_fragment: FragmentGetter,
    fragment_token_counts: Optional[Dict[str, int]] = None,
) -> int:
    """Count the tokens of a printed node and of all fragments it references.

    Every referenced fragment is counted once, however often it is spread. Token
    counts of fragments can be shared between calls via ``fragment_token_counts``.
    """
    if fragment_token_counts is None:
        fragment_token_counts = {}
    token_count = count_tokens(print_ast(node))
    for fragment in collect_referenced_fragments(node, get_fragment):
        fragment_name = fragment.name.value
        fragment_token_count = fragment_token_counts.get(fragment_name)
        if fragment_token_count is None:
            fragment_token_count = count_tokens(print_ast(fragment))
            fragment_token_counts[fragment_name] = fragment_token_count
        token_count += fragment_token_count
    return token_count


def validate_token_count(
    *,
    source: Optional[Source],
    document: DocumentNode,
    max_token_count: int,
    fragment_graph: Optional[FragmentGraph] = None,
) -> Optional[LimitExceededError]:
    """Check that no operation of the document consists of too many tokens."""
    get_fragment = fragment_getter(document, fragment_graph)
    fragment_token_counts: Dict[str, int] = {}
    for operation in get_operations(document):
        token_count = calculate_token_count(
            operation, get_fragment, fragment_token_counts
        )
        if token_count > max_token_count:
            return LimitExceededError(
                f"Query exceeds maximum token count of {max_token_count}"
                f" (actual: {token_count})",
                operation,
                source,
                "tokens",
                token_count,
                max_token_count,
            )
    return None
