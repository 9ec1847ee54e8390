"""Limit validators

Each validator measures one metric of the operations in an assembled document,
following fragment spreads, and returns a single
:class:`~gqlguard.error.LimitExceededError` if the metric of an operation exceeds
the given threshold, or ``None`` otherwise.
"""

from .alias_count import count_aliases, validate_alias_count
from .complexity import (
    ComplexityConfig,
    calculate_operation_complexity,
    validate_complexity,
)
from .depth import calculate_depth, validate_query_depth
from .directive_count import count_directives, validate_directive_count
from .token_count import calculate_token_count, count_tokens, validate_token_count

__all__ = [
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
]
