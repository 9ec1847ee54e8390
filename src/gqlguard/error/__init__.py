"""Validation errors

The :mod:`gqlguard.error` package defines the errors reported by the document
validation engine in addition to the plain :class:`graphql.GraphQLError` instances
produced by structural validation and deprecation detection.

All of these are returned as data in lists and are never raised for a finding.
"""

from .limit_exceeded_error import LimitExceededError
from .duplicate_fragment_name_error import DuplicateFragmentNameError

__all__ = ["DuplicateFragmentNameError", "LimitExceededError"]
