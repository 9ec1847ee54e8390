"""Duplicate fragment name error"""

from graphql import GraphQLError

__all__ = ["DuplicateFragmentNameError"]


class DuplicateFragmentNameError(GraphQLError):
    """A GraphQLError reporting a fragment name defined more than once."""

    def __init__(self, fragment_name: str) -> None:
        super().__init__(f"Name of '{fragment_name}' fragment is not unique")
        self.fragment_name = fragment_name
