"""Limit exceeded error"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from graphql import GraphQLError

if TYPE_CHECKING:
    from graphql import Node, Source

__all__ = ["LimitExceededError"]


class LimitExceededError(GraphQLError):
    """A GraphQLError reporting that a document exceeds a configured budget."""

    metric: str
    """Name of the measured metric, e.g. ``"depth"`` or ``"complexity"``"""

    value: Union[int, float]
    """The value computed for the document"""

    limit: Union[int, float]
    """The configured threshold that was exceeded"""

    def __init__(
        self,
        message: str,
        node: Node,
        source: Source | None,
        metric: str,
        value: Union[int, float],
        limit: Union[int, float],
    ) -> None:
        """Initialize the LimitExceededError

        The error is attributed to the given source when the node carries a
        location, so that it points into the validated file rather than into the
        assembled document.
        """
        loc = node.loc
        positions = [loc.start] if source and loc else None
        super().__init__(message, node, source if positions else None, positions)
        self.metric = metric
        self.value = value
        self.limit = limit
