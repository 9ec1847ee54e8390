"""Helpers for reporting validation results"""

from __future__ import annotations

import os
from typing import Any, Collection, Dict, List, Optional

from graphql import Source

from .validate import InvalidDocument

__all__ = [
    "count_deprecated",
    "count_errors",
    "filter_documents",
    "move_deprecated_to_errors",
    "report_to_dict",
    "use_relative_paths",
]


def move_deprecated_to_errors(
    documents: Collection[InvalidDocument],
) -> List[InvalidDocument]:
    """Treat deprecated usages as errors."""
    return [
        InvalidDocument(doc.source, [*doc.errors, *doc.deprecated], [])
        for doc in documents
    ]


def filter_documents(
    documents: Collection[InvalidDocument], patterns: Optional[Collection[str]] = None
) -> List[InvalidDocument]:
    """Keep only the documents with a source name containing one of the patterns.

    All documents are kept if no patterns are given.
    """
    if not patterns:
        return list(documents)
    return [
        doc
        for doc in documents
        if any(pattern in doc.source.name for pattern in patterns)
    ]


def use_relative_paths(
    documents: Collection[InvalidDocument], start: Optional[str] = None
) -> List[InvalidDocument]:
    """Show source names as paths relative to the given or current directory.

    The sources of the given documents are not modified.
    """
    return [
        doc._replace(
            source=Source(
                doc.source.body,
                os.path.relpath(doc.source.name, start),
                doc.source.location_offset,
            )
        )
        for doc in documents
    ]


def count_errors(documents: Collection[InvalidDocument]) -> int:
    """Count the documents with errors."""
    return sum(1 for doc in documents if doc.errors)


def count_deprecated(documents: Collection[InvalidDocument]) -> int:
    """Count the documents with deprecated usages."""
    return sum(1 for doc in documents if doc.deprecated)


def report_to_dict(documents: Collection[InvalidDocument]) -> Dict[str, Any]:
    """Get a JSON serializable report of the given validation results.

    The status is ``False`` if any of the documents has errors.
    """
    return {
        "status": not count_errors(documents),
        "documents": [
            {
                "source": doc.source.name,
                "errors": [error.formatted for error in doc.errors],
                "deprecated": [error.formatted for error in doc.deprecated],
            }
            for doc in documents
        ],
    }
