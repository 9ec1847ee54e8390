"""Reading GraphQL sources into documents"""

from .document import ParsedDocument, read_document

__all__ = ["ParsedDocument", "read_document"]
