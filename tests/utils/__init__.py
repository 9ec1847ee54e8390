"""Test utilities"""

from .dedent import dedent
from .fragment_chain import fragment_chain
from .schema import test_schema

__all__ = ["dedent", "fragment_chain", "test_schema"]
