"""
Validation package for undigraph.

Provides JSON schema validation for edge-list documents before they are
turned into graphs.
"""

from .base import ValidationResult
from .schema import GRAPH_DOCUMENT_SCHEMA, SchemaValidator

__all__ = [
    "GRAPH_DOCUMENT_SCHEMA",
    "SchemaValidator",
    "ValidationResult",
]
