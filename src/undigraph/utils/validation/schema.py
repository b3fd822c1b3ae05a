"""
Schema validation for edge-list documents.

A graph document is a JSON object of the form::

    {
        "edges": [["0", "1"], ["1", "2", 3]],
        "allow_parallel_edges": true,
        "default_weight": 0
    }

Each edge is a pair of vertex labels with an optional integer weight. Only
``edges`` is required.
"""

from typing import Any, Dict, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

LABEL_SCHEMA: Dict[str, Any] = {"type": "string", "minLength": 1, "pattern": r"\S"}

GRAPH_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "edges": {
            "type": "array",
            "items": {
                "type": "array",
                "prefixItems": [LABEL_SCHEMA, LABEL_SCHEMA, {"type": "integer"}],
                "minItems": 2,
                "maxItems": 3,
            },
        },
        "allow_parallel_edges": {"type": "boolean"},
        "default_weight": {"type": "integer"},
    },
    "required": ["edges"],
    "additionalProperties": False,
}


class SchemaValidator:
    """
    JSON Schema-based validator for graph documents.

    Attributes:
        schema (Dict[str, Any]): Schema applied to every document
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema or GRAPH_DOCUMENT_SCHEMA

    def validate_document(self, document: Any) -> ValidationResult:
        """
        Validate a decoded JSON document against the schema.

        An empty edge list is valid but produces a warning, since the
        resulting graph has no vertices to search from.

        Args:
            document: Decoded JSON value

        Returns:
            ValidationResult containing validation details and any errors or warnings
        """
        errors = []
        warnings = []

        try:
            json_validate(instance=document, schema=self.schema)
        except JsonSchemaError as e:
            location = "/".join(str(part) for part in e.absolute_path) or "<root>"
            errors.append(f"Schema validation failed at {location}: {e.message}")

        if not errors and not document["edges"]:
            warnings.append("Document contains no edges")

        edge_total = len(document["edges"]) if not errors else 0
        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"edge_count": edge_total},
        )
