"""
JSON Schema Contract Validators

Validation of the JSON documents exchanged with the HTTP collaborator,
against formal JSON Schema (Draft 2020-12) contracts shipped with the
package.

Schemas:
- configuration_request.json (incoming order request)
- order_quote.json (serialized OrderQuote)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Schemas live in the `schema/` directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'order_quote')

        Returns:
            Parsed schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator compiled from one schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: If data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Yields every ValidationError found in data."""
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """Human-readable messages, one per violation, ordered by path."""
        errors = sorted(self.iter_errors(data), key=lambda e: list(e.absolute_path))
        messages = []
        for error in errors:
            path = "/".join(str(part) for part in error.absolute_path)
            messages.append(f"{path or '<root>'}: {error.message}")
        return messages


class ConfigurationRequestValidator(ContractValidator):
    """Validator for the configuration_request contract."""

    def __init__(self):
        super().__init__("configuration_request")


class OrderQuoteValidator(ContractValidator):
    """Validator for the order_quote contract."""

    def __init__(self):
        super().__init__("order_quote")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_configuration_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: If data does not match the schema
    """
    ConfigurationRequestValidator().validate(data)


def validate_order_quote(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: If data does not match the schema
    """
    OrderQuoteValidator().validate(data)
