import json
import logging
from typing import Any, Dict, List, Optional, Type, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JSONSchemaValidationError

from ..models import MESSAGE_TYPES, get_message_model
from ..models.base import VDA5050Model
from ..utils.exceptions import CONSTRAINT_KINDS, DecodeError, FieldError, ValidationError

logger = logging.getLogger(__name__)


def _leaf_errors(error: JSONSchemaValidationError) -> List[JSONSchemaValidationError]:
    # anyOf branches for optional fields: the "type: null" branch is noise when
    # the value is present, so prefer the branches that say something else.
    if not error.context:
        return [error]
    relevant = [sub for sub in error.context if sub.validator != "type"] or list(error.context)
    leaves: List[JSONSchemaValidationError] = []
    for sub in relevant:
        leaves.extend(_leaf_errors(sub))
    return leaves


def _to_field_error(error: JSONSchemaValidationError) -> FieldError:
    field = ".".join(str(part) for part in error.absolute_path)
    return FieldError(field, error.message, str(error.validator))


class MessageValidator:
    """
    VDA5050 message validator using JSON Schema generated from the models.

    Checks raw payloads structurally (required fields, types, enum members,
    numeric ranges) and reports every violation at once. String formats and
    cross-field contracts such as the knot vector length are left to model
    decoding.
    """

    def __init__(self, models: Optional[Dict[str, Type[VDA5050Model]]] = None):
        self.models = dict(models) if models is not None else dict(MESSAGE_TYPES)
        self._schema_cache: Dict[str, Dict[str, Any]] = {}
        self._validator_cache: Dict[str, Draft202012Validator] = {}

    def _model_for(self, message_type: str) -> Type[VDA5050Model]:
        if message_type in self.models:
            return self.models[message_type]
        return get_message_model(message_type)

    def _load_schema(self, message_type: str) -> Dict[str, Any]:
        """Generate and cache the JSON schema for a message type."""
        if message_type not in self._schema_cache:
            model = self._model_for(message_type)
            schema = model.model_json_schema()
            self._schema_cache[message_type] = schema
            self._validator_cache[message_type] = Draft202012Validator(schema)
        return self._schema_cache[message_type]

    def validate_message(self, message_type: str, payload: Union[str, bytes, dict]) -> bool:
        """
        Validate a VDA5050 message against its JSON schema.

        Raises DecodeError on malformed JSON or structural violations and
        ValidationError when only range or pattern constraints failed.
        """
        self._load_schema(message_type)
        try:
            data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        except json.JSONDecodeError as e:
            raise DecodeError(message_type, [FieldError("", f"Invalid JSON: {e}", "json_invalid")]) from e

        validator = self._validator_cache[message_type]
        leaves = [
            leaf
            for error in validator.iter_errors(data)
            for leaf in _leaf_errors(error)
        ]
        if not leaves:
            logger.debug(f"Message '{message_type}' validation successful")
            return True

        errors = [_to_field_error(leaf) for leaf in sorted(leaves, key=lambda e: list(map(str, e.absolute_path)))]
        if all(error.kind in CONSTRAINT_KINDS for error in errors):
            raise ValidationError(message_type, errors)
        raise DecodeError(message_type, errors)

    def get_schema(self, message_type: str) -> Dict[str, Any]:
        """Return the JSON schema for a message type."""
        return self._load_schema(message_type)

    def get_required_fields(self, message_type: str) -> List[str]:
        """Return the list of required top-level fields as declared in the schema."""
        schema = self._load_schema(message_type)
        return schema.get("required", [])
