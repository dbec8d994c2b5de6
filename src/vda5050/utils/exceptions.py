# src/vda5050/utils/exceptions.py

from typing import Any, Iterable, List, NamedTuple

# Error kinds that mean "well-formed input, but a value is out of bounds".
# Anything else (missing field, wrong type, unknown enum member) is a decode failure.
CONSTRAINT_KINDS = frozenset({
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "string_pattern_mismatch",
    "too_short",
    "too_long",
    "value_error",
    # jsonschema keyword names
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "pattern",
    "minItems",
    "maxItems",
})


class FieldError(NamedTuple):
    """One rejected field: dotted path, failed constraint, and error kind."""
    field: str
    constraint: str
    kind: str


class VDA5050Error(Exception):
    """Base exception for all VDA5050 library errors."""
    pass


class SchemaError(VDA5050Error, ValueError):
    """
    Raised when a message or value object cannot be built.

    Attributes:
        model: Name of the model that rejected the input
        errors: One FieldError per rejected field
    """

    def __init__(self, model: str, errors: Iterable[FieldError]):
        self.model = model
        self.errors: List[FieldError] = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        count = len(self.errors)
        lines = [f"{self.model}: {count} invalid field{'s' if count != 1 else ''}"]
        for error in self.errors:
            location = error.field or "<root>"
            lines.append(f"  {location}: {error.constraint} [{error.kind}]")
        return "\n".join(lines)

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class ValidationError(SchemaError):
    """Raised when a field violates its documented range or structural constraint."""
    pass


class DecodeError(SchemaError):
    """Raised when wire input is malformed, misses a required field, has a wrong type or unknown enum value."""
    pass


class ProtocolError(VDA5050Error):
    """Raised for VDA5050 protocol usage violations."""
    pass


def _loc_to_path(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc)


def from_pydantic(model: str, exc: Any, decoding: bool = False) -> SchemaError:
    """
    Translate a pydantic ValidationError into this library's taxonomy.

    Keyword construction always yields ValidationError. When decoding wire
    input, any structural problem turns the whole failure into a DecodeError.
    """
    errors = [
        FieldError(_loc_to_path(err["loc"]), err["msg"], err["type"])
        for err in exc.errors(include_url=False)
    ]
    if decoding and any(error.kind not in CONSTRAINT_KINDS for error in errors):
        return DecodeError(model, errors)
    return ValidationError(model, errors)
