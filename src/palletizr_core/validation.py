from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .units import parse_float

VALIDATION_RULES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "carton": {
        "length": {"min": 1, "max": 500, "unit": "cm"},
        "width": {"min": 1, "max": 500, "unit": "cm"},
        "height": {"min": 1, "max": 500, "unit": "cm"},
        "weight": {"min": 0.1, "max": 1000, "unit": "kg"},
        "quantity": {"min": 1, "max": 10000, "unit": "pieces"},
    },
    "pallet": {
        "length": {"min": 50, "max": 200, "unit": "cm"},
        "width": {"min": 50, "max": 200, "unit": "cm"},
        "height": {"min": 10, "max": 50, "unit": "cm"},
        "maxStackHeight": {"min": 100, "max": 300, "unit": "cm"},
        "maxStackWeight": {"min": 100, "max": 2000, "unit": "kg"},
    },
    "container": {
        "length": {"min": 500, "max": 1500, "unit": "cm"},
        "width": {"min": 200, "max": 300, "unit": "cm"},
        "height": {"min": 200, "max": 300, "unit": "cm"},
        "weightCapacity": {"min": 10000, "max": 30000, "unit": "kg"},
    },
}


class InputRangeError(ValueError):
    """Raised at the input boundary when fields fail validation.

    ``errors`` maps category to ``{field: message}``.
    """

    def __init__(self, errors: Mapping[str, Mapping[str, str]]) -> None:
        self.errors = {category: dict(fields) for category, fields in errors.items()}
        details = "; ".join(
            message for fields in self.errors.values() for message in fields.values()
        )
        super().__init__(f"invalid input: {details}")


@dataclass(frozen=True)
class FieldValidation:
    is_valid: bool
    error: Optional[str] = None


@dataclass
class ValidationResult:
    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


def _format_limit(value: float) -> str:
    return f"{value:g}"


def validate_field(value: Any, field: str, category: str) -> FieldValidation:
    rules = VALIDATION_RULES.get(category, {}).get(field)
    if rules is None:
        return FieldValidation(True)

    try:
        number = parse_float(value)
    except (TypeError, ValueError):
        return FieldValidation(False, f"Please enter a valid number for {field}")

    if number < rules["min"]:
        return FieldValidation(
            False, f"{field} must be at least {_format_limit(rules['min'])} {rules['unit']}"
        )
    if number > rules["max"]:
        return FieldValidation(
            False, f"{field} cannot exceed {_format_limit(rules['max'])} {rules['unit']}"
        )
    return FieldValidation(True)


def validate_all(record: Mapping[str, Any], category: str) -> ValidationResult:
    errors: Dict[str, str] = {}
    for name, value in record.items():
        result = validate_field(value, name, category)
        if not result.is_valid:
            errors[name] = result.error or ""
    return ValidationResult(is_valid=not errors, errors=errors)
