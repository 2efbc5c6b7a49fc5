"""Field Validator — declarative type and rule checks for submitted form fields.

Usage:
    from formvalidator.validators import ValidationEngine

    engine = ValidationEngine(options, fields)
    engine.validate()
    if engine.errors:
        # {field: ["value is not numeric", ...]}
"""

from formvalidator.validators.engine import ValidationEngine, validate_fields
from formvalidator.validators.exceptions import (
    EngineAlreadyValidatedError,
    PresetNotFoundError,
    UnconfiguredFieldError,
    ValidationConfigError,
)
from formvalidator.validators.models import (
    FieldSpec,
    RuleName,
    RuleSpec,
    TypeName,
    ValidationOptions,
    ValidationReport,
)
from formvalidator.validators.presets import get_all_presets, load_preset

__all__ = [
    "ValidationEngine",
    "validate_fields",
    "ValidationOptions",
    "FieldSpec",
    "RuleSpec",
    "TypeName",
    "RuleName",
    "ValidationReport",
    "ValidationConfigError",
    "UnconfiguredFieldError",
    "EngineAlreadyValidatedError",
    "PresetNotFoundError",
    "load_preset",
    "get_all_presets",
]
