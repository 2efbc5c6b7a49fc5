"""formvalidator — declarative validation of submitted form fields."""

from formvalidator.log_config import configure_logging
from formvalidator.validators import (
    EngineAlreadyValidatedError,
    UnconfiguredFieldError,
    ValidationConfigError,
    ValidationEngine,
    ValidationOptions,
    load_preset,
    validate_fields,
)

__version__ = "0.1.0"

__all__ = [
    "ValidationEngine",
    "ValidationOptions",
    "validate_fields",
    "load_preset",
    "configure_logging",
    "ValidationConfigError",
    "UnconfiguredFieldError",
    "EngineAlreadyValidatedError",
]
