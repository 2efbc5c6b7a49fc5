"""Configuration errors raised by the validation engine.

Field values that fail a check are never raised — they are recorded in the
engine's error report. Only problems with the configuration itself (or with
how the engine is driven) surface as exceptions.
"""


class ValidationConfigError(Exception):
    """Base class for configuration and usage errors."""


class UnconfiguredFieldError(ValidationConfigError):
    """A payload field has no entry in the validation options."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' is not configured in the validation options")


class EngineAlreadyValidatedError(ValidationConfigError):
    """validate() was called again without reset()."""

    def __init__(self):
        super().__init__("Engine has already validated its fields; call reset() before validating again")


class PresetNotFoundError(ValidationConfigError):
    """No preset file defines the requested form."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown preset '{name}'. Available: {', '.join(available) or 'none'}"
        )
