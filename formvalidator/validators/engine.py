"""Validation Engine — checks a payload of form fields against validation options.

Usage:
    engine = ValidationEngine(options, {"year": "2024", "salary": "0"})
    engine.validate()
    if engine.errors:
        # {"salary": ["value has to be greater than 0"]}

An engine is single-use: it owns the error report of one run. Call reset()
before validating again, otherwise validate() raises rather than appending the
same errors twice.
"""

import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Union

import structlog

from formvalidator.validators.exceptions import EngineAlreadyValidatedError, UnconfiguredFieldError
from formvalidator.validators.models import RuleSpec, TypeName, ValidationOptions, ValidationReport
from formvalidator.validators.rules import check_rule, rule_error_message, to_number
from formvalidator.validators.types import check_type, is_numeric

logger = structlog.get_logger()


class ValidationEngine:
    """Runs type and rule checks for every field present in a payload.

    Design principles:
        - Failing values are data: they land in `errors`, never raised
        - Types and rules are conjunctive: every failing check adds a message
        - Rules only run on numeric strings; other values skip them silently
        - The payload is never modified
    """

    def __init__(
        self,
        options: Union[ValidationOptions, Mapping[str, Any]],
        fields: Mapping[str, Any],
    ):
        """Initialize with validation options and the raw field values.

        Args:
            options: ValidationOptions, or a raw mapping in configuration form
            fields: Field name → raw value. A shallow snapshot is kept.
        """
        if not isinstance(options, ValidationOptions):
            options = ValidationOptions.model_validate(options)
        self.options = options
        self.fields = MappingProxyType(dict(fields))
        self._errors: dict[str, list[str]] = {}
        self._validated = False

    @property
    def errors(self) -> dict[str, list[str]]:
        """Field name → error messages. Fields without errors are absent."""
        return {field: list(messages) for field, messages in self._errors.items()}

    @property
    def is_valid(self) -> bool:
        """True once validate() has run and recorded no errors."""
        return self._validated and not self._errors

    def validate(self) -> None:
        """Check every payload field and record failures in `errors`.

        Raises:
            UnconfiguredFieldError: a payload field has no validation options.
                Nothing is recorded for any field in that case.
            EngineAlreadyValidatedError: the engine already ran and was not reset.
        """
        if self._validated:
            logger.warning("engine_reused", fields=list(self.fields))
            raise EngineAlreadyValidatedError()

        for field in self.fields:
            if field not in self.options:
                logger.error(
                    "unconfigured_field",
                    field=field,
                    configured=list(self.options),
                )
                raise UnconfiguredFieldError(field)

        start_time = time.perf_counter()

        for field, value in self.fields.items():
            spec = self.options[field]
            self._validate_types(spec.types, value, field)
            self._validate_rules(spec.rules, value, field)

        self._validated = True

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "validation_complete",
            passed=not self._errors,
            total_fields=len(self.fields),
            invalid_fields=list(self._errors),
            total_errors=sum(len(messages) for messages in self._errors.values()),
            duration_ms=round(duration, 3),
        )

    def reset(self) -> None:
        """Clear the error report so the engine can validate again."""
        self._errors = {}
        self._validated = False

    def report(self) -> ValidationReport:
        """Summarize the last run as a ValidationReport."""
        return ValidationReport.build(self._errors)

    def _push_error(self, error: str, field: str) -> None:
        self._errors.setdefault(field, []).append(error)

    def _validate_types(self, types: tuple[TypeName, ...], value: Any, field: str) -> None:
        for type_name in types:
            if not check_type(type_name, value):
                logger.debug("type_check_failed", field=field, type=type_name.value, value=repr(value))
                self._push_error(f"value is not {type_name.label}", field)

    def _validate_rules(self, rules: tuple[RuleSpec, ...], value: Any, field: str) -> None:
        # Rules only apply to numeric strings, whatever the configured types say
        if not rules or not is_numeric(value):
            return

        number = to_number(value)
        if number is None:
            logger.debug("rule_check_skipped", field=field, value=repr(value))
            return

        for rule in rules:
            if not check_rule(rule.name, number, rule.args):
                logger.debug("rule_check_failed", field=field, rule=rule.name.value, args=list(rule.args))
                self._push_error(rule_error_message(rule.name, rule.args), field)


def validate_fields(
    options: Union[ValidationOptions, Mapping[str, Any]],
    fields: Mapping[str, Any],
) -> dict[str, list[str]]:
    """Validate a payload in one call and return the error map."""
    engine = ValidationEngine(options, fields)
    engine.validate()
    return engine.errors
