"""Shared fixtures for the formvalidator test suite."""

from collections.abc import Iterator

import pytest
import structlog

from formvalidator.config import get_settings
from formvalidator.validators.models import ValidationOptions
from formvalidator.validators.presets import clear_preset_cache


@pytest.fixture(autouse=True)
def _isolate_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Fresh settings, preset cache and structlog config for every test."""
    monkeypatch.delenv("FORMVALIDATOR_PRESETS_DIR", raising=False)
    monkeypatch.delenv("FORMVALIDATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORMVALIDATOR_LOG_JSON", raising=False)
    get_settings.cache_clear()
    clear_preset_cache()
    yield
    get_settings.cache_clear()
    clear_preset_cache()
    structlog.reset_defaults()


@pytest.fixture
def salary_options() -> ValidationOptions:
    return ValidationOptions.model_validate(
        {
            "year": {"types": ["numeric"], "rules": [["greater_than", [0]]]},
            "salary": {"types": ["numeric"], "rules": [["greater_than", [0]]]},
            "days": {"types": ["numeric"], "rules": [["greater_than", [0]]]},
        }
    )
