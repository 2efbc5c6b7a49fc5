"""Preset loader — reads named form option sets from JSON files.

Presets are plain caller-side configuration: the engine never looks them up
itself. Files shipped next to this module are always available; PRESETS_DIR
adds more (and may override a shipped form of the same name).

File format:
    {"form": "SalaryForm", "fields": {"year": {"types": [...], "rules": [...]}}}
"""

import json
from pathlib import Path
from typing import Optional

import structlog

from formvalidator.config import get_settings
from formvalidator.validators.exceptions import PresetNotFoundError
from formvalidator.validators.models import ValidationOptions

PRESETS_DIR = Path(__file__).parent

logger = structlog.get_logger()

# Cache loaded presets to avoid re-reading from disk
_preset_cache: dict[str, ValidationOptions] = {}


def _preset_dirs() -> list[Path]:
    dirs = [PRESETS_DIR]
    extra: Optional[Path] = get_settings().PRESETS_DIR
    if extra is not None:
        dirs.append(extra)
    return dirs


def _load_all_presets() -> dict[str, ValidationOptions]:
    """Load and cache every preset JSON file."""
    if _preset_cache:
        return _preset_cache

    # Build the full set first so the cache is never left half-filled
    loaded: dict[str, ValidationOptions] = {}
    for directory in _preset_dirs():
        for json_file in sorted(directory.glob("*.json")):
            try:
                data = json.loads(json_file.read_text(encoding="utf-8"))
                form_name = data.get("form", json_file.stem)
                if not isinstance(form_name, str):
                    raise TypeError(f"form name must be a string, got {type(form_name).__name__}")
                loaded[form_name] = ValidationOptions.model_validate(data.get("fields", {}))
            # ValueError covers JSONDecodeError, UnicodeDecodeError and pydantic's ValidationError
            except (ValueError, OSError, TypeError, AttributeError) as e:
                logger.warning("preset_skipped", path=str(json_file), error=str(e))
                continue

    _preset_cache.update(loaded)
    return _preset_cache


def load_preset(name: str) -> ValidationOptions:
    """Load the validation options of a named form.

    Args:
        name: Form identifier (e.g., "SalaryForm")

    Returns:
        ValidationOptions for the form

    Raises:
        PresetNotFoundError: no preset file defines the form
    """
    presets = _load_all_presets()
    try:
        return presets[name]
    except KeyError:
        raise PresetNotFoundError(name, sorted(presets)) from None


def get_all_presets() -> list[str]:
    """List all available preset form names."""
    return sorted(_load_all_presets())


def clear_preset_cache() -> None:
    """Forget loaded presets so the next lookup re-reads the files."""
    _preset_cache.clear()
