"""Form presets — JSON-based validation options for named forms."""

from formvalidator.validators.presets.loader import clear_preset_cache, get_all_presets, load_preset

__all__ = ["load_preset", "get_all_presets", "clear_preset_cache"]
