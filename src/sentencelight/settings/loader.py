"""YAML settings loading, validation and persistence."""

import yaml
from pathlib import Path
from typing import Optional, Union

from ..core.abc import Logger
from ..core.errors import SettingsLoadError
from .schema import HighlighterSettings


def _validate(data, source: str) -> HighlighterSettings:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        settings = HighlighterSettings.model_validate(data)
    except Exception as e:
        raise SettingsLoadError(f"Settings validation failed: {e}")

    issues = settings.validate_settings()
    if issues:
        raise SettingsLoadError(f"Settings validation issues: {'; '.join(issues)}")

    return settings


def load_settings(path: Union[str, Path]) -> HighlighterSettings:
    """
    Load and validate highlighter settings from a YAML file.

    Keys missing from the file take their default values.

    Args:
        path: Path to YAML settings file

    Returns:
        HighlighterSettings: Validated settings object

    Raises:
        SettingsLoadError: If file cannot be read or settings are invalid
    """
    path = Path(path)

    if not path.exists():
        raise SettingsLoadError(f"Settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"Invalid YAML in {path}: {e}")
    except Exception as e:
        raise SettingsLoadError(f"Cannot read settings file {path}: {e}")

    return _validate(data, f"Settings file {path}")


def load_settings_from_string(yaml_content: str) -> HighlighterSettings:
    """
    Load and validate highlighter settings from a YAML string.

    Raises:
        SettingsLoadError: If YAML is invalid or settings validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"Invalid YAML content: {e}")

    return _validate(data, "Settings content")


def load_settings_or_default(path: Optional[Union[str, Path]],
                             logger: Optional[Logger] = None) -> HighlighterSettings:
    """Load settings, falling back to defaults when the file is absent or broken."""
    if path is None or not Path(path).exists():
        return HighlighterSettings()
    try:
        return load_settings(path)
    except SettingsLoadError as e:
        if logger:
            logger.error("Error loading settings, using defaults", path=str(path), error=str(e))
        return HighlighterSettings()


def save_settings(settings: HighlighterSettings, path: Union[str, Path]) -> None:
    """
    Write settings to a YAML file.

    Raises:
        SettingsLoadError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings.model_dump(mode="json"), f, sort_keys=False)
    except OSError as e:
        raise SettingsLoadError(f"Cannot write settings file {path}: {e}")
