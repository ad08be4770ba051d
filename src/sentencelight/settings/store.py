"""In-process owner of the current settings record."""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

from pydantic import ValidationError

from ..core.abc import Logger
from ..core.errors import SettingsError, SettingsLoadError
from .loader import load_settings_or_default, save_settings
from .schema import HighlighterSettings


class SettingsStore:
    """
    Holds the settings, validates updates and notifies subscribers.

    Subscribers receive the names of the fields that actually changed.
    """

    def __init__(self, settings: Optional[HighlighterSettings] = None,
                 path: Optional[Union[str, Path]] = None,
                 logger: Optional[Logger] = None):
        self._settings = settings or HighlighterSettings()
        self.path = Path(path) if path is not None else None
        self.log = logger
        self._callbacks: List[Callable[[Iterable[str]], None]] = []

    @classmethod
    def open(cls, path: Union[str, Path], logger: Optional[Logger] = None) -> "SettingsStore":
        """Create a store backed by a YAML file, using defaults if it is missing or broken."""
        return cls(load_settings_or_default(path, logger), path=path, logger=logger)

    def get(self) -> HighlighterSettings:
        return self._settings

    def on_change(self, callback: Callable[[Iterable[str]], None]) -> Callable[[], None]:
        self._callbacks.append(callback)

        def _unsubscribe():
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def update(self, **changes) -> Set[str]:
        """
        Apply and persist changes, then notify subscribers.

        Args:
            **changes: Field values to change

        Returns:
            Set[str]: Names of fields whose value changed

        Raises:
            SettingsError: If the resulting settings are invalid
        """
        data = self._settings.model_dump()
        data.update(changes)
        try:
            updated = HighlighterSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings update: {e}")

        issues = updated.validate_settings()
        if issues:
            raise SettingsError(f"Invalid settings update: {'; '.join(issues)}")

        changed = {name for name in changes
                   if getattr(updated, name) != getattr(self._settings, name)}
        if not changed:
            return changed

        self._settings = updated
        self._persist()

        for callback in list(self._callbacks):
            callback(changed)
        return changed

    def _persist(self) -> None:
        if self.path is None:
            return
        try:
            save_settings(self._settings, self.path)
        except SettingsLoadError as e:
            if self.log:
                self.log.error("Error saving settings", path=str(self.path), error=str(e))
