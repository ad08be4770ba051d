"""Plugin shell composing the orchestrator with host lifecycle callbacks."""

from typing import Callable, Dict, List, Optional

from ...core.abc import Logger, Meter, Scheduler, Segmenter
from ...core.errors import SettingsError
from ...providers.loggers import StdlibLogger
from ...runtime.orchestrator import RecomputeOrchestrator
from ...settings.store import SettingsStore
from .command_ids import CLEAR, COMMAND_NAMES, HIGHLIGHT, TOGGLE


class HighlighterPlugin:
    """
    Host-facing plugin object.

    The host passes itself in (document source, annotation sink, event
    source and notifier in one object, or anything with those methods) and
    calls on_load / on_unload / run_command. The plugin holds no host type.
    """

    def __init__(self, *, host, settings: SettingsStore,
                 scheduler: Optional[Scheduler] = None,
                 segmenter: Optional[Segmenter] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize the plugin.

        Args:
            host: Object implementing DocumentSource, AnnotationSink, EventSource and Notifier
            settings: Settings store owning the configuration record
            scheduler: Deferred-task scheduler for debounced triggers
            segmenter: Optional segmenter override
            logger: Structured logger (defaults to the logging module)
            meter: Optional metrics collector
        """
        self.host = host
        self.settings = settings
        self.log = logger or StdlibLogger()
        self.orchestrator = RecomputeOrchestrator(
            document=host,
            sink=host,
            settings=settings,
            scheduler=scheduler,
            segmenter=segmenter,
            notifier=host,
            logger=self.log,
            meter=meter,
        )
        self.loaded = False
        self._commands: Dict[str, Callable[[], None]] = {
            TOGGLE: self.toggle,
            HIGHLIGHT: self.highlight,
            CLEAR: self.clear,
        }
        self._unsubscribe_settings: Optional[Callable[[], None]] = None

    def commands(self) -> List[str]:
        """Registered command ids."""
        return list(self._commands)

    def command_name(self, command_id: str) -> str:
        return COMMAND_NAMES[command_id]

    # Lifecycle

    def on_load(self) -> None:
        if self.loaded:
            return
        self.orchestrator.attach(self.host)
        self._unsubscribe_settings = self.settings.on_change(self.orchestrator.on_settings_changed)
        self.loaded = True
        if self.settings.get().enabled:
            self.orchestrator.schedule_initial()

    def on_unload(self) -> None:
        if not self.loaded:
            return
        try:
            self.orchestrator.clear()
            self.orchestrator.detach()
            if self._unsubscribe_settings is not None:
                self._unsubscribe_settings()
                self._unsubscribe_settings = None
        except Exception as e:
            self.log.error("Error during unload", error=str(e))
        self.loaded = False

    # Commands

    def run_command(self, command_id: str) -> bool:
        """
        Run a registered command.

        Returns:
            bool: False when the id is unknown
        """
        command = self._commands.get(command_id)
        if command is None:
            self.log.warn("Unknown command", command=command_id)
            return False
        command()
        return True

    def toggle(self) -> None:
        try:
            enabled = not self.settings.get().enabled
            # The settings subscription recomputes or clears
            self.settings.update(enabled=enabled)
            self.host.notify("Highlighting enabled" if enabled else "Highlighting disabled")
        except Exception as e:
            self.log.error("Error toggling highlighting", error=str(e))
            self.host.notify("Error toggling highlighting")

    def highlight(self) -> None:
        try:
            self.orchestrator.recompute()
        except Exception as e:
            self.log.error("Error highlighting sentences", error=str(e))
            self.host.notify("Error highlighting sentences")

    def clear(self) -> None:
        try:
            self.orchestrator.clear()
        except Exception as e:
            self.log.error("Error clearing highlights", error=str(e))
            self.host.notify("Error clearing highlights")

    # Settings surface

    def set_max_words(self, value) -> bool:
        """
        Apply a threshold typed by the user; non-positive or non-numeric input is ignored.

        Returns:
            bool: Whether the value was accepted
        """
        try:
            threshold = int(str(value).strip())
        except ValueError:
            return False
        if threshold <= 0:
            return False
        try:
            self.settings.update(max_words=threshold)
        except SettingsError as e:
            self.log.warn("Rejected threshold", value=str(value), error=str(e))
            return False
        return True
