"""Recompute orchestration: when to highlight and how to install the result."""

from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..core.abc import (
    AnnotationSink, DocumentSource, EventKind, EventSource, Logger, Meter,
    Notifier, Scheduler, Segmenter, SettingsProvider,
)
from ..core.errors import DocumentUnavailable, PositionResolutionMiss, RenderApplyFailure
from ..core.types import RecomputeResult
from ..core.util import hash_text
from ..providers.loggers import StdlibLogger
from .annotations import AnnotationSet
from .scheduler import Debouncer
from .threshold import compute_highlights

# Settings fields that change what is matched or how it is rendered
RECOMPUTE_FIELDS = frozenset({"max_words", "highlight_style", "highlight_color", "enabled"})

INITIAL_LOAD = "initial-load"


class OrchestratorState(str, Enum):
    IDLE = "idle"
    COMPUTING = "computing"


class RecomputeOrchestrator:
    """
    Owns the current AnnotationSet and replaces it on every recompute.

    Runs on the host loop. A recompute runs to completion before control
    returns; debounced triggers only decide when it starts. Failures never
    propagate to the host: they are logged, surfaced as a notice and leave
    the previous annotations in place.
    """

    def __init__(self, *, document: DocumentSource, sink: AnnotationSink,
                 settings: SettingsProvider,
                 scheduler: Optional[Scheduler] = None,
                 segmenter: Optional[Segmenter] = None,
                 notifier: Optional[Notifier] = None,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize the orchestrator with host collaborators.

        Args:
            document: Source of document snapshots
            sink: Host decoration layer receiving the highlight set
            settings: Provider of the current settings
            scheduler: Deferred-task scheduler; without one triggers recompute immediately
            segmenter: Optional segmenter returning sentence strings
            notifier: Optional user-visible notices
            logger: Structured logger (defaults to the logging module)
            meter: Optional metrics collector
        """
        self.document = document
        self.sink = sink
        self.settings = settings
        self.segmenter = segmenter
        self.notifier = notifier
        self.log = logger or StdlibLogger()
        self.meter = meter
        self.debouncer = Debouncer(scheduler) if scheduler is not None else None
        self.state = OrchestratorState.IDLE
        self._annotations = AnnotationSet.empty()
        self._subscriptions: List[Callable[[], None]] = []

    @property
    def current(self) -> AnnotationSet:
        """The last annotation set the host accepted."""
        return self._annotations

    # Effectful operations

    def recompute(self) -> RecomputeResult:
        """
        Run the full segment, filter, resolve and replace cycle.

        Returns:
            RecomputeResult: applied, cleared, skipped or failed
        """
        return self._guarded(self._recompute)

    def clear(self) -> RecomputeResult:
        """Replace the highlight set with an empty one."""
        return self._guarded(lambda: self._apply(self._annotations.replace_all(()), "cleared"))

    def _guarded(self, operation: Callable[[], RecomputeResult]) -> RecomputeResult:
        if self.state is OrchestratorState.COMPUTING:
            self.log.warn("Recompute requested while computing, ignoring")
            return RecomputeResult(status="skipped", reason="reentrant")
        self.state = OrchestratorState.COMPUTING
        try:
            return operation()
        finally:
            self.state = OrchestratorState.IDLE

    def _recompute(self) -> RecomputeResult:
        try:
            settings = self.settings.get()
            if not settings.enabled:
                return self._apply(self._annotations.replace_all(()), "cleared")

            snapshot = self.document.get_document_snapshot()
            if snapshot is None:
                raise DocumentUnavailable("No active document")

            version = hash_text(snapshot)
            misses: List[PositionResolutionMiss] = []
            annotations = compute_highlights(snapshot, settings, self.segmenter, misses)
            for miss in misses:
                self.log.warn("Sentence position not found, skipping",
                              cursor=miss.cursor, sentence_length=len(miss.sentence))
                if self.meter:
                    self.meter.inc("sentencelight.position_miss")

            new_set = self._annotations.replace_all(annotations, version=version,
                                                    document_length=len(snapshot))

        except DocumentUnavailable as e:
            self.log.info("No document to highlight", reason=str(e))
            self._count("skipped")
            return RecomputeResult(status="skipped", reason="document_unavailable")
        except Exception as e:
            self.log.error("Error highlighting sentences", error=str(e), error_type=type(e).__name__)
            self._notice("Error highlighting sentences")
            self._count("failed")
            return RecomputeResult(status="failed", reason="compute_error")

        return self._apply(new_set, "applied")

    def _apply(self, new_set: AnnotationSet, status: str) -> RecomputeResult:
        """Hand the whole set to the host in one call; keep the old one on rejection."""
        try:
            self.sink.replace_annotations(list(new_set))
        except Exception as e:
            failure = RenderApplyFailure(str(e))
            self.log.error("Host rejected highlight update", error=str(failure))
            self._notice("Error applying highlights")
            self._count("failed")
            return RecomputeResult(status="failed", document_version=new_set.version,
                                   reason="render_apply_failed")

        self._annotations = new_set
        self.log.info("Highlights replaced", status=status, annotations=len(new_set),
                      version=new_set.version)
        self._count(status)
        if self.meter and status == "applied":
            self.meter.observe("sentencelight.long_sentences", float(len(new_set)))
        return RecomputeResult(status=status, annotations=len(new_set),
                               document_version=new_set.version)

    def _notice(self, message: str) -> None:
        if not self.notifier:
            return
        try:
            self.notifier.notify(message)
        except Exception as e:
            self.log.error("Notice failed", error=str(e))

    def _count(self, status: str) -> None:
        if self.meter:
            self.meter.inc("sentencelight.recompute", status=status)

    # Triggers

    def schedule_initial(self) -> None:
        """Schedule the first recompute after load."""
        self._debounce(INITIAL_LOAD, self.settings.get().delays.initial)

    def on_document_changed(self) -> None:
        self._debounce(EventKind.DOCUMENT_CHANGED.value, self.settings.get().delays.document_change)

    def on_view_changed(self) -> None:
        self._debounce(EventKind.ACTIVE_VIEW_CHANGED.value, self.settings.get().delays.view_change)

    def on_theme_changed(self) -> None:
        self._debounce(EventKind.THEME_CHANGED.value, self.settings.get().delays.theme_change)

    def on_settings_changed(self, fields: Iterable[str]) -> None:
        """Recompute right away when a matching or rendering field changed."""
        if RECOMPUTE_FIELDS.intersection(fields):
            self.recompute()

    def _debounce(self, kind: str, delay_ms: int) -> None:
        if not self.settings.get().enabled:
            return
        if self.debouncer is None:
            self.recompute()
            return
        self.debouncer.schedule(kind, delay_ms, self._fire)

    def _fire(self) -> None:
        # Settings may have been disabled while the task was pending
        if self.settings.get().enabled:
            self.recompute()

    # Host wiring

    def attach(self, events: EventSource) -> None:
        """Subscribe to host change notifications."""
        handlers = {
            EventKind.DOCUMENT_CHANGED: self.on_document_changed,
            EventKind.ACTIVE_VIEW_CHANGED: self.on_view_changed,
            EventKind.THEME_CHANGED: self.on_theme_changed,
        }
        for kind, handler in handlers.items():
            self._subscriptions.append(events.subscribe(kind, self._shielded(kind, handler)))

    def detach(self) -> None:
        """Drop host subscriptions and any pending debounced work."""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        if self.debouncer is not None:
            self.debouncer.cancel_all()

    def _shielded(self, kind: EventKind, handler: Callable[[], None]) -> Callable[[], None]:
        """Wrap an event handler so nothing raised reaches the host dispatcher."""
        def _handle():
            try:
                handler()
            except Exception as e:
                self.log.error("Error handling host event", event=kind.value, error=str(e))
        return _handle
