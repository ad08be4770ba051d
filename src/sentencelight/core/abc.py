"""Protocol interfaces for dependency injection from the host editor."""

from enum import Enum
from typing import Protocol, Sequence, List, Optional, Callable, Iterable, Any

from .types import Annotation


class EventKind(str, Enum):
    """Host notifications the orchestrator listens to."""
    DOCUMENT_CHANGED = "document-changed"
    ACTIVE_VIEW_CHANGED = "active-view-changed"
    THEME_CHANGED = "theme-changed"


class DocumentSource(Protocol):
    """Host-provided access to the active document."""

    def get_document_snapshot(self) -> Optional[str]:
        """
        Read the full text of the active document.

        Returns:
            Optional[str]: Current text, or None when no view is active
        """
        ...


class AnnotationSink(Protocol):
    """Host decoration layer that renders the highlight set."""

    def replace_annotations(self, annotations: Sequence[Annotation]) -> None:
        """
        Install a new highlight set, discarding the previous one.

        Args:
            annotations: Ordered, non-overlapping ranges. Empty clears.
        """
        ...


class EventSource(Protocol):
    """Host change notifications."""

    def subscribe(self, kind: EventKind, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register a payload-free callback for an event kind.

        Returns:
            Callable[[], None]: Function that removes the subscription
        """
        ...


class SettingsProvider(Protocol):
    """Owner of the current settings record."""

    def get(self) -> Any:
        """Return the current settings."""
        ...

    def on_change(self, callback: Callable[[Iterable[str]], None]) -> Callable[[], None]:
        """Register a callback receiving the names of changed fields."""
        ...


class TaskHandle(Protocol):
    """Handle to a deferred task."""

    def cancel(self) -> None:
        """Prevent the task from running if it has not fired yet."""
        ...


class Scheduler(Protocol):
    """Deferred-task scheduler running tasks on the host loop."""

    def schedule(self, delay_ms: int, task: Callable[[], None]) -> TaskHandle:
        """Run task once after delay_ms milliseconds."""
        ...


class Segmenter(Protocol):
    """Host-injected text segmenter (optional). If None, use the built-in scanner."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into trimmed sentence strings in document order.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of sentence strings
        """
        ...


class Notifier(Protocol):
    """User-visible notices."""

    def notify(self, message: str) -> None:
        """Show a short message to the user."""
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
