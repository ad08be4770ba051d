"""In-memory editor host for testing and offline use."""

from typing import Callable, Dict, List, Optional, Sequence

from ..core.abc import EventKind
from ..core.types import Annotation, TextChange
from ..runtime.annotations import AnnotationSet


class MemoryEditor:
    """
    A simple editor host holding one document and its decoration layer.

    Implements DocumentSource, AnnotationSink, EventSource and Notifier.
    Edits shift the installed annotations the way an editor's decoration
    layer does; they never create new ranges.
    """

    def __init__(self, text: str = "", active: bool = True):
        """
        Initialize the editor.

        Args:
            text: Initial document text
            active: Whether a view is open on the document
        """
        self.text = text
        self.active = active
        self.annotations = AnnotationSet.empty()
        self.notices: List[str] = []
        self.apply_count = 0
        self._listeners: Dict[EventKind, List[Callable[[], None]]] = {kind: [] for kind in EventKind}

    # DocumentSource

    def get_document_snapshot(self) -> Optional[str]:
        if not self.active:
            return None
        return self.text

    # AnnotationSink

    def replace_annotations(self, annotations: Sequence[Annotation]) -> None:
        self.annotations = AnnotationSet(annotations, document_length=len(self.text))
        self.apply_count += 1

    # EventSource

    def subscribe(self, kind: EventKind, callback: Callable[[], None]) -> Callable[[], None]:
        self._listeners[kind].append(callback)

        def _unsubscribe():
            if callback in self._listeners[kind]:
                self._listeners[kind].remove(callback)

        return _unsubscribe

    def listener_count(self, kind: EventKind) -> int:
        return len(self._listeners[kind])

    def emit(self, kind: EventKind) -> None:
        for callback in list(self._listeners[kind]):
            callback()

    # Notifier

    def notify(self, message: str) -> None:
        self.notices.append(message)

    # Editing and view changes

    def edit(self, start: int, end: int, insert: str = "") -> None:
        """Replace text[start:end] with insert and remap the highlights."""
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Edit range [{start}, {end}) outside document of length {len(self.text)}")
        change = TextChange(start=start, end=end, insert=insert)
        self.text = self.text[:start] + insert + self.text[end:]
        self.annotations = self.annotations.map_changes([change])
        self.emit(EventKind.DOCUMENT_CHANGED)

    def insert(self, pos: int, text: str) -> None:
        self.edit(pos, pos, text)

    def set_text(self, text: str) -> None:
        """Replace the whole document."""
        self.edit(0, len(self.text), text)

    def open_view(self, text: str) -> None:
        """Switch the active view to another document; its highlights start empty."""
        self.text = text
        self.active = True
        self.annotations = AnnotationSet.empty()
        self.emit(EventKind.ACTIVE_VIEW_CHANGED)

    def close_view(self) -> None:
        self.active = False
        self.annotations = AnnotationSet.empty()
        self.emit(EventKind.ACTIVE_VIEW_CHANGED)

    def change_theme(self) -> None:
        self.emit(EventKind.THEME_CHANGED)

    def highlighted_text(self) -> List[str]:
        """Text currently covered by each highlight."""
        return self.annotations.texts(self.text)
