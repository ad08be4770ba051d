"""Ordered, non-overlapping highlight ranges over one document version."""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.types import Annotation, TextChange


class AnnotationSet:
    """
    Immutable ordered collection of annotations.

    The set is tagged with the version (document fingerprint) it was computed
    against. It is only ever replaced as a whole; map_changes exists for host
    decoration layers that shift ranges through edits.
    """

    __slots__ = ("_items", "version")

    def __init__(self, annotations: Iterable[Annotation] = (),
                 version: Optional[str] = None,
                 document_length: Optional[int] = None):
        """
        Build and validate an annotation set.

        Args:
            annotations: Annotations ordered by start
            version: Fingerprint of the document snapshot
            document_length: When given, every range must end within it

        Raises:
            ValueError: If ranges are unordered, overlap or exceed the document
        """
        items = tuple(annotations)
        previous_end = 0
        for ann in items:
            if ann.start < previous_end:
                raise ValueError(f"Annotations overlap or are unordered at offset {ann.start}")
            if document_length is not None and ann.end > document_length:
                raise ValueError(f"Annotation [{ann.start}, {ann.end}) exceeds document length {document_length}")
            previous_end = ann.end
        self._items = items
        self.version = version

    @classmethod
    def empty(cls, version: Optional[str] = None) -> "AnnotationSet":
        return cls((), version=version)

    def replace_all(self, annotations: Iterable[Annotation], version: Optional[str] = None,
                    document_length: Optional[int] = None) -> "AnnotationSet":
        """Return a new set holding only the given annotations."""
        return AnnotationSet(annotations, version=version, document_length=document_length)

    def map_changes(self, changes: Sequence[TextChange]) -> "AnnotationSet":
        """
        Shift ranges through a sequence of edits applied in order.

        A start inside a replaced region moves past the inserted text and an
        end inside moves to the edit start, so inserted text is never
        highlighted. Ranges that collapse are dropped.

        Args:
            changes: Edits in the order the host applied them

        Returns:
            AnnotationSet: Remapped set, version cleared
        """
        items: List[Annotation] = list(self._items)
        for change in changes:
            mapped: List[Annotation] = []
            for ann in items:
                start = _map_position(ann.start, change, after=True)
                end = _map_position(ann.end, change, after=False)
                if start < end:
                    mapped.append(Annotation(start=start, end=end, style=ann.style))
            items = mapped
        return AnnotationSet(items, version=None)

    def spans(self) -> List[Tuple[int, int]]:
        return [(ann.start, ann.end) for ann in self._items]

    def texts(self, document: str) -> List[str]:
        """Highlighted substrings of document."""
        return [document[ann.start:ann.end] for ann in self._items]

    def __iter__(self) -> Iterator[Annotation]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AnnotationSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"AnnotationSet({list(self._items)!r}, version={self.version!r})"


def _map_position(pos: int, change: TextChange, after: bool) -> int:
    if pos < change.start:
        return pos
    if pos > change.end:
        return pos + change.delta
    # Inside the replaced region, or at an insertion point
    return change.start + len(change.insert) if after else change.start
