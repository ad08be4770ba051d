"""Data types and result structures for SentenceLight operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HighlightStyle(str, Enum):
    """Rendering style tag carried by every annotation."""
    BACKGROUND = "background"
    UNDERLINE = "underline"

    @property
    def css_class(self) -> str:
        """Mark class name the host renderer attaches to the range."""
        if self is HighlightStyle.UNDERLINE:
            return "long-sentence-underline"
        return "long-sentence-highlight"


@dataclass
class SentenceUnit:
    """A trimmed sentence-like run of a document snapshot."""
    text: str
    start: int                  # offset of the first character
    end: int                    # exclusive offset
    word_count: int


@dataclass(frozen=True)
class Annotation:
    """A highlighted character range plus its rendering style."""
    start: int
    end: int
    style: HighlightStyle = HighlightStyle.BACKGROUND

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid annotation range: [{self.start}, {self.end})")


@dataclass(frozen=True)
class TextChange:
    """One host edit: document[start:end] replaced by insert."""
    start: int
    end: int
    insert: str = ""

    @property
    def delta(self) -> int:
        """Change in document length caused by this edit."""
        return len(self.insert) - (self.end - self.start)


@dataclass
class RecomputeResult:
    """Outcome of a single recompute or clear."""
    status: str                          # "applied" | "cleared" | "skipped" | "failed"
    annotations: int = 0                 # number of annotations installed
    document_version: Optional[str] = None
    reason: Optional[str] = None         # why skipped or failed (if applicable)

    @property
    def ok(self) -> bool:
        """Whether the annotation layer reflects this run."""
        return self.status in ("applied", "cleared")
