"""
SentenceLight - Long sentence highlighting for live text documents.

A pure plugin core that assumes nothing about the editor. The host must
inject document access, the decoration layer and change notifications at
runtime.
"""

from .core.types import Annotation, HighlightStyle, RecomputeResult, SentenceUnit, TextChange
from .runtime.annotations import AnnotationSet
from .runtime.orchestrator import RecomputeOrchestrator
from .runtime.threshold import compute_highlights, long_sentences, word_count
from .segmenters.sentence import SentenceSegmenter, split_sentences
from .settings.schema import HighlighterSettings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Annotation",
    "AnnotationSet",
    "HighlighterSettings",
    "HighlightStyle",
    "RecomputeOrchestrator",
    "RecomputeResult",
    "SentenceSegmenter",
    "SentenceUnit",
    "TextChange",
    "compute_highlights",
    "long_sentences",
    "split_sentences",
    "word_count",
]
