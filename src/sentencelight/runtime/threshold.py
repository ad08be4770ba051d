"""Word-count threshold filter and forward-only position resolution."""

from typing import Iterable, List, Optional, Tuple

from ..core.abc import Segmenter
from ..core.errors import PositionResolutionMiss, SegmentationFailure
from ..core.types import Annotation, HighlightStyle, SentenceUnit
from ..segmenters.sentence import split_sentences


def word_count(text: str) -> int:
    """Count whitespace-separated tokens of the trimmed text."""
    return len([word for word in text.strip().split() if word])


def is_long_sentence(unit: SentenceUnit, max_words: int) -> bool:
    """A unit qualifies only when it has strictly more than max_words words."""
    return unit.word_count > max_words


def long_sentences(text: str, max_words: int) -> List[SentenceUnit]:
    """
    Segment text and keep the units above the word threshold.

    Args:
        text: Document snapshot
        max_words: Highest word count that is still acceptable

    Returns:
        List[SentenceUnit]: Long units in document order
    """
    if not text or not text.strip():
        return []
    return [unit for unit in split_sentences(text) if is_long_sentence(unit, max_words)]


def resolve_positions(text: str,
                      sentences: Iterable[str]) -> Tuple[List[Tuple[int, int]], List[PositionResolutionMiss]]:
    """
    Map sentence strings back to offsets by scanning forward.

    Each sentence is searched from the end of the previously resolved one, so
    repeated sentences resolve to successive occurrences and the spans come
    out ordered and non-overlapping.

    Args:
        text: Document snapshot the sentences were derived from
        sentences: Trimmed sentence strings in document order

    Returns:
        tuple: (spans, misses) where misses lists the skipped sentences
    """
    spans: List[Tuple[int, int]] = []
    misses: List[PositionResolutionMiss] = []
    cursor = 0

    for sentence in sentences:
        if not sentence:
            continue
        found = text.find(sentence, cursor)
        if found == -1:
            misses.append(PositionResolutionMiss(sentence, cursor))
            continue
        end = found + len(sentence)
        spans.append((found, end))
        cursor = end

    return spans, misses


def compute_highlights(document: str, settings,
                       segmenter: Optional[Segmenter] = None,
                       misses: Optional[List[PositionResolutionMiss]] = None) -> List[Annotation]:
    """
    Compute the highlight ranges for a document snapshot.

    Pure and host-agnostic: the same snapshot and settings always give the
    same annotations. The enabled flag is the caller's concern.

    Args:
        document: Document snapshot
        settings: Settings providing max_words and highlight_style
        segmenter: Optional injected segmenter returning sentence strings
        misses: Optional list collecting unresolved sentences

    Returns:
        List[Annotation]: Ordered, non-overlapping annotations

    Raises:
        SegmentationFailure: If the segmentation step raises unexpectedly
    """
    if not document or not document.strip():
        return []

    style = HighlightStyle(settings.highlight_style)
    max_words = settings.max_words

    try:
        if segmenter is None:
            spans = [(unit.start, unit.end) for unit in long_sentences(document, max_words)]
        else:
            sentences = [s.strip() for s in segmenter.segment(document)]
            long_texts = [s for s in sentences if word_count(s) > max_words]
            spans, missed = resolve_positions(document, long_texts)
            if misses is not None:
                misses.extend(missed)
    except Exception as e:
        raise SegmentationFailure(f"Segmentation failed: {e}") from e

    return [Annotation(start=start, end=end, style=style) for start, end in spans]
