"""Deterministic sentence segmenter with no external dependencies."""

from enum import Enum
from typing import List, Optional

from ..core.types import SentenceUnit

_TERMINATORS = frozenset(".!?")


class _ScanState(Enum):
    IN_SENTENCE = 1
    AT_BOUNDARY = 2


class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.

    A boundary is either terminal punctuation followed by whitespace, or a
    paragraph break (a line break, optional non-newline whitespace, another
    line break). Sentences glued together without whitespace ("Done.Next.")
    stay one unit.
    """

    def split(self, text: str) -> List[SentenceUnit]:
        """
        Partition text into trimmed sentence units with offsets.

        Args:
            text: Document snapshot to segment

        Returns:
            List[SentenceUnit]: Units in document order, none empty
        """
        units: List[SentenceUnit] = []
        n = len(text)
        state = _ScanState.AT_BOUNDARY
        unit_start = 0
        i = 0

        while i < n:
            ch = text[i]

            if state is _ScanState.AT_BOUNDARY:
                # Separator whitespace belongs to neither neighbour
                if ch.isspace():
                    i += 1
                    continue
                unit_start = i
                state = _ScanState.IN_SENTENCE

            if ch in _TERMINATORS and i + 1 < n and text[i + 1].isspace():
                self._emit(text, unit_start, i + 1, units)
                state = _ScanState.AT_BOUNDARY
                i += 1
                continue

            if ch == "\n":
                after = _paragraph_break_end(text, i)
                if after is not None:
                    self._emit(text, unit_start, i, units)
                    state = _ScanState.AT_BOUNDARY
                    i = after
                    continue

            i += 1

        if state is _ScanState.IN_SENTENCE:
            self._emit(text, unit_start, n, units)

        return units

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentence strings.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of trimmed sentence strings
        """
        return [unit.text for unit in self.split(text)]

    @staticmethod
    def _emit(text: str, start: int, end: int, units: List[SentenceUnit]) -> None:
        """Trim [start, end) by moving offsets and append it unless empty."""
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        if start == end:
            return
        unit_text = text[start:end]
        units.append(SentenceUnit(
            text=unit_text,
            start=start,
            end=end,
            word_count=len(unit_text.split()),
        ))


def _paragraph_break_end(text: str, newline_at: int) -> Optional[int]:
    """Return the offset after the next line break when text[newline_at] opens a blank line, else None."""
    k = newline_at + 1
    n = len(text)
    while k < n and text[k] != "\n" and text[k].isspace():
        k += 1
    if k < n and text[k] == "\n":
        return k + 1
    return None


_default_segmenter = SentenceSegmenter()


def split_sentences(text: str) -> List[SentenceUnit]:
    """Split text into sentence units using the default segmenter."""
    return _default_segmenter.split(text)
