"""SentenceLight error types."""


class HighlighterError(Exception):
    """Base error for all SentenceLight failures."""


class DocumentUnavailable(HighlighterError):
    """No active view or document snapshot to highlight."""


class SegmentationFailure(HighlighterError):
    """Unexpected exception inside the pure segmentation step."""


class PositionResolutionMiss(HighlighterError):
    """A sentence could not be located at or after the scan cursor."""

    def __init__(self, sentence: str, cursor: int):
        super().__init__(f"Sentence not found at or after offset {cursor}: {sentence[:40]!r}")
        self.sentence = sentence
        self.cursor = cursor


class RenderApplyFailure(HighlighterError):
    """The host rejected the annotation replacement."""


class SettingsError(HighlighterError):
    """Settings values failed validation."""


class SettingsLoadError(SettingsError):
    """Settings file could not be read or parsed."""
