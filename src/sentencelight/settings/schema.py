"""Pydantic schemas for highlighter settings validation."""

import re
from pydantic import BaseModel, Field
from typing import List

from ..core.types import HighlightStyle

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class TriggerDelays(BaseModel):
    """Debounce delays in milliseconds per trigger kind."""
    initial: int = Field(default=1000, ge=0, description="Delay of the first recompute after load")
    view_change: int = Field(default=500, ge=0, description="Delay after the active view changes")
    theme_change: int = Field(default=100, ge=0, description="Delay after a theme or style change")
    document_change: int = Field(default=300, ge=0, description="Delay after a document edit")

    class Config:
        extra = "forbid"


class HighlighterSettings(BaseModel):
    """Complete settings record for the long sentence highlighter."""
    max_words: int = Field(default=20, gt=0,
                           description="Sentences with more words than this are highlighted")
    highlight_color: str = Field(default="#ffeb3b", description="Color used by the host renderer")
    enabled: bool = Field(default=True, description="Whether highlighting is active")
    highlight_style: HighlightStyle = Field(default=HighlightStyle.BACKGROUND,
                                            description="background | underline")
    delays: TriggerDelays = Field(default_factory=TriggerDelays)

    class Config:
        extra = "forbid"  # Strict validation

    def validate_settings(self) -> List[str]:
        """Validate settings values and return any issues."""
        issues = []

        color = self.highlight_color.strip()
        if not color:
            issues.append("highlight_color is empty")
        elif color.startswith("#") and not _HEX_COLOR.match(color):
            issues.append(f"highlight_color is not a valid hex color: {color!r}")

        return issues
