"""Command identifiers registered with the host."""

# Standard commands exposed by the highlighter
TOGGLE = "toggle-long-sentence-highlighting"
HIGHLIGHT = "highlight-long-sentences"
CLEAR = "clear-sentence-highlights"

# Human-readable names shown in the host command palette
COMMAND_NAMES = {
    TOGGLE: "Toggle",
    HIGHLIGHT: "Highlight long sentences in current note",
    CLEAR: "Clear highlights",
}
