"""Test the Logger protocol adapters."""

import logging

from sentencelight.providers.loggers import StdlibLogger
from sentencelight.providers.memory_host import MemoryEditor
from sentencelight.runtime.orchestrator import RecomputeOrchestrator


def test_stdlib_logger_formats_context(caplog):
    log = StdlibLogger("sentencelight.test")
    with caplog.at_level(logging.INFO, logger="sentencelight.test"):
        log.info("Highlights replaced", annotations=2, status="applied")
        log.warn("position miss")
        log.error("failed", error="boom")

    assert [r.levelname for r in caplog.records] == ["INFO", "WARNING", "ERROR"]
    assert caplog.records[0].getMessage() == "Highlights replaced annotations=2 status=applied"
    assert caplog.records[1].getMessage() == "position miss"


def test_orchestrator_defaults_to_stdlib_logging(settings_store, caplog):
    editor = MemoryEditor("A host without a logger.")
    orch = RecomputeOrchestrator(document=editor, sink=editor, settings=settings_store)

    with caplog.at_level(logging.INFO, logger="sentencelight"):
        orch.recompute()

    assert isinstance(orch.log, StdlibLogger)
    assert any("Highlights replaced" in r.getMessage() for r in caplog.records)

