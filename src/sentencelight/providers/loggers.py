"""Logger adapters implementing the structured Logger protocol."""

import logging
from typing import Any, Optional


class StdlibLogger:
    """Structured logger backed by the standard logging module."""

    def __init__(self, name: str = "sentencelight", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    def info(self, msg: str, **kv: Any) -> None:
        self._logger.info(self._format(msg, kv))

    def warn(self, msg: str, **kv: Any) -> None:
        self._logger.warning(self._format(msg, kv))

    def error(self, msg: str, **kv: Any) -> None:
        self._logger.error(self._format(msg, kv))

    @staticmethod
    def _format(msg: str, kv: dict) -> str:
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        return f"{msg} {details}" if details else msg

