"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from sentencelight.providers.memory_host import MemoryEditor
from sentencelight.runtime.scheduler import ManualScheduler
from sentencelight.settings.loader import load_settings_from_string
from sentencelight.settings.store import SettingsStore


LONG_SENTENCE = ("This is a very long sentence that is far beyond the limit of the "
                 "10 words that commonly people want to read.")


@pytest.fixture
def sample_settings_yaml():
    """Provide a sample settings YAML for testing."""
    return """
max_words: 10
highlight_color: "#ffeb3b"
enabled: true
highlight_style: background
delays:
  initial: 1000
  view_change: 500
  theme_change: 100
  document_change: 300
"""


@pytest.fixture
def sample_settings(sample_settings_yaml):
    """Provide a loaded settings object for testing."""
    return load_settings_from_string(sample_settings_yaml)


@pytest.fixture
def temp_settings_file(sample_settings_yaml):
    """Provide a temporary settings file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_settings_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def settings_store(sample_settings):
    """Provide an in-memory settings store (no persistence)."""
    return SettingsStore(sample_settings)


@pytest.fixture
def editor():
    """Provide an in-memory editor holding one long and one short sentence."""
    return MemoryEditor(f"Short one here. {LONG_SENTENCE} Another short one.")


@pytest.fixture
def scheduler():
    """Provide a virtual-clock scheduler."""
    return ManualScheduler()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def levels(self):
        return [m[0] for m in self.messages]

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter that records counters and observations."""

    def __init__(self):
        self.counters = []
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters.append((name, amount, tags))

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
