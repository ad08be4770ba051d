"""Test the plugin shell lifecycle and commands."""

import pytest

from sentencelight.adapters.plugin import command_ids
from sentencelight.adapters.plugin.shell import HighlighterPlugin
from sentencelight.core.abc import EventKind
from sentencelight.core.types import HighlightStyle

from conftest import LONG_SENTENCE


@pytest.fixture
def plugin(editor, settings_store, scheduler, test_logger):
    return HighlighterPlugin(host=editor, settings=settings_store, scheduler=scheduler,
                             logger=test_logger)


class TestLifecycle:
    """Test load and unload."""

    def test_load_schedules_initial_highlight(self, plugin, editor, scheduler):
        plugin.on_load()
        assert editor.apply_count == 0

        scheduler.advance(1000)

        assert editor.highlighted_text() == [LONG_SENTENCE]
        for kind in EventKind:
            assert editor.listener_count(kind) == 1

    def test_load_twice_is_noop(self, plugin, editor):
        plugin.on_load()
        plugin.on_load()
        assert editor.listener_count(EventKind.THEME_CHANGED) == 1

    def test_disabled_load_does_not_schedule(self, plugin, editor, settings_store, scheduler):
        settings_store.update(enabled=False)
        plugin.on_load()
        scheduler.run_all()
        assert editor.apply_count == 0

    def test_unload_clears_and_detaches(self, plugin, editor, scheduler):
        plugin.on_load()
        scheduler.advance(1000)
        editor.change_theme()

        plugin.on_unload()
        scheduler.run_all()

        assert len(editor.annotations) == 0
        assert not plugin.loaded
        for kind in EventKind:
            assert editor.listener_count(kind) == 0

    def test_settings_changes_after_unload_are_ignored(self, plugin, editor, settings_store):
        plugin.on_load()
        plugin.on_unload()
        count = editor.apply_count
        settings_store.update(max_words=3)
        assert editor.apply_count == count


class TestCommands:
    """Test the registered commands."""

    def test_command_ids(self, plugin):
        assert plugin.commands() == [command_ids.TOGGLE, command_ids.HIGHLIGHT, command_ids.CLEAR]
        assert plugin.command_name(command_ids.CLEAR) == "Clear highlights"

    def test_highlight_command(self, plugin, editor):
        plugin.on_load()
        assert plugin.run_command(command_ids.HIGHLIGHT)
        assert editor.highlighted_text() == [LONG_SENTENCE]

    def test_clear_command(self, plugin, editor):
        plugin.on_load()
        plugin.run_command(command_ids.HIGHLIGHT)
        plugin.run_command(command_ids.CLEAR)
        assert len(editor.annotations) == 0

    def test_toggle_off_and_on(self, plugin, editor, settings_store):
        plugin.on_load()
        plugin.run_command(command_ids.HIGHLIGHT)

        plugin.run_command(command_ids.TOGGLE)
        assert settings_store.get().enabled is False
        assert len(editor.annotations) == 0
        assert editor.notices[-1] == "Highlighting disabled"

        plugin.run_command(command_ids.TOGGLE)
        assert settings_store.get().enabled is True
        assert editor.highlighted_text() == [LONG_SENTENCE]
        assert editor.notices[-1] == "Highlighting enabled"

    def test_unknown_command(self, plugin, test_logger):
        assert plugin.run_command("does-not-exist") is False
        assert 'warn' in test_logger.levels()

    def test_toggle_error_becomes_notice(self, editor, test_logger, scheduler):
        class BrokenStore:
            def get(self):
                raise RuntimeError("store down")

            def on_change(self, callback):
                return lambda: None

        plugin = HighlighterPlugin(host=editor, settings=BrokenStore(), scheduler=scheduler,
                                   logger=test_logger)
        plugin.toggle()
        assert editor.notices == ["Error toggling highlighting"]


class TestSettingsSurface:
    """Test settings-driven recomputes."""

    def test_threshold_change_recomputes(self, plugin, editor):
        plugin.on_load()
        plugin.run_command(command_ids.HIGHLIGHT)

        assert plugin.set_max_words("2")

        assert editor.highlighted_text() == ["Short one here.", LONG_SENTENCE, "Another short one."]

    @pytest.mark.parametrize("value", ["0", "-4", "abc", ""])
    def test_invalid_threshold_ignored(self, plugin, settings_store, value):
        assert plugin.set_max_words(value) is False
        assert settings_store.get().max_words == 10

    def test_style_change_recomputes(self, plugin, editor, settings_store):
        plugin.on_load()
        settings_store.update(highlight_style=HighlightStyle.UNDERLINE)
        assert [a.style for a in editor.annotations] == [HighlightStyle.UNDERLINE]

    def test_edit_shifts_then_recomputes(self, plugin, editor, scheduler):
        plugin.on_load()
        scheduler.advance(1000)

        editor.insert(0, "New start. ")
        # Decoration layer shifted the range before the debounced recompute
        assert editor.highlighted_text() == [LONG_SENTENCE]
        scheduler.advance(300)
        assert editor.highlighted_text() == [LONG_SENTENCE]
