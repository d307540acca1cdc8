# test_picker.py

import io
import asyncio
import logging
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from filepick import Picker, PickerConfig, Logger, ConfigurationError, TerminalEnvironmentError
from filepick.display import Display
from filepick.display.terminal import DisplayTerminal, TerminalSize
from filepick.items import StaticItemSource


class FakeTerminal(DisplayTerminal):
    """Terminal writing to memory, with a fixed size and a scripted key press."""
    def __init__(self, columns=80, lines=3, key_delay=0.03):
        super().__init__(stream=io.StringIO(), stdin=io.StringIO())
        self.size = TerminalSize(columns=columns, lines=lines)
        self.key_delay = key_delay
        self.keys_read = 0

    def ensure_available(self):
        return self.size

    def get_size(self):
        return self.size

    async def read_key(self):
        await asyncio.sleep(self.key_delay)
        self.keys_read += 1
        return "q"

    @property
    def output(self):
        return self._out.getvalue()


FAST = dict(duration=0.05, frame_yield=0, blink_interval=0.01)
ITEMS = ["a.rb", "b.rb", "c.rb", "d.rb", "e.rb"]


class TestPicker:
    """Full sessions against an in-memory terminal."""

    def setup_method(self):
        self.terminal = FakeTerminal()
        self.display = Display(terminal=self.terminal)

    def make_picker(self, items=ITEMS, **config):
        settings = {**FAST, **config}
        return Picker(source=StaticItemSource(items), config=PickerConfig(**settings),
                      display=self.display)

    def test_scrolls_onto_forced_winner(self):
        picker = self.make_picker()
        winner = picker.run(winner_index=2)

        assert winner == "c.rb"
        assert self.terminal.keys_read == 1
        output = self.terminal.output
        assert "\033[30;47mc.rb\033[0m" in output
        # Cursor hidden first, restored at the end
        assert output.startswith("\033[?25l")
        assert output.endswith("\033[0m\033[?25h\033[2J\033[H")

    def test_blinks_on_middle_row(self):
        self.terminal.key_delay = 0.05
        self.make_picker().run(winner_index=2)
        # Middle of a three-row window is screen row 2 (1-based)
        assert "\033[2;1H\033[2K\033[30;47mc.rb\033[0m" in self.terminal.output
        assert "\033[2;1H\033[2Kc.rb" in self.terminal.output

    def test_height_larger_than_items_fails_before_drawing(self):
        self.terminal.size = TerminalSize(columns=80, lines=10)
        picker = self.make_picker(items=["a.rb", "b.rb", "c.rb"], height=4)
        with pytest.raises(ConfigurationError, match="items"):
            picker.run()
        assert self.terminal.output == ""

    def test_height_larger_than_terminal_fails_before_drawing(self):
        items = [f"file_{i}.rb" for i in range(6)]
        picker = self.make_picker(items=items, height=4)
        with pytest.raises(ConfigurationError, match="terminal height"):
            picker.run()
        assert self.terminal.output == ""

    def test_empty_source_fails_before_drawing(self):
        picker = self.make_picker(items=[])
        with pytest.raises(ConfigurationError):
            picker.run()
        assert self.terminal.output == ""

    def test_suffix_filter(self):
        picker = self.make_picker(items=["a.rb", "b.md", "c.rb", "d.rb"], suffixes=(".rb",))
        assert picker.run(winner_index=1) == "c.rb"

    def test_seeded_runs_agree(self):
        items = [f"file_{i}.rb" for i in range(20)]
        first = self.make_picker(items=items, seed=7).run()
        second = Picker(source=StaticItemSource(items), config=PickerConfig(seed=7, **FAST),
                        display=Display(terminal=FakeTerminal())).run()
        assert first == second

    def test_returns_untrimmed_winner(self):
        self.terminal.size = TerminalSize(columns=8, lines=3)
        items = ["a.rb", "lib/long_name.rb", "c.rb"]
        winner = self.make_picker(items=items).run(winner_index=1)
        assert winner == "lib/long_name.rb"
        assert "\033[30;47mlib/l...\033[0m" in self.terminal.output

    def test_terminal_unavailable(self):
        display = Display(terminal=DisplayTerminal(stream=io.StringIO(), stdin=io.StringIO()))
        picker = Picker(source=StaticItemSource(ITEMS), config=PickerConfig(**FAST), display=display)
        with pytest.raises(TerminalEnvironmentError):
            picker.run()

    def test_announce(self):
        panel = self.make_picker().announce("c.rb")
        assert "c.rb" in panel


class TestPickerConfig:
    """Validation of run settings."""

    def test_defaults_are_valid(self):
        config = PickerConfig().validate()
        assert config.duration == 5.0
        assert config.blink_interval == 0.5
        assert config.bezier_points == (0.0, 0.99, 0.999, 1.0)

    @pytest.mark.parametrize("field,value", [
        ("duration", -1.0),
        ("blink_interval", 0),
        ("frame_yield", -0.1),
        ("height", 0),
        ("easing", "bounce"),
        ("bezier_points", (0.0, 0.5, 1.0)),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ConfigurationError):
            PickerConfig(**{field: value}).validate()

    def test_picker_validates_config(self):
        with pytest.raises(ConfigurationError):
            Picker(source=StaticItemSource(ITEMS), config=PickerConfig(duration=-1),
                   display=Display(terminal=FakeTerminal()))


class TestLogger:
    def test_methods_delegate(self, caplog):
        caplog.set_level(logging.DEBUG, logger="filepick.tests")
        logger = Logger("filepick.tests")
        logger.debug("scrolling")
        logger.error("failed")
        assert [r.getMessage() for r in caplog.records] == ["scrolling", "failed"]
        assert [r.levelname for r in caplog.records] == ["DEBUG", "ERROR"]
