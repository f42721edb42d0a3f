"""Tests for pulse_tty.prompt — the shared loop, raw-mode handling and cancellation"""
import pytest

from pulse_tty import ansi
from pulse_tty.components import ConfirmPrompt, SelectPrompt
from pulse_tty.config import PromptConfig
from pulse_tty.keys import KEY
from pulse_tty.prompt import PromptCancelled, run_prompt
from pulse_tty.terminal import TerminalError

CTRL_C = b"\x03"


class TestRawModeRestored:
    def test_released_after_normal_return(self, make_terminal, config):
        term = make_terminal([b"\x1b[B", b"\r"])
        run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config)
        assert not term.raw_mode_engaged
        assert term.events[-1] == "raw-off"
        assert term.events.count("raw-on") == 1

    def test_cursor_shown_before_release(self, make_terminal, config):
        term = make_terminal([b"\r"])
        run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config)
        assert term.writes[0] == ansi.HIDE_CURSOR
        assert term.writes[-1] == ansi.SHOW_CURSOR
        assert term.events[-2:] == ["write", "raw-off"]

    def test_released_after_interrupt(self, make_terminal, config):
        term = make_terminal([b"\x1b[B", CTRL_C])
        with pytest.raises(PromptCancelled):
            run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config)
        assert not term.raw_mode_engaged
        assert term.events[-1] == "raw-off"
        assert term.writes[-1] == ansi.SHOW_CURSOR

    def test_released_after_error(self, make_terminal, config):
        class Broken(ConfirmPrompt):
            def on_char(self, state, text):
                raise RuntimeError("boom")

        term = make_terminal([b"x"])
        with pytest.raises(RuntimeError, match="boom"):
            run_prompt(Broken("Sure?"), term, config)
        assert not term.raw_mode_engaged
        assert term.events[-1] == "raw-off"

    def test_interrupt_exit_code(self):
        assert PromptCancelled.exit_code == 130
        assert issubclass(PromptCancelled, KeyboardInterrupt)

    def test_exit_on_interrupt(self, make_terminal):
        term = make_terminal([CTRL_C])
        with pytest.raises(SystemExit) as excinfo:
            run_prompt(ConfirmPrompt("Sure?"), term, PromptConfig(exit_on_interrupt=True))
        assert excinfo.value.code == 130
        assert term.events[-1] == "raw-off"

    def test_nested_raw_mode_rejected(self, make_terminal):
        term = make_terminal()
        with term.raw_mode():
            with pytest.raises(TerminalError):
                term.engage_raw_mode()
        assert not term.raw_mode_engaged

    def test_handle_release_idempotent(self, make_terminal):
        term = make_terminal()
        handle = term.engage_raw_mode()
        handle.release()
        handle.release()
        assert term.events.count("raw-off") == 1
        assert not term.raw_mode_engaged


class TestModeSelection:
    def test_non_interactive_never_touches_raw_mode(self, make_terminal, config):
        term = make_terminal(interactive=False, lines=["\n"])
        assert run_prompt(SelectPrompt("Pick", ["a", "b", "c"], 1), term, config) == 1
        assert "raw-on" not in term.events

    def test_force_fallback(self, make_terminal):
        term = make_terminal([b"\r"], lines=["y\n"])
        assert run_prompt(ConfirmPrompt("Sure?"), term, PromptConfig(force_fallback=True)) is True
        assert "raw-on" not in term.events

    def test_theme_follows_config(self, make_terminal):
        term = make_terminal([b"\r"])
        prompt = ConfirmPrompt("Sure?")
        run_prompt(prompt, term, PromptConfig(color=False))
        assert "\x1b[36m" not in term.output


class TestLoop:
    def test_redraw_only_on_change(self, make_terminal, config):
        term = make_terminal([b"\x1b[A", b"q", b"\r"])
        run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config)
        # hide, initial frame, finish, show: up at index 0 and 'q' change nothing
        assert len(term.writes) == 4

    def test_redraw_before_next_read(self, make_terminal, config):
        term = make_terminal([b"\x1b[B", b"\r"])
        run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config)
        reads = [i for i, e in enumerate(term.events) if e == "read"]
        assert term.events[reads[0] + 1] == "write"

    def test_keys_after_enter_in_same_read_discarded(self, make_terminal, config):
        term = make_terminal([b"\r\x1b[B"])
        assert run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config) == 0

    def test_several_keys_in_one_read(self, make_terminal, config):
        term = make_terminal([b"\x1b[B\x1b[B\r"])
        assert run_prompt(SelectPrompt("Pick", ["a", "b", "c"]), term, config) == 2

    def test_split_arrow_is_decoded(self, make_terminal, config):
        term = make_terminal([b"\x1b", b"[B", b"\r"])
        assert run_prompt(SelectPrompt("Pick", ["a", "b"]), term, config) == 1
        assert term.read_timeouts[:2] == [None, config.escape_timeout_ms / 1000.0]

    def test_pending_escape_flushed_on_timeout(self, make_terminal, config):
        term = make_terminal([b"\x1b", None, b"\r"])
        assert run_prompt(ConfirmPrompt("Sure?", True), term, config) is True

    def test_end_of_stream_keeps_waiting(self, make_terminal, config):
        term = make_terminal([b"", b"", b"y", b"\r"])
        assert run_prompt(ConfirmPrompt("Sure?"), term, config) is True

    def test_transition_table_dispatch(self):
        prompt = SelectPrompt("Pick", ["a", "b"])
        state = prompt.update(prompt.initial_state(), KEY.down)
        assert state.selected == 1
        assert prompt.update(state, KEY.backspace) == state
