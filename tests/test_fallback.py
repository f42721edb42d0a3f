"""Tests for the line-based prompts used when stdin is not a terminal"""
import pytest

from pulse_tty import prompts
from pulse_tty.fallback import confirm_hint, parse_choice, parse_confirm, parse_rating, parse_text


def _pipe(make_terminal, *lines):
    return make_terminal(interactive=False, lines=list(lines))


class TestParsers:
    @pytest.mark.parametrize(
        "line, expected",
        [("", 0), ("\n", 0), ("2\n", 1), (" 3 ", 2), ("4", 0), ("0", 0), ("-1", 0), ("b", 0), ("1.5", 0)],
    )
    def test_parse_choice(self, line, expected):
        assert parse_choice(line, 3, 0) == expected

    def test_parse_text(self):
        assert parse_text("  hello \n", "d") == "hello"
        assert parse_text("   \n", "d") == "d"

    @pytest.mark.parametrize("line, expected", [("", 3), ("1", 1), ("5", 5), ("6", 3), ("x", 3), ("0", 3)])
    def test_parse_rating(self, line, expected):
        assert parse_rating(line, 1, 5, 3) == expected

    @pytest.mark.parametrize(
        "line, default, expected",
        [
            ("y", False, True),
            ("YES\n", False, True),
            ("n", True, False),
            ("No", True, False),
            ("", True, True),
            ("", False, False),
            ("maybe", True, True),
            ("maybe", False, False),
        ],
    )
    def test_parse_confirm(self, line, default, expected):
        assert parse_confirm(line, default) is expected

    def test_confirm_hint(self):
        assert confirm_hint(True) == "[Y/n]"
        assert confirm_hint(False) == "[y/N]"


class TestSelectFallback:
    def test_blank_returns_default(self, make_terminal, config):
        term = _pipe(make_terminal, "\n")
        assert prompts.select("Pick", ["a", "b", "c"], 2, terminal=term, config=config) == 2

    def test_number_selects(self, make_terminal, config):
        term = _pipe(make_terminal, "2\n")
        assert prompts.select("Pick", ["a", "b", "c"], terminal=term, config=config) == 1

    def test_listing(self, make_terminal, config):
        term = _pipe(make_terminal, "\n")
        prompts.select("Pick", ["a", "b"], 1, terminal=term, config=config)
        assert term.output == "Pick\n    1. a\n  > 2. b\nChoice [2]: "

    def test_end_of_input_is_blank(self, make_terminal, config):
        term = _pipe(make_terminal)
        assert prompts.select("Pick", ["a", "b"], 1, terminal=term, config=config) == 1


class TestInputFallback:
    def test_prompt_shows_default(self, make_terminal, config):
        term = _pipe(make_terminal, "\n")
        assert prompts.input("Name", "my-experiment", terminal=term, config=config) == "my-experiment"
        assert term.output == "Name [my-experiment]: "

    def test_no_default_suffix(self, make_terminal, config):
        term = _pipe(make_terminal, "  bob  \n")
        assert prompts.input("Name", terminal=term, config=config) == "bob"
        assert term.output == "Name: "


class TestRatingFallback:
    def test_prompt_and_value(self, make_terminal, config):
        term = _pipe(make_terminal, "4\n")
        assert prompts.rating("Focus", 1, 5, 3, terminal=term, config=config) == 4
        assert term.output == "Focus (1-5) [3]: "

    def test_out_of_range(self, make_terminal, config):
        term = _pipe(make_terminal, "9\n")
        assert prompts.rating("Focus", 1, 5, 3, terminal=term, config=config) == 3


class TestConfirmFallback:
    def test_hint_matches_default(self, make_terminal, config):
        term = _pipe(make_terminal, "\n")
        assert prompts.confirm("Sure?", True, terminal=term, config=config) is True
        assert term.output == "Sure? [Y/n]: "

    def test_yes(self, make_terminal, config):
        term = _pipe(make_terminal, "yes\n")
        assert prompts.confirm("Sure?", terminal=term, config=config) is True
