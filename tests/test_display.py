"""
Tests for CLI output formatting.

Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import re

import pytest

import gitcc.output as output
from gitcc.cli.main import _display_message
from gitcc.message import CommitType
from gitcc.output import Colors, colorize_commit_type, print_error, print_command

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def colors_on(monkeypatch):
    monkeypatch.setattr(output, 'COLORS_ENABLED', True)


# ---------------------------------------------------------------------------
# Final message echo
# ---------------------------------------------------------------------------

class TestDisplayMessage:
    """Output from _display_message()."""

    def test_subject_with_body(self, capsys, strip_ansi):
        msg = "feat(auth): add OAuth login\n\nImplements RFC 6749."
        _display_message(msg)
        out = strip_ansi(capsys.readouterr().out)

        assert "feat(auth): add OAuth login" in out
        assert "Implements RFC 6749." in out

    def test_has_horizontal_rules(self, capsys, strip_ansi):
        _display_message("chore: update dependencies")
        out = strip_ansi(capsys.readouterr().out)
        lines = [l for l in out.split("\n") if l.strip()]

        assert set(lines[0].strip()) == {output.RULE}
        assert set(lines[-1].strip()) == {output.RULE}
        assert len(lines[0]) == len("chore: update dependencies")

    def test_rule_width_follows_longest_line(self, capsys, strip_ansi):
        _display_message("fix: x\n\nBREAKING CHANGE: config file moved")
        lines = strip_ansi(capsys.readouterr().out).split("\n")
        rules = [l for l in lines if l and set(l) == {output.RULE}]
        assert all(len(r) == len("BREAKING CHANGE: config file moved") for r in rules)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

class TestColorizeCommitType:

    def test_every_type_has_a_color(self):
        assert set(output.COMMIT_TYPE_COLORS) == {t.value for t in CommitType}

    def test_no_color_leaves_text_alone(self, monkeypatch):
        monkeypatch.setattr(output, 'COLORS_ENABLED', False)
        assert colorize_commit_type("fix: x") == "fix: x"

    def test_colors_prefix_only(self, colors_on, strip_ansi):
        colored = colorize_commit_type("fix(api): handle null\n\nbody")
        assert colored.startswith(Colors.BOLD + Colors.RED + "fix(api):")
        assert colored.endswith("handle null\n\nbody")
        assert strip_ansi(colored) == "fix(api): handle null\n\nbody"

    def test_unknown_type_untouched(self, colors_on):
        assert colorize_commit_type("wip: stuff") == "wip: stuff"


class TestPrintHelpers:

    def test_print_error_goes_to_stderr(self, capsys, strip_ansi):
        print_error("Not a git repository")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Not a git repository" in strip_ansi(captured.err)

    def test_print_command_quotes_arguments(self, capsys, strip_ansi):
        print_command(["git", "commit", "-m", "fix: two words"])
        assert "$ git commit -m 'fix: two words'" in strip_ansi(capsys.readouterr().err)
