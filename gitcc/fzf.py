"""Fuzzy selection through fzf and the commit type menu built on it."""

import shutil
import subprocess
from typing import Optional

from gitcc.message import CommitType
from gitcc.output import print_command

# fzf exit statuses: 1 = no match, 130 = interrupted with Ctrl-C or ESC
FZF_NO_MATCH = 1
FZF_CANCELLED = 130


class FuzzySelectError(Exception):
    """Raised when fzf fails for a reason other than the user cancelling."""
    pass


class FuzzySelector:
    """Runs fzf over a list of candidate lines."""

    def __init__(self, command: str = "fzf", height: str = "40%",
                 prompt: str = "> ", verbose: bool = False):
        self.command = command
        self.height = height
        self.prompt = prompt
        self.verbose = verbose

    def is_available(self) -> bool:
        return shutil.which(self.command) is not None

    def _build_command(self, query: Optional[str]) -> list[str]:
        cmd = [self.command, '--height', self.height, '--reverse', '--prompt', self.prompt]
        if query:
            cmd.extend(['--query', query])
        return cmd

    def select(self, candidates: list[str], query: Optional[str] = None) -> Optional[str]:
        """Return the chosen line, or None when the user picked nothing.

        fzf draws on the terminal itself, so only stdout is captured.
        """
        cmd = self._build_command(query)
        if self.verbose:
            print_command(cmd)
        try:
            result = subprocess.run(
                cmd,
                input='\n'.join(candidates) + '\n',
                stdout=subprocess.PIPE,
                text=True,
                encoding='utf-8',
            )
        except FileNotFoundError:
            raise FuzzySelectError(f"{self.command} is not installed or not in PATH")

        if result.returncode in (FZF_NO_MATCH, FZF_CANCELLED):
            return None
        if result.returncode != 0:
            raise FuzzySelectError(f"{self.command} exited with status {result.returncode}")

        choice = result.stdout.rstrip('\n')
        return choice or None


def _menu_line(commit_type: CommitType, width: int) -> str:
    return f"{commit_type.value.ljust(width)}  {commit_type.description}"


def build_type_menu() -> dict[str, CommitType]:
    """Display line -> CommitType, in menu order."""
    width = max(len(t.value) for t in CommitType)
    return {_menu_line(t, width): t for t in CommitType}


def select_commit_type(selector: FuzzySelector, query: Optional[str] = None) -> Optional[CommitType]:
    """Show the commit type menu and return the chosen type, or None if cancelled."""
    menu = build_type_menu()
    choice = selector.select(list(menu), query)
    if choice is None:
        return None
    return menu.get(choice)
