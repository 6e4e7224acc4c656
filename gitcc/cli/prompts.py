"""Interactive prompts.

Ctrl-C is never caught here; it propagates so the caller can abort the whole
run. End of input counts as an empty answer.
"""

import sys
from typing import Optional, TextIO

from gitcc.output import bold, dim

YES_ANSWERS = {'y', 'yes'}
NO_ANSWERS = {'n', 'no'}


def ask(question: str) -> str:
    try:
        return input(question).strip()
    except EOFError:
        print()
        return ''


def ask_scope() -> str:
    return ask(f"{bold('Scope')} {dim('(optional, Enter to skip)')}: ")


def ask_subject() -> str:
    return ask(f"{bold('Subject')}: ")


def ask_breaking_change() -> str:
    return ask(f"{bold('Describe the breaking change')}: ")


def read_body(stream: Optional[TextIO] = None) -> str:
    """Read everything up to end of input as the commit body."""
    stream = stream or sys.stdin
    end_key = 'Ctrl-Z, Enter' if sys.platform == 'win32' else 'Ctrl-D'
    print(f"{bold('Body')} {dim(f'(finish with {end_key} on an empty line)')}:")
    return stream.read().rstrip()


def confirm(question: str, default: bool = False) -> bool:
    """Ask a yes/no question until answered. Empty answer returns the default."""
    hint = '[Y/n]' if default else '[y/N]'
    while True:
        answer = ask(f"{question} {dim(hint)} ").lower()
        if not answer:
            return default
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        print("Please answer y or n")
