"""Commit Message - types, draft record and Conventional Commits formatting."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gitcc import COMMIT_TYPES


class CommitType(str, Enum):
    """Conventional Commits type, in menu order."""
    FEAT = 'feat'
    FIX = 'fix'
    DOCS = 'docs'
    STYLE = 'style'
    REFACTOR = 'refactor'
    PERF = 'perf'
    TEST = 'test'
    BUILD = 'build'
    CI = 'ci'
    CHORE = 'chore'
    REVERT = 'revert'

    @property
    def description(self) -> str:
        return COMMIT_TYPES[self.value]

    def __str__(self) -> str:
        return self.value


BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"


@dataclass(frozen=True)
class CommitDraft:
    """Answers collected during one run."""
    type: CommitType
    subject: str
    scope: Optional[str] = None
    body: Optional[str] = None
    breaking_change: Optional[str] = None

    def __post_init__(self):
        if not self.subject or not self.subject.strip():
            raise ValueError("Commit subject must not be empty")

    @property
    def prefix(self) -> str:
        scope = (self.scope or '').strip()
        return f"{self.type.value}({scope})" if scope else self.type.value

    @property
    def header(self) -> str:
        return f"{self.prefix}: {self.subject.strip()}"

    def to_message(self) -> str:
        """Render header, optional body and optional breaking-change footer."""
        paragraphs = [self.header]

        body = (self.body or '').strip('\n').rstrip()
        if body.strip():
            paragraphs.append(body)

        breaking = (self.breaking_change or '').strip()
        if breaking:
            paragraphs.append(f"{BREAKING_CHANGE_TOKEN}: {breaking}")

        return '\n\n'.join(paragraphs)
