"""Git Operations Package"""

from gitcc.git.repo import GitRepo, GitError, GitNotFoundError

__all__ = [
    "GitRepo",
    "GitError",
    "GitNotFoundError",
]
