"""Git Repo - read-only queries on the work tree and the final commit call."""

import subprocess

from gitcc.output import print_command


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitNotFoundError(GitError):
    """Raised when the git executable is missing."""
    pass


class GitRepo:
    """Thin wrapper over the git command line."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _run(self, args: list[str], **kwargs) -> subprocess.CompletedProcess:
        cmd = ['git', *args]
        if self.verbose:
            print_command(cmd)
        try:
            return subprocess.run(cmd, **kwargs)
        except FileNotFoundError:
            raise GitNotFoundError("Git is not installed or not in PATH")

    def _run_git(self, *args: str) -> subprocess.CompletedProcess:
        """Run a git query, capturing its output. Never raises on exit status."""
        return self._run(
            list(args),
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
        )

    def is_inside_work_tree(self) -> bool:
        result = self._run_git('rev-parse', '--is-inside-work-tree')
        return result.returncode == 0 and result.stdout.strip() == 'true'

    def has_staged_changes(self) -> bool:
        """'git diff --cached --quiet' exits 1 when the index differs from HEAD."""
        result = self._run_git('diff', '--cached', '--quiet')
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise GitError(f"Git command failed: git diff --cached --quiet\n{result.stderr.strip()}")

    def commit(self, message: str, no_verify: bool = False) -> int:
        """Create the commit and return git's exit status.

        Output is not captured so hooks and git's summary reach the terminal.
        """
        args = ['commit', '-m', message]
        if no_verify:
            args.append('--no-verify')
        return self._run(args).returncode
