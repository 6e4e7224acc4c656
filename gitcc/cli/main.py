"""CLI Main Entry Point"""

import sys
from enum import IntEnum
from typing import Optional

from gitcc.config import load_config
from gitcc.fzf import FuzzySelector, FuzzySelectError, select_commit_type
from gitcc.git import GitRepo, GitError, GitNotFoundError
from gitcc.message import CommitDraft
from gitcc.output import bold, dim, RULE, print_error, print_success, print_warning, colorize_commit_type

from gitcc.cli.args import Options, parse_args
from gitcc.cli.commands import display_config, run_install_completion
from gitcc.cli.prompts import ask_scope, ask_subject, ask_breaking_change, read_body, confirm


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    USAGE = 2  # raised by argparse itself on bad arguments
    MISSING_DEPENDENCY = 3
    NOT_A_REPOSITORY = 4
    NO_STAGED_CHANGES = 5
    NO_TYPE_SELECTED = 6
    EMPTY_SUBJECT = 7
    INTERRUPTED = 130


class Abort(Exception):
    """Stops the flow before anything is committed."""

    def __init__(self, code: ExitCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def _check_preconditions(repo: GitRepo, selector: FuzzySelector) -> None:
    """Raise Abort unless fzf is installed, we're in a work tree and something is staged
    (or the user agrees to continue without)."""
    if not selector.is_available():
        raise Abort(ExitCode.MISSING_DEPENDENCY,
                    f"Missing dependency: {selector.command} is not installed or not in PATH")

    try:
        if not repo.is_inside_work_tree():
            raise Abort(ExitCode.NOT_A_REPOSITORY, "Not a git repository (or any of the parent directories)")
        staged = repo.has_staged_changes()
    except GitNotFoundError as e:
        raise Abort(ExitCode.MISSING_DEPENDENCY, f"Missing dependency: {e}")
    except GitError as e:
        raise Abort(ExitCode.ERROR, str(e))

    if not staged:
        print_warning("No changes staged for commit. Run 'git add' first.")
        if not confirm("Continue anyway?"):
            raise Abort(ExitCode.NO_STAGED_CHANGES, "Aborted: nothing staged")


def _collect_draft(options: Options, selector: FuzzySelector) -> CommitDraft:
    try:
        commit_type = select_commit_type(selector, options.initial_query)
    except FuzzySelectError as e:
        code = ExitCode.ERROR if selector.is_available() else ExitCode.MISSING_DEPENDENCY
        raise Abort(code, str(e))
    if commit_type is None:
        raise Abort(ExitCode.NO_TYPE_SELECTED, "No commit type selected")
    print(f"{bold('Type')}: {commit_type.value} {dim('- ' + commit_type.description)}")

    scope = ask_scope()
    subject = ask_subject()
    if not subject:
        raise Abort(ExitCode.EMPTY_SUBJECT, "Commit message is required")

    body = read_body() if options.include_body else None

    breaking_change = None
    if confirm("Breaking change?"):
        breaking_change = ask_breaking_change()
        if not breaking_change:
            print_warning("No description given, BREAKING CHANGE footer omitted")

    return CommitDraft(
        type=commit_type,
        scope=scope or None,
        subject=subject,
        body=body or None,
        breaking_change=breaking_change or None,
    )


def _display_message(message: str) -> None:
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Use raw message for width calculation (no ANSI codes)
    width = max((len(line) for line in message.split('\n')), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def compose_and_commit(options: Options, repo: GitRepo, selector: FuzzySelector) -> int:
    """Run the interactive flow and commit.

    Returns:
        int: an ExitCode for aborts, otherwise git commit's own exit status
    """
    try:
        _check_preconditions(repo, selector)
        draft = _collect_draft(options, selector)
    except Abort as e:
        print_error(e.message)
        return e.code
    except KeyboardInterrupt:
        print()
        print_error("Aborted")
        return ExitCode.INTERRUPTED

    if len(draft.header) > options.config.max_subject_length:
        print_warning(f"Header is {len(draft.header)} characters (max_subject_length is {options.config.max_subject_length})")

    message = draft.to_message()
    _display_message(message)

    if options.dry_run:
        print(dim("Dry run: nothing committed."))
        return ExitCode.OK

    status = repo.commit(message, no_verify=options.no_verify)
    if status == 0:
        print_success("Committed")
    return status


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Subcommands that exit early
    if args.install_completion:
        return run_install_completion()
    if args.display_config:
        return display_config()

    config = load_config()
    options = Options.from_args(args, config)

    repo = GitRepo(verbose=options.verbose)
    selector = FuzzySelector(
        command=config.fzf_command,
        height=config.fzf_height,
        prompt=config.fzf_prompt,
        verbose=options.verbose,
    )
    return compose_and_commit(options, repo, selector)


def run() -> None:
    sys.exit(main())
