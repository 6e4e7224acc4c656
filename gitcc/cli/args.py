"""CLI Argument Parsing"""

import argparse
from dataclasses import dataclass
from typing import Optional

import argcomplete

from gitcc import COMMIT_TYPE_NAMES, __version__
from gitcc.config import Config


def _query_completer(prefix, **kwargs):
    return [name for name in COMMIT_TYPE_NAMES if name.startswith(prefix)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-cc',
        description='Compose a Conventional Commits message interactively and commit it',
        epilog='Example: git-cc fix --body (menu pre-filtered to "fix", then asks for a body)'
    )

    parser.add_argument('query', nargs='?', default=None, metavar='TYPE',
                        help='Initial filter for the commit type menu').completer = _query_completer
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Message options
    parser.add_argument('-b', '--body', action='store_true', help='Read a multi-line body until end of input (Ctrl-D)')
    parser.add_argument('--no-verify', action='store_true', help='Pass --no-verify to git commit (skip hooks)')
    parser.add_argument('-n', '--dry-run', action='store_true', help='Print the message, do not commit')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show the external commands being run')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)


@dataclass(frozen=True)
class Options:
    """Everything one run needs, resolved once at startup.

    Precedence: CLI flags > environment variables > config file
    """
    config: Config
    initial_query: Optional[str] = None
    include_body: bool = False
    no_verify: bool = False
    dry_run: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace, config: Config) -> 'Options':
        return cls(
            config=config,
            initial_query=args.query or None,
            include_body=args.body or config.include_body,
            no_verify=args.no_verify or config.no_verify,
            dry_run=args.dry_run,
            verbose=args.verbose,
        )
