"""CLI Argument Parsing"""

import argparse
from typing import Optional

import argcomplete

from git_emoji_commit import COMMIT_TYPES, CommitType, __version__

# Shortcut flags: (short, long, type name, help)
TYPE_FLAGS = [
    ('-f', '--feat', 'feat', 'add new feature'),
    ('-s', '--style', 'style', 'edit/add styles'),
    ('-x', '--fix', 'fix', 'squash bugs'),
    ('-c', '--chore', 'chore', 'update packages, gitignore etc. (no prod code)'),
    ('-d', '--doc', 'doc', 'add/edit documentation'),
    ('-r', '--refactor', 'refactor', 'refactor or rework'),
    ('-t', '--test', 'test', 'add/edit tests'),
    ('-y', '--try', 'try', 'add untested to production'),
    ('-b', '--build', 'build', 'build for production'),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gec',
        description='Simple CLI to encourage more concise commits.',
        epilog='Example: gec -x "handle empty config file"'
    )

    parser.add_argument('message', nargs='*', help='Commit title/message (prompted for when omitted)')
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--learn', action='store_true', help='Learn more about commit types')

    # Commit type shortcuts
    types = parser.add_argument_group('commit types').add_mutually_exclusive_group()
    for short, long, name, help_text in TYPE_FLAGS:
        types.add_argument(short, long, dest='commit_type', action='store_const', const=name, help=help_text)

    # Behaviour options
    parser.add_argument('--no-update-check', action='store_true', help='Do not check PyPI for a newer version')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_intermixed_args(argv)


def selected_type(args: argparse.Namespace) -> Optional[CommitType]:
    """Commit type chosen with a shortcut flag, if any."""
    if not args.commit_type:
        return None
    return COMMIT_TYPES[args.commit_type]


def message_from_args(args: argparse.Namespace) -> str:
    """Positional words joined into one message."""
    return ' '.join(args.message).strip()
