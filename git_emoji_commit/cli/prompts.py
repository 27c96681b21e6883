"""Interactive prompts"""

from typing import Optional

from git_emoji_commit import COMMIT_TYPES, CommitType
from git_emoji_commit.message import choice_label, validate_commit_message
from git_emoji_commit.output import bold, dim, info, colorize_commit_type

INVALID_MESSAGE = "😕  Please enter a valid commit message."


def ask_commit_message() -> Optional[str]:
    """Ask until a non-empty message is given. None if the user bails out."""
    while True:
        try:
            value = input(f"{bold('?')} What's your commit title/message? ").strip()
        except (KeyboardInterrupt, EOFError):
            print()
            return None
        if validate_commit_message(value):
            return value
        print(INVALID_MESSAGE)


def _format_choice(commit_type: CommitType, number: int) -> str:
    label = choice_label(commit_type)
    prefix = f"{commit_type.name} {commit_type.emoji}"
    return f"  {info(f'[{number}]')} {colorize_commit_type(commit_type.name, prefix)}{label[len(prefix):]}"


def select_commit_type() -> Optional[CommitType]:
    """Show the numbered type list and return the pick. None on quit."""
    types = list(COMMIT_TYPES.values())

    print(f"{bold('?')} Select a commit type:")
    for i, commit_type in enumerate(types, 1):
        print(_format_choice(commit_type, i))

    while True:
        try:
            choice = input(f"Select [1-{len(types)}] or (q)uit: ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            return None
        if choice == 'q':
            return None
        if choice in COMMIT_TYPES:
            return COMMIT_TYPES[choice]
        if choice.isdigit() and 1 <= int(choice) <= len(types):
            return types[int(choice) - 1]
        print(dim(f"Enter 1-{len(types)}, a type name, or q"))


def confirm(question: str, default: bool = False) -> bool:
    hint = '[Y/n]' if default else '[y/N]'
    while True:
        try:
            answer = input(f"{question} {dim(hint)} ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            return False
        if not answer:
            return default
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False
