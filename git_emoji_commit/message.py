"""Commit message formatting and type prefix detection."""

from typing import Optional

from git_emoji_commit import COMMIT_TYPES, CommitType


class EmptyMessageError(ValueError):
    """Raised when a commit message is empty or whitespace only."""
    pass


def validate_commit_message(message: Optional[str]) -> bool:
    return bool(message and message.strip())


def format_commit_message(commit_type: CommitType, message: str) -> str:
    """Build the final commit message, e.g. 'fix 🐛: handle null response'."""
    if not validate_commit_message(message):
        raise EmptyMessageError("Commit message cannot be empty")
    return f"{commit_type.name} {commit_type.emoji}: {message.strip()}"


def choice_label(commit_type: CommitType) -> str:
    return f"{commit_type.name} {commit_type.emoji}: {commit_type.description}"


def _prefixes(commit_type: CommitType) -> tuple[str, ...]:
    emoji = commit_type.emoji.strip()
    return (
        f"{commit_type.name} {emoji}",  # what format_commit_message writes
        f"{commit_type.emoji}  {commit_type.name}",  # 1.x releases
    )


def split_commit_type(message: Optional[str]) -> tuple[Optional[CommitType], str]:
    """Split a message into the type it is already prefixed with and the text after it.

    Matching is exact on name and emoji, so 'fix: typo' (no emoji) or
    'fixed 🐛 ...' do not count as prefixed. Unprefixed messages come back
    as (None, message).
    """
    if not message:
        return None, message or ""
    text = message.lstrip()
    for commit_type in COMMIT_TYPES.values():
        emoji_prefix, legacy_prefix = _prefixes(commit_type)
        if text.startswith(emoji_prefix):
            rest = text[len(emoji_prefix):].lstrip(' ')
            if rest.startswith(':'):
                return commit_type, rest[1:].strip()
        if text.startswith(legacy_prefix):
            rest = text[len(legacy_prefix):].lstrip(' ')
            return commit_type, rest[1:].strip() if rest.startswith(':') else rest.strip()
    return None, message


def match_commit_type(message: Optional[str]) -> Optional[CommitType]:
    """Return the commit type a message is already prefixed with, if any."""
    return split_commit_type(message)[0]
