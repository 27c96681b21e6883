"""
Git Emoji Commit

Prefix commit messages with a commit type and emoji, then run git commit.
"""

from dataclasses import dataclass

__version__ = "2.1.0"

PACKAGE_NAME = "git-emoji-commit"


@dataclass(frozen=True)
class CommitType:
    """A commit category with its emoji and prompt description."""
    name: str
    emoji: str
    description: str


# Centralized commit types - single source of truth
# Used by: message.py (formatting/matching), cli/args.py (shortcut flags), cli/prompts.py
COMMIT_TYPES = {
    'feat': CommitType('feat', '📦', 'new feature'),
    'style': CommitType('style', '💅', 'layout or style change'),
    'fix': CommitType('fix', '🐛', 'fix bug'),
    'chore': CommitType('chore', '🧹', 'update packages, gitignore etc; (no prod code)'),
    'doc': CommitType('doc', '📖', 'documentation'),
    'refactor': CommitType('refactor', '🛠 ', 'refactoring'),  # narrow glyph, padded
    'content': CommitType('content', '📝', 'content changes'),
    'test': CommitType('test', '✅', 'add/edit tests (no prod code)'),
    'try': CommitType('try', '🤞', 'add untested to production'),
    'build': CommitType('build', '🚀', 'build for production'),
}

# List of type names, in prompt order
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

LEARN_URL = "https://www.conventionalcommits.org/en/v1.0.0/#summary"
