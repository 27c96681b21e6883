"""Git Operations Package"""

from git_emoji_commit.git.repo import GitRepo, GitError, CommitResult, UNMERGED_EXIT_CODE
from git_emoji_commit.git.staged import (
    find_excluded,
    exceeds_threshold,
    DEFAULT_EXCLUDED_PATHS,
    DEFAULT_WARNING_THRESHOLD,
)

__all__ = [
    "GitRepo",
    "GitError",
    "CommitResult",
    "UNMERGED_EXIT_CODE",
    "find_excluded",
    "exceeds_threshold",
    "DEFAULT_EXCLUDED_PATHS",
    "DEFAULT_WARNING_THRESHOLD",
]
