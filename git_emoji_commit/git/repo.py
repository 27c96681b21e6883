"""Git Repo - Read staged files and run git commit."""

import subprocess
from dataclasses import dataclass

UNMERGED_EXIT_CODE = 128


@dataclass
class CommitResult:
    """Outcome of a single 'git commit' invocation."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def has_unmerged_files(self) -> bool:
        return self.returncode == UNMERGED_EXIT_CODE


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepo:
    """The git working tree in the current directory."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        result = self._run(*args)
        if result.returncode != 0:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr}")
        return result.stdout

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def get_staged_files(self) -> list[str]:
        """Paths from 'git diff --cached --name-only'."""
        result = self._run('diff', '--cached', '--name-only')
        if result.returncode == 1:
            return []
        if result.returncode != 0:
            raise GitError(f"Could not list staged files:\n{result.stderr}")
        return [line.strip() for line in result.stdout.split('\n') if line.strip()]

    def commit(self, message: str) -> CommitResult:
        """Run 'git commit -m <message>'. Non-zero exits are returned, not raised."""
        result = self._run('commit', '-m', message)
        return CommitResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
