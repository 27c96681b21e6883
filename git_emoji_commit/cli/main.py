"""CLI Main Entry Point"""

import os
import sys
from typing import Optional

from git_emoji_commit import __version__
from git_emoji_commit.config import Config, load_config
from git_emoji_commit.git import GitRepo, GitError, CommitResult, find_excluded, exceeds_threshold
from git_emoji_commit.message import format_commit_message, split_commit_type, validate_commit_message
from git_emoji_commit.output import print_error
from git_emoji_commit.update import check_for_update

from git_emoji_commit.cli.args import parse_args, selected_type, message_from_args
from git_emoji_commit.cli.commands import display_config, run_install_completion, run_learn
from git_emoji_commit.cli.prompts import ask_commit_message, select_commit_type, confirm

CANCELED = "❌ Commit canceled."


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.learn:
        return run_learn(), True
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def _confirm_staged_files(files, config: Config) -> bool:
    """Ask before committing excluded paths or an unusually large change set."""
    for fragment in find_excluded(files, config.excluded_paths):
        if not confirm(f"🤔 '{fragment.rstrip('/')}/' is staged for commit. Are you sure you want to continue?"):
            return False

    if exceeds_threshold(files, config.staged_files_warning_threshold):
        if not confirm(f"🤔 You are committing {len(files)} (many) files. Are you sure you want to continue?"):
            return False

    return True


def _resolve_message(args) -> Optional[str]:
    """Work out the final commit message, prompting where needed.

    Returns:
        str | None: formatted message, or None if the user cancelled
    """
    message = message_from_args(args)

    prefixed_type, text = split_commit_type(message)
    if prefixed_type:
        if validate_commit_message(text):
            print("👍 Commit message looks good.")
            return message
        # prefix only, ask for the text and keep the type
        message = ask_commit_message()
        if message is None:
            return None
        return format_commit_message(prefixed_type, message)

    if not message:
        message = ask_commit_message()
        if message is None:
            return None

    commit_type = selected_type(args)
    if commit_type is None:
        commit_type = select_commit_type()
        if commit_type is None:
            return None

    return format_commit_message(commit_type, message)


def _report_commit(result: CommitResult) -> None:
    if result.stdout.strip():
        print(f"* {result.stdout.rstrip()}")
    if result.stderr.strip():
        print(f"# {result.stderr.rstrip()}")

    if result.ok:
        return
    if result.has_unmerged_files:
        print_error("Error: Committing is not possible because you have unmerged files.")
        print_error("Please resolve the conflicts and try again.")
    else:
        print_error(f"An unknown error occurred (git exited with {result.returncode}).")


def _should_check_updates(args, config: Config) -> bool:
    if args.no_update_check or os.environ.get('GEC_NO_UPDATE_CHECK'):
        return False
    return config.check_updates


def _commit_flow(args, config: Config) -> int:
    """Main commit flow.

    Returns:
        int: Exit code (git's exit code once a commit was attempted)
    """
    try:
        repo = GitRepo()
        files = repo.get_staged_files()
    except GitError as e:
        print_error(str(e))
        return 1

    if not files:
        print("🤷 There are no files staged to commit. Stage some files then try again.")
        return 1

    if not _confirm_staged_files(files, config):
        print(CANCELED)
        return 0

    message = _resolve_message(args)
    if message is None:
        print(CANCELED)
        return 0

    try:
        result = repo.commit(message)
    except GitError as e:
        print_error(str(e))
        return 1
    _report_commit(result)

    if result.ok and _should_check_updates(args, config):
        check_for_update(__version__, timeout=config.update_timeout)

    return result.returncode


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()
    return _commit_flow(args, config)


def run() -> None:
    sys.exit(main())
