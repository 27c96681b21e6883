"""CLI Commands"""

import os
import sys

from git_emoji_commit import LEARN_URL
from git_emoji_commit.config import load_config, get_config_path
from git_emoji_commit.output import bold, dim, info


def run_learn() -> int:
    print(f"📚 Learn more about commit types here: {LEARN_URL}")
    return 0


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gecrc found)")

    if os.environ.get('GEC_NO_UPDATE_CHECK'):
        print(f"  {dim('Environment overrides:')}")
        print(f"    GEC_NO_UPDATE_CHECK={os.environ['GEC_NO_UPDATE_CHECK']}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    check_updates:                  {info(str(config.check_updates).lower())}")
    print(f"    staged_files_warning_threshold: {info(str(config.staged_files_warning_threshold))}")
    print(f"    excluded_paths:                 {info(', '.join(config.excluded_paths) or '(none)')}")
    print(f"    update_timeout:                 {info(str(config.update_timeout))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gecrc (in current directory)")
    print(f"    Global: ~/.gecrc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        line = 'eval "$(register-python-argcomplete gec)"'
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell gec | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print('  eval "$(register-python-argcomplete gec)"\n')
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish gec | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
