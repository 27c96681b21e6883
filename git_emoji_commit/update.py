"""Check PyPI for a newer release of git-emoji-commit."""

import json
import socket
import sys
import urllib.error
import urllib.request

from git_emoji_commit import PACKAGE_NAME
from git_emoji_commit.output import Colors, COLORS_ENABLED

PYPI_URL = "https://pypi.org/pypi/{package}/json"
DEFAULT_TIMEOUT = 5


class UpdateCheckError(Exception):
    """Raised when the latest version cannot be determined."""
    pass


def fetch_latest_version(package: str = PACKAGE_NAME, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return the latest version string published on PyPI."""
    url = PYPI_URL.format(package=package)
    req = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            data = json.loads(response.read().decode('utf-8'))
    except urllib.error.HTTPError as e:
        raise UpdateCheckError(f"PyPI returned {e.code}: {e.reason}")
    except urllib.error.URLError as e:
        if isinstance(e.reason, socket.timeout):
            raise UpdateCheckError(f"Request timed out after {timeout}s")
        raise UpdateCheckError(f"Could not reach PyPI: {e.reason}")
    except socket.timeout:
        raise UpdateCheckError(f"Request timed out after {timeout}s")
    except json.JSONDecodeError:
        raise UpdateCheckError("Invalid response from PyPI")
    except OSError as e:
        raise UpdateCheckError(f"Connection to PyPI failed: {e}")

    version = (data.get("info") or {}).get("version") if isinstance(data, dict) else None
    if not version:
        raise UpdateCheckError("PyPI response has no version")
    return str(version).strip()


def _major_minor(version: str) -> tuple[str, str]:
    parts = version.strip().split('.')
    return parts[0], parts[1] if len(parts) > 1 else '0'


def is_update_available(current: str, latest: str) -> bool:
    """True when major or minor differ. Patch releases are not announced."""
    return _major_minor(current) != _major_minor(latest)


def check_for_update(current: str, package: str = PACKAGE_NAME, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Print an update notice if one is available. Never raises.

    Returns:
        bool: True if a notice was printed
    """
    try:
        latest = fetch_latest_version(package, timeout)
    except UpdateCheckError as e:
        print(f"Error checking for updates: {e}", file=sys.stderr)
        return False

    if not is_update_available(current, latest):
        return False

    green = Colors.GREEN if COLORS_ENABLED else ''
    white = Colors.WHITE if COLORS_ENABLED else ''
    reset = Colors.RESET if COLORS_ENABLED else ''
    print(f"{green}😎  Update available: {latest} {white}run $ pip install -U {package}{reset}")
    return True
