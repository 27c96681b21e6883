"""Sanity checks on the set of staged files."""

DEFAULT_EXCLUDED_PATHS = ["node_modules"]
DEFAULT_WARNING_THRESHOLD = 30


def find_excluded(files: list[str], excluded_paths: list[str]) -> list[str]:
    """Excluded path fragments that appear in any staged file, in config order."""
    return [
        fragment for fragment in excluded_paths
        if fragment and any(fragment in path for path in files)
    ]


def exceeds_threshold(files: list[str], threshold: int) -> bool:
    return len(files) > threshold
