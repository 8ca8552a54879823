"""
Decides which files an import directive may pull in.
"""
from pathlib import Path

SCRIPT_SUFFIX = ".sh"


def to_valid_script(base_dir, text):
    """
    Join `text` onto `base_dir` and check the result is an existing shell script.

    Returns:
        (text, path) if the path exists and ends in .sh, otherwise None
    """
    path = Path(base_dir) / text

    if path.exists() and path.suffix == SCRIPT_SUFFIX:
        return text, path

    return None
