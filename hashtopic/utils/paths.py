"""Filesystem location helpers."""

import os
from pathlib import Path


def ensure_path_absolute_or_relative_to(datadir: str | Path, filename: str | Path) -> Path:
    """
    Anchor a relative filename at a data directory.

    Args:
        datadir: Directory relative names are resolved against.
        filename: Absolute or relative file name.

    Returns:
        filename unchanged if absolute, otherwise datadir / filename.
    """
    path = Path(filename)
    if path.is_absolute():
        return path
    return Path(datadir) / path


def home_dir() -> str:
    """
    Get the current user's home directory.

    $HOME wins when it is set and non-empty. Otherwise the account database
    is consulted on POSIX systems.

    Returns:
        The home directory, or an empty string if it cannot be determined.
    """
    home = os.environ.get("HOME")
    if home:
        return home

    if os.name == "posix":
        import pwd

        try:
            return pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            return ""

    return os.environ.get("USERPROFILE", "")
