"""Shared helpers."""

from .paths import ensure_path_absolute_or_relative_to, home_dir

__all__ = [
    "ensure_path_absolute_or_relative_to",
    "home_dir",
]
