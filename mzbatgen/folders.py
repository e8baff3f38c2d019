"""Listing the file names of a folder that match a pattern."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path


def read_folder(folder: str | Path, pattern: str = ".+") -> list[str]:
    """Return the sorted names of the entries in *folder* that fully match *pattern*.

    A folder that does not exist, or is not a directory, yields an empty list.
    """
    folder = Path(folder)
    if not folder.is_dir():
        return []
    regex = re.compile(pattern)
    return sorted(
        entry.name for entry in folder.iterdir() if regex.fullmatch(entry.name)
    )


def format_names(names: Iterable[str]) -> str:
    """Join *names* into one text, each name followed by a newline."""
    return "".join(f"{name}\n" for name in names)