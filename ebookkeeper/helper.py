"""File-system helpers: recursive listing, hashing, renaming and deleting."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from .sha256 import SHA256

_CHUNK_SIZE = 32768


def walk_files(directory: str | os.PathLike[str]) -> Iterator[str]:
    """Yield every regular file under ``directory``, recursing into subdirectories.

    Paths use forward slashes. Raises FileNotFoundError if the directory
    does not exist.
    """
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Not exists: {directory}")
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir():
            yield from walk_files(entry.path)
        else:
            yield Path(entry.path).as_posix()


def list_files(
    directory: str | os.PathLike[str], processor: Callable[[str], object]
) -> None:
    """Call ``processor`` on every file under ``directory``.

    A missing directory is reported and skipped; an exception raised by the
    processor is reported and the walk carries on.
    """
    try:
        files = walk_files(directory)
        for name in files:
            try:
                processor(name)
            except Exception as exc:  # keep going past a bad file
                print(f"Exception:{exc}")
    except FileNotFoundError:
        print(f"Not exists: {directory}")


def sha256_file(filename: str | os.PathLike[str]) -> str:
    """Return the hex SHA-256 of a file's contents, or "" if it cannot be read."""
    hasher = SHA256()
    try:
        with open(filename, "rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                hasher.update(chunk)
    except OSError:
        return ""
    return hasher.hexdigest()


def rename_file(name: str, str_toremove: str) -> str | None:
    """Remove the first occurrence of ``str_toremove`` from the path and rename.

    Returns the new path when a rename happened, otherwise None. Failures
    are reported, not raised.
    """
    if str_toremove not in name:
        return None
    new_name = name.replace(str_toremove, "", 1)
    print(name)
    print(new_name)
    try:
        os.rename(name, new_name)
    except OSError as exc:
        print(exc)
        return None
    return new_name


def delete_file(name: str | os.PathLike[str]) -> bool:
    """Remove a file or an empty directory; return False if nothing was there."""
    path = Path(name)
    if path.is_dir() and not path.is_symlink():
        path.rmdir()
        return True
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True