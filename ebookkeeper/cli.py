"""Command-line entry point: list, hash, rename or de-duplicate e-book files."""

from __future__ import annotations

import enum
import sqlite3
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial

from .db import EbookDB
from .helper import delete_file, list_files, rename_file, sha256_file

_BAD_ARGUMENTS = "Bad argument parameters"


class Action(enum.Enum):
    RENAME = "rename"
    LIST = "list"
    SHA256 = "sha256"
    DUPLICATE = "duplicate"


@dataclass
class Options:
    target_dir: str = ""
    action: Action = Action.RENAME
    str_toremove: str = ""
    db_path: str = ""


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-key value`` pairs; a trailing unpaired argument is ignored.

    An unknown action name is ignored; an unknown key raises ValueError.
    """
    options = Options()
    it = iter(argv)
    for key, value in zip(it, it):
        if key == "-action":
            try:
                options.action = Action(value)
            except ValueError:
                pass
        elif key == "-target":
            options.target_dir = value
        elif key == "-r":
            options.str_toremove = value
        elif key == "-db":
            options.db_path = value
        else:
            raise ValueError(f"unknown option: {key}")
    return options


def run_list(options: Options) -> None:
    """Print the path of every file under the target directory."""
    if not options.target_dir:
        raise ValueError(_BAD_ARGUMENTS)
    list_files(options.target_dir, print)


def run_sha256(options: Options) -> None:
    """Print the SHA-256 of every file under the target directory."""
    if not options.target_dir:
        raise ValueError(_BAD_ARGUMENTS)
    list_files(options.target_dir, lambda path: print(sha256_file(path)))


def run_rename(options: Options) -> None:
    """Strip the given text from the paths of files under the target directory."""
    if not options.target_dir or not options.str_toremove:
        raise ValueError(_BAD_ARGUMENTS)
    list_files(options.target_dir, partial(rename_file, str_toremove=options.str_toremove))


def remove_duplicates(options: Options, db: EbookDB) -> list[str]:
    """Delete files whose content is already recorded under another path.

    New files are recorded in ``db``. Returns the deleted paths.
    """
    if not options.target_dir or not options.db_path:
        raise ValueError(_BAD_ARGUMENTS)
    removed: list[str] = []

    def process(path: str) -> None:
        print(f"processing file: {path}")
        digest = sha256_file(path)
        if not digest:
            return
        if db.is_saved(digest):
            if db.get_path(digest) != path:
                print(f"Duplicated file found: {path}")
                delete_file(path)
                removed.append(path)
            else:
                print(f"Same file found: {path}")
        else:
            db.insert(path, digest)

    list_files(options.target_dir, process)
    return removed


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except ValueError:
        print("Unknown command")
        return 1

    with EbookDB() as db:
        if options.db_path:
            try:
                db.open(options.db_path)
            except sqlite3.Error as exc:
                print(f"DB Open Error: {exc}")
        handlers = {
            Action.RENAME: run_rename,
            Action.LIST: run_list,
            Action.SHA256: run_sha256,
            Action.DUPLICATE: lambda opts: remove_duplicates(opts, db),
        }
        try:
            handlers[options.action](options)
        except ValueError as exc:
            print(exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())