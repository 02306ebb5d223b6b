# ebookkeeper

A small command-line tool for looking after a folder of e-books. It walks a
directory and everything under it, in name order, and for every file it can:

- print the file's path (`list`)
- print the SHA-256 digest of the file's contents (`sha256`)
- remove a piece of text from the file's path and rename it (`rename`)
- delete files whose contents have been seen before, keeping track of seen
  files in a SQLite database (`duplicate`)

Paths are printed with forward slashes. It needs nothing beyond the Python
standard library (3.10 or later).

## Installation

```
pip install .
```

## Usage

Options are given as pairs of a flag and a value:

| Flag      | Value                                          |
|-----------|------------------------------------------------|
| `-action` | `list`, `sha256`, `rename` or `duplicate`      |
| `-target` | directory to walk                              |
| `-r`      | text to remove from file paths (for `rename`)  |
| `-db`     | path of the SQLite database (for `duplicate`)  |

```
ebookkeeper -action list -target ~/books
ebookkeeper -action sha256 -target ~/books
ebookkeeper -action rename -target ~/books -r "[sample tag]"
ebookkeeper -action duplicate -db ~/ebook.db -target ~/incoming
```

Details worth knowing:

- When `-action` is not given, or names an unknown action, the action is
  `rename`.
- An unknown flag makes the tool print `Unknown command` and exit with
  status 1. A trailing flag without a value is ignored.
- If an action lacks what it needs (`-target` for all of them, `-r` for
  `rename`, `-db` for `duplicate`), the tool prints `Bad argument parameters`
  and exits with status 1.
- A target directory that does not exist is reported as `Not exists: <dir>`.
- `rename` removes the first occurrence of the text from the file's whole
  path, prints the old and new paths, and renames the file. Files whose path
  does not contain the text are left alone.
- `sha256` prints an empty line for a file that cannot be read.

### Removing duplicates

With `duplicate`, every file is hashed. If its hash is not in the database
yet, the file's path and hash are recorded. If the hash is already recorded
under a different path, the file is a duplicate and is deleted. If the hash
is recorded under the same path, the file is left alone, so running it again
over the same collection deletes nothing. Files that cannot be read are
skipped.

The database holds a single table, `EBOOK`, with `ID`, `NAME` and `HASH`
columns. It is created on first use.

## Using it from Python

```python
from ebookkeeper.sha256 import SHA256, to_hex
from ebookkeeper.helper import walk_files, list_files, sha256_file, rename_file, delete_file
from ebookkeeper.db import EbookDB
from ebookkeeper.cli import Options, Action, parse_args, remove_duplicates

h = SHA256()
h.update(b"abc")          # str is accepted too and encoded as UTF-8
print(h.hexdigest())

for path in walk_files("books"):   # raises FileNotFoundError if missing
    print(path, sha256_file(path))

with EbookDB() as db:
    db.open("ebook.db")
    db.insert("books/a.epub", "0" * 64)
    db.insert_many([("books/b.epub", "1" * 64), ("books/c.epub", "2" * 64)])
    print(db.is_saved("0" * 64), db.get_path("0" * 64))
    print(db.query_by_hash("1" * 64))   # list of (name, hash) rows

    options = parse_args(["-action", "duplicate", "-db", "ebook.db", "-target", "books"])
    deleted = remove_duplicates(options, db)   # list of deleted paths
```

- `SHA256` is an incremental hasher with `update`, `digest` (32 bytes) and
  `hexdigest`; `to_hex` renders a digest as lower-case hex.
- `list_files(directory, processor)` calls `processor` on each file, prints
  and carries on past exceptions it raises.
- `rename_file` returns the new path, or `None` when nothing was renamed.
- `delete_file` removes a file or an empty directory and returns `False` if
  nothing was there.
- `EbookDB.get_path` returns `""` for an unknown hash; its in-memory index
  keeps the first path recorded for each hash. `insert_many` stores all rows
  in one transaction or none. Inserting before `open` raises `RuntimeError`;
  opening an empty name raises `ValueError`.

## What it does not do

There is no dry-run mode: `rename` and `duplicate` change files on disk
straight away. The `duplicate` action only records and compares hashes; it
does not clean out database entries for files that have since been moved or
deleted.

## Running the tests

```
pip install .[test]
pytest
```