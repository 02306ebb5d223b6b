import sqlite3

import pytest

from ebookkeeper.db import EbookDB


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "ebook.db"


def test_open_empty_name_raises():
    db = EbookDB()
    with pytest.raises(ValueError):
        db.open("")


def test_insert_then_lookup(db_file):
    with EbookDB() as db:
        db.open(db_file)
        db.insert("books/a.epub", "h1")
        assert db.is_saved("h1")
        assert db.get_path("h1") == "books/a.epub"
        assert not db.is_saved("h2")


def test_get_path_missing_returns_empty(db_file):
    with EbookDB() as db:
        db.open(db_file)
        assert db.get_path("absent") == ""


def test_rows_persist_across_reopen(db_file):
    with EbookDB() as db:
        db.open(db_file)
        db.insert("books/a.epub", "h1")
    with EbookDB() as db:
        db.open(db_file)
        assert db.is_saved("h1")
        assert db.get_path("h1") == "books/a.epub"


def test_first_path_wins_for_same_hash(db_file):
    with EbookDB() as db:
        db.open(db_file)
        db.insert("first.pdf", "same")
        db.insert("second.pdf", "same")
        assert db.get_path("same") == "first.pdf"
        assert db.query_by_hash("same") == [("first.pdf", "same"), ("second.pdf", "same")]
    with EbookDB() as db:
        db.open(db_file)
        assert db.get_path("same") == "first.pdf"


def test_insert_many_and_query(db_file):
    with EbookDB() as db:
        db.open(db_file)
        db.insert_many([("a.pdf", "x"), ("b.pdf", "y")])
        assert db.query_by_hash("x") == [("a.pdf", "x")]
        assert db.query_by_hash("y") == [("b.pdf", "y")]
        assert db.query_by_hash("z") == []
        assert db.is_saved("y")


def test_insert_many_rolls_back_on_failure(db_file):
    with EbookDB() as db:
        db.open(db_file)
        with pytest.raises(sqlite3.IntegrityError):
            db.insert_many([("a.pdf", "x"), (None, "y")])
        assert db.query_by_hash("x") == []
        assert not db.is_saved("x")


def test_unicode_name_round_trip(db_file):
    name = "书单/电子书.epub"
    with EbookDB() as db:
        db.open(db_file)
        db.insert(name, "u")
    with EbookDB() as db:
        db.open(db_file)
        assert db.get_path("u") == name


def test_operations_on_unopened_db_raise():
    db = EbookDB()
    with pytest.raises(RuntimeError):
        db.insert("a", "b")
    with pytest.raises(RuntimeError):
        db.query_by_hash("b")


def test_context_manager_closes(db_file):
    with EbookDB() as db:
        db.open(db_file)
    with pytest.raises(RuntimeError):
        db.insert("a", "b")