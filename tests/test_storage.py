"""Word list loading and saved-index backends (JSON and SQLite)."""

import io
import json
import sqlite3

import pytest

from phonetics import MetaphoneEncoder, SoundexEncoder
from speller import (
    JsonIndexBackend,
    PhoneticIndex,
    SqliteIndexBackend,
    WordListError,
    iter_words,
    load_index,
    open_backend,
    read_words,
    save_index,
)


def test_iter_words_drops_blank_lines_keeps_duplicates():
    assert list(iter_words(["cat\n", "\n", "  \n", " dog ", "cat"])) == ["cat", "dog", "cat"]


def test_read_words_from_path_and_stream(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\r\nbeta\n\ngamma", encoding="utf-8")
    assert read_words(path) == ["alpha", "beta", "gamma"]
    assert read_words(str(path)) == ["alpha", "beta", "gamma"]
    assert read_words(io.StringIO("x\ny\n")) == ["x", "y"]


def test_read_words_load_faults(tmp_path):
    with pytest.raises(WordListError):
        read_words(tmp_path / "nope.txt")
    bad = tmp_path / "latin1.txt"
    bad.write_bytes("caf\xe9\n".encode("latin-1"))
    with pytest.raises(WordListError):
        read_words(bad)
    assert read_words(bad, encoding="latin-1") == ["caf\xe9"]


def test_open_backend_by_suffix(tmp_path):
    assert isinstance(open_backend(tmp_path / "i.json"), JsonIndexBackend)
    backend = open_backend(tmp_path / "i.db")
    assert isinstance(backend, SqliteIndexBackend)
    backend.close()


@pytest.mark.parametrize("name", ["index.json", "index.db"])
def test_save_and_load_index(tmp_path, name):
    index = PhoneticIndex.build(["cat", "cot", "cat", "dog", "Kat"])
    path = tmp_path / name
    save_index(index, path)
    loaded = load_index(path)
    assert loaded.encoder.name == "metaphone"
    assert dict(loaded.items()) == dict(index.items())
    assert len(loaded) == 5
    assert loaded.contains("cat")


def test_saving_twice_replaces_contents(tmp_path):
    path = tmp_path / "index.db"
    save_index(PhoneticIndex.build(["cat", "dog"]), path)
    save_index(PhoneticIndex.build(["fish"]), path)
    loaded = load_index(path)
    assert len(loaded) == 1
    assert loaded.contains("fish")


def test_load_with_mismatched_encoder(tmp_path):
    path = tmp_path / "index.json"
    save_index(PhoneticIndex.build(["cat"], SoundexEncoder()), path)
    assert load_index(path).encoder.name == "soundex"
    with pytest.raises(WordListError):
        load_index(path, MetaphoneEncoder())


def test_load_missing_or_malformed(tmp_path):
    with pytest.raises(WordListError):
        load_index(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(WordListError):
        load_index(bad)
    wrong = tmp_path / "wrong.json"
    wrong.write_text(json.dumps({"buckets": {"KT": "cat"}}), encoding="utf-8")
    with pytest.raises(WordListError):
        load_index(wrong)
    not_db = tmp_path / "text.db"
    not_db.write_text("this is not a database\n" * 64, encoding="utf-8")
    with pytest.raises(WordListError):
        load_index(not_db)


class _TrackedConnection:
    def __init__(self, conn):
        self._conn = conn
        self.closed = False

    def execute(self, *args):
        return self._conn.execute(*args)

    def commit(self):
        self._conn.commit()

    def close(self):
        self.closed = True
        self._conn.close()


def test_sqlite_backend_closes_connection_when_schema_fails(tmp_path, monkeypatch):
    opened = []
    real_connect = sqlite3.connect

    def tracked_connect(*args, **kwargs):
        conn = _TrackedConnection(real_connect(*args, **kwargs))
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", tracked_connect)
    not_db = tmp_path / "text.db"
    not_db.write_text("this is not a database\n" * 64, encoding="utf-8")
    with pytest.raises(WordListError):
        SqliteIndexBackend(not_db)
    assert len(opened) == 1
    assert opened[0].closed
