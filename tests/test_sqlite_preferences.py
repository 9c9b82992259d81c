"""SQLitePreferences host store: in-memory reads, apply() in background, commit() synchronous."""

from __future__ import annotations

import sqlite3

import pytest

from agnostic_storage.host.sqlite_preferences import SQLitePreferences


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "nested" / "prefs.sqlite"


@pytest.fixture
def prefs(db_path):
    with SQLitePreferences(db_path) as p:
        yield p


def _rows(db_path):
    conn = sqlite3.connect(str(db_path))
    try:
        return dict(
            (key, (kind, value))
            for key, kind, value in conn.execute("SELECT key, kind, value FROM preferences")
        )
    finally:
        conn.close()


def test_creates_parent_dir_and_table(prefs, db_path):
    assert db_path.exists()
    assert _rows(db_path) == {}


def test_apply_is_visible_before_flush(prefs):
    prefs.edit().put_string("s", "v").apply()
    assert prefs.get_string("s") == "v"


def test_apply_then_flush_persists_typed_rows(prefs, db_path):
    prefs.edit().put_string("s", "v").put_int("i", -3).put_boolean("b", True).apply()
    prefs.flush()
    assert _rows(db_path) == {
        "s": ("string", "v"),
        "i": ("int", "-3"),
        "b": ("boolean", "1"),
    }


def test_commit_persists_without_flush(prefs, db_path):
    assert prefs.edit().put_int("i", 9).commit() is True
    assert _rows(db_path) == {"i": ("int", "9")}


def test_commit_lands_after_earlier_apply(prefs, db_path):
    prefs.edit().put_string("k", "applied").apply()
    prefs.edit().put_string("k", "committed").commit()
    prefs.flush()
    assert _rows(db_path)["k"] == ("string", "committed")


def test_values_survive_reopen(db_path):
    with SQLitePreferences(db_path) as first:
        first.edit().put_string("s", "kept").put_int("i", 12).put_boolean("b", False).apply()
    with SQLitePreferences(db_path) as second:
        assert second.get_string("s") == "kept"
        assert second.get_int("i") == 12
        assert second.get_boolean("b", True) is False


def test_remove_deletes_row(prefs, db_path):
    prefs.edit().put_string("s", "v").commit()
    prefs.edit().remove("s").apply()
    prefs.flush()
    assert prefs.contains("s") is False
    assert _rows(db_path) == {}


def test_defaults_honored_when_absent(prefs):
    assert prefs.get_string("x", "d") == "d"
    assert prefs.get_int("x", 7) == 7
    assert prefs.get_boolean("x", True) is True


def test_wrong_accessor_raises_type_error(prefs):
    prefs.edit().put_string("s", "text").put_boolean("b", True).apply()
    with pytest.raises(TypeError):
        prefs.get_int("s")
    with pytest.raises(TypeError):
        prefs.get_int("b")
    with pytest.raises(TypeError):
        prefs.get_string("b")


def test_apply_after_close_persists_synchronously(db_path):
    prefs = SQLitePreferences(db_path)
    prefs.close()
    prefs.edit().put_string("late", "v").apply()
    assert _rows(db_path) == {"late": ("string", "v")}
