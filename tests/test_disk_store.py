from __future__ import annotations

import json

import pytest

from nestedjson import DatabaseError, DiskJsonDocumentStore, NestedJSONStore
from nestedjson.json_store import atomic_write_json, read_json, write_json
from nestedjson.paths import ensure_parent_dir, parent_dir


def test_bootstrap_creates_directories_and_empty_document(tmp_path):
    path = tmp_path / "sub" / "dir" / "db.json"
    DiskJsonDocumentStore(path)
    assert path.exists()
    assert path.read_text(encoding="utf-8") == "{}"


def test_bootstrap_does_not_touch_existing_file(tmp_path):
    path = tmp_path / "db.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    store = DiskJsonDocumentStore(path)
    assert store.load() == {"a": 1}


def test_bare_file_name_uses_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    store = NestedJSONStore()
    assert store.path.name == "database.json"
    assert (tmp_path / "database.json").read_text(encoding="utf-8") == "{}"


def test_parent_dir():
    assert parent_dir("database.json") == ""
    assert parent_dir("data/db.json") == "data"
    assert parent_dir("a/b/c.json") == "a/b"
    assert parent_dir("/db.json") == ""


def test_ensure_parent_dir(tmp_path):
    assert ensure_parent_dir("db.json") is None
    created = ensure_parent_dir(f"{tmp_path}/x/y/db.json")
    assert created is not None and created.is_dir()


def test_empty_file_reads_as_empty_document(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("  \n", encoding="utf-8")
    assert read_json(path) == {}
    store = NestedJSONStore(str(path))
    assert store.all() == []
    store.set("a", 1)
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("not valid json{{{", encoding="utf-8")
    store = NestedJSONStore(str(path))
    with pytest.raises(json.JSONDecodeError):
        store.get("a")


def test_non_object_root_raises(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("[1, 2]", encoding="utf-8")
    store = NestedJSONStore(str(path))
    with pytest.raises(DatabaseError):
        store.all()


def test_deleted_file_propagates_io_error(store, db_path):
    db_path.unlink()
    with pytest.raises(FileNotFoundError):
        store.get("a")


def test_write_json_preserves_key_order_and_unicode(tmp_path):
    path = tmp_path / "out.json"
    write_json(path, {"z": 1, "a": "héllo"})
    assert path.read_text(encoding="utf-8") == '{\n  "z": 1,\n  "a": "héllo"\n}'


def test_atomic_write_replaces_target_and_leaves_no_temp(tmp_path):
    path = tmp_path / "out.json"
    path.write_text("{}", encoding="utf-8")
    atomic_write_json(path, {"a": [1, 2]})
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": [1, 2]}
    assert not (tmp_path / "out.json.tmp").exists()


def test_store_with_atomic_writes(db_path):
    store = NestedJSONStore(str(db_path), atomic_writes=True)
    store.push("arr", 1)
    store.push("arr", 2)
    assert store.get("arr") == [1, 2]
    assert not db_path.with_suffix(".json.tmp").exists()


def test_store_accepts_custom_document_store():
    class MemoryDocumentStore:
        def __init__(self):
            self.doc = {}
            self.saves = 0

        @property
        def path(self):
            return None

        def load(self):
            return json.loads(json.dumps(self.doc))

        def save(self, doc):
            self.saves += 1
            self.doc = json.loads(json.dumps(doc))

    backend = MemoryDocumentStore()
    store = NestedJSONStore(document_store=backend)
    store.set("a..b", 1)
    store.add("a..c", 2)
    assert backend.doc == {"a": {"b": 1, "c": 2}}
    assert backend.saves == 2
    assert store.get("a..missing") is None
    assert backend.saves == 2
