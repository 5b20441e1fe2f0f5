"""Tests for key-value storage backends and build_storage."""

import json
import tempfile
import unittest
from pathlib import Path

from slat_inventory.storage import JsonFileStorage, MemoryStorage, SqlKeyValueStorage, build_storage


class TestJsonFileStorage(unittest.TestCase):
    def test_missing_file_reads_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            storage = JsonFileStorage(Path(tmp) / "nested" / "store.json")
            self.assertIsNone(storage.get_item("k"))

    def test_set_then_get_keeps_other_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "store.json"
            storage = JsonFileStorage(path)
            storage.set_item("a", "1")
            storage.set_item("b", "[]")
            storage.set_item("a", "2")
            self.assertEqual(storage.get_item("a"), "2")
            self.assertEqual(storage.get_item("b"), "[]")
            self.assertEqual(json.loads(path.read_text(encoding="utf-8")), {"a": "2", "b": "[]"})

    def test_corrupt_file_raises_on_read_and_is_replaced_on_write(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "store.json"
            path.write_text("not json", encoding="utf-8")
            storage = JsonFileStorage(path)
            with self.assertRaises(ValueError):
                storage.get_item("a")
            storage.set_item("a", "x")
            self.assertEqual(storage.get_item("a"), "x")


class TestSqlKeyValueStorage(unittest.TestCase):
    def test_set_get_and_overwrite(self):
        with tempfile.TemporaryDirectory() as tmp:
            url = f"sqlite:///{(Path(tmp) / 'kv.db').as_posix()}"
            storage = SqlKeyValueStorage(url)
            try:
                self.assertIsNone(storage.get_item("k"))
                storage.set_item("k", "first")
                storage.set_item("k", "second")
                self.assertEqual(storage.get_item("k"), "second")
            finally:
                storage.dispose()
            reopened = SqlKeyValueStorage(url)
            try:
                self.assertEqual(reopened.get_item("k"), "second")
            finally:
                reopened.dispose()

    def test_sqlite_parent_directory_created(self):
        with tempfile.TemporaryDirectory() as tmp:
            db = Path(tmp) / "data" / "kv.db"
            storage = SqlKeyValueStorage(f"sqlite:///{db.as_posix()}")
            try:
                storage.set_item("k", "v")
                self.assertTrue(db.is_file())
            finally:
                storage.dispose()


class TestMemoryStorage(unittest.TestCase):
    def test_initial_items_are_copied(self):
        seed = {"k": "v"}
        storage = MemoryStorage(seed)
        storage.set_item("k", "w")
        self.assertEqual(seed, {"k": "v"})
        self.assertEqual(storage.get_item("k"), "w")


class TestBuildStorage(unittest.TestCase):
    def test_known_backends(self):
        self.assertIsInstance(build_storage("json"), JsonFileStorage)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            build_storage("redis")


if __name__ == "__main__":
    unittest.main()
