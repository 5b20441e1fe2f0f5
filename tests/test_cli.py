"""Tests for the Typer CLI against a temporary local storage file."""

import re
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import structlog
from typer.testing import CliRunner

from slat_inventory.cli import app
from slat_inventory.storage import JsonFileStorage
from slat_inventory.storage.repository import InventoryRepository

runner = CliRunner()

ADD_ARGS = [
    "add",
    "--category", "Clothes",
    "--color", "WH",
    "--length", "531",
    "--position", "Sides",
    "--step", "Milling",
]


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = Path(self._tmp.name) / "local_storage.json"

    def tearDown(self):
        self._tmp.cleanup()

    def _repo(self) -> InventoryRepository:
        return InventoryRepository(JsonFileStorage(self.store))

    def test_add_and_list(self):
        result = runner.invoke(app, ADD_ARGS + ["--quantity", "8", "--pallet", "P5", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Entry saved", result.output)
        records = self._repo().list_records()
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].quantity, 8)
        self.assertEqual(records[0].pallet_id, "P5")

        result = runner.invoke(app, ["list", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("1 entries", result.output)

    def test_add_rejects_invalid_entry(self):
        result = runner.invoke(app, ADD_ARGS + ["--quantity", "0", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Rejected", result.output)
        self.assertEqual(self._repo().list_records(), [])

    def test_add_with_photo(self):
        photo = Path(self._tmp.name) / "pallet.jpg"
        photo.write_bytes(b"jpeg-bytes")
        result = runner.invoke(
            app,
            ADD_ARGS + ["--quantity", "2", "--photo", str(photo), "--store", str(self.store)],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(self._repo().list_records()[0].photo_url.startswith("data:image/jpeg;base64,"))

    def test_summary_totals(self):
        for q in ("10", "5", "7"):
            runner.invoke(app, ADD_ARGS + ["--quantity", q, "--store", str(self.store)])
        result = runner.invoke(app, ["summary", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Total quantity: 22", result.output)

    def test_summary_bad_date(self):
        result = runner.invoke(app, ["summary", "--from", "yesterday", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 1)

    def test_delete(self):
        record = self._repo().create_record(
            {
                "category": "Pull Out",
                "color": "BEIGE",
                "length": 426,
                "position_type": "Default",
                "production_step": "After Pile",
                "quantity": 3,
            }
        )
        result = runner.invoke(app, ["delete", record.id, "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self._repo().list_records(), [])
        result = runner.invoke(app, ["delete", record.id, "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No entry", result.output)

    def test_delete_with_id_shown_by_list(self):
        runner.invoke(app, ["seed", "--store", str(self.store)])
        ids = [r.id for r in self._repo().list_records()]
        result = runner.invoke(app, ["list", "--store", str(self.store)])
        shown = re.findall(r"\b[0-9a-f]{8}\b", result.output)
        self.assertEqual(shown, [i[:8] for i in ids])

        result = runner.invoke(app, ["delete", shown[0], "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(f"Deleted {ids[0]}", result.output)
        self.assertEqual([r.id for r in self._repo().list_records()], ids[1:])

    def test_delete_ambiguous_prefix_removes_nothing(self):
        ids = iter(["abc-1", "abc-10"])
        repo = InventoryRepository(JsonFileStorage(self.store), id_factory=lambda: next(ids))
        for q in (1, 2):
            repo.create_record(
                {
                    "category": "Clothes",
                    "color": "WH",
                    "length": 961,
                    "position_type": "Front",
                    "production_step": "Milling",
                    "quantity": q,
                }
            )
        result = runner.invoke(app, ["delete", "abc", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("matches 2 entries", result.output)
        self.assertEqual(len(self._repo().list_records()), 2)

        # An exact id wins over being a prefix of another id
        result = runner.invoke(app, ["delete", "abc-1", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([r.id for r in self._repo().list_records()], ["abc-10"])

    def test_summary_details_lists_group_entries(self):
        runner.invoke(app, ADD_ARGS + ["--quantity", "4", "--store", str(self.store)])
        runner.invoke(app, ADD_ARGS + ["--quantity", "6", "--store", str(self.store)])
        other = [a if a != "WH" else "GREY" for a in ADD_ARGS]
        runner.invoke(app, other + ["--quantity", "1", "--store", str(self.store)])
        records = self._repo().list_records()

        result = runner.invoke(app, ["summary", "--store", str(self.store)])
        self.assertNotIn("Group 1:", result.output)

        result = runner.invoke(app, ["summary", "--details", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Group 1:", result.output)
        self.assertIn("Group 2:", result.output)
        self.assertNotIn("Group 3:", result.output)
        for record in records:
            self.assertIn(record.id[:8], result.output)

    def test_command_name_bound_to_log_context(self):
        seen = []

        def _open(store):
            seen.append(structlog.contextvars.get_contextvars())
            return InventoryRepository(JsonFileStorage(store))

        with patch("slat_inventory.cli.records.open_repository", side_effect=_open):
            result = runner.invoke(app, ["list", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(seen[0].get("command"), "list")
        self.assertEqual(structlog.contextvars.get_contextvars(), {})

    def test_seed_then_list(self):
        result = runner.invoke(app, ["seed", "--store", str(self.store)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(self._repo().list_records()), 4)
        result = runner.invoke(app, ["seed", "--store", str(self.store)])
        self.assertIn("nothing seeded", result.output)

    def test_rule_lookups(self):
        result = runner.invoke(app, ["positions", "Trousers", "926", "Hotstamping"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.split(), ["Front", "Back"])

        result = runner.invoke(app, ["lengths", "Clothes"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([line.split()[0] for line in result.output.splitlines()], ["961", "711", "461", "531", "301"])

        result = runner.invoke(app, ["positions", "Clothes", "999", "Milling"])
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
