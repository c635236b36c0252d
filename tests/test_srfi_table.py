"""Tests for the bundled SRFI table and the flat-triple loader."""

import json

import pytest

from opensrfiview.srfi_table import load_srfi_table, records_from_flat, srfi_count


class TestRecordsFromFlat:
    def test_last_triple_is_srfi_zero(self):
        records = records_from_flat([
            2019, "withdrawn", "Baz",
            "draft", "draft", "Bar",
            2020, "final", "Foo",
        ])
        assert [r.number for r in records] == [2, 1, 0]
        assert records[-1].title == "Foo"
        assert records[-1].year == 2020
        assert records[0].status == "withdrawn"

    def test_empty_table(self):
        assert records_from_flat([]) == []

    def test_length_not_multiple_of_three_is_rejected(self):
        with pytest.raises(ValueError, match="multiple of 3"):
            records_from_flat([1999, "final"])


class TestBundledTable:
    def test_numbers_are_unique_and_contiguous(self):
        records = load_srfi_table()
        numbers = [r.number for r in records]
        assert len(set(numbers)) == len(numbers)
        assert sorted(numbers) == list(range(len(numbers)))
        assert srfi_count() == len(records)

    def test_known_entries(self):
        by_number = {r.number: r for r in load_srfi_table()}
        assert by_number[0].title == "Feature-based conditional expansion construct"
        assert by_number[1].title == "List Library"
        assert by_number[1].year == 1999
        assert by_number[3].status == "withdrawn"

    def test_returns_fresh_list(self):
        first = load_srfi_table()
        first.clear()
        assert load_srfi_table()


class TestAlternateTable:
    def test_loads_json_file(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(
            json.dumps([2021, "final", "Alpha", 2020, "final", "Beta"]),
            encoding="utf-8",
        )
        records = load_srfi_table(path)
        assert [(r.number, r.title) for r in records] == [(1, "Alpha"), (0, "Beta")]

    def test_rejects_non_list_json(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text('{"0": "Foo"}', encoding="utf-8")
        with pytest.raises(ValueError, match="expected list"):
            load_srfi_table(path)
