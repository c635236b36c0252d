"""Tests for line formatting and rendering order."""

from opensrfiview.logic.list_renderer import format_line, render_lines
from opensrfiview.models.srfi_record import SrfiRecord
from opensrfiview.srfi_table import load_srfi_table


def test_format_final():
    rec = SrfiRecord(number=0, year=2020, status="final", title="Foo")
    assert format_line(rec) == "SRFI   0: Foo (2020)"


def test_format_withdrawn():
    rec = SrfiRecord(number=2, year=2019, status="withdrawn", title="Baz")
    assert format_line(rec) == "SRFI   2: Baz (2019, withdrawn)"


def test_format_draft_uses_status():
    rec = SrfiRecord(number=250, year=None, status="draft", title="Qux")
    assert format_line(rec) == "SRFI 250: Qux (draft)"


def test_render_sample_order(sample_records):
    lines = render_lines(reversed(sample_records))
    assert [line.text for line in lines] == [
        "SRFI   2: Baz (2019, withdrawn)",
        "SRFI   1: Bar (draft)",
        "SRFI   0: Foo (2020)",
    ]
    assert [line.number for line in lines] == [2, 1, 0]
    assert all(line.visible for line in lines)


def test_render_bundled_table_one_line_per_record():
    records = load_srfi_table()
    lines = render_lines(records)
    assert len(lines) == len(records)
    numbers = [line.number for line in lines]
    assert all(a > b for a, b in zip(numbers, numbers[1:]))
