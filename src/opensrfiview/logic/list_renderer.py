# src/opensrfiview/logic/list_renderer.py

from __future__ import annotations

from typing import Iterable, List

from opensrfiview.models.list_line import ListLine
from opensrfiview.models.srfi_record import SrfiRecord


def format_line(record: SrfiRecord) -> str:
    """
    一覧の 1 行分の表示文字列を作る。

        final     -> "SRFI   1: List Library (1999)"
        withdrawn -> "SRFI   3: List-Set Library (1999, withdrawn)"
        それ以外  -> "SRFI 250: Foo (draft)"
    """
    head = f"SRFI {record.number:3d}: {record.title}"
    if record.is_final:
        return f"{head} ({record.year})"
    if record.is_withdrawn:
        return f"{head} ({record.year}, withdrawn)"
    return f"{head} ({record.status})"


def render_lines(records: Iterable[SrfiRecord]) -> List[ListLine]:
    """
    SrfiRecord 1 件につき 1 行の ListLine を、番号の降順で返す。
    描画直後はすべての行が表示状態。
    """
    ordered = sorted(records, key=lambda r: r.number, reverse=True)
    return [ListLine(text=format_line(r), number=r.number) for r in ordered]
