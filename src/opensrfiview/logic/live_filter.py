# src/opensrfiview/logic/live_filter.py

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from opensrfiview.models.list_line import ListLine


def line_matches(line: ListLine, query: str) -> bool:
    """大文字小文字を区別せず、query が行テキストに含まれるか。空文字は常に一致。"""
    if not query:
        return True
    return query.lower() in line.text.lower()


def apply_filter(lines: Iterable[ListLine], query: str) -> None:
    """
    各行の visible を query に合わせて書き換える。

    非表示にするだけでなく、一致するようになった行は表示に戻す。
    結果は現在の query だけで決まり、それまでの絞り込み履歴には依存しない。
    """
    lowered = (query or "").lower()
    for line in lines:
        line.visible = not lowered or lowered in line.text.lower()


def first_visible_index(lines: Sequence[ListLine]) -> Optional[int]:
    """最初に表示されている行の位置。1 行も表示されていなければ None。"""
    for idx, line in enumerate(lines):
        if line.visible:
            return idx
    return None
