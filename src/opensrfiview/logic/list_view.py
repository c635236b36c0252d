# src/opensrfiview/logic/list_view.py

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional

from opensrfiview.logic.list_renderer import render_lines
from opensrfiview.logic.live_filter import apply_filter, first_visible_index
from opensrfiview.models.list_line import ListLine
from opensrfiview.models.srfi_record import SrfiRecord

logger = logging.getLogger(__name__)


class NoRecordAtCursor(Exception):
    """カーソル位置に（表示中の）SRFI 行が無いときに送出される。"""

    def __init__(self, cursor: Optional[int]) -> None:
        super().__init__(f"No SRFI at cursor position {cursor}")
        self.cursor = cursor


class ViewState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    NARROWING = "narrowing"


class ListView:
    """
    SRFI 一覧ビューの状態を保持するオブジェクト。

    - lines: 描画済みの ListLine（番号の降順）
    - query: 絞り込み文字列。ビューを閉じても保持し、clear_query() でのみ消える
    - state: CLOSED → OPEN → NARROWING → OPEN → CLOSED
    - top_index: 絞り込み後に先頭へスクロールすべき行（表示行が無ければ None）

    画面（QListWidget など）はこのオブジェクトの内容を写すだけにする。
    """

    def __init__(self, records: Iterable[SrfiRecord]) -> None:
        self._records: List[SrfiRecord] = list(records)
        self.lines: List[ListLine] = []
        self.query: str = ""
        self.state: ViewState = ViewState.CLOSED
        self.top_index: Optional[int] = None

    # ─ 表示 / 非表示 ─────────────────────────────────────
    def show(self) -> List[ListLine]:
        """
        一覧を描画し直して OPEN 状態にする。

        すでに開いている場合も全体を描画し直すが、query はそのまま引き継ぐ。
        絞り込み入力中なら状態は NARROWING のまま変えない。
        """
        self.lines = render_lines(self._records)
        self._refilter()
        if self.state is not ViewState.NARROWING:
            self.state = ViewState.OPEN
        logger.debug("list shown: %d lines, query=%r", len(self.lines), self.query)
        return self.lines

    def close(self) -> None:
        self.state = ViewState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is not ViewState.CLOSED

    # ─ 絞り込み ──────────────────────────────────────────
    def begin_narrowing(self) -> str:
        """
        絞り込み入力を開始する。閉じていれば先に一覧を表示する。
        入力欄の初期値として現在の query を返す。
        """
        if self.state is ViewState.CLOSED:
            self.show()
        self.state = ViewState.NARROWING
        return self.query

    def on_query_changed(self, query: str) -> Optional[int]:
        """入力が変わるたびに呼ばれる。先頭に表示すべき行を返す。"""
        self.query = query or ""
        self._refilter()
        return self.top_index

    def confirm_narrowing(self) -> None:
        self.state = ViewState.OPEN

    def cancel_narrowing(self) -> None:
        # 入力途中の query は巻き戻さずに残す
        self.state = ViewState.OPEN

    def clear_query(self) -> None:
        self.query = ""
        self._refilter()

    def _refilter(self) -> None:
        apply_filter(self.lines, self.query)
        self.top_index = first_visible_index(self.lines)

    # ─ カーソル ──────────────────────────────────────────
    def visible_lines(self) -> List[ListLine]:
        return [line for line in self.lines if line.visible]

    def resolve_number(self, cursor: Optional[int]) -> int:
        """
        カーソル行（lines の添字）に対応する SRFI 番号を返す。

        範囲外・非表示行・カーソル無しの場合は NoRecordAtCursor。
        """
        if cursor is None or cursor < 0 or cursor >= len(self.lines):
            raise NoRecordAtCursor(cursor)
        line = self.lines[cursor]
        if not line.visible:
            raise NoRecordAtCursor(cursor)
        return line.number
