# src/opensrfiview/logic/action_dispatcher.py

from __future__ import annotations

import logging
from typing import Callable, Optional

from opensrfiview.logic.list_view import ListView
from opensrfiview.logic.srfi_urls import (
    discussion_url,
    document_url,
    landing_page_url,
    repository_url,
)

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """
    カーソル行の SRFI 番号から URL を組み立て、open_url に渡す。

    open_url の成否はこちらでは扱わない（呼び出すだけ）。
    カーソル行に SRFI が無い場合は ListView.resolve_number が
    NoRecordAtCursor を送出し、そのまま呼び出し側に伝わる。
    """

    def __init__(self, view: ListView, open_url: Callable[[str], None]) -> None:
        self._view = view
        self._open_url = open_url

    def _dispatch(self, cursor: Optional[int], build_url: Callable[[int], str]) -> str:
        number = self._view.resolve_number(cursor)
        url = build_url(number)
        logger.info("opening %s", url)
        self._open_url(url)
        return url

    def browse_document(self, cursor: Optional[int]) -> str:
        return self._dispatch(cursor, document_url)

    def browse_discussion(self, cursor: Optional[int]) -> str:
        return self._dispatch(cursor, discussion_url)

    def browse_repository(self, cursor: Optional[int]) -> str:
        return self._dispatch(cursor, repository_url)

    def browse_landing_page(self, cursor: Optional[int]) -> str:
        return self._dispatch(cursor, landing_page_url)
