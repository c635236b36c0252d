# src/opensrfiview/gui/main_window.py

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QAction, QDesktopServices, QFont, QKeySequence
from PySide6.QtWidgets import (
    QAbstractItemView,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from opensrfiview.gui.narrow_bar import NarrowBar
from opensrfiview.logic.action_dispatcher import ActionDispatcher
from opensrfiview.logic.list_view import ListView, NoRecordAtCursor
from opensrfiview.logic.srfi_urls import home_page_url
from opensrfiview.models.srfi_record import SrfiRecord
from opensrfiview.settings import Settings
from opensrfiview.srfi_table import load_srfi_table

logger = logging.getLogger(__name__)


def open_in_browser(url: str) -> None:
    """外部ブラウザで URL を開く。成否は呼び出し側では扱わない。"""
    if not QDesktopServices.openUrl(QUrl(url)):
        logger.warning("browser refused to open %s", url)


class MainWindow(QMainWindow):
    """
    SRFI 一覧ウィンドウ。

    一覧の中身は ListView が持ち、QListWidget はそれを写すだけ。
    1行 = 1 SRFI で、行の UserRole に SRFI 番号を保持している。
    """

    def __init__(
        self,
        records: Optional[Iterable[SrfiRecord]] = None,
        open_url: Callable[[str], None] | None = None,
        settings: Optional[Settings] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()

        self.setWindowTitle("OpenSrfiView - SRFI 一覧")
        self.resize(self._settings.window_width, self._settings.window_height)

        if records is None:
            records = self._load_records()

        self._view = ListView(records)
        # 呼び出し側から差し替え可能（なければ QDesktopServices）
        self._open_url = open_url or open_in_browser
        self._dispatcher = ActionDispatcher(self._view, self._open_url)

        # UI 構築
        self._create_central_widgets()
        self._create_actions()
        self._create_menus()
        self._create_status_bar()

    @property
    def view(self) -> ListView:
        return self._view

    def _load_records(self) -> List[SrfiRecord]:
        """
        SRFI 一覧を読み込む。

        設定で別ファイルが指定されていればそれを読むが、
        読めない・形式が壊れている場合は警告を出して同梱テーブルを使う。
        """
        path = self._settings.srfi_table
        if path is not None:
            try:
                return load_srfi_table(path)
            except (OSError, ValueError) as e:
                logger.warning("could not load SRFI table %s, using bundled table: %s", path, e)
        return load_srfi_table()

    # ─────────────────────────────
    # UI 構築
    # ─────────────────────────────
    def _create_central_widgets(self) -> None:
        """
        中央領域：
          - 上: 絞り込み入力欄（絞り込み中だけ表示）
          - 下: SRFI 一覧
        """
        root = QWidget(self)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.narrow_bar = NarrowBar(root)
        self.narrow_bar.hide()
        self.narrow_bar.queryChanged.connect(self._on_query_changed)
        self.narrow_bar.accepted.connect(self._on_narrow_accepted)
        self.narrow_bar.cancelled.connect(self._on_narrow_cancelled)

        self.srfi_list = QListWidget(root)
        self.srfi_list.setSelectionMode(QListWidget.SingleSelection)
        self.srfi_list.setUniformItemSizes(True)
        font = self.srfi_list.font()
        font.setFamily("monospace")
        font.setStyleHint(QFont.TypeWriter)
        self.srfi_list.setFont(font)
        self.srfi_list.itemDoubleClicked.connect(self._on_item_double_clicked)

        layout.addWidget(self.narrow_bar)
        layout.addWidget(self.srfi_list)

        self.setCentralWidget(root)

    def _list_action(
        self,
        text: str,
        shortcuts: list[str | QKeySequence.StandardKey],
        slot: Callable[[], None],
    ) -> QAction:
        """一覧にフォーカスがあるときだけ効くショートカット付きのアクションを作る。"""
        action = QAction(text, self)
        action.setShortcuts([QKeySequence(s) for s in shortcuts])
        action.setShortcutContext(Qt.WidgetWithChildrenShortcut)
        action.triggered.connect(slot)
        self.srfi_list.addAction(action)
        return action

    def _create_actions(self) -> None:
        # 一覧を表示（描画し直し）
        self.show_list_action = QAction("一覧を再表示(&L)", self)
        self.show_list_action.setShortcut(QKeySequence.Refresh)  # F5
        self.show_list_action.triggered.connect(self.show_list)

        # 閉じる
        self.close_action = QAction("閉じる(&Q)", self)
        self.close_action.setShortcut("Ctrl+Q")
        self.close_action.triggered.connect(self.close)

        # 絞り込み（入力欄へ）
        self.search_action = self._list_action(
            "絞り込み(&S)...", ["S", "/", QKeySequence.Find], self._begin_search
        )

        # 絞り込み解除
        self.clear_filter_action = QAction("絞り込み解除(&C)", self)
        self.clear_filter_action.setShortcut("Ctrl+L")
        self.clear_filter_action.triggered.connect(self._on_clear_filter)

        # カーソル行の SRFI に対する操作
        self.browse_document_action = self._list_action(
            "本文を開く(&O)", ["Return", "Enter"], self._on_browse_document
        )
        self.browse_discussion_action = self._list_action(
            "議論アーカイブを開く(&D)", ["D"], self._on_browse_discussion
        )
        self.browse_repository_action = self._list_action(
            "リポジトリを開く(&R)", ["R"], self._on_browse_repository
        )
        self.browse_landing_page_action = self._list_action(
            "SRFI ページを開く(&W)", ["W"], self._on_browse_landing_page
        )

        # SRFI サイトのトップページ
        self.browse_home_action = QAction("SRFI サイトを開く(&H)", self)
        self.browse_home_action.triggered.connect(self._on_browse_home)

    def _create_menus(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("ファイル(&F)")
        file_menu.addAction(self.show_list_action)
        file_menu.addSeparator()
        file_menu.addAction(self.close_action)

        # 表示メニュー（絞り込み系）
        view_menu = menubar.addMenu("表示(&V)")
        view_menu.addAction(self.search_action)
        view_menu.addAction(self.clear_filter_action)

        # SRFI メニュー（カーソル行に対する操作）
        srfi_menu = menubar.addMenu("SRFI(&R)")
        srfi_menu.addAction(self.browse_document_action)
        srfi_menu.addAction(self.browse_landing_page_action)
        srfi_menu.addAction(self.browse_discussion_action)
        srfi_menu.addAction(self.browse_repository_action)
        srfi_menu.addSeparator()
        srfi_menu.addAction(self.browse_home_action)

    def _create_status_bar(self) -> None:
        status = QStatusBar(self)
        self.setStatusBar(status)
        self.statusBar().showMessage("S で絞り込み / Enter で本文を開く")

    # ─────────────────────────────
    # コマンド
    # ─────────────────────────────
    def show_list(self) -> None:
        """一覧を描画し直して表示する。絞り込み文字列は引き継ぐ。"""
        self._view.show()
        self._populate_srfi_list()

        self.show()
        self.raise_()
        self.activateWindow()

    def show_list_and_search(self) -> None:
        """一覧を表示して、そのまま絞り込み入力に入る。"""
        self.show_list()
        self._begin_search()

    def _begin_search(self) -> None:
        initial = self._view.begin_narrowing()
        if self.srfi_list.count() != len(self._view.lines):
            self._populate_srfi_list()
        self.narrow_bar.start(initial)

    def _populate_srfi_list(self) -> None:
        """ListView の行を QListWidget に流し込む。"""
        self.srfi_list.clear()

        for line in self._view.lines:
            item = QListWidgetItem(line.text)
            item.setData(Qt.UserRole, line.number)
            self.srfi_list.addItem(item)

        self._sync_visibility()

    def _sync_visibility(self) -> None:
        """
        各行の表示/非表示を ListView に合わせ、
        最初の表示行が先頭に来るようにスクロールする。
        """
        for row, line in enumerate(self._view.lines):
            self.srfi_list.setRowHidden(row, not line.visible)

        top = self._view.top_index
        shown = len(self._view.visible_lines())
        total = len(self._view.lines)

        if top is not None:
            item = self.srfi_list.item(top)
            self.srfi_list.scrollToItem(item, QAbstractItemView.PositionAtTop)
            current = self.srfi_list.currentRow()
            if current < 0 or self.srfi_list.isRowHidden(current):
                self.srfi_list.setCurrentRow(top)

        if self._view.query:
            self.statusBar().showMessage(
                f"「{self._view.query}」: {shown} / {total} 件を表示"
            )
        elif self._view.lines:
            # 同梱テーブルがどこまでの SRFI を収録しているかも出す
            high = self._view.lines[0].number
            low = self._view.lines[-1].number
            self.statusBar().showMessage(f"全 {total} 件 (SRFI {low}〜{high})")
        else:
            self.statusBar().showMessage("全 0 件")

    # ─────────────────────────────
    # イベントハンドラ
    # ─────────────────────────────
    def _on_query_changed(self, text: str) -> None:
        self._view.on_query_changed(text)
        self._sync_visibility()

    def _on_narrow_accepted(self) -> None:
        self._view.confirm_narrowing()
        self.narrow_bar.hide()
        self.srfi_list.setFocus()

    def _on_narrow_cancelled(self) -> None:
        self._view.cancel_narrowing()
        self.narrow_bar.hide()
        self.srfi_list.setFocus()

    def _on_clear_filter(self) -> None:
        self._view.clear_query()
        self.narrow_bar.set_text("")
        self._sync_visibility()

    def _on_item_double_clicked(self, item: QListWidgetItem) -> None:
        self.srfi_list.setCurrentItem(item)
        self._on_browse_document()

    def _current_cursor(self) -> Optional[int]:
        row = self.srfi_list.currentRow()
        return row if row >= 0 else None

    def _run_action(self, action: Callable[[Optional[int]], str], label: str) -> None:
        """カーソル行に対して action を実行し、結果をステータスバーに出す。"""
        try:
            url = action(self._current_cursor())
        except NoRecordAtCursor as e:
            logger.debug("%s", e)
            self.statusBar().showMessage("カーソル位置に SRFI がありません")
            return

        self.statusBar().showMessage(f"{label}: {url}")

    def _on_browse_document(self) -> None:
        self._run_action(self._dispatcher.browse_document, "本文")

    def _on_browse_discussion(self) -> None:
        self._run_action(self._dispatcher.browse_discussion, "議論アーカイブ")

    def _on_browse_repository(self) -> None:
        self._run_action(self._dispatcher.browse_repository, "リポジトリ")

    def _on_browse_landing_page(self) -> None:
        self._run_action(self._dispatcher.browse_landing_page, "SRFI ページ")

    def _on_browse_home(self) -> None:
        url = home_page_url()
        self._open_url(url)
        self.statusBar().showMessage(f"SRFI サイト: {url}")

    def closeEvent(self, event) -> None:
        self._view.close()
        self.narrow_bar.hide()
        super().closeEvent(event)
