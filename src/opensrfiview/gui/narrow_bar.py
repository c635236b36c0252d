# src/opensrfiview/gui/narrow_bar.py

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QWidget,
)


class NarrowBar(QWidget):
    """
    一覧の絞り込み入力欄。

    - 入力が変わるたびに queryChanged(str) を出す（確定ボタンは無い）
    - Enter で accepted、Esc で cancelled を出す
    どちらの場合も入力済みの文字列はそのまま残す。
    """

    queryChanged = Signal(str)
    accepted = Signal()
    cancelled = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._init_widgets()
        self._init_layout()
        self._connect_signals()

    def _init_widgets(self) -> None:
        self.label = QLabel("絞り込み:", self)

        self.query_edit = QLineEdit(self)
        self.query_edit.setPlaceholderText("例: list, 2005, withdrawn")
        self.query_edit.setClearButtonEnabled(True)

        # Esc は入力欄にフォーカスがあるときだけ有効
        self.cancel_action = QAction("絞り込みを中止", self.query_edit)
        self.cancel_action.setShortcut(QKeySequence(Qt.Key_Escape))
        self.cancel_action.setShortcutContext(Qt.WidgetShortcut)
        self.query_edit.addAction(self.cancel_action)

    def _init_layout(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 0)
        layout.addWidget(self.label)
        layout.addWidget(self.query_edit)
        self.setLayout(layout)

    def _connect_signals(self) -> None:
        self.query_edit.textChanged.connect(self.queryChanged.emit)
        self.query_edit.returnPressed.connect(self.accepted.emit)
        self.cancel_action.triggered.connect(self.cancelled.emit)

    def start(self, initial: str) -> None:
        """入力欄を表示し、現在の絞り込み文字列を入れた状態でフォーカスする。"""
        self.query_edit.setText(initial)
        self.show()
        self.query_edit.setFocus()
        self.query_edit.selectAll()

    def text(self) -> str:
        return self.query_edit.text()

    def set_text(self, text: str) -> None:
        # 表示だけ合わせる（queryChanged は出さない）
        self.query_edit.blockSignals(True)
        self.query_edit.setText(text)
        self.query_edit.blockSignals(False)
