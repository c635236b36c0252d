"""
Pytest fixtures for OpenSrfiView tests.

- src/ を import パスに追加
- Qt はオフスクリーンで動かす（表示環境が無くてもテストできるように）
- 3 件だけの小さな SRFI テーブル
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from opensrfiview.models.srfi_record import SrfiRecord  # noqa: E402


@pytest.fixture
def sample_records():
    """SRFI 0: final / 1: draft / 2: withdrawn の 3 件。"""
    return [
        SrfiRecord(number=2, year=2019, status="withdrawn", title="Baz"),
        SrfiRecord(number=1, year=None, status="draft", title="Bar"),
        SrfiRecord(number=0, year=2020, status="final", title="Foo"),
    ]


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


class RecordingOpener:
    """open_url の代わりに、渡された URL を記録するだけの callable。"""

    def __init__(self):
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)


@pytest.fixture
def opener():
    return RecordingOpener()
