# src/opensrfiview/app.py
"""
アプリケーションの起動処理。

- コマンドライン引数の解釈
- ログ出力の設定
- 設定ファイルを読み込み、QApplication を立ち上げて MainWindow を表示
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

from opensrfiview.gui.main_window import MainWindow
from opensrfiview.settings import load_settings


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="opensrfiview",
        description="SRFI 一覧を表示し、本文や議論アーカイブをブラウザで開く。",
    )
    parser.add_argument(
        "--search",
        action="store_true",
        help="起動直後に絞り込み入力に入る",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="設定ファイル（既定: ~/.opensrfiview.json）",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config)

    app = QApplication(sys.argv[:1])
    win = MainWindow(settings=settings)
    if args.search:
        win.show_list_and_search()
    else:
        win.show_list()
    return app.exec()
