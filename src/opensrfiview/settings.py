# src/opensrfiview/settings.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".opensrfiview.json"


@dataclass
class Settings:
    """
    起動時に読み込む設定。ファイルへの書き戻しはしない。

    - srfi_table: 同梱テーブルの代わりに読む SRFI 一覧 JSON（任意）
    - window_width / window_height: メインウィンドウの初期サイズ
    """
    srfi_table: Optional[Path] = None
    window_width: int = 720
    window_height: int = 600


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    設定ファイル（JSON）を読み込んで Settings を返す。

    ファイルが無い・壊れている場合は既定値のまま返す（起動は継続する）。
    知らないキーは無視する。
    """
    config_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    settings = Settings()

    if not config_path.exists():
        return settings

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("ignoring settings file %s: %s", config_path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", config_path)
        return settings

    table = data.get("srfi_table")
    if table:
        table_path = Path(str(table)).expanduser()
        if table_path.is_file():
            settings.srfi_table = table_path
        else:
            logger.warning("srfi_table %s does not exist, using bundled table", table_path)

    # helper: 正の整数だけ採用する
    def _positive_int(key: str, default: int) -> int:
        value = data.get(key)
        try:
            number = int(value)
        except (TypeError, ValueError):
            return default
        return number if number > 0 else default

    settings.window_width = _positive_int("window_width", settings.window_width)
    settings.window_height = _positive_int("window_height", settings.window_height)
    return settings
