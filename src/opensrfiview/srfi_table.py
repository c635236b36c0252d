# src/opensrfiview/srfi_table.py

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, List, Optional, Sequence

import chardet

from opensrfiview.models.srfi_record import SrfiRecord

logger = logging.getLogger(__name__)

# data フォルダ内の SRFI 一覧ファイル
_TABLE_FILE = "srfi_data.json"


def records_from_flat(values: Sequence[Any]) -> List[SrfiRecord]:
    """
    (年, 状態, 表題) を平坦に並べたシーケンスを SrfiRecord のリストに変換する。

    テーブルは新しい SRFI から順に並んでいる前提で、
    末尾のトリプルが SRFI 0 になる（先頭ほど番号が大きい）。
    戻り値も同じ並び（番号の降順）になる。
    """
    if len(values) % 3 != 0:
        raise ValueError(
            f"SRFI table length must be a multiple of 3 (got {len(values)})"
        )

    count = len(values) // 3
    records: List[SrfiRecord] = []
    for i in range(count):
        year, status, title = values[i * 3 : i * 3 + 3]
        records.append(
            SrfiRecord(
                number=count - 1 - i,
                year=year,
                status=str(status),
                title=str(title),
            )
        )
    return records


def _decode_bytes(raw: bytes) -> str:
    """chardet で文字コードを推定してテキスト化する。推定できなければ UTF-8。"""
    guess = chardet.detect(raw)
    encoding = guess.get("encoding") or "utf-8"
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.warning("could not decode SRFI table as %s, falling back to utf-8", encoding)
        return raw.decode("utf-8", errors="replace")


def _parse_table_text(text: str, source: str) -> List[SrfiRecord]:
    raw = json.loads(text)
    if not isinstance(raw, list):
        raise ValueError(f"Unsupported JSON format in {source} (expected list)")
    return records_from_flat(raw)


@lru_cache(maxsize=None)
def _load_bundled_table() -> tuple[SrfiRecord, ...]:
    with resources.files("opensrfiview.data").joinpath(_TABLE_FILE).open(
        "r", encoding="utf-8"
    ) as f:
        records = _parse_table_text(f.read(), _TABLE_FILE)
    logger.debug("loaded %d SRFI records from bundled table", len(records))
    return tuple(records)


def load_srfi_table(path: Optional[Path] = None) -> List[SrfiRecord]:
    """
    SRFI 一覧を読み込んで SrfiRecord のリスト（番号の降順）を返す。

    - path が None ならパッケージ同梱の srfi_data.json を読む（キャッシュあり）
    - path が指定されていればそのファイルを読む（設定ファイルで差し替えた場合）
    """
    if path is None:
        return list(_load_bundled_table())

    raw = Path(path).read_bytes()
    records = _parse_table_text(_decode_bytes(raw), str(path))
    logger.info("loaded %d SRFI records from %s", len(records), path)
    return records


def srfi_count() -> int:
    """同梱テーブルの SRFI 件数。"""
    return len(_load_bundled_table())
