# src/opensrfiview/models/srfi_record.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SrfiRecord:
    """
    SRFI 1件分の情報（静的テーブルの 1 トリプル）。

    - number: SRFI 番号（テーブル上の位置で決まる。末尾が 0 番）
    - year: 確定年。draft などでは状態文字列や None が入ることがある
    - status: "final" / "draft" / "withdrawn" などの状態
    - title: 表題
    """
    number: int
    year: Optional[Union[int, str]]
    status: str
    title: str

    @property
    def is_final(self) -> bool:
        return self.status == "final"

    @property
    def is_withdrawn(self) -> bool:
        return self.status == "withdrawn"
