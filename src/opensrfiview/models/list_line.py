# src/opensrfiview/models/list_line.py

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class ListLine:
    """
    一覧に表示する 1 行。SrfiRecord 1 件から作られる。

    visible だけが絞り込みで書き換わり、text / number は描画後に変化しない。
    """
    text: str
    number: int            # 対応する SrfiRecord.number
    visible: bool = True
