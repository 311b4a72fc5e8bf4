"""ユニット境界を意識した文字走査と分類。

scan_step は呼び出し側が全バイトオフセットを順に渡す前提で、
ユニット境界に乗らないオフセットは内部で無視する。
前後1ユニットを先読み/後読みし、3つともデコードできた場合のみ classify に渡す。
"""
from __future__ import annotations

from typing import Optional

from .counts import CharCounts
from .decoders import Decoder

SPACE = " "
NEWLINE = "\n"


def classify(counts: CharCounts, prev: Optional[str], curr: Optional[str], nxt: Optional[str]) -> None:
    """curr を空白/改行/その他に分類して counts を更新する。

    None と空文字はどちらも「文字なし」。前後がともに文字なしの場合は
    端の文字とみなし、total_count にも数えない。
    """
    if not curr:
        return
    if not prev and not nxt:
        return
    if curr == NEWLINE:
        counts.newline_count += 1
    elif curr == SPACE:
        counts.space_count += 1
    counts.total_count += 1


def _unit_at(buffer: bytes, unit_index: int, unit_width: int, unit_count: int, decoder: Decoder) -> str | None:
    if unit_index < 0 or unit_index >= unit_count:
        return None
    start = unit_index * unit_width
    return decoder(buffer[start:start + unit_width])


def scan_step(
    counts: CharCounts,
    buffer: bytes,
    byte_offset: int,
    unit_width: int,
    decoder: Decoder,
) -> None:
    if unit_width <= 0 or byte_offset % unit_width != 0:
        return
    unit_index = byte_offset // unit_width
    # 先頭ユニットはデコード可能でも分類しない。
    # XXX: 意図的な端の扱いか境界判定の off-by-one か不明。互換のため維持。
    if unit_index == 0:
        return
    unit_count = len(buffer) // unit_width
    prev = _unit_at(buffer, unit_index - 1, unit_width, unit_count, decoder)
    curr = _unit_at(buffer, unit_index, unit_width, unit_count, decoder)
    nxt = _unit_at(buffer, unit_index + 1, unit_width, unit_count, decoder)
    if prev is None or curr is None or nxt is None:
        return
    classify(counts, prev, curr, nxt)


__all__ = ["classify", "scan_step", "SPACE", "NEWLINE"]
