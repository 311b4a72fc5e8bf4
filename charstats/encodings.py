"""エンコーディングドライバ定義。

(名前, ユニット幅, デコーダ) の固定リストをループで回す。
新しいエンコーディングは DRIVERS に1エントリ追加するだけでよい。

utf32 は未実装のスタブ(decoder=None)。スロット自体は CharStats に残し、
常に 0 のままとなる。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .counts import CharStats, ENCODING_NAMES
from .decoders import Decoder, decode_utf8, decode_utf16le, decode_utf16be
from .scanner import scan_step


@dataclass(frozen=True)
class EncodingDriver:
    name: str
    unit_width: int
    decoder: Optional[Decoder] = None

    @property
    def is_stub(self) -> bool:
        return self.decoder is None

    def step(self, stats: CharStats, buffer: bytes, byte_offset: int) -> None:
        if self.decoder is None:
            return
        scan_step(stats.slot(self.name), buffer, byte_offset, self.unit_width, self.decoder)


DRIVERS: tuple[EncodingDriver, ...] = (
    EncodingDriver("utf8", 1, decode_utf8),
    EncodingDriver("utf16le", 2, decode_utf16le),
    EncodingDriver("utf16be", 2, decode_utf16be),
    # TODO: UTF-32 (LE/BE どちらをスロットに載せるか決めてから) 4バイトデコーダを実装
    EncodingDriver("utf32", 4, None),
)


def select_drivers(names: Iterable[str] | None = None) -> List[EncodingDriver]:
    """指定名のドライバを DRIVERS の順序で返す。None なら全ドライバ。"""
    if names is None:
        return list(DRIVERS)
    wanted = set()
    for n in names:
        key = str(n).strip().lower().replace("-", "").replace("_", "")
        if key not in ENCODING_NAMES:
            raise ValueError(f"unknown encoding: {n} (choose from {', '.join(ENCODING_NAMES)})")
        wanted.add(key)
    return [d for d in DRIVERS if d.name in wanted]


def driver_for(name: str) -> EncodingDriver:
    for d in DRIVERS:
        if d.name == name:
            return d
    raise ValueError(f"unknown encoding: {name}")


__all__ = ["EncodingDriver", "DRIVERS", "select_drivers", "driver_for"]
