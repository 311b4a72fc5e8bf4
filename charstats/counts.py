"""エンコーディング別の文字カウント(データモデル)。

- CharCounts: 空白/改行/有効文字の3カウンタ
- CharStats: エンコーディングごとに CharCounts を1つずつ保持
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict

ENCODING_NAMES = ("utf8", "utf16le", "utf16be", "utf32")


@dataclass
class CharCounts:
    space_count: int = 0
    newline_count: int = 0
    total_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "space_count": self.space_count,
            "newline_count": self.newline_count,
            "total_count": self.total_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharCounts":
        return cls(
            space_count=int(data.get("space_count", 0)),
            newline_count=int(data.get("newline_count", 0)),
            total_count=int(data.get("total_count", 0)),
        )


@dataclass
class CharStats:
    utf8: CharCounts = field(default_factory=CharCounts)
    utf16le: CharCounts = field(default_factory=CharCounts)
    utf16be: CharCounts = field(default_factory=CharCounts)
    utf32: CharCounts = field(default_factory=CharCounts)

    def slot(self, name: str) -> CharCounts:
        """エンコーディング名から対応するスロットを返す。"""
        if name not in ENCODING_NAMES:
            raise ValueError(f"unknown encoding: {name}")
        return getattr(self, name)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {f.name: getattr(self, f.name).to_dict() for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharStats":
        return cls(**{name: CharCounts.from_dict(data.get(name) or {}) for name in ENCODING_NAMES})


__all__ = ["CharCounts", "CharStats", "ENCODING_NAMES"]
