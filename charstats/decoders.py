"""1ユニット(固定幅バイト列)を1文字にデコードする関数群。

デコード失敗は例外ではなく None で表す。不正バイト列・途中で切れた
マルチバイト列・孤立サロゲートはいずれも「文字なし」として扱う。
"""
from __future__ import annotations

from typing import Callable, Optional

Decoder = Callable[[bytes], Optional[str]]


def _decode_unit(window: bytes, codec: str, width: int) -> str | None:
    if len(window) != width:
        return None
    try:
        text = bytes(window).decode(codec)
    except UnicodeDecodeError:
        return None
    if len(text) != 1:
        return None
    return text


def decode_utf8(window: bytes) -> str | None:
    # 1バイト窓なので ASCII 以外(先行/継続バイト)は常に失敗する
    return _decode_unit(window, "utf-8", 1)


def decode_utf16le(window: bytes) -> str | None:
    return _decode_unit(window, "utf-16-le", 2)


def decode_utf16be(window: bytes) -> str | None:
    return _decode_unit(window, "utf-16-be", 2)


__all__ = ["Decoder", "decode_utf8", "decode_utf16le", "decode_utf16be"]
