"""ファイル走査ユーティリティ。

- 拡張子フィルタは行わない(バイナリも統計対象)。
- max_bytes 指定時は先頭からその長さだけ読む(スニッファ向け)。
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Iterator, Iterable


def read_bytes(path: Path, max_bytes: int | None = None) -> bytes | None:
    try:
        if max_bytes is None:
            return path.read_bytes()
        with path.open("rb") as f:
            return f.read(max_bytes)
    except OSError:
        return None


def iter_files(paths: Iterable[str | os.PathLike[str]]) -> Iterator[Path]:
    for p in paths:
        path = Path(p)
        if path.is_file():
            yield path
        elif path.is_dir():
            for root, _dirs, files in os.walk(path):
                for f in sorted(files):
                    yield Path(root) / f

__all__ = ["iter_files", "read_bytes"]
