"""走査結果の簡易キャッシュ。

ファイルの mtime/サイズ とスキャンオプションが一致する場合のみ再利用する。
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Any, Iterable

DEFAULT_CACHE = ".charstats_cache.json"

def load_cache(root: str, filename: str = DEFAULT_CACHE) -> Dict[str, Any]:
    p = Path(root) / filename
    if not p.is_file():
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}

def save_cache(root: str, data: Dict[str, Any], filename: str = DEFAULT_CACHE) -> None:
    p = Path(root) / filename
    p.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

def file_fingerprint(path: Path) -> str:
    stat = path.stat()
    return f"{stat.st_mtime_ns}:{stat.st_size}"

def options_key(max_bytes: int | None, encodings: Iterable[str] | None) -> str:
    encs = ",".join(sorted(encodings)) if encodings is not None else "*"
    return f"max_bytes={max_bytes}|encodings={encs}"

__all__ = ["load_cache", "save_cache", "file_fingerprint", "options_key", "DEFAULT_CACHE"]
