"""高レベル API: バイト列/ファイル/パス群に対するエンコーディング別文字統計

- get_char_stats: 全バイトオフセット × 全ドライバで走査
- ファイル読込(先頭 max_bytes のみも可)
- パス走査と簡易キャッシュ/並列
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Iterable, Dict, Any, Tuple
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from .counts import CharStats
from .encodings import select_drivers
from .file_scanner import iter_files, read_bytes
from .cache import load_cache, save_cache, file_fingerprint, options_key


def get_char_stats(buffer: bytes, encodings: Iterable[str] | None = None) -> CharStats:
    stats = CharStats()
    data = bytes(buffer)
    drivers = select_drivers(encodings)
    for i in range(len(data)):
        for driver in drivers:
            driver.step(stats, data, i)
    return stats


@dataclass
class FileStats:
    file: str | None
    size: int
    stats: CharStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "size": self.size,
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileStats":
        return cls(
            file=data.get("file"),
            size=int(data.get("size", 0)),
            stats=CharStats.from_dict(data.get("stats") or {}),
        )


def stats_for_bytes(data: bytes, file: str | None = None, encodings: Iterable[str] | None = None) -> FileStats:
    return FileStats(file=file, size=len(data), stats=get_char_stats(data, encodings=encodings))


def stats_for_file(
    path: str,
    max_bytes: int | None = None,
    encodings: Iterable[str] | None = None,
) -> FileStats | None:
    data = read_bytes(Path(path), max_bytes=max_bytes)
    if data is None:
        return None
    return stats_for_bytes(data, file=path, encodings=encodings)


def stats_for_paths(
    paths: Iterable[str],
    jobs: int = 1,
    use_cache: bool = True,
    max_bytes: int | None = None,
    encodings: Iterable[str] | None = None,
) -> List[FileStats]:
    # 名前の正規化と検証を先に済ませる(不正名はここで ValueError)
    names: List[str] | None = None
    if encodings is not None:
        names = [d.name for d in select_drivers(encodings)]
    files = list(iter_files(paths))
    opts = options_key(max_bytes, names)

    # キャッシュ読み込み
    cache = load_cache(str(Path.cwd())) if use_cache else {}
    to_scan: List[Tuple[str, str]] = []  # (path, fingerprint)
    results: List[FileStats] = []

    for f in files:
        key = str(f)
        try:
            fp = file_fingerprint(Path(f))
        except OSError:
            continue
        entry = cache.get(key) if use_cache else None
        if isinstance(entry, dict) and entry.get("fingerprint") == fp and entry.get("options") == opts:
            results.append(FileStats.from_dict(entry.get("result") or {}))
            continue
        to_scan.append((key, fp))

    def _record(key: str, fp: str, res: FileStats | None) -> None:
        if res is None:
            return
        results.append(res)
        if use_cache:
            cache[key] = {"fingerprint": fp, "options": opts, "result": res.to_dict()}

    # 並列/直列実行
    if jobs and jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            futs = {
                ex.submit(stats_for_file, key, max_bytes, names): (key, fp)
                for key, fp in to_scan
            }
            for fut in as_completed(futs):
                key, fp = futs[fut]
                _record(key, fp, fut.result())
    else:
        for key, fp in to_scan:
            _record(key, fp, stats_for_file(key, max_bytes=max_bytes, encodings=names))

    # キャッシュ保存
    if use_cache:
        save_cache(str(Path.cwd()), cache)

    results.sort(key=lambda r: r.file or "")
    return results


__all__ = ["get_char_stats", "stats_for_bytes", "stats_for_file", "stats_for_paths", "FileStats"]
