"""charstats
バイト列のエンコーディング別 空白/改行/文字数 統計ライブラリ。

主な提供機能:
- UTF-8 / UTF-16LE / UTF-16BE / UTF-32 ごとの空白・改行・有効文字数の集計
- デコード失敗は例外にせず静かに読み飛ばす(統計は近似シグナル)
- ファイル/ディレクトリ走査、簡易キャッシュ、CLI インターフェース

制限:
- UTF-32 は未実装(スロットは常に 0)
- サロゲートペア/結合文字は扱わない
"""
from .counts import CharCounts, CharStats
from .stats import get_char_stats, stats_for_bytes, stats_for_file, stats_for_paths, FileStats

__all__ = [
    "CharCounts",
    "CharStats",
    "FileStats",
    "get_char_stats",
    "stats_for_bytes",
    "stats_for_file",
    "stats_for_paths",
]

__version__ = "0.1.0"
