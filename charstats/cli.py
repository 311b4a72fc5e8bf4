from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from .config import load_config
from .counts import ENCODING_NAMES
from .encodings import select_drivers, driver_for
from .stats import stats_for_paths, FileStats
from typing import List


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="charstats",
        description="任意ファイルのバイト列をエンコーディング別に走査し、空白/改行/文字数を集計します"
    )
    p.add_argument("paths", nargs="+", help="走査するファイル/ディレクトリ")
    p.add_argument("--json", action="store_true", default=None, help="JSONで出力")
    p.add_argument("--config", help="設定ファイル(TOML: pyproject.toml / YAML / JSON)を読み込み、既定値を上書き")
    p.add_argument("--jobs", type=int, default=None, help="並列実行のワーカー数 (既定: 1)")
    p.add_argument("--no-cache", dest="cache", action="store_false", default=None, help="キャッシュを使わず毎回フルスキャン")
    p.add_argument("--max-bytes", type=int, default=None, metavar="N", help="各ファイルの先頭 N バイトのみ走査")
    p.add_argument("--encoding", action="append", dest="encodings", metavar="NAME",
                   help=f"集計するエンコーディング (複数指定は繰り返し): {', '.join(ENCODING_NAMES)}")
    p.add_argument("--fail-on-empty", action="store_true", default=None,
                   help="報告対象の全エンコーディングで文字数0のファイルがあれば終了コード1")
    return p


def _format_text(results: List[FileStats], names: List[str]) -> List[str]:
    lines: List[str] = []
    width = max(len(n) for n in names) if names else 0
    for r in results:
        lines.append(f"{r.file} ({r.size} bytes)")
        for name in names:
            c = r.stats.slot(name)
            line = f"  {name:<{width}}  space={c.space_count} newline={c.newline_count} total={c.total_count}"
            if driver_for(name).is_stub:
                line += "  (未実装)"
            lines.append(line)
    return lines


def _is_empty(r: FileStats, names: List[str]) -> bool:
    live = [n for n in names if not driver_for(n).is_stub]
    if not live:
        return False
    return all(r.stats.slot(n).total_count == 0 for n in live)


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    # 設定ファイル読込。CLI引数が最優先で、未指定の項目は設定で補完。
    cfg = {}
    if args.config:
        try:
            cfg = load_config(args.config)
        except (OSError, ValueError, RuntimeError) as e:
            print(f"Failed to load config {args.config}: {e}", file=sys.stderr)
            return 2
    for attr, default in [("json", False), ("jobs", 1), ("cache", True), ("max_bytes", None),
                          ("encodings", None), ("fail_on_empty", False)]:
        if getattr(args, attr) is None:
            setattr(args, attr, cfg.get(attr, default))

    if args.jobs < 1:
        print(f"--jobs は 1 以上で指定してください: {args.jobs}", file=sys.stderr)
        return 2
    if args.max_bytes is not None and args.max_bytes < 0:
        print(f"--max-bytes は 0 以上で指定してください: {args.max_bytes}", file=sys.stderr)
        return 2
    try:
        names = [d.name for d in select_drivers(args.encodings)]
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    for name in names:
        if driver_for(name).is_stub:
            print(f"[warn] {name} は未実装のため常に 0 を報告します。", file=sys.stderr)

    results = stats_for_paths(
        args.paths,
        jobs=args.jobs,
        use_cache=args.cache,
        max_bytes=args.max_bytes,
        encodings=names,
    )
    scanned = {r.file for r in results}
    for p in args.paths:
        path = Path(p)
        if not path.exists():
            print(f"[warn] 見つかりません: {p}", file=sys.stderr)
        elif path.is_file() and str(path) not in scanned:
            print(f"[warn] 読み込めませんでした: {p}", file=sys.stderr)

    if args.json:
        data = []
        for r in results:
            d = r.to_dict()
            d["stats"] = {n: d["stats"][n] for n in names}
            data.append(d)
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        if not results:
            print("No files scanned.")
        else:
            for line in _format_text(results, names):
                print(line)
            print(f"Total: {len(results)} file(s)")
    if args.fail_on_empty and any(_is_empty(r, names) for r in results):
        return 1
    return 0

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
