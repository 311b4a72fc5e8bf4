"""設定ファイル(TOML / YAML / JSON)の読込。

TOML:
[tool.charstats]
jobs = 4
cache = false
maxBytes = 65536
encodings = ["utf8", "utf16le"]
json = true
failOnEmpty = false

YAML: トップレベル、または `charstats:` 配下に同じキーを置く。
JSON: YAML と同じ構造。
"""
from __future__ import annotations
from pathlib import Path
import json
from typing import Any, Dict

try:
    import tomllib  # Python 3.11+
except Exception:  # pragma: no cover
    tomllib = None  # type: ignore

try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None  # YAML未インストール時はTOML/JSONのみ

from .encodings import select_drivers

_BOOL_KEYS = {"cache": "cache", "json": "json", "failOnEmpty": "fail_on_empty"}


def _read_text(p: Path) -> str:
    raw = p.read_bytes()
    for enc in ("utf-8", "utf-8-sig", "utf-16"):
        try:
            return raw.decode(enc).lstrip("\ufeff")
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Unable to decode config file: {p}")


def _section(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("設定ファイルはマッピングである必要があります")
    tool = data.get("tool")
    if isinstance(tool, dict) and isinstance(tool.get("charstats"), dict):
        return tool["charstats"]
    if isinstance(data.get("charstats"), dict):
        return data["charstats"]
    return data


def load_config(path: str) -> Dict[str, Any]:
    """設定ファイルを読み込み、検証済みの dict(snake_case キー)を返す。"""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        if tomllib is None:
            raise RuntimeError("tomllib が利用できないため TOML は読み込めません (Python 3.11+ が必要)")
        data = tomllib.loads(_read_text(p))
    elif suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAMLがインストールされていないためYAMLは読み込めません。'pip install PyYAML' を実行してください")
        data = yaml.safe_load(_read_text(p))
    else:
        data = json.loads(_read_text(p))
    return validate_config(_section(data))


def validate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    for key, attr in _BOOL_KEYS.items():
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"{key} は true/false で指定してください: {raw[key]!r}")
            cfg[attr] = raw[key]
    if "jobs" in raw:
        jobs = raw["jobs"]
        if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
            raise ValueError(f"jobs は 1 以上の整数で指定してください: {jobs!r}")
        cfg["jobs"] = jobs
    if "maxBytes" in raw:
        mb = raw["maxBytes"]
        if mb is not None and (isinstance(mb, bool) or not isinstance(mb, int) or mb < 0):
            raise ValueError(f"maxBytes は 0 以上の整数で指定してください: {mb!r}")
        cfg["max_bytes"] = mb
    if "encodings" in raw:
        val = raw["encodings"]
        if not isinstance(val, list):
            raise ValueError("encodings は配列で指定してください")
        cfg["encodings"] = [d.name for d in select_drivers(str(x) for x in val)]
    return cfg


__all__ = ["load_config", "validate_config"]
