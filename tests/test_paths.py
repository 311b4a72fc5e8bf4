import json

from charstats import stats_for_file, stats_for_paths
from charstats.cache import DEFAULT_CACHE


def _counts(cc):
    return cc.space_count, cc.newline_count, cc.total_count


def test_stats_for_file(tmp_path):
    p = tmp_path / "sample.txt"
    p.write_bytes(" a \nb\n".encode("utf-16-le"))
    res = stats_for_file(str(p))
    assert res is not None
    assert res.size == 12
    assert _counts(res.stats.utf16le) == (1, 1, 4)


def test_stats_for_file_max_bytes(tmp_path):
    p = tmp_path / "sample.txt"
    p.write_bytes(b" a \nb\n")
    res = stats_for_file(str(p), max_bytes=3)
    assert res.size == 3
    # " a " → 'a' のみ
    assert _counts(res.stats.utf8) == (0, 0, 1)


def test_stats_for_missing_file(tmp_path):
    assert stats_for_file(str(tmp_path / "missing.txt")) is None


def test_stats_for_paths_sorted_and_parallel(tmp_path):
    for name in ("c.txt", "a.txt", "b.txt"):
        (tmp_path / name).write_bytes(b" x y\n")
    serial = stats_for_paths([str(tmp_path)], use_cache=False)
    parallel = stats_for_paths([str(tmp_path)], jobs=3, use_cache=False)
    assert [r.file for r in serial] == sorted(r.file for r in serial)
    assert [r.to_dict() for r in serial] == [r.to_dict() for r in parallel]
    assert len(serial) == 3


def test_cache_reuse(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "data.txt"
    p.write_bytes(b"a b\nc d")
    first = stats_for_paths([str(p)])
    cache = json.loads((tmp_path / DEFAULT_CACHE).read_text(encoding="utf-8"))
    assert str(p) in cache
    # キャッシュ結果を改竄し、再利用されることを確認
    cache[str(p)]["result"]["stats"]["utf8"]["total_count"] = 999
    (tmp_path / DEFAULT_CACHE).write_text(json.dumps(cache), encoding="utf-8")
    second = stats_for_paths([str(p)])
    assert second[0].stats.utf8.total_count == 999
    # オプションが変われば再走査
    third = stats_for_paths([str(p)], max_bytes=100)
    assert third[0].stats.utf8.total_count == first[0].stats.utf8.total_count


def test_corrupt_cache_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_CACHE).write_text("{not json", encoding="utf-8")
    p = tmp_path / "data.txt"
    p.write_bytes(b"a b c")
    res = stats_for_paths([str(p)])
    assert _counts(res[0].stats.utf8) == (2, 0, 3)
