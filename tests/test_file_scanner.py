from pathlib import Path

from charstats.file_scanner import iter_files, read_bytes


def test_read_bytes_limit(tmp_path):
    p = tmp_path / "a.bin"
    p.write_bytes(b"0123456789")
    assert read_bytes(p) == b"0123456789"
    assert read_bytes(p, max_bytes=4) == b"0123"
    assert read_bytes(p, max_bytes=0) == b""


def test_read_bytes_missing_returns_none(tmp_path):
    assert read_bytes(tmp_path / "nope.txt") is None


def test_iter_files_walks_directories(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_bytes(b"a")
    (tmp_path / "sub" / "b.txt").write_bytes(b"b")
    found = {Path(p).name for p in iter_files([str(tmp_path)])}
    assert found == {"a.txt", "b.txt"}
