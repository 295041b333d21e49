"""Tests for input path discovery."""
import io
from pathlib import Path

import pytest

from svs.pipeline.sources import iter_input_paths, read_lines, walk_files


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "in"
    (root / "b" / "deep").mkdir(parents=True)
    (root / "a").mkdir()
    for rel in ("z.dat", "a/one.dat", "a/two.bad", "b/deep/three.dat", "b/x.dat"):
        (root / rel).write_bytes(b"")
    return root


@pytest.mark.unit
def test_walk_files_recursive_and_sorted(tree: Path):
    found = [p.relative_to(tree).as_posix() for p in walk_files(tree)]
    assert found == ["z.dat", "a/one.dat", "b/x.dat", "b/deep/three.dat"]


@pytest.mark.unit
def test_walk_files_keep_bad(tree: Path):
    found = {p.name for p in walk_files(tree, keep_bad=True)}
    assert "two.bad" in found


@pytest.mark.unit
def test_walk_files_single_file(tree: Path):
    assert list(walk_files(tree / "z.dat")) == [tree / "z.dat"]
    assert list(walk_files(tree / "a" / "two.bad")) == []


@pytest.mark.unit
def test_walk_files_missing_path(tmp_path: Path):
    assert list(walk_files(tmp_path / "missing")) == []


@pytest.mark.unit
def test_read_lines_skips_blanks():
    stream = io.StringIO("one\n\ntwo\r\n\nthree")
    assert list(read_lines(stream)) == ["one", "two", "three"]


@pytest.mark.unit
def test_iter_input_paths_prefers_arguments(tree: Path):
    stream = io.StringIO(str(tree / "b") + "\n")
    found = list(iter_input_paths([tree / "a"], stream=stream))
    assert found == [tree / "a" / "one.dat"]


@pytest.mark.unit
def test_iter_input_paths_reads_stream(tree: Path):
    stream = io.StringIO(f"{tree / 'a'}\n\n{tree / 'z.dat'}\n")
    found = list(iter_input_paths([], keep_bad=True, stream=stream))
    assert found == [tree / "a" / "one.dat", tree / "a" / "two.bad", tree / "z.dat"]


@pytest.mark.unit
def test_iter_input_paths_without_stream():
    assert list(iter_input_paths([])) == []
