import pytest

from uscript.entries import ReadError
from uscript.reader import ScriptReader


def write(tmp_path, text):
    path = tmp_path / "script.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_raises(tmp_path):
    with pytest.raises(ReadError):
        ScriptReader(tmp_path / "absent.txt").read_script()


def test_trims_and_skips_comments(tmp_path):
    path = write(tmp_path, "  LOAD_PLUGIN X  \n\n# full comment\n   # indented comment\nX.CMD a b\n")
    assert ScriptReader(path).read_script() == ["LOAD_PLUGIN X", "X.CMD a b"]


def test_trailing_comment_removed(tmp_path):
    path = write(tmp_path, "X.CMD a   # explain\n")
    assert ScriptReader(path).read_script() == ["X.CMD a"]


def test_empty_trailing_comment_kept(tmp_path):
    path = write(tmp_path, "X.CMD a #\n")
    assert ScriptReader(path).read_script() == ["X.CMD a #"]


def test_block_comment_skipped(tmp_path):
    path = write(tmp_path, "A.B\n---\nC.D\nE.F\n!--\nG.H\n")
    assert ScriptReader(path).read_script() == ["A.B", "G.H"]


def test_nested_block_comment_raises(tmp_path):
    path = write(tmp_path, "---\n---\n!--\n")
    with pytest.raises(ReadError):
        ScriptReader(path).read_script()


def test_unmatched_block_end_raises(tmp_path):
    path = write(tmp_path, "A.B\n!--\n")
    with pytest.raises(ReadError):
        ScriptReader(path).read_script()


def test_empty_file(tmp_path):
    path = write(tmp_path, "")
    assert ScriptReader(path).read_script() == []