import pytest

from trackerkit.commands import CommandRegistry
from trackerkit.fsshell import FileShell


@pytest.fixture
def shell(tmp_path):
    out = []
    return FileShell(tmp_path, out.append), out


def test_ls_lists_files_and_free_space(tmp_path, shell):
    fs, out = shell
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "sub").mkdir()
    assert fs.ls("ls") == 0
    assert out[0].startswith("a.txt".ljust(16))
    assert "\t 5\t -" in out[0]
    assert out[1].startswith("sub".ljust(16))
    assert "\t D" in out[1]
    assert "free disk size:" in out[-1]
    assert len(out) == 3


def test_free_size_is_positive(shell):
    fs, _ = shell
    assert fs.free_size() > 0


def test_rm_deletes(tmp_path, shell):
    fs, out = shell
    target = tmp_path / "a.txt"
    target.write_text("x")
    assert fs.rm("rm a.txt  \r\n") == 0
    assert not target.exists()
    assert out == ["delete file Success"]


def test_rm_missing_file(shell):
    fs, out = shell
    assert fs.rm("rm nothing.txt") == -1
    assert out == ["file nothing.txt not found"]


def test_rm_without_parameter(shell):
    fs, out = shell
    assert fs.rm("rm   ") == 0
    assert out == []


def test_cat_prints_content(tmp_path, shell):
    fs, out = shell
    (tmp_path / "note.txt").write_text("line one\nline two")
    assert fs.cat("cat note.txt") == 0
    assert out == ["line one\nline two"]


def test_cat_without_parameter(shell):
    fs, out = shell
    assert fs.cat("cat") == 0
    assert out == ["parameter not correct"]


def test_tail_small_file(tmp_path, shell):
    fs, out = shell
    (tmp_path / "log.txt").write_text("hello")
    assert fs.tail("tail log.txt") == 0
    assert out == ["hello\n"]


def test_tail_large_file_keeps_last_block(tmp_path, shell):
    fs, out = shell
    (tmp_path / "log.txt").write_text("x" * 1000 + "y" * 1024)
    assert fs.tail("tail log.txt") == 0
    assert out == ["y" * 1024 + "\n"]


def test_tail_missing_file(shell):
    fs, out = shell
    assert fs.tail("tail absent.txt") == -1
    assert out == ["log file not exists."]


def test_register_and_dispatch(tmp_path, shell):
    fs, out = shell
    registry = CommandRegistry()
    fs.register(registry)
    assert {"ls", "rm", "cat", "tail"} <= set(registry.names())
    target = tmp_path / "b.txt"
    target.write_text("data")
    assert registry.dispatch("  rm b.txt") == 0
    assert not target.exists()