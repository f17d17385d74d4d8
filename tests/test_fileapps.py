import pytest

from ossim.fileapps import copy_file, delete_file, move_file


def test_copy_file_round_trip(tmp_path):
    source = tmp_path / "a.txt"
    target = tmp_path / "b.txt"
    payload = b"line one\nline two\x00\xff\n"
    source.write_bytes(payload)
    copy_file(source, target)
    assert target.read_bytes() == payload
    assert source.read_bytes() == payload


def test_copy_file_replaces_existing_target(tmp_path):
    source = tmp_path / "a.txt"
    target = tmp_path / "b.txt"
    source.write_text("new")
    target.write_text("old and longer")
    copy_file(source, target)
    assert target.read_text() == "new"


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing.txt", tmp_path / "b.txt")
    assert not (tmp_path / "b.txt").exists()


def test_delete_file_removes(tmp_path):
    victim = tmp_path / "gone.txt"
    victim.write_text("x")
    delete_file(victim)
    assert not victim.exists()


def test_delete_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        delete_file(tmp_path / "missing.txt")


def test_move_file_moves_content(tmp_path):
    old = tmp_path / "old.txt"
    subdir = tmp_path / "sub"
    subdir.mkdir()
    new = subdir / "new.txt"
    old.write_text("content")
    move_file(old, new)
    assert not old.exists()
    assert new.read_text() == "content"


def test_move_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        move_file(tmp_path / "missing.txt", tmp_path / "other.txt")