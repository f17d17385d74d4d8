import io
import sys

from ossim.notepad import IPC_FILE, main, write_ipc_signal, write_lines


def test_write_lines_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    lines = ["first line", "", "third line"]
    assert write_lines(path, lines) == 3
    assert path.read_text(encoding="utf-8").splitlines() == lines


def test_write_lines_truncates(tmp_path):
    path = tmp_path / "note.txt"
    path.write_text("old text that is long\n")
    write_lines(path, ["new"])
    assert path.read_text(encoding="utf-8") == "new\n"


def test_write_ipc_signal_content(tmp_path):
    path = tmp_path / "ipc.txt"
    write_ipc_signal(path)
    assert path.read_text(encoding="utf-8") == "1,1,7\n"


def test_main_writes_note_and_signal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("out.txt\nhello\ny\nworld\nn\n"))
    assert main([]) == 0
    assert (tmp_path / "out.txt").read_text(encoding="utf-8") == "hello\nworld\n"
    assert (tmp_path / IPC_FILE).read_text(encoding="utf-8") == "1,1,7\n"
    assert "File saved: out.txt" in capsys.readouterr().out


def test_main_without_finishing_leaves_no_signal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("out.txt\nonly\n"))
    assert main([]) == 0
    assert (tmp_path / "out.txt").read_text(encoding="utf-8") == "only\n"
    assert not (tmp_path / IPC_FILE).exists()