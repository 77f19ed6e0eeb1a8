import io
from unittest.mock import patch

from demokit.musiclib import MusicManager
from demokit.musicplayer_cli import (
    handle_manager_command,
    handle_play_command,
    main,
)


def test_add_then_list(capsys):
    manager = MusicManager()
    handle_manager_command(manager, "mgr add tune singer path mp3".split())
    assert len(manager) == 1
    assert manager.get(0).id == "0"
    handle_manager_command(manager, ["mgr", "list"])
    out = capsys.readouterr().out
    assert "add success." in out
    assert "0 tune singer path mp3" in out


def test_add_wrong_arity(capsys):
    manager = MusicManager()
    handle_manager_command(manager, ["mgr", "add", "only"])
    assert len(manager) == 0
    assert "usage: mgr add" in capsys.readouterr().out


def test_remove(capsys):
    manager = MusicManager()
    handle_manager_command(manager, "mgr add tune singer path mp3".split())
    handle_manager_command(manager, ["mgr", "remove", "0"])
    assert len(manager) == 0
    assert "remove the music: tune" in capsys.readouterr().out


def test_remove_bad_id(capsys):
    manager = MusicManager()
    handle_manager_command(manager, ["mgr", "remove", "x"])
    assert "usage: mgr remove <id>" in capsys.readouterr().out


def test_unknown_option(capsys):
    handle_manager_command(MusicManager(), ["mgr", "shuffle"])
    assert "unsupport option shuffle" in capsys.readouterr().out


def test_play_missing(capsys):
    handle_play_command(MusicManager(), ["play", "ghost"])
    assert "not exist the music" in capsys.readouterr().out


@patch("demokit.musiclib.time.sleep")
def test_play_found(mock_sleep, capsys):
    manager = MusicManager()
    handle_manager_command(manager, "mgr add tune singer path wav".split())
    handle_play_command(manager, ["play", "tune"])
    out = capsys.readouterr().out
    assert "playing wav music path" in out
    assert mock_sleep.called


def test_main_reads_until_quit(monkeypatch, capsys):
    commands = "mgr add a b c mp3\nmgr list\nfoo\nq\nmgr list\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "add success." in out
    assert out.count("0 a b c mp3") == 1
    assert "unknow command foo" in out