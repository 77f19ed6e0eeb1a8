from unittest.mock import patch

import pytest

from demokit.musiclib import MusicInfo, MusicManager, play


def _info(name="song", kind="mp3"):
    return MusicInfo("0", name, "artist", "source", kind)


def test_add_and_get():
    manager = MusicManager()
    info = _info()
    manager.add(info)
    assert len(manager) == 1
    assert manager.get(0) == info


def test_get_out_of_range():
    manager = MusicManager()
    with pytest.raises(IndexError, match="index out of range."):
        manager.get(0)
    manager.add(_info())
    with pytest.raises(IndexError):
        manager.get(-1)


def test_find():
    manager = MusicManager()
    manager.add(_info("a"))
    manager.add(_info("b"))
    assert manager.find("b").name == "b"
    assert manager.find("c") is None


def test_add_stores_a_copy():
    manager = MusicManager()
    info = _info("original")
    manager.add(info)
    info.name = "changed"
    assert manager.get(0).name == "original"


def test_remove():
    manager = MusicManager()
    manager.add(_info("a"))
    manager.add(_info("b"))
    removed = manager.remove(0)
    assert removed.name == "a"
    assert len(manager) == 1
    assert manager.get(0).name == "b"


def test_remove_out_of_range_keeps_list():
    manager = MusicManager()
    manager.add(_info("a"))
    assert manager.remove(5) is None
    assert len(manager) == 1


@patch("demokit.musiclib.time.sleep")
def test_play_mp3(mock_sleep, capsys):
    assert play("song", "mp3") is True
    out = capsys.readouterr().out
    assert "playing mp3 music song" in out
    assert "finish playing song" in out
    assert mock_sleep.call_count == out.count(".")
    assert mock_sleep.call_count == 10


@patch("demokit.musiclib.time.sleep")
def test_play_wav(mock_sleep, capsys):
    assert play("track", "wav") is True
    assert "playing wav music track" in capsys.readouterr().out


def test_play_unsupported(capsys):
    assert play("track", "ogg") is False
    assert "unsupport music type ogg" in capsys.readouterr().out