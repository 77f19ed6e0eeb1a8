"""A music library and a simulated player for mp3 and wav sources."""

import time
from dataclasses import dataclass, replace


@dataclass
class MusicInfo:
    """One entry of the music library."""

    id: str
    name: str
    artist: str
    source: str
    kind: str


class MusicManager:
    """An ordered list of music entries."""

    def __init__(self):
        self._musics = []

    def __len__(self):
        return len(self._musics)

    def __iter__(self):
        return iter(self._musics)

    def get(self, index):
        """Return the entry at ``index``; raise IndexError outside the list."""
        if not 0 <= index < len(self._musics):
            raise IndexError("index out of range.")
        return self._musics[index]

    def find(self, name):
        """Return the first entry called ``name``, or ``None``."""
        return next((music for music in self._musics if music.name == name), None)

    def add(self, music):
        """Append a copy of ``music``."""
        self._musics.append(replace(music))

    def remove(self, index):
        """Remove and return the entry at ``index``; ``None`` outside the list."""
        if not 0 <= index < len(self._musics):
            return None
        return self._musics.pop(index)


class _Player:
    def __init__(self, label, tick=0.1):
        self.label = label
        self.tick = tick

    def play(self, source):
        print(f"playing {self.label} music", source)
        progress = 0
        while progress < 100:
            time.sleep(self.tick)
            print(".", end="", flush=True)
            progress += 10
        print()
        print("finish playing", source)


_PLAYERS = {"mp3": _Player("mp3"), "wav": _Player("wav")}


def play(source, kind):
    """Play ``source`` with the player for ``kind``; False if the kind is unsupported."""
    player = _PLAYERS.get(kind)
    if player is None:
        print("unsupport music type", kind)
        return False
    player.play(source)
    return True