"""A central game server tracking online players, and its client."""

import json
import threading
from dataclasses import dataclass, field

from demokit.ipc import Response


class CenterError(Exception):
    """A request to the center server failed; ``code`` says why."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code


@dataclass(frozen=True)
class Message:
    """A chat message."""

    sender: str = ""
    receiver: str = ""
    content: str = ""

    def to_json(self):
        return json.dumps(
            {"from": self.sender, "to": self.receiver, "content": self.content},
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text):
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("message must be a JSON object")
        return cls(
            str(data.get("from", "")), str(data.get("to", "")), str(data.get("content", ""))
        )


@dataclass
class Player:
    """An online player and the messages delivered to them."""

    name: str = ""
    level: int = 0
    exp: int = 0
    room: int = 0
    inbox: list = field(default_factory=list, repr=False, compare=False)

    def receive(self, message):
        self.inbox.append(message)
        print(self.name, "received message:", message.content)

    def to_dict(self):
        return {"Name": self.name, "Level": self.level, "Exp": self.exp, "Room": self.room}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError("player must be a JSON object")
        name = data.get("Name", "")
        if not isinstance(name, str):
            raise ValueError("Name must be a string")
        numbers = {}
        for key in ("Level", "Exp", "Room"):
            value = data.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer")
            numbers[key.lower()] = value
        return cls(name, **numbers)


@dataclass
class Room:
    """A game room."""


class CenterServer:
    """Keeps the list of online players and handles requests about them."""

    def __init__(self):
        self._players = []
        self.rooms = []
        self._lock = threading.Lock()

    @property
    def players(self):
        with self._lock:
            return list(self._players)

    def _add_player(self, params):
        player = Player.from_dict(json.loads(params))
        with self._lock:
            self._players.append(player)

    def _remove_player(self, name):
        with self._lock:
            for index, player in enumerate(self._players):
                if player.name == name:
                    del self._players[index]
                    return
        raise CenterError("player not find.")

    def _list_players(self):
        with self._lock:
            if not self._players:
                raise CenterError("no player online.")
            return json.dumps([p.to_dict() for p in self._players], ensure_ascii=False)

    def _broadcast(self, params):
        message = Message.from_json(params)
        with self._lock:
            if not self._players:
                raise CenterError("no player online.")
            for player in self._players:
                player.receive(message)

    def handle(self, method, params):
        """Answer one request with a :class:`Response`."""
        try:
            if method == "addplayer":
                self._add_player(params)
            elif method == "removeplayer":
                self._remove_player(params)
            elif method == "listplayer":
                return Response("200", self._list_players())
            elif method == "broadcast":
                self._broadcast(params)
            else:
                return Response("404", f"{method}:{params}")
        except (CenterError, ValueError) as exc:
            return Response(str(exc))
        return Response("200")

    def name(self):
        return "CenterServer"


class CenterClient:
    """Talks to a :class:`CenterServer` through an IPC client."""

    def __init__(self, client):
        self.client = client

    def _call(self, method, params):
        response = self.client.call(method, params)
        if response.code != "200":
            raise CenterError(response.code)
        return response

    def add_player(self, player):
        self._call("addplayer", json.dumps(player.to_dict(), ensure_ascii=False))

    def remove_player(self, name):
        self._call("removeplayer", name)

    def list_players(self, params=""):
        body = self._call("listplayer", params).body
        return [Player.from_dict(item) for item in json.loads(body)]

    def broadcast(self, message):
        self._call("broadcast", Message(content=message).to_json())