import json

import pytest

from demokit.gameserver import CenterClient, CenterError, CenterServer, Message, Player
from demokit.ipc import IpcClient, IpcServer, Response


@pytest.fixture
def setup():
    server = CenterServer()
    client = CenterClient(IpcClient(IpcServer(server)))
    return server, client


def test_name():
    assert CenterServer().name() == "CenterServer"


def test_unknown_method():
    assert CenterServer().handle("dance", "now") == Response("404", "dance:now")


def test_list_empty():
    assert CenterServer().handle("listplayer", "") == Response("no player online.")


def test_message_wire_keys():
    assert json.loads(Message("a", "b", "c").to_json()) == {"from": "a", "to": "b", "content": "c"}


def test_player_dict_round_trip():
    player = Player("ann", 4, 9, 1)
    assert Player.from_dict(player.to_dict()) == player


def test_player_from_dict_rejects_bad_level():
    with pytest.raises(ValueError):
        Player.from_dict({"Name": "ann", "Level": "high"})


def test_add_and_list(setup):
    _, client = setup
    players = [Player("ann", 1, 2), Player("bob", 3, 4)]
    for player in players:
        client.add_player(player)
    assert client.list_players("") == players


def test_add_invalid_json():
    server = CenterServer()
    response = server.handle("addplayer", "{bad")
    assert response.body == ""
    assert server.players == []


def test_remove_missing(setup):
    _, client = setup
    with pytest.raises(CenterError) as info:
        client.remove_player("ghost")
    assert info.value.code == "player not find."


def test_remove_existing(setup):
    server, client = setup
    client.add_player(Player("ann"))
    client.remove_player("ann")
    assert server.players == []
    with pytest.raises(CenterError, match="no player online."):
        client.list_players("")


def test_broadcast_delivers(setup, capsys):
    server, client = setup
    client.add_player(Player("ann"))
    client.broadcast("hi all")
    assert server.players[0].inbox == [Message(content="hi all")]
    assert "hi all" in capsys.readouterr().out


def test_broadcast_without_players(setup):
    _, client = setup
    with pytest.raises(CenterError, match="no player online."):
        client.broadcast("anyone?")