"""An interactive console for the central game server."""

import argparse
import sys

from demokit.gameserver import CenterClient, CenterError, CenterServer, Player
from demokit.ipc import IpcClient, IpcServer

HELP = """
        commands:
            login <username> <level> <exp>
            logout <username>
            send <message>
            listplayer
            quit(q)
            help(h)
"""


class GameConsole:
    """Turns command lines into calls on a :class:`CenterClient`.

    Every command returns True when the console should stop.
    """

    def __init__(self, client):
        self.client = client
        self.finished = False
        self.handlers = {
            "help": self.help,
            "h": self.help,
            "quit": self.quit,
            "q": self.quit,
            "login": self.login,
            "logout": self.logout,
            "listplayer": self.list_players,
            "send": self.send,
        }

    def help(self, args):
        print(HELP)
        return self.finished

    def quit(self, args):
        self.finished = True
        return self.finished

    def login(self, args):
        if len(args) != 4:
            print("usage: login <username> <level> <exp>")
            return False
        try:
            level = int(args[2])
        except ValueError:
            print("<level> should be an integer.")
            return False
        try:
            exp = int(args[3])
        except ValueError:
            print("<exp> should be an integer.")
            return False
        try:
            self.client.add_player(Player(args[1], level, exp))
        except CenterError as exc:
            print("failed adding player", exc)
        return False

    def logout(self, args):
        if len(args) != 2:
            print("usage: logout <username>")
            return False
        try:
            self.client.remove_player(args[1])
        except CenterError as exc:
            print("failed.", exc)
        return False

    def list_players(self, args):
        try:
            players = self.client.list_players("")
        except CenterError as exc:
            print("failed.", exc)
            return False
        for index, player in enumerate(players, 1):
            print(index, ":", player)
        return False

    def send(self, args):
        try:
            self.client.broadcast(" ".join(args[1:]))
        except CenterError as exc:
            print("failed.", exc)
        return False

    def dispatch(self, line):
        """Run one command line; True means stop."""
        tokens = line.split(" ")
        handler = self.handlers.get(tokens[0])
        if handler is None:
            print("unknow command:", tokens[0])
            return False
        return handler(tokens)


def main(argv=None):
    """Start a center server and read commands from standard input."""
    argparse.ArgumentParser(description="Game center console.").parse_args(argv)
    console = GameConsole(CenterClient(IpcClient(IpcServer(CenterServer()))))
    console.help([])
    while True:
        print("Command> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line or console.dispatch(line.rstrip("\r\n")):
            break
    return 0