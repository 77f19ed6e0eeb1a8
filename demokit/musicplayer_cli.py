"""An interactive console for managing and playing a music list."""

import argparse
import sys

from demokit.musiclib import MusicInfo, MusicManager, play

USAGE = """
        enter following commands to control the player:
        mgr list -- view the music list.
        mgr add <name> <artist> <source> <type> -- add a music to the list
        mgr remove <id> -- remove the specified music
        play <name> -- play the specified music
        q -- quit the player"""


def handle_manager_command(manager, tokens):
    """Run a ``mgr`` command against ``manager``."""
    option = tokens[1] if len(tokens) > 1 else ""
    if option == "list":
        for index, music in enumerate(manager):
            print(index, music.name, music.artist, music.source, music.kind)
    elif option == "add":
        if len(tokens) != 6:
            print("usage: mgr add <name> <artist> <source> <type>")
            return
        manager.add(MusicInfo(str(len(manager)), *tokens[2:6]))
        print("add success.")
    elif option == "remove":
        if len(tokens) != 3:
            print("usage: mgr remove <id>")
            return
        try:
            index = int(tokens[2])
        except ValueError:
            print("usage: mgr remove <id>")
            return
        removed = manager.remove(index)
        if removed is not None:
            print("remove the music:", removed.name)
    else:
        print("unsupport option", option)


def handle_play_command(manager, tokens):
    """Run a ``play`` command against ``manager``."""
    if len(tokens) != 2:
        print("usage: play <name>")
        return
    music = manager.find(tokens[1])
    if music is None:
        print("not exist the music", tokens[1])
        return
    play(music.source, music.kind)


def main(argv=None):
    """Read commands from standard input until ``q`` or end of input."""
    argparse.ArgumentParser(description="Interactive music player.").parse_args(argv)
    print(USAGE)
    manager = MusicManager()
    for raw in sys.stdin:
        line = raw.rstrip("\r\n")
        if line == "q":
            break
        tokens = line.split(" ")
        command = tokens[0]
        if command == "mgr":
            handle_manager_command(manager, tokens)
        elif command == "play":
            handle_play_command(manager, tokens)
        else:
            print("unknow command", command)
    return 0