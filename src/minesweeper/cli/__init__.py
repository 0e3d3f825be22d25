"""
Terminal front end: command parsing, board rendering and the game loop.
"""
from .commands import Command, CommandError, CommandKind, parse_command
from .render import render_board, render_debug
from .driver import CommandLineDriver

__all__ = [
    "Command",
    "CommandError",
    "CommandKind",
    "parse_command",
    "render_board",
    "render_debug",
    "CommandLineDriver",
]
