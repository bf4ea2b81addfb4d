"""Command line handling and the start of a game session."""

from __future__ import annotations

import enum
import logging
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .assets import DIR_MAP
from .mapfile import MapFile, read_map
from .mapinfo import MAP_PATH_MAX, MapError, MapInfo, new_grid
from .tiles import TILE_METADATA, TileId

logger = logging.getLogger(__name__)

START_MAP = "title.map"
"""Map loaded when the game is started without arguments."""

NEW_FLAG = "--new"

_INT = r"\s*([+-]?\d+)"
_WIDTH = re.compile(_INT)
_HEIGHT = re.compile(r"x" + _INT)


class GameState(enum.Enum):
    """What the game loop is doing."""

    INGAME = "ingame"
    EDITOR = "editor"
    QUIT = "quit"


@dataclass(frozen=True)
class StartupOptions:
    """What the command line asks the game to start with."""

    map_path: str = START_MAP
    state: GameState = GameState.INGAME
    new_size: tuple[int, int] | None = None

    @property
    def editing(self) -> bool:
        return self.state is GameState.EDITOR

    @property
    def is_new(self) -> bool:
        return self.new_size is not None


def _parse_dimensions(text: str) -> tuple[int, int]:
    """Read ``<width>x<height>`` from the start of ``text``."""
    width = height = 0
    match = _WIDTH.match(text)
    if match is not None:
        width = int(match.group(1))
        rest = _HEIGHT.match(text, match.end())
        if rest is not None:
            height = int(rest.group(1))
    if width <= 0:
        raise ValueError("failed to extract new map width from command line arguments")
    if height <= 0:
        raise ValueError("failed to extract new map height from command line arguments")
    return width, height


def parse_args(argv: Sequence[str]) -> StartupOptions:
    """Interpret the command line arguments, without the program name.

    No arguments start the title map in game; one argument opens that map in
    the editor; ``--new <width>x<height> <path>`` creates a new map to edit.
    Raises ValueError for anything else.
    """
    args = list(argv)
    if not args:
        return StartupOptions()
    if len(args) == 1:
        return StartupOptions(map_path=args[0], state=GameState.EDITOR)
    if len(args) == 3:
        flag, dims, path = args
        if flag != NEW_FLAG:
            raise ValueError(f'unknown argument "{flag}" provided, expected "{NEW_FLAG}"')
        if len(path) >= MAP_PATH_MAX:
            raise ValueError(
                f"error: map path longer than MAP_PATH_MAX ({MAP_PATH_MAX} chars)"
            )
        size = _parse_dimensions(dims)
        return StartupOptions(map_path=path, state=GameState.EDITOR, new_size=size)
    raise ValueError("wrong number of arguments provided")


def input_string(prompt: str, max_len: int) -> str:
    """Ask the player for a line of text of at most ``max_len - 1`` characters.

    Raises EOFError when input has ended and ValueError when the line is
    too long.
    """
    if max_len < 1:
        raise ValueError(f"invalid maximum length {max_len}")
    print(f"soupdl: input: {prompt}: (max {max_len - 1} chars)", file=sys.stderr)
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no input")
    text = line[:-1] if line.endswith("\n") else line
    if len(text) > max_len - 1:
        raise ValueError(f"input longer than {max_len - 1} chars")
    return text


def _blank_map(options: StartupOptions) -> MapFile:
    assert options.new_size is not None
    width, height = options.new_size
    return MapFile(
        tiles=new_grid(width, height, TileId.AIR),
        entities=new_grid(width, height, None),
        path=options.map_path,
    )


def _open_map(options: StartupOptions) -> MapFile:
    if options.is_new:
        return _blank_map(options)
    return read_map(Path(DIR_MAP) / options.map_path, ())


def main(argv: Sequence[str] | None = None) -> int:
    """Start a session from the command line and report the map it opens."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except ValueError as exc:
        print(f"soupdl: {exc}", file=sys.stderr)
        return 1
    try:
        map_file = _open_map(options)
        info = MapInfo(
            path=map_file.path,
            editing=options.editing,
            width=map_file.width,
            height=map_file.height,
            void_rects=list(map_file.void_rects),
        )
    except MapError as exc:
        print(f"soupdl: {exc}", file=sys.stderr)
        return 1
    mode = "editor" if info.editing else "game"
    outside = TILE_METADATA[map_file.outside_tile].name
    print(
        f"{info.path}: {info.width}x{info.height} tiles, {mode}, "
        f"outside tile {outside}, {len(info.void_rects)} void rectangles"
    )
    return 0