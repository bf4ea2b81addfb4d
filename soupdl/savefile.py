"""Reading and writing saved game progress.

A save file holds the map name, six player numbers, one per line, and then
the collector data: for each map, its name, its size as ``<height>x<width>``
and its entity tiles as one character per cell. For example::

    cool.map
    36
    90
    4
    8
    4
    1
    sick.map
    8x6
    NNNNNN
    ...
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .assets import DIR_SAVE
from .mapinfo import MAP_PATH_MAX, EntityTile, get_entity_id

logger = logging.getLogger(__name__)

SAVE_PATH = DIR_SAVE + "/test.sav"
"""Where the game keeps its save file."""

ENTITY_NONE_CHAR = "N"
"""Character written for a cell of collector data without an entity."""

_DIMENSIONS = re.compile(r"(\d+)x(\d+)")

_NUMBER_FIELDS = ("x", "y", "fireballs", "maxhp", "hp", "coins")


class SaveError(Exception):
    """Raised when a save file cannot be read or written."""


@dataclass
class CollectorMap:
    """Entity tiles remaining on one map visited by the player."""

    path: str
    width: int
    height: int
    entities: list[list[int | None]]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid collector map size {self.height}x{self.width}")
        if len(self.entities) != self.height or any(
            len(row) != self.width for row in self.entities
        ):
            raise ValueError("collector map data does not match its size")


@dataclass
class SaveData:
    """Everything stored in a save file."""

    map_path: str
    x: int
    y: int
    fireballs: int
    maxhp: int
    hp: int
    coins: int
    collector: list[CollectorMap] = field(default_factory=list)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_path(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise SaveError(f"missing {what}")
    return _check_path(line, what)


def _check_path(line: str, what: str) -> str:
    if len(line) >= MAP_PATH_MAX:
        raise SaveError(f"{what} longer than {MAP_PATH_MAX - 1} chars: {line!r}")
    return line


def _read_collector_map(
    path: str, lines: Iterator[str], entity_tiles: Sequence[EntityTile]
) -> CollectorMap:
    dims = next(lines, None)
    match = _DIMENSIONS.fullmatch(dims.strip()) if dims is not None else None
    if match is None:
        raise SaveError(f"failed to read collector dimensions for {path!r}")
    height, width = (int(group) for group in match.groups())
    rows: list[list[int | None]] = []
    for _ in range(height):
        row = next(lines, None)
        if row is None or len(row) != width:
            raise SaveError(f"failed to read entity tile data for {path!r}")
        rows.append([get_entity_id(char, entity_tiles) for char in row])
    return CollectorMap(path, width, height, rows)


def read_save(stream: TextIO, entity_tiles: Sequence[EntityTile]) -> SaveData:
    """Read a save file from ``stream``.

    Characters that name no entity tile are read as empty cells. A map that
    appears twice in the collector data keeps its first entry.
    """
    lines = iter(_split_lines(stream.read()))
    map_path = _read_path(lines, "map name")

    numbers: list[int] = []
    for label in _NUMBER_FIELDS:
        line = next(lines, None)
        if line is None:
            raise SaveError(f"missing player {label} in save file")
        try:
            numbers.append(int(line.strip()))
        except ValueError:
            raise SaveError(f"invalid player {label} {line!r} in save file") from None

    collector: list[CollectorMap] = []
    seen: set[str] = set()
    for path_line in lines:
        path = _check_path(path_line, "collector map name")
        cmap = _read_collector_map(path, lines, entity_tiles)
        if path in seen:
            logger.error("collector data for %r appears more than once", path)
            continue
        seen.add(path)
        collector.append(cmap)

    x, y, fireballs, maxhp, hp, coins = numbers
    return SaveData(map_path, x, y, fireballs, maxhp, hp, coins, collector)


def _entity_char(entity_id: int | None, entity_tiles: Sequence[EntityTile]) -> str:
    if entity_id is None:
        return ENTITY_NONE_CHAR
    if not 0 <= entity_id < len(entity_tiles):
        raise SaveError(f"unknown entity tile id {entity_id}")
    return entity_tiles[entity_id].map_char


def write_save(
    stream: TextIO, data: SaveData, entity_tiles: Sequence[EntityTile]
) -> None:
    """Write ``data`` to ``stream`` in the save file format."""
    stream.write(
        f"{data.map_path}\n{int(data.x)}\n{int(data.y)}\n{data.fireballs}\n"
        f"{data.maxhp}\n{data.hp}\n{data.coins}\n"
    )
    for cmap in data.collector:
        stream.write(f"{cmap.path}\n{cmap.height}x{cmap.width}\n")
        for row in cmap.entities:
            stream.write("".join(_entity_char(e, entity_tiles) for e in row) + "\n")


def load_save(path: str | Path, entity_tiles: Sequence[EntityTile]) -> SaveData:
    """Read the save file at ``path``."""
    try:
        with open(path, encoding="ascii", newline="") as stream:
            data = read_save(stream, entity_tiles)
    except OSError as exc:
        raise SaveError(f"failed to open save file {str(path)!r}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SaveError(f"save file {str(path)!r} is not plain text") from exc
    logger.info("load game successful")
    return data


def store_save(
    path: str | Path, data: SaveData, entity_tiles: Sequence[EntityTile]
) -> None:
    """Write ``data`` to the save file at ``path``."""
    try:
        with open(path, "w", encoding="ascii", newline="") as stream:
            write_save(stream, data, entity_tiles)
    except OSError as exc:
        raise SaveError(f"failed to write save file {str(path)!r}: {exc}") from exc
    logger.info("save game successful")