"""Reading and writing text map files.

A map file holds rows of tile characters, all of the same width, followed
by option lines that start with ``>``::

    sssss
    s.p.s
    sssss
    >ot l
    >r 1 1 1 3 i5
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .mapinfo import (
    MAP_HEIGHT_MAX,
    MAP_OPT_SYMBOL,
    MAP_PATH_MAX,
    MAP_WIDTH_MAX,
    VOID_RECT_LIST_LEN,
    EntityTile,
    MapError,
    get_entity_id,
    get_tile_id,
)
from .tiles import DEFAULT_OUTSIDE_TILE, TILE_METADATA, TILE_SIZE, TileId
from .voidrect import Rect, VoidRect, parse_void_rect_value

logger = logging.getLogger(__name__)

MAP_OPTION_LEN = 5
"""Storage size of an option name, including its terminator."""

ENT_OPT_LEN = 100
"""Maximum number of entity options written to one map file."""


class MapLoadError(MapError):
    """Raised when a map file cannot be read."""


@dataclass(frozen=True)
class EntitySpawn:
    """An entity to create at a tile position, with its spawn value."""

    entity_id: int
    x: int
    y: int
    value: int | str = 0

    @property
    def pixel(self) -> tuple[int, int]:
        """Position of the entity in world pixels."""
        return (self.x * TILE_SIZE, self.y * TILE_SIZE)


@dataclass
class MapFile:
    """Tiles, entity tiles and options of a map."""

    tiles: list[list[TileId]]
    entities: list[list[int | None]]
    path: str = ""
    outside_tile: TileId = DEFAULT_OUTSIDE_TILE
    door_paths: dict[int, str] = field(default_factory=dict)
    scroll_stop: bool | None = None
    void_rects: list[VoidRect] = field(default_factory=list)

    def __post_init__(self) -> None:
        width = self.width
        if any(len(row) != width for row in self.tiles):
            raise MapError("tile rows differ in width")
        if len(self.entities) != self.height or any(
            len(row) != width for row in self.entities
        ):
            raise MapError("entity data does not match the tile data")

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def height(self) -> int:
        return len(self.tiles)

    def spawns(self) -> Iterator[EntitySpawn]:
        """Yield the entities to create, in spawning order.

        Entities inside void rectangles come first and carry the rectangle's
        value; a cell covered by several rectangles takes the first one. The
        remaining entities follow row by row with the value 0.
        """
        claimed: set[tuple[int, int]] = set()
        for void_rect in self.void_rects:
            for x, y in void_rect.rect.cells():
                if (x, y) in claimed or not self._inside(x, y):
                    continue
                entity_id = self.entities[y][x]
                if entity_id is None:
                    continue
                claimed.add((x, y))
                yield EntitySpawn(entity_id, x, y, void_rect.value)
        for y, row in enumerate(self.entities):
            for x, entity_id in enumerate(row):
                if entity_id is not None and (x, y) not in claimed:
                    yield EntitySpawn(entity_id, x, y, 0)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_rows(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split the lines into map rows and option lines."""
    if not lines or not lines[0]:
        raise MapLoadError("error reading the first line of map tile data")
    width = len(lines[0])
    if width > MAP_WIDTH_MAX:
        raise MapLoadError(f"map wider than {MAP_WIDTH_MAX} tiles")
    rows = [lines[0]]
    for number, line in enumerate(lines[1:], start=2):
        if len(rows) >= MAP_HEIGHT_MAX:
            logger.error("maximum height for a map was read in")
            return rows, []
        if line.startswith(MAP_OPT_SYMBOL):
            return rows, lines[number - 1:]
        if not line:
            raise MapLoadError(f"failed to read a char at the start of map line {number}")
        if len(line) != width:
            raise MapLoadError(f"failed to read map data from line {number}")
        rows.append(line)
    raise MapLoadError("map file ended before its options")


def _decode_rows(
    rows: list[str], entity_tiles: Sequence[EntityTile]
) -> tuple[list[list[TileId]], list[list[int | None]]]:
    tiles: list[list[TileId]] = []
    entities: list[list[int | None]] = []
    for y, row in enumerate(rows):
        tile_row: list[TileId] = []
        entity_row: list[int | None] = []
        for x, char in enumerate(row):
            tile_id = get_tile_id(char)
            entity_id = None
            if tile_id is None:
                entity_id = get_entity_id(char, entity_tiles)
                if entity_id is None:
                    logger.error("no tile or entity found at (%d, %d)", x, y)
                tile_id = TileId.AIR
            tile_row.append(tile_id)
            entity_row.append(entity_id)
        tiles.append(tile_row)
        entities.append(entity_row)
    return tiles, entities


def _option_door(map_file: MapFile, args: str) -> None:
    id_text, _, path = args.partition(" ")
    try:
        door_id = int(id_text)
    except ValueError:
        logger.error("d: invalid door id %r specified", id_text)
        return
    if door_id < 0:
        logger.error("d: invalid door id %d specified", door_id)
        return
    path = path.lstrip(" ")
    if len(path) >= MAP_PATH_MAX:
        logger.error(
            "d: map path for door id %d was too long (over %d characters)",
            door_id,
            MAP_PATH_MAX,
        )
        return
    map_file.door_paths[door_id] = path


def _option_scroll_stop(map_file: MapFile, args: str) -> None:
    try:
        map_file.scroll_stop = bool(int(args.strip()))
    except ValueError:
        logger.error("ss: invalid value %r", args)


def _option_void_rect(map_file: MapFile, args: str) -> None:
    if len(map_file.void_rects) >= VOID_RECT_LIST_LEN:
        logger.error("max number of void rectangles read. ignoring this one")
        return
    fields = args.split(None, 4)
    try:
        y, x, h, w = (int(item) for item in fields[:4])
    except ValueError:
        logger.error("failed to read void rectangle dimensions")
        return
    if len(fields) < 4:
        logger.error("failed to read void rectangle dimensions")
        return
    if x < 0 or y < 0 or x + w > map_file.width or y + h > map_file.height:
        logger.error("void rectangle dimensions are out of bounds. skipping rectangle.")
        return
    try:
        value = parse_void_rect_value(fields[4] if len(fields) == 5 else "")
    except ValueError as exc:
        logger.error("failed to read void rectangle value: %s", exc)
        return
    map_file.void_rects.append(VoidRect(Rect(x, y, w, h), value))


def _option_entity(
    map_file: MapFile, args: str, entity_tiles: Sequence[EntityTile]
) -> None:
    fields = args.split()
    try:
        y, x = int(fields[0]), int(fields[1])
        char = fields[2][0]
    except (ValueError, IndexError):
        logger.error("e: invalid entity option %r", args)
        return
    if not map_file._inside(x, y):
        logger.error("e: entity position (%d, %d) is outside the map", x, y)
        return
    map_file.entities[y][x] = get_entity_id(char, entity_tiles)


def _apply_options(
    map_file: MapFile, lines: list[str], entity_tiles: Sequence[EntityTile]
) -> None:
    for line in lines:
        if not line.startswith(MAP_OPT_SYMBOL):
            break
        name, _, args = line[1:].partition(" ")
        if len(name) >= MAP_OPTION_LEN:
            raise MapLoadError(f"failed to read map option name {name!r}")
        if name == "ot":
            outside = get_tile_id(args[:1])
            map_file.outside_tile = DEFAULT_OUTSIDE_TILE if outside is None else outside
        elif name == "d":
            _option_door(map_file, args)
        elif name == "ss":
            _option_scroll_stop(map_file, args)
        elif name == "r":
            _option_void_rect(map_file, args)
        elif name == "e":
            _option_entity(map_file, args, entity_tiles)
        else:
            logger.error("unknown option %r found", name)


def parse_map(text: str, entity_tiles: Sequence[EntityTile]) -> MapFile:
    """Parse the text of a map file.

    Unknown map characters become air, faulty options are logged and
    skipped. Raises MapLoadError when the tile data itself is malformed.
    """
    rows, option_lines = _read_rows(_split_lines(text))
    tiles, entities = _decode_rows(rows, entity_tiles)
    map_file = MapFile(tiles, entities)
    _apply_options(map_file, option_lines, entity_tiles)
    return map_file


def read_map(path: str | Path, entity_tiles: Sequence[EntityTile]) -> MapFile:
    """Read and parse the map file at ``path``; its name becomes the map path."""
    try:
        text = Path(path).read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapLoadError(f"failed to load text map file {str(path)!r}") from exc
    map_file = parse_map(text, entity_tiles)
    map_file.path = Path(path).name
    return map_file


def format_map(map_file: MapFile, entity_tiles: Sequence[EntityTile]) -> str:
    """Return the text of ``map_file`` in the map file format.

    An entity on a tile other than air is written as an ``e`` option, up to
    :data:`ENT_OPT_LEN` of them; entities beyond that are dropped.
    """
    lines: list[str] = []
    entity_options: list[tuple[int, int, int]] = []
    for y, (tile_row, entity_row) in enumerate(zip(map_file.tiles, map_file.entities)):
        chars: list[str] = []
        for x, (tile_id, entity_id) in enumerate(zip(tile_row, entity_row)):
            if entity_id is None:
                chars.append(TILE_METADATA[tile_id].map_char)
            elif tile_id != TileId.AIR:
                chars.append(TILE_METADATA[tile_id].map_char)
                if len(entity_options) >= ENT_OPT_LEN:
                    logger.error(
                        "failed to add entity option at (%d, %d). max entity options reached.",
                        x,
                        y,
                    )
                    continue
                entity_options.append((y, x, entity_id))
            else:
                chars.append(entity_tiles[entity_id].map_char)
        lines.append("".join(chars))

    lines.append(f"{MAP_OPT_SYMBOL}ot {TILE_METADATA[map_file.outside_tile].map_char}")
    lines.extend(
        f"{MAP_OPT_SYMBOL}d {door_id} {path}"
        for door_id, path in sorted(map_file.door_paths.items())
        if path
    )
    lines.extend(
        f"{MAP_OPT_SYMBOL}r {r.rect.y} {r.rect.x} {r.rect.h} {r.rect.w} {r.format_value()}"
        for r in map_file.void_rects
    )
    lines.extend(
        f"{MAP_OPT_SYMBOL}e {y} {x} {entity_tiles[entity_id].map_char}"
        for y, x, entity_id in entity_options
    )
    return "\n".join(lines) + "\n"


def write_map(
    path: str | Path, map_file: MapFile, entity_tiles: Sequence[EntityTile]
) -> None:
    """Write ``map_file`` to ``path``."""
    try:
        Path(path).write_text(format_map(map_file, entity_tiles), encoding="ascii")
    except OSError as exc:
        raise MapError(f"failed to open map file {str(path)!r}") from exc