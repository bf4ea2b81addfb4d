"""State of the loaded map and lookups between map characters and ids."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from .tiles import TILE_METADATA, TileId, tile_id_for_char
from .voidrect import VoidRect

MAP_WIDTH_MAX = 2000
"""Maximum width of a map in tiles."""

MAP_HEIGHT_MAX = 2000
"""Maximum height of a map in tiles."""

MAP_PATH_MAX = 20
"""Storage size of a map path, including its terminator."""

VOID_RECT_LIST_LEN = 20
"""Maximum number of void rectangles in one map."""

MAP_OPT_SYMBOL = ">"
"""Character that starts an option line in map files."""

AIR_CHAR = TILE_METADATA[TileId.AIR].map_char

_T = TypeVar("_T")


class MapError(Exception):
    """Raised when map data or map state is invalid."""


@dataclass(frozen=True)
class EntityTile:
    """An entity that can be placed on the map, written as one character."""

    map_char: str
    name: str


@dataclass
class MapInfo:
    """Path, size and void rectangles of the current map."""

    path: str = ""
    editing: bool = False
    width: int = 0
    height: int = 0
    void_rects: list[VoidRect] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.path) >= MAP_PATH_MAX:
            raise MapError(
                f"map path longer than MAP_PATH_MAX ({MAP_PATH_MAX} chars): {self.path!r}"
            )
        if len(self.void_rects) > VOID_RECT_LIST_LEN:
            raise MapError(f"more than {VOID_RECT_LIST_LEN} void rectangles")

    def add_void_rect(self, void_rect: VoidRect) -> VoidRect:
        """Append a void rectangle and return it; raise MapError when the list is full."""
        if len(self.void_rects) >= VOID_RECT_LIST_LEN:
            raise MapError(f"maximum of {VOID_RECT_LIST_LEN} void rectangles reached")
        self.void_rects.append(void_rect)
        return void_rect

    def remove_void_rect(self, index: int) -> VoidRect:
        """Remove and return the void rectangle at ``index``.

        The last rectangle takes the place of the removed one, so the order
        of the others is not kept.
        """
        removed = self.void_rects[index]
        last = self.void_rects.pop()
        if removed is not last:
            self.void_rects[self.void_rects.index(removed)] = last
        return removed


def get_tile_id(char: str) -> TileId | None:
    """Return the tile type written as ``char``, or None if there is none."""
    return tile_id_for_char(char)


def get_entity_id(char: str, entity_tiles: Sequence[EntityTile]) -> int | None:
    """Return the index of the entity tile written as ``char``, or None."""
    for index, entity in enumerate(entity_tiles):
        if entity.map_char == char:
            return index
    return None


def check_duplicate_chars(entity_tiles: Sequence[EntityTile]) -> bool:
    """Return False if any two tiles or entity tiles share a map character.

    Tiles and entity tiles are numbered together, tiles first.
    """
    chars = [meta.map_char for meta in TILE_METADATA]
    chars.extend(entity.map_char for entity in entity_tiles)
    seen: set[str] = set()
    for char in chars:
        if char in seen:
            return False
        seen.add(char)
    return True


def new_grid(width: int, height: int, fill: _T) -> list[list[_T]]:
    """Return a grid of ``height`` rows of ``width`` cells, indexed ``[y][x]``."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid map dimensions {width}x{height}")
    return [[fill] * width for _ in range(height)]