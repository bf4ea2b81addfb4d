"""Tile types, their metadata and the calculation of which tiles to draw."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

TILE_SIZE = 32
"""Width and height of a tile in pixels."""


class TileId(enum.IntEnum):
    """Tile types; the values index the metadata table."""

    AIR = 0
    STONE = 1
    LIME = 2
    LIMESTONE = 3
    IRON = 4
    IRONBACK = 5
    SPIKE_UP = 6
    SPIKE_DOWN = 7
    SPIKE_LEFT = 8
    SPIKE_RIGHT = 9
    SPIKE_BALL = 10
    STRING = 11
    GRASS = 12
    TALLGRASS = 13
    INVIS = 14
    WOOD = 15
    WOODBACK = 16
    WINDOW = 17
    EVILSTOP = 18


class TileFlags(enum.IntFlag):
    """Bit flags describing a tile type."""

    NONE = 0
    ROT1 = 1 << 0
    ROT2 = 1 << 1
    ROT3 = 1 << 2
    SOLID = 1 << 3
    SPIKE = 1 << 4
    EVILSTOP = 1 << 5


@dataclass(frozen=True)
class TileMetadata:
    """Map character, sprite position, flags and editor name of a tile type."""

    map_char: str
    spoint: tuple[int, int]
    flags: TileFlags
    name: str

    def rotation(self) -> float:
        """Sprite rotation in degrees given by the rotation flags."""
        if self.flags & TileFlags.ROT1:
            return 90.0
        if self.flags & TileFlags.ROT2:
            return 180.0
        if self.flags & TileFlags.ROT3:
            return 270.0
        return 0.0

    @property
    def solid(self) -> bool:
        return bool(self.flags & TileFlags.SOLID)


def _sp(x: int, y: int) -> tuple[int, int]:
    return (TILE_SIZE * x, TILE_SIZE * y)


_F = TileFlags

TILE_METADATA: tuple[TileMetadata, ...] = (
    TileMetadata(".", (0, 0), _F.NONE, "Air"),
    TileMetadata("s", _sp(0, 0), _F.SOLID, "Stone"),
    TileMetadata("l", _sp(1, 0), _F.SOLID, "Lime..?"),
    TileMetadata("L", _sp(0, 2), _F.SOLID, "Limestone"),
    TileMetadata("o", _sp(2, 0), _F.SOLID, "Iron Block"),
    TileMetadata("O", _sp(0, 3), _F.NONE, "Iron Block Background"),
    TileMetadata("x", _sp(3, 0), _F.SPIKE, "Spikes Pointing Up"),
    TileMetadata("d", _sp(3, 0), _F.SPIKE | _F.ROT2, "Spikes Pointing Down"),
    TileMetadata("{", _sp(3, 0), _F.SPIKE | _F.ROT3, "Spikes Pointing Left"),
    TileMetadata("}", _sp(3, 0), _F.SPIKE | _F.ROT1, "Spikes Pointing Right"),
    TileMetadata("X", _sp(2, 2), _F.SPIKE, "Spike Ball"),
    TileMetadata("|", _sp(0, 1), _F.NONE, "Pointless string"),
    TileMetadata(";", _sp(1, 1), _F.NONE, "Grass"),
    TileMetadata(":", _sp(1, 2), _F.NONE, "Tallgrass"),
    TileMetadata("i", (0, 0), _F.SOLID, "Solid Air"),
    TileMetadata("W", _sp(1, 3), _F.SOLID, "Wood planks"),
    TileMetadata("w", _sp(2, 3), _F.NONE, "Wood background"),
    TileMetadata("#", _sp(3, 3), _F.NONE, "Wood window"),
    TileMetadata("E", _sp(3, 2), _F.SOLID | _F.EVILSTOP, "Evilball stopper"),
)

DEFAULT_OUTSIDE_TILE = TileId.LIME
"""Tile type used for everything outside the map unless the map says otherwise."""

_INVISIBLE = frozenset({TileId.AIR, TileId.INVIS})


def tile_metadata(tile_id: int) -> TileMetadata:
    """Return the metadata of a tile type; raise ValueError for an unknown id."""
    return TILE_METADATA[TileId(tile_id)]


def tile_id_for_char(char: str) -> TileId | None:
    """Return the tile type written as ``char`` in map files, or None."""
    for tile_id, meta in zip(TileId, TILE_METADATA):
        if meta.map_char == char:
            return tile_id
    return None


@dataclass(frozen=True)
class TileDraw:
    """One tile to be copied from the tileset onto the screen."""

    tile_id: TileId
    source: tuple[int, int]
    dest: tuple[int, int]
    rotation: float
    size: int = TILE_SIZE


def visible_tiles(
    tile_map: Sequence[Sequence[int]],
    left: int,
    right: int,
    top: int,
    bottom: int,
    xshift: int,
    yshift: int,
) -> Iterator[TileDraw]:
    """Yield draw instructions for the tiles in the given tile rectangle.

    Air and invisible solid tiles are skipped. Rows and columns are visited
    top to bottom, left to right.
    """
    for y, row in enumerate(tile_map[top:bottom], start=top):
        for x, raw in enumerate(row[left:right], start=left):
            tile_id = TileId(raw)
            if tile_id in _INVISIBLE:
                continue
            meta = TILE_METADATA[tile_id]
            yield TileDraw(
                tile_id=tile_id,
                source=meta.spoint,
                dest=(x * TILE_SIZE + xshift, y * TILE_SIZE + yshift),
                rotation=meta.rotation(),
            )