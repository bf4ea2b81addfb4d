import pytest

from soupdl.tiles import (
    DEFAULT_OUTSIDE_TILE,
    TILE_METADATA,
    TILE_SIZE,
    TileFlags,
    TileId,
    tile_id_for_char,
    tile_metadata,
    visible_tiles,
)


def test_metadata_covers_every_tile():
    assert [tile_metadata(tile_id) for tile_id in TileId] == list(TILE_METADATA)


def test_map_chars_are_unique():
    chars = [tile_metadata(tile_id).map_char for tile_id in TileId]
    assert len(set(chars)) == len(chars)


@pytest.mark.parametrize("tile_id", list(TileId))
def test_char_lookup_round_trip(tile_id):
    assert tile_id_for_char(tile_metadata(tile_id).map_char) is tile_id


def test_known_chars():
    assert tile_id_for_char("s") is TileId.STONE
    assert tile_id_for_char(".") is TileId.AIR
    assert tile_id_for_char("E") is TileId.EVILSTOP


def test_unknown_char_returns_none():
    assert tile_id_for_char("?") is None


def test_unknown_tile_id_raises():
    with pytest.raises(ValueError):
        tile_metadata(len(TileId))


@pytest.mark.parametrize(
    "tile_id, degrees",
    [
        (TileId.SPIKE_UP, 0.0),
        (TileId.SPIKE_RIGHT, 90.0),
        (TileId.SPIKE_DOWN, 180.0),
        (TileId.SPIKE_LEFT, 270.0),
    ],
)
def test_rotation(tile_id, degrees):
    assert tile_metadata(tile_id).rotation() == degrees


def test_flags():
    assert tile_metadata(TileId.EVILSTOP).flags == TileFlags.SOLID | TileFlags.EVILSTOP
    assert tile_metadata(TileId.STONE).solid
    assert not tile_metadata(TileId.GRASS).solid


def test_default_outside_tile_is_lime():
    assert tile_id_for_char("l") is DEFAULT_OUTSIDE_TILE
    assert tile_metadata(DEFAULT_OUTSIDE_TILE).map_char == "l"


def test_visible_tiles_skips_air_and_invisible():
    grid = [
        [TileId.AIR, TileId.STONE, TileId.INVIS],
        [TileId.GRASS, TileId.AIR, TileId.AIR],
    ]
    draws = list(visible_tiles(grid, 0, 3, 0, 2, 0, 0))
    assert [d.tile_id for d in draws] == [TileId.STONE, TileId.GRASS]


def test_visible_tiles_source_and_rotation_from_metadata():
    grid = [[TileId.SPIKE_DOWN]]
    (draw,) = visible_tiles(grid, 0, 1, 0, 1, 0, 0)
    meta = tile_metadata(TileId.SPIKE_DOWN)
    assert draw.source == meta.spoint
    assert draw.rotation == meta.rotation()
    assert draw.dest == (0, 0)


def test_visible_tiles_respects_bounds_and_shift():
    grid = [[TileId.STONE] * 4 for _ in range(4)]
    draws = list(visible_tiles(grid, 1, 3, 2, 4, 5, -7))
    assert len(draws) == 4
    xs = sorted({d.dest[0] for d in draws})
    ys = sorted({d.dest[1] for d in draws})
    assert xs[1] - xs[0] == TILE_SIZE
    assert ys[1] - ys[0] == TILE_SIZE
    assert draws[0].dest == (TILE_SIZE + 5, 2 * TILE_SIZE - 7)