import pytest

from soupdl.mapinfo import (
    MAP_PATH_MAX,
    VOID_RECT_LIST_LEN,
    EntityTile,
    MapError,
    MapInfo,
    check_duplicate_chars,
    get_entity_id,
    get_tile_id,
    new_grid,
)
from soupdl.tiles import TileId
from soupdl.voidrect import Rect, VoidRect

ENTITIES = [EntityTile("p", "Player"), EntityTile("+", "Coin"), EntityTile("N", "None")]


def _vr(value):
    return VoidRect(Rect(0, 0, 1, 1), value)


def test_get_tile_id_known_chars():
    assert get_tile_id(".") == TileId.AIR
    assert get_tile_id("s") == TileId.STONE
    assert get_tile_id("E") == TileId.EVILSTOP


def test_get_tile_id_unknown():
    assert get_tile_id("p") is None


def test_get_entity_id():
    assert get_entity_id("+", ENTITIES) == 1
    assert get_entity_id("s", ENTITIES) is None


def test_check_duplicate_chars_clean():
    assert check_duplicate_chars(ENTITIES) is True


def test_check_duplicate_chars_clash_with_tile():
    assert check_duplicate_chars([EntityTile("s", "Stone thing")]) is False


def test_check_duplicate_chars_clash_between_entities():
    assert check_duplicate_chars([EntityTile("q", "a"), EntityTile("q", "b")]) is False


def test_new_grid_shape_and_independence():
    grid = new_grid(3, 2, 0)
    assert grid == [[0, 0, 0], [0, 0, 0]]
    grid[0][1] = 5
    assert grid[1][1] == 0


def test_new_grid_negative():
    with pytest.raises(ValueError):
        new_grid(-1, 2, 0)


def test_path_too_long():
    with pytest.raises(MapError):
        MapInfo(path="a" * MAP_PATH_MAX)
    assert MapInfo(path="a" * (MAP_PATH_MAX - 1)).path == "a" * (MAP_PATH_MAX - 1)


def test_add_void_rect_until_full():
    info = MapInfo()
    for n in range(VOID_RECT_LIST_LEN):
        info.add_void_rect(_vr(n))
    assert len(info.void_rects) == VOID_RECT_LIST_LEN
    with pytest.raises(MapError):
        info.add_void_rect(_vr(0))


def test_remove_void_rect_moves_last_into_place():
    info = MapInfo()
    rects = [info.add_void_rect(_vr(n)) for n in range(4)]
    removed = info.remove_void_rect(1)
    assert removed is rects[1]
    assert info.void_rects == [rects[0], rects[3], rects[2]]


def test_remove_last_void_rect():
    info = MapInfo()
    rects = [info.add_void_rect(_vr(n)) for n in range(3)]
    info.remove_void_rect(2)
    assert info.void_rects == rects[:2]


def test_remove_void_rect_bad_index():
    with pytest.raises(IndexError):
        MapInfo().remove_void_rect(0)