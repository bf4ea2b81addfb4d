# soupdl

The data and layout logic behind SoupDL, a small tile-based side-scrolling
platformer: the text map format, save files, tile metadata, the HUD layout,
the tiles drawn around the map, and the screen and timestep arithmetic. It
uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
soupdl                       # open res/map/title.map
soupdl cool.map              # open res/map/cool.map in editor mode
soupdl --new 40x30 new.map   # set up a new, empty 40 by 30 map in editor mode
```

Maps are looked up in `res/map` relative to the working directory. The
command reads the map (or builds an empty one for `--new`) and prints one
line describing it: its path, size in tiles, whether it is in game or editor
mode, the outside tile and the number of void rectangles. `--new` does not
write a file. Map paths are limited to 19 characters, and new map dimensions
must both be positive. Any error is printed to standard error and the command
exits with status 1.

The command knows no entity tiles, so entity characters in a map it opens are
logged as unknown and read as air.

## Map files

A map is a text file. The tile grid comes first, one character per tile and
every row the same width, followed by at least one option line starting with
`>`:

```
sssssssssssss
sssssssssssss
ss.........ss
ss.....+++.ss
ss.p...+++.ss
sssssssssssss
sssssssssssss
>ot l
>r 2 2 3 2 i5
```

Options:

- `>ot <char>`: the tile used outside the map (lime when the character names
  no tile).
- `>d <door id> <map path>`: link a door to another map.
- `>ss <1|0>`: camera scroll stop on or off.
- `>r <y> <x> <h> <w> <i|s><value>`: a void rectangle; its value, a signed
  byte or a string of up to 19 characters, is handed to the entities inside it.
  At most 20 per map; out-of-bounds rectangles are skipped.
- `>e <y> <x> <char>`: an entity placed on top of a tile.

Unknown characters become air and faulty or unknown options are logged and
skipped; malformed tile data raises `MapLoadError`.

`soupdl.mapfile` provides `parse_map`, `read_map`, `format_map` and
`write_map`. Each takes the game's entity tiles as a sequence of
`soupdl.mapinfo.EntityTile` (a map character and a name); an entity's id is
its index in that sequence. `MapFile.spawns()` yields `EntitySpawn` records,
the entities inside void rectangles first with the rectangle's value, then
the rest row by row with the value 0. When writing, an entity on a tile other
than air becomes an `e` option, up to 100 of them.

## Save files

`soupdl.savefile` reads and writes saves: the map name, the player's x and
y, fireballs, maximum and current health and coins, one per line, followed by
the entity tiles left on each visited map (`CollectorMap`, written as
`<height>x<width>` and one character per cell, `N` for an empty cell). Use
`read_save`/`write_save` on open text streams or `load_save`/`store_save` on
paths; all return or take a `SaveData`. Problems raise `SaveError`. The game's
own save location is `SAVE_PATH` (`./res/sav/test.sav`).

## Other modules

- `soupdl.mapinfo`: `MapInfo` (path, editing flag, size and void rectangles,
  with `add_void_rect` and `remove_void_rect`), `get_tile_id`,
  `get_entity_id`, `check_duplicate_chars`, `new_grid` and `MapError`.
- `soupdl.tiles`: `TileId`, `TileFlags`, `TileMetadata`, `tile_metadata`,
  `tile_id_for_char` and `visible_tiles`, which yields `TileDraw`
  instructions for a rectangle of the tile map, skipping air.
- `soupdl.voidrect`: `Rect`, `VoidRect` and `parse_void_rect_value`.
- `soupdl.outside`: `outside_regions` returns the top, bottom, left and right
  `TileSpan`s of outside tiles visible for a camera shift.
- `soupdl.hud`: `heart_sprites`, `coins_text`, `game_name_position` and the
  `FireballBlinker` animation of the fireball counter.
- `soupdl.display`: `Screen` (logical size under a render scale),
  `timestep` and `frame_ticks`.
- `soupdl.assets`: resource directories, `res_path`, `texture_files`,
  `sound_files`, `music_files` and `missing_assets`.
- `soupdl.rng`: `RandomTable`, a fixed cycling table of bytes, and
  `spdl_random()`.
- `soupdl.mathutil`: `sign` and `clamp`.

```python
from soupdl.mapfile import parse_map
from soupdl.mapinfo import EntityTile
from soupdl.tiles import TileId

entities = [EntityTile("p", "Player")]
m = parse_map("sss\nsps\nsss\n>ot l\n", entities)
assert m.tiles[1][1] == TileId.AIR
assert [(s.entity_id, s.x, s.y) for s in m.spawns()] == [(0, 1, 1)]
```

## What it does not do

There is no game window, rendering, sound or music playback, input handling,
game loop or visual map editor; the modules compute what to draw and where,
and which files to load, but do not draw or play anything. It has no entity
behaviour and no built-in list of entity tiles: callers supply the entity
tiles for map and save files.