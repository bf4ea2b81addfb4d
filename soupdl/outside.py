"""Which tiles around the map have to be drawn with the outside tile."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .tiles import TILE_SIZE


@dataclass(frozen=True)
class TileSpan:
    """A rectangle of tile coordinates; ``right`` and ``bottom`` are exclusive."""

    left: int
    right: int
    top: int
    bottom: int

    @property
    def empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) tile coordinates of the span, row by row."""
        for y in range(self.top, self.bottom):
            for x in range(self.left, self.right):
                yield x, y

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        x, y = cell
        return self.left <= x < self.right and self.top <= y < self.bottom


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def outside_regions(
    xshift: int,
    yshift: int,
    screen_width: int,
    screen_height: int,
    map_width: int,
    map_height: int,
) -> tuple[TileSpan, TileSpan, TileSpan, TileSpan]:
    """Return the top, bottom, left and right spans of outside tiles on screen.

    ``xshift`` and ``yshift`` are the camera shifts in pixels; the screen
    and map sizes are in pixels and tiles respectively.
    """
    map_px_w = map_width * TILE_SIZE
    map_px_h = map_height * TILE_SIZE

    ott_left = _tdiv(-xshift, TILE_SIZE)
    if xshift > 0:
        ott_left -= 1
    ott_right = ott_left + _ceil_div(screen_width, TILE_SIZE) + 1
    ott_top = -_ceil_div(yshift, TILE_SIZE)
    ott_bottom = 0
    if yshift > screen_height:
        ott_bottom = _tdiv(-(yshift - screen_height), TILE_SIZE)

    otb_top = map_height
    if -yshift > map_px_h:
        otb_top += _tdiv(-yshift - map_px_h, TILE_SIZE)
        otb_bottom = otb_top + _ceil_div(screen_height, TILE_SIZE) + 1
    else:
        otb_bottom = otb_top + _ceil_div(screen_height - map_px_h - yshift, TILE_SIZE)

    otl_right = ott_right if xshift > screen_width else 0
    otl_top = _tdiv(-yshift, TILE_SIZE) if yshift < 0 else 0
    otl_bottom = map_height
    if yshift + map_px_h > screen_height:
        otl_bottom = map_height - _tdiv(yshift + map_px_h - screen_height, TILE_SIZE)

    otr_left = map_width
    if -xshift > map_px_w:
        otr_left += _tdiv(-xshift - map_px_w, TILE_SIZE)

    return (
        TileSpan(ott_left, ott_right, ott_top, ott_bottom),
        TileSpan(ott_left, ott_right, otb_top, otb_bottom),
        TileSpan(ott_left, otl_right, otl_top, otl_bottom),
        TileSpan(otr_left, ott_right, otl_top, otl_bottom),
    )