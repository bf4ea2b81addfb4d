"""Void rectangles: map regions that hand a value to entity spawners."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

VOID_RECT_STR_LEN = 20
"""Storage size of a string value, including its terminator."""

VOID_RECT_STR_MAX = VOID_RECT_STR_LEN - 1


def _to_int8(value: int) -> int:
    return (value + 128) % 256 - 128


@dataclass
class Rect:
    """A rectangle in map tile coordinates."""

    x: int
    y: int
    w: int
    h: int

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) tile coordinates inside the rectangle, row by row."""
        for y in range(self.y, self.y + self.h):
            for x in range(self.x, self.x + self.w):
                yield x, y


@dataclass
class VoidRect:
    """A rectangle holding either a small integer or a short string."""

    rect: Rect
    value: int | str = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            if len(self.value) > VOID_RECT_STR_MAX:
                raise ValueError(
                    f"void rectangle string longer than {VOID_RECT_STR_MAX} chars"
                )
        else:
            self.value = _to_int8(int(self.value))

    @property
    def value_is_str(self) -> bool:
        return isinstance(self.value, str)

    def format_value(self) -> str:
        """Return the value as written in map files: ``s<text>`` or ``i<int>``."""
        if isinstance(self.value, str):
            return f"s{self.value}"
        return f"i{self.value}"


def parse_void_rect_value(text: str) -> int | str:
    """Parse a value written as ``i<int>`` or ``<tag><text>``.

    A leading ``i`` marks an integer, stored as a signed byte. Any other
    leading character marks a string, which is the rest of the text.
    """
    text = text.rstrip("\n")
    if not text:
        raise ValueError("missing void rectangle value")
    tag, rest = text[0], text[1:]
    if tag == "i":
        try:
            return _to_int8(int(rest.strip()))
        except ValueError:
            raise ValueError(f"invalid void rectangle integer {rest!r}") from None
    if len(rest) > VOID_RECT_STR_MAX:
        raise ValueError(f"void rectangle string longer than {VOID_RECT_STR_MAX} chars")
    return rest