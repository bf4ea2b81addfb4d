"""A cheap cycling table of pseudo-random bytes."""

from __future__ import annotations

RANDOM_VALUES: tuple[int, ...] = (
    5, 186, 40, 89, 232, 23, 96, 132, 65, 12,
    158, 219, 166, 123, 54, 248, 2, 196, 254, 18,
    109, 200, 78, 82, 25, 128, 74, 48, 158, 209,
    183, 28, 98, 25, 168, 122, 63, 6, 31, 125,
    80, 189, 228, 176, 151, 68, 42, 39, 148, 128,
    182, 77, 205, 103, 185, 45, 82, 25, 74, 82,
    128, 112, 130, 188, 132, 53, 87, 134, 93, 25,
    97, 129, 200, 243, 221, 178, 75, 39, 58, 3,
    98, 130, 152, 183, 253, 19, 7, 38, 14, 72,
    124, 168, 187, 132, 107, 204, 39, 70, 139, 196,
)


class RandomTable:
    """Steps through :data:`RANDOM_VALUES`, wrapping at the end."""

    def __init__(self, values: tuple[int, ...] = RANDOM_VALUES) -> None:
        if not values:
            raise ValueError("random table must not be empty")
        self._values = tuple(values)
        self._index = 0

    def next(self) -> int:
        """Advance to the next entry and return it (0 to 255)."""
        self._index += 1
        if self._index >= len(self._values):
            self._index = 0
        return self._values[self._index]

    def __iter__(self) -> "RandomTable":
        return self

    def __next__(self) -> int:
        return self.next()


_shared = RandomTable()


def spdl_random() -> int:
    """Return the next value of the game-wide random table."""
    return _shared.next()