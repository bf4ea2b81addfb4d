"""Layout of the heads-up display: coins, game name, hearts and fireballs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

FONT_CHAR_XSPACE = 8
"""Horizontal advance of one character of the HUD font in pixels."""

FONT_CHAR_YSPACE = 8
"""Vertical advance of one line of the HUD font in pixels."""

COINS_STR_LEN = 10
"""Storage size of the coin counter text, including its terminator."""

GAME_NAME_STR = "SoupDL06\nby lukelawlor\nbuild"
GAME_NAME_WIDTH = 19 * FONT_CHAR_XSPACE
GAME_NAME_MARGIN = 6
"""Gap in pixels between the game name and the right edge of the screen."""

COINS_POSITION = (4, 4)

HEART_START_X = 4
HEART_START_Y = FONT_CHAR_YSPACE + 8
HEART_SPRITE_WIDTH = 16
HEART_SPRITE_HEIGHT = 16
HEART_XSPACE = 20

FIREBALL_START_X = HEART_START_X
FIREBALL_START_Y = HEART_START_Y + HEART_SPRITE_HEIGHT + 4
FIREBALL_SPRITE_WIDTH = 16
FIREBALL_SPRITE_HEIGHT = 16
FIREBALL_XSPACE = 20

BLINK_TICK_INC = 4
"""Frames for which one fireball stays lit."""

BLINK_TICK_RESET_WAIT = 4
"""Number of BLINK_TICK_INC periods to wait before the blink restarts."""

BLINK_BOB_Y = 2
"""Downward offset of the fireball that blinks and bobs."""


class HeartKind(enum.IntEnum):
    """Heart sprites; the value is the sprite's column in the heart texture."""

    FULL = 0
    HALF = 1
    EMPTY = 2

    @property
    def source_x(self) -> int:
        return self.value * HEART_SPRITE_WIDTH


@dataclass(frozen=True)
class FireballSprite:
    """One fireball of the fireball counter, with its screen position."""

    NORMAL: ClassVar[int] = 0
    BRIGHT: ClassVar[int] = 1
    USED: ClassVar[int] = 2

    x: int
    y: int
    frame: int

    @property
    def source_x(self) -> int:
        return self.frame * FIREBALL_SPRITE_WIDTH


def _trunc_half(value: int) -> int:
    """Halve towards zero, as integer division does in the game's arithmetic."""
    half = abs(value) // 2
    return half if value >= 0 else -half


def heart_sprites(hp: int, maxhp: int) -> list[tuple[HeartKind, tuple[int, int]]]:
    """Return the hearts to draw for the player's health, left to right.

    Each heart stands for two hit points: full hearts first, then a half
    heart for an odd hp, then empty hearts up to half of ``maxhp``.
    """
    full = _trunc_half(hp)
    empty = _trunc_half(maxhp) - full
    half = hp % 2 != 0
    if half:
        empty -= 1
    kinds = [HeartKind.FULL] * max(full, 0)
    if half:
        kinds.append(HeartKind.HALF)
    kinds.extend([HeartKind.EMPTY] * max(empty, 0))
    return [
        (kind, (HEART_START_X + index * HEART_XSPACE, HEART_START_Y))
        for index, kind in enumerate(kinds)
    ]


def coins_text(coins: int) -> str:
    """Return the coin counter text, cut to fit its fixed-size buffer."""
    return f"coins: {coins}"[: COINS_STR_LEN - 1]


def game_name_position(screen_width: int) -> tuple[int, int]:
    """Return where the game name is drawn, aligned to the right of the screen."""
    return (screen_width - GAME_NAME_WIDTH - GAME_NAME_MARGIN, 0)


class FireballBlinker:
    """Animation state of the fireball counter.

    A lit fireball travels along the row of fireballs, then the row rests
    for a while before the next pass.
    """

    def __init__(self) -> None:
        self.blink_tick = 0

    def tick(self, shots_reset: int) -> int:
        """Advance the animation by one frame and return the new tick."""
        self.blink_tick += 1
        if self.blink_tick > (shots_reset + BLINK_TICK_RESET_WAIT) * BLINK_TICK_INC:
            self.blink_tick = 0
        return self.blink_tick

    def layout(
        self, shots: int, shots_reset: int, fireblink_tmr: int
    ) -> list[FireballSprite]:
        """Advance one frame and return the fireballs to draw, left to right.

        ``shots`` fireballs are available out of ``shots_reset``; the rest are
        drawn as used. While ``fireblink_tmr`` is positive every fireball
        not taking part in the blink is drawn lit and lowered by it.
        """
        tick = self.tick(shots_reset)
        i_bob = tick // BLINK_TICK_INC
        i_light = i_bob - 1

        sprites: list[FireballSprite] = []
        x = FIREBALL_START_X
        for i in range(shots):
            if i == i_bob:
                y, frame = FIREBALL_START_Y + BLINK_BOB_Y, FireballSprite.BRIGHT
            elif i == i_light:
                y, frame = FIREBALL_START_Y, FireballSprite.BRIGHT
            elif fireblink_tmr > 0:
                y, frame = FIREBALL_START_Y + fireblink_tmr, FireballSprite.BRIGHT
            else:
                y, frame = FIREBALL_START_Y, FireballSprite.NORMAL
            sprites.append(FireballSprite(x, y, frame))
            x += FIREBALL_XSPACE

        for _ in range(shots_reset - shots):
            sprites.append(FireballSprite(x, FIREBALL_START_Y, FireballSprite.USED))
            x += FIREBALL_XSPACE
        return sprites