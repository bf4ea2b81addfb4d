import pytest

from soupdl.hud import (
    BLINK_BOB_Y,
    BLINK_TICK_INC,
    BLINK_TICK_RESET_WAIT,
    COINS_STR_LEN,
    FIREBALL_START_X,
    FIREBALL_START_Y,
    FIREBALL_XSPACE,
    GAME_NAME_MARGIN,
    GAME_NAME_WIDTH,
    HEART_START_X,
    HEART_START_Y,
    HEART_XSPACE,
    FireballBlinker,
    FireballSprite,
    HeartKind,
    coins_text,
    game_name_position,
    heart_sprites,
)


def test_full_health_is_all_full_hearts():
    hearts = heart_sprites(8, 8)
    assert [kind for kind, _ in hearts] == [HeartKind.FULL] * 4


def test_odd_health_draws_a_half_heart():
    hearts = heart_sprites(5, 8)
    assert [kind for kind, _ in hearts] == [
        HeartKind.FULL,
        HeartKind.FULL,
        HeartKind.HALF,
        HeartKind.EMPTY,
    ]


def test_no_health_is_all_empty_hearts():
    hearts = heart_sprites(0, 6)
    assert [kind for kind, _ in hearts] == [HeartKind.EMPTY] * 3


@pytest.mark.parametrize("hp", range(0, 11))
def test_heart_count_is_half_of_max_hp(hp):
    assert len(heart_sprites(hp, 10)) == 5


def test_heart_positions_step_right():
    hearts = heart_sprites(3, 6)
    positions = [pos for _, pos in hearts]
    assert positions == [
        (HEART_START_X + i * HEART_XSPACE, HEART_START_Y) for i in range(3)
    ]


def test_heart_source_columns_are_distinct():
    sources = [kind.source_x for kind, _ in heart_sprites(5, 8)]
    assert sources == sorted(sources)
    assert len(set(sources)) == 3


def test_coins_text_small_count():
    assert coins_text(5) == "coins: 5"


def test_coins_text_is_cut_to_buffer():
    assert coins_text(100) == "coins: 10"
    assert len(coins_text(123456)) == COINS_STR_LEN - 1


def test_game_name_is_right_aligned():
    x, y = game_name_position(800)
    assert y == 0
    assert x + GAME_NAME_WIDTH + GAME_NAME_MARGIN == 800


def test_blink_tick_counts_up_then_wraps():
    blinker = FireballBlinker()
    limit = (3 + BLINK_TICK_RESET_WAIT) * BLINK_TICK_INC
    values = [blinker.tick(3) for _ in range(limit + 1)]
    assert values[:-1] == list(range(1, limit + 1))
    assert values[-1] == 0


def test_first_frame_lights_and_bobs_first_fireball():
    sprites = FireballBlinker().layout(3, 3, 0)
    assert sprites[0] == FireballSprite(
        FIREBALL_START_X, FIREBALL_START_Y + BLINK_BOB_Y, FireballSprite.BRIGHT
    )
    assert all(s.frame == FireballSprite.NORMAL for s in sprites[1:])
    assert all(s.y == FIREBALL_START_Y for s in sprites[1:])


def test_used_fireballs_follow_available_ones():
    sprites = FireballBlinker().layout(1, 3, 0)
    assert [s.frame for s in sprites[1:]] == [FireballSprite.USED] * 2
    assert [s.x for s in sprites] == [
        FIREBALL_START_X + i * FIREBALL_XSPACE for i in range(3)
    ]


def test_fireblink_timer_lights_and_lowers_the_rest():
    sprites = FireballBlinker().layout(3, 3, 3)
    for sprite in sprites[1:]:
        assert sprite.frame == FireballSprite.BRIGHT
        assert sprite.y == FIREBALL_START_Y + 3


def test_light_moves_along_the_row():
    blinker = FireballBlinker()
    for _ in range(BLINK_TICK_INC - 1):
        blinker.layout(3, 3, 0)
    sprites = blinker.layout(3, 3, 0)
    assert sprites[0].frame == FireballSprite.BRIGHT
    assert sprites[0].y == FIREBALL_START_Y
    assert sprites[1].y == FIREBALL_START_Y + BLINK_BOB_Y
    assert sprites[2].frame == FireballSprite.NORMAL