"""Resource directories and the textures, sounds and music the game loads."""

from __future__ import annotations

from pathlib import Path

RES_PATH_MAX = 100
"""Maximum size of a resource path, including its terminator."""

DIR_WORK = "."
DIR_RES = DIR_WORK + "/res"
DIR_GFX = DIR_RES + "/gfx"
DIR_MAP = DIR_RES + "/map"
DIR_MUS = DIR_RES + "/mus"
DIR_SND = DIR_RES + "/snd"
DIR_SAVE = DIR_RES + "/sav"

TEXTURE_NAMES: tuple[str, ...] = (
    "tileset",
    "egg",
    "evilegg",
    "coolegg",
    "fireball",
    "particle",
    "trumpet",
    "heart",
    "font",
    "cloud",
    "turret",
    "cakico",
    "barrier",
)

SOUND_NAMES: tuple[str, ...] = ("step", "shoot", "splode", "bubble", "coin")

MUSIC_NAMES: tuple[str, ...] = ("egg06", "grianduineog")

STARTUP_MUSIC = "egg06"

MIX_SAMPLE_RATE = 44100

TEXTURE_COLOR_MODS: dict[str, tuple[int, int, int]] = {
    "font": (0xFF, 0x00, 0x00),
    "barrier": (0xB6, 0x0F, 0xFF),
}
"""Colour modulation applied to some textures after loading."""

WINDOW_ICON = DIR_GFX + "/cakico.png"


def res_path(directory: str, name: str) -> str:
    """Join a resource directory and a file name.

    Raises ValueError if the result does not fit in a resource path.
    """
    path = f"{directory}/{name}"
    if len(path) >= RES_PATH_MAX:
        raise ValueError(f"resource path longer than {RES_PATH_MAX - 1} chars: {path!r}")
    return path


def texture_files() -> dict[str, str]:
    """Map each texture name to its image path, in loading order."""
    return {name: res_path(DIR_GFX, f"{name}.png") for name in TEXTURE_NAMES}


def sound_files() -> dict[str, str]:
    """Map each sound effect name to its wave file path, in loading order."""
    return {name: res_path(DIR_SND, f"{name}.wav") for name in SOUND_NAMES}


def music_files() -> dict[str, str]:
    """Map each music name to its module file path, in loading order."""
    return {name: res_path(DIR_MUS, f"{name}.xm") for name in MUSIC_NAMES}


def missing_assets(root: str | Path) -> list[str]:
    """Return the resource paths, in loading order, that do not exist under ``root``."""
    base = Path(root)
    wanted = [
        *texture_files().values(),
        *sound_files().values(),
        *music_files().values(),
    ]
    return [path for path in wanted if not (base / path).is_file()]