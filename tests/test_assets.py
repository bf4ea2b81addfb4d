from pathlib import Path

import pytest

from soupdl.assets import (
    DIR_GFX,
    DIR_MUS,
    DIR_SND,
    MUSIC_NAMES,
    RES_PATH_MAX,
    SOUND_NAMES,
    TEXTURE_NAMES,
    WINDOW_ICON,
    missing_assets,
    music_files,
    res_path,
    sound_files,
    texture_files,
)


def test_directories():
    assert res_path(DIR_GFX, "a.png") == "./res/gfx/a.png"
    assert res_path(DIR_SND, "a.wav") == "./res/snd/a.wav"
    assert res_path(DIR_MUS, "a.xm") == "./res/mus/a.xm"


def test_res_path_joins():
    assert res_path(DIR_GFX, "egg.png") == DIR_GFX + "/egg.png"


def test_res_path_too_long_raises():
    with pytest.raises(ValueError):
        res_path(DIR_GFX, "x" * RES_PATH_MAX)


def test_texture_files_in_order():
    files = texture_files()
    assert tuple(files) == TEXTURE_NAMES
    assert files["tileset"] == DIR_GFX + "/tileset.png"
    assert all(path.endswith(".png") for path in files.values())


def test_window_icon_is_a_texture():
    assert WINDOW_ICON in texture_files().values()


def test_sound_files():
    files = sound_files()
    assert tuple(files) == SOUND_NAMES
    assert all(path.startswith(DIR_SND + "/") and path.endswith(".wav") for path in files.values())


def test_music_files():
    files = music_files()
    assert tuple(files) == MUSIC_NAMES
    assert files["egg06"] == DIR_MUS + "/egg06.xm"


def test_missing_assets_all_missing(tmp_path):
    missing = missing_assets(tmp_path)
    expected = [*texture_files().values(), *sound_files().values(), *music_files().values()]
    assert missing == expected


def test_missing_assets_none_missing(tmp_path):
    for group in (texture_files(), sound_files(), music_files()):
        for path in group.values():
            target = tmp_path / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"")
    assert missing_assets(tmp_path) == []


def test_missing_assets_reports_only_absent(tmp_path):
    for path in texture_files().values():
        target = Path(tmp_path) / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"")
    missing = missing_assets(str(tmp_path))
    assert missing == [*sound_files().values(), *music_files().values()]