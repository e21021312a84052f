import json

import pytest

from bullethell.levels import EnemyWave, LevelData, load_level


def write(tmp_path, content):
    path = tmp_path / "lvl.json"
    path.write_text(json.dumps(content))
    return path


def test_full_level_is_read(tmp_path):
    path = write(
        tmp_path,
        {
            "backgroundTexture": "bg.png",
            "musicTrack": "song.ogg",
            "enemyWaves": [
                {"enemyType": "grunt", "count": 5, "spawnDelay": 0.5, "startTime": 2},
                {"enemyType": "turret", "count": 1},
            ],
        },
    )
    level = load_level(path)
    assert level.background_texture == "bg.png"
    assert level.music_track == "song.ogg"
    assert level.waves[0] == EnemyWave("grunt", 5, 0.5, 2.0)
    assert level.waves[1] == EnemyWave("turret", 1, 1.0, 0.0)


def test_wave_defaults(tmp_path):
    level = load_level(write(tmp_path, {"enemyWaves": [{}]}))
    assert level.waves == [EnemyWave("", 0, 1.0, 0.0)]


def test_level_without_waves(tmp_path):
    level = load_level(write(tmp_path, {"backgroundTexture": "bg.png"}))
    assert level.waves == []
    assert level.music_track == ""


def test_missing_file_gives_empty_level(tmp_path):
    assert load_level(tmp_path / "absent.json") == LevelData()


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_level(path)