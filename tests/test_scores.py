import json
from datetime import datetime

from bullethell.scores import ScoreEntry, ScoreManager

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def test_add_score_keeps_descending_order(tmp_path):
    manager = ScoreManager(tmp_path / "scores.json")
    manager.add_score("a", 100, 1)
    manager.add_score("b", 300, 2)
    manager.add_score("c", 200, 0)
    scores = [entry.score for entry in manager.entries()]
    assert scores == sorted(scores, reverse=True)
    assert [entry.name for entry in manager.entries()] == ["b", "c", "a"]


def test_add_score_saves_file(tmp_path):
    path = tmp_path / "scores.json"
    manager = ScoreManager(path)
    manager.add_score("Player1", 9000, 3)
    stored = json.loads(path.read_text())
    assert stored[0]["name"] == "Player1"
    assert stored[0]["score"] == 9000
    assert stored[0]["level"] == 3
    assert set(stored[0]) == {"name", "score", "level", "timestamp"}


def test_timestamp_format(tmp_path):
    manager = ScoreManager(tmp_path / "scores.json")
    entry = manager.add_score("x", 1, 0)
    parsed = datetime.strptime(entry.timestamp, TIMESTAMP_FORMAT)
    assert parsed.strftime(TIMESTAMP_FORMAT) == entry.timestamp
    assert len(entry.timestamp) == 19
    assert manager.entries()[0].timestamp == entry.timestamp


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "scores.json"
    manager = ScoreManager(path)
    manager.add_score("a", 10, 1)
    manager.add_score("b", 20, 2)
    other = ScoreManager(path)
    other.load()
    assert other.entries() == manager.entries()


def test_save_creates_missing_folders(tmp_path):
    path = tmp_path / "deep" / "nested" / "scores.json"
    manager = ScoreManager(path)
    manager.add_score("a", 5, 0)
    assert path.exists()


def test_load_missing_file_gives_empty_table(tmp_path):
    manager = ScoreManager(tmp_path / "scores.json")
    manager.add_score("a", 5, 0)
    manager.load(tmp_path / "absent.json")
    assert manager.entries() == []


def test_load_damaged_file_gives_empty_table(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("[{broken")
    manager = ScoreManager(path)
    manager.load()
    assert manager.entries() == []


def test_load_fills_missing_fields_with_defaults(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{}]))
    manager = ScoreManager(path)
    manager.load()
    assert manager.entries() == [ScoreEntry("Player", 0, 0, "")]


def test_entries_returns_a_copy(tmp_path):
    manager = ScoreManager(tmp_path / "scores.json")
    manager.add_score("a", 5, 0)
    manager.entries().clear()
    assert len(manager.entries()) == 1