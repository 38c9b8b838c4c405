"""Tests for key-value store backends."""
import json
from key_value_store import JsonFileStore, MemoryStore


def test_memory_store_roundtrip():
    """Test reading back a stored value."""
    store = MemoryStore()

    assert store.get_item("lastCity") is None
    store.set_item("lastCity", "Paris")
    assert store.get_item("lastCity") == "Paris"
    assert store.writes == 1


def test_json_file_store_creates_file(tmp_path):
    """Test that the first write creates the file and parent directory."""
    path = tmp_path / "nested" / "store.json"
    store = JsonFileStore(str(path))

    assert store.get_item("lastCity") is None
    store.set_item("lastCity", "Paris")

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == {"lastCity": "Paris"}


def test_json_file_store_persists_between_instances(tmp_path):
    """Test that values survive a new session."""
    path = str(tmp_path / "store.json")
    JsonFileStore(path).set_item("recentSearches", '["Paris"]')

    assert JsonFileStore(path).get_item("recentSearches") == '["Paris"]'


def test_json_file_store_corrupt_file(tmp_path):
    """Test that a corrupt file starts empty and is overwritten on write."""
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileStore(str(path))
    assert store.get_item("lastCity") is None

    store.set_item("lastCity", "Oslo")
    assert json.loads(path.read_text(encoding="utf-8")) == {"lastCity": "Oslo"}


def test_json_file_store_non_object(tmp_path):
    """Test that a JSON file that is not an object starts empty."""
    path = tmp_path / "store.json"
    path.write_text('["Paris"]', encoding="utf-8")

    assert JsonFileStore(str(path)).get_item("0") is None
