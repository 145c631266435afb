import json

from content.defaults import default_profile_data
from content.snapshot import SNAPSHOT_KEY, SnapshotStore


def test_missing_snapshot_serves_defaults(snapshot_path):
    store = SnapshotStore()
    assert not store.exists()
    assert store.load() is None
    assert store.get_profile_data() == default_profile_data()


def test_save_writes_wrapped_document(snapshot_path):
    store = SnapshotStore()
    data = default_profile_data()
    data["about"]["name"] = "Ada"
    store.save(data)

    with open(snapshot_path, encoding="utf-8") as f:
        raw = json.load(f)
    assert raw[SNAPSHOT_KEY]["about"]["name"] == "Ada"
    assert store.load()["about"]["name"] == "Ada"


def test_update_section_leaves_other_sections(snapshot_path):
    store = SnapshotStore()
    original = default_profile_data()
    original["contact"]["email"] = "me@example.org"
    store.save(original)

    store.update_section("settings", {"resumeLink": "https://example.org/cv.pdf"})

    loaded = store.load()
    assert loaded["settings"] == {"resumeLink": "https://example.org/cv.pdf"}
    assert loaded["contact"]["email"] == "me@example.org"
    assert loaded["projects"] == original["projects"]


def test_corrupt_snapshot_is_treated_as_missing(snapshot_path, tmp_path):
    store = SnapshotStore(tmp_path / "broken.json")
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() is None
    assert store.get_profile_data() == default_profile_data()


def test_clear_removes_file(snapshot_path):
    store = SnapshotStore()
    store.save(default_profile_data())
    assert store.exists()
    store.clear()
    assert not store.exists()
    store.clear()
