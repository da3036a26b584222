import json

from deskmenu.state import load_usage, record_launch, save_usage


def test_missing_file_is_empty(tmp_path):
    assert load_usage(tmp_path / "usage.json") == {}


def test_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "usage.json"
    path.write_text("{not json")
    assert load_usage(path) == {}
    path.write_text("[1, 2]")
    assert load_usage(path) == {}


def test_non_integer_counts_are_dropped(tmp_path):
    path = tmp_path / "usage.json"
    path.write_text(json.dumps({"a": 2, "b": "3", "c": True, "d": 1.5}))
    assert load_usage(path) == {"a": 2}


def test_record_and_save(tmp_path):
    path = tmp_path / "nested" / "usage.json"
    usage = {}
    record_launch(usage, "firefox")
    record_launch(usage, "firefox")
    record_launch(usage, "vim")
    save_usage(path, usage)
    assert load_usage(path) == {"firefox": 2, "vim": 1}
