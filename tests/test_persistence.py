"""Tests for baseline persistence (JSON save/load)."""

import json

import pytest

from emojimirror.baseline import BaselineStore
from emojimirror.persistence import load_baseline, save_baseline


class TestSaveLoad:
    def test_roundtrip(self, tmp_path, make_vector):
        store = BaselineStore()
        store.calibrate(make_vector(seed=7, scale=0.3))

        path = tmp_path / "baseline.json"
        save_baseline(store, path)
        loaded = load_baseline(path)

        assert loaded.is_calibrated
        assert dict(loaded.get_baseline()) == pytest.approx(dict(store.get_baseline()))

    def test_save_plain_vector(self, tmp_path):
        path = tmp_path / "nested" / "baseline.json"
        save_baseline({"jawOpen": 0.1}, path)
        assert load_baseline(path).get_baseline()["jawOpen"] == 0.1

    def test_uncalibrated_roundtrip(self, tmp_path, store):
        path = tmp_path / "baseline.json"
        save_baseline(store, path)

        with open(path) as f:
            data = json.load(f)
        assert data["baseline"] is None
        assert data["_version"]["app"] == "emojimirror"

        assert not load_baseline(path).is_calibrated

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_baseline(tmp_path / "missing.json")

    def test_invalid_baseline(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"baseline": [0.1, 0.2]}))
        with pytest.raises(ValueError):
            load_baseline(path)

    def test_top_level_not_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(ValueError, match="expected a JSON object"):
            load_baseline(path)

    def test_null_score(self, tmp_path):
        path = tmp_path / "null_score.json"
        path.write_text(json.dumps({"baseline": {"jawOpen": None}}))
        with pytest.raises(ValueError, match="non-numeric score"):
            load_baseline(path)

    def test_text_score(self, tmp_path):
        path = tmp_path / "text_score.json"
        path.write_text(json.dumps({"baseline": {"jawOpen": "wide"}}))
        with pytest.raises(ValueError, match="non-numeric score"):
            load_baseline(path)
