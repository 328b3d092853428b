"""Tests for ClassifierConfig."""

import pytest

from emojimirror.config import ClassifierConfig, DEFAULT_MIN_SCORE, DEFAULT_THRESHOLDS
from emojimirror.types import ExpressionCategory


class TestClassifierConfig:
    def test_defaults(self):
        config = ClassifierConfig()
        assert config.thresholds == {
            "smile": 0.25,
            "surprise": 0.28,
            "frown": 0.20,
            "cheeky": 0.22,
        }
        assert config.min_score == 0.15

    def test_defaults_not_shared(self):
        config = ClassifierConfig()
        config.thresholds["smile"] = 0.9
        assert DEFAULT_THRESHOLDS["smile"] == 0.25
        assert ClassifierConfig().thresholds["smile"] == 0.25

    def test_partial_thresholds_keep_defaults(self):
        config = ClassifierConfig(thresholds={"smile": 0.3})
        assert config.threshold(ExpressionCategory.SMILE) == 0.3
        assert config.threshold(ExpressionCategory.FROWN) == 0.20

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError, match="Unknown threshold category"):
            ClassifierConfig(thresholds={"wink": 0.3})

    def test_neutral_has_no_threshold(self):
        with pytest.raises(ValueError):
            ClassifierConfig(thresholds={"neutral": 0.1})

    def test_from_dict(self):
        config = ClassifierConfig.from_dict({"thresholds": {"cheeky": "0.3"}, "min_score": 0.2})
        assert config.thresholds["cheeky"] == 0.3
        assert config.min_score == 0.2

    def test_from_empty_dict(self):
        config = ClassifierConfig.from_dict({})
        assert config.thresholds == DEFAULT_THRESHOLDS
        assert config.min_score == DEFAULT_MIN_SCORE

    def test_to_dict_roundtrip(self):
        config = ClassifierConfig(thresholds={"frown": 0.18}, min_score=0.12)
        restored = ClassifierConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "classifier.yaml"
        path.write_text("thresholds:\n  smile: 0.35\n  surprise: 0.3\nmin_score: 0.1\n")
        config = ClassifierConfig.from_yaml(str(path))
        assert config.thresholds["smile"] == 0.35
        assert config.thresholds["surprise"] == 0.3
        assert config.thresholds["frown"] == 0.20
        assert config.min_score == 0.1

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ClassifierConfig.from_yaml(str(path)) == ClassifierConfig()

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ClassifierConfig.from_yaml(str(tmp_path / "nope.yaml"))
