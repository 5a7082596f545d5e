"""Tests for evaluation configuration loading."""
import json
import logging

import pytest

from poker_hands.core.card import Card
from poker_hands.evaluation.evaluation_config import (
    ConfigError, EvaluationConfigLoader, get_evaluation_config
)
from poker_hands.evaluation.evaluator import EvaluationType
from poker_hands.evaluation.eval_types.badugi import BadugiEvaluator


def write_config(directory, name, data):
    path = directory / f"{name}.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


def valid_config(**overrides):
    data = {
        "id": "test",
        "name": "Test",
        "min_cards": 2,
        "max_cards": 3,
    }
    data.update(overrides)
    return data


def test_bundled_configs():
    high = get_evaluation_config("high")
    badugi = get_evaluation_config("badugi")

    assert (high.min_cards, high.max_cards, high.uses_board) == (5, 7, True)
    assert high.rank_order == "BASE_RANKS"
    assert (badugi.min_cards, badugi.max_cards, badugi.uses_board) == (4, 4, False)
    assert badugi.rank_order == "BADUGI_RANKS"


@pytest.mark.parametrize("eval_type", list(EvaluationType))
def test_every_evaluation_type_has_config(eval_type):
    assert EvaluationType.validate_with_config(eval_type)


def test_defaults_applied(tmp_path):
    write_config(tmp_path, "test", valid_config())
    config = EvaluationConfigLoader(tmp_path).get_config("test")

    assert config.description == ""
    assert config.uses_board is True
    assert config.rank_order == "BASE_RANKS"


def test_configs_keyed_by_filename(tmp_path):
    write_config(tmp_path, "first", valid_config(id="first"))
    write_config(tmp_path, "second", valid_config(id="second"))

    configs = EvaluationConfigLoader(tmp_path).get_all_configs()
    assert sorted(configs) == ["first", "second"]


def test_unknown_type_returns_none(tmp_path):
    write_config(tmp_path, "test", valid_config())
    assert EvaluationConfigLoader(tmp_path).get_config("missing") is None


def test_missing_directory(tmp_path):
    loader = EvaluationConfigLoader(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        loader.load_all_configs()


def test_empty_directory_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert EvaluationConfigLoader(tmp_path).get_all_configs() == {}
    assert "No JSON configuration files" in caplog.text


@pytest.mark.parametrize("data", [
    "{not json",
    valid_config(id="bad", min_cards=0),
    valid_config(id="bad", rank_order="LOW_RANKS"),
    valid_config(id="bad", uses_board="yes"),
    {"id": "bad", "name": "Test", "min_cards": 2},
    valid_config(id="bad", min_cards=5, max_cards=4),
    valid_config(id="other"),
])
def test_invalid_config_raises(tmp_path, data):
    path = write_config(tmp_path, "bad", data)
    with pytest.raises(ConfigError):
        EvaluationConfigLoader(tmp_path)._load_config_file(path)


def test_invalid_file_skipped(tmp_path, caplog):
    write_config(tmp_path, "good", valid_config(id="good"))
    write_config(tmp_path, "bad", valid_config(id="bad", max_cards="many"))

    with caplog.at_level(logging.ERROR):
        configs = EvaluationConfigLoader(tmp_path).get_all_configs()

    assert list(configs) == ["good"]
    assert "bad.json" in caplog.text


def test_evaluator_without_config(tmp_path, monkeypatch):
    from poker_hands.evaluation.eval_types import base

    monkeypatch.setattr(base, "evaluation_config_loader", EvaluationConfigLoader(tmp_path))
    with pytest.raises(ConfigError):
        BadugiEvaluator()


def test_evaluator_uses_config_rank_order():
    evaluator = BadugiEvaluator()
    cards = Card.list_from_string("KsAh5d2c")
    assert [str(c) for c in evaluator.sort_cards(cards)] == ["Ah", "2c", "5d", "Ks"]
