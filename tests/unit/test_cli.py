"""Tests for the command-line interface."""
import pytest
from click.testing import CliRunner

from poker_hands.cli import cli
from poker_hands.core.deck import Deck


@pytest.fixture
def runner():
    return CliRunner()


def test_high(runner):
    result = runner.invoke(cli, ['high', '8h9s', '--board', '2d9d2c9h3h'])

    assert result.exit_code == 0
    assert "Strength: 7225" in result.output
    assert "Category: 7" in result.output
    assert "Description: 9s Full of 2s" in result.output


def test_high_sorts_cards(runner):
    result = runner.invoke(cli, ['high', '2sAhKd7c9s'])

    assert result.exit_code == 0
    assert "Cards: Ah Kd 9s 7c 2s" in result.output
    assert "Description: Ace High" in result.output


def test_high_not_enough_cards(runner):
    result = runner.invoke(cli, ['high', 'AsKs'])

    assert result.exit_code == 1
    assert "Set of cards must have at least 5 cards" in result.output


def test_bad_card_string(runner):
    result = runner.invoke(cli, ['high', 'AsKsQsJsXx'])

    assert result.exit_code == 2
    assert "Invalid rank or suit" in result.output


def test_badugi(runner):
    result = runner.invoke(cli, ['badugi', '4hAs3c2d'])

    assert result.exit_code == 0
    assert "Cards: As 2d 3c 4h" in result.output
    assert "Strength: 873" in result.output
    assert "Card count: 4" in result.output


def test_badugi_too_many_cards(runner):
    result = runner.invoke(cli, ['badugi', 'As2d3c4h5s'])

    assert result.exit_code == 1
    assert "Player hand must have at most 4 cards" in result.output


@pytest.mark.parametrize("args,expected", [
    (['9c3s', '8h9s', '--board', '2d9d2c9h3h'], "9c 3s wins"),
    (['8h9s', '9c3s', '--board', '2d9d2c9h3h'], "9c 3s wins"),
    (['AhKh', 'AdKd', '--board', '2c3c7s8sJd'], "Tie"),
    (['As2d3c4h', 'KsQhJdTc', '--type', 'badugi'], "As 2d 3c 4h wins"),
])
def test_compare(runner, args, expected):
    result = runner.invoke(cli, ['compare'] + args)

    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_deal_with_seed(runner):
    result = runner.invoke(cli, ['deal', '--seed', '42', '--count', '7'])

    deck = Deck()
    deck.shuffle(42)
    expected = ' '.join(str(card) for card in deck.deal_cards(7))

    assert result.exit_code == 0
    assert result.output.splitlines() == [expected, "Seed: 42"]


def test_deal_count_limits(runner):
    result = runner.invoke(cli, ['deal', '--count', '53'])
    assert result.exit_code == 2


def test_log_level_option(runner):
    result = runner.invoke(cli, ['--log-level', 'debug', 'deal', '--seed', '1'])
    assert result.exit_code == 0
