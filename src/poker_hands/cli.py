"""Command-line interface for hand evaluation."""

import logging

import click

from poker_hands.core.card import Card
from poker_hands.core.deck import Deck
from poker_hands.evaluation.errors import EvaluatorError
from poker_hands.evaluation.evaluator import EvaluationType, HandEvaluator


def parse_cards(ctx, param, value):
    """Click callback turning '2d9d2c' into a list of cards."""
    if value is None:
        return []
    try:
        return Card.list_from_string(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def format_cards(cards) -> str:
    return ' '.join(str(card) for card in cards)


@click.group()
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Poker hand ranking tools."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    ctx.obj = HandEvaluator()


@cli.command()
@click.argument('hand', callback=parse_cards)
@click.option('--board', callback=parse_cards, help='Community cards, e.g. 2d9d2c9h3h')
@click.pass_obj
def high(evaluator, hand, board):
    """Rank a five to seven card high hand."""
    try:
        rank = evaluator.evaluate_hand(hand, EvaluationType.HIGH, board)
    except EvaluatorError as e:
        raise click.ClickException(str(e))

    click.echo(f"Cards: {format_cards(evaluator.get_evaluator(EvaluationType.HIGH).sort_cards(hand + board))}")
    click.echo(f"Strength: {rank.strength}")
    click.echo(f"Category: {rank.category}")
    click.echo(f"Sub rank: {rank.sub_rank}")
    click.echo(f"Description: {rank.description}")


@cli.command()
@click.argument('hand', callback=parse_cards)
@click.pass_obj
def badugi(evaluator, hand):
    """Rank a four card Badugi hand."""
    try:
        rank = evaluator.evaluate_hand(hand, EvaluationType.BADUGI)
    except EvaluatorError as e:
        raise click.ClickException(str(e))

    click.echo(f"Cards: {format_cards(evaluator.get_evaluator(EvaluationType.BADUGI).sort_cards(hand))}")
    click.echo(f"Strength: {rank.strength}")
    click.echo(f"Card count: {rank.category}")
    click.echo(f"Sub rank: {rank.sub_rank}")


@cli.command()
@click.argument('hand1', callback=parse_cards)
@click.argument('hand2', callback=parse_cards)
@click.option('--board', callback=parse_cards, help='Community cards shared by both hands')
@click.option('--type', 'eval_type', default='high', show_default=True,
              type=click.Choice([t.value for t in EvaluationType]), help='Evaluation type')
@click.pass_obj
def compare(evaluator, hand1, hand2, board, eval_type):
    """Compare two hands."""
    try:
        result = evaluator.compare_hands(hand1, hand2, EvaluationType(eval_type), board)
    except EvaluatorError as e:
        raise click.ClickException(str(e))

    if result > 0:
        click.echo(f"{format_cards(hand1)} wins")
    elif result < 0:
        click.echo(f"{format_cards(hand2)} wins")
    else:
        click.echo("Tie")


@cli.command()
@click.option('--seed', type=int, default=None, help='Shuffle seed for a repeatable deal')
@click.option('--count', type=click.IntRange(1, 52), default=5, show_default=True,
              help='Number of cards to deal')
def deal(seed, count):
    """Deal cards from a freshly shuffled deck."""
    deck = Deck()
    used = deck.shuffle(seed)
    click.echo(format_cards(deck.deal_cards(count)))
    click.echo(f"Seed: {used}")


if __name__ == '__main__':
    cli()
