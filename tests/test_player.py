from corabia.card import Card, Suit
from corabia.player import Player


def test_defaults():
    player = Player("ana")
    assert player.name == "ana"
    assert player.level == 1
    assert player.fails == 0
    assert player.attempts == 1
    assert player.cards == []


def test_advance_level():
    player = Player()
    player.advance_level()
    player.advance_level()
    assert player.level == 3


def test_add_and_delete_cards():
    player = Player()
    card = Card(4, Suit.CLUBS)
    player.add_card(card)
    assert player.cards == [card]
    player.delete_cards()
    assert player.cards == []


def test_reset_keeps_fails():
    player = Player()
    player.add_card(Card(9, Suit.HEARTS))
    player.advance_level()
    player.increment_fails()
    player.reset()
    assert player.level == 1
    assert player.cards == []
    assert player.fails == 1
    assert player.attempts == 2


def test_reset_fails():
    player = Player()
    player.increment_fails()
    player.increment_fails()
    player.reset_fails()
    assert player.fails == 0


def test_players_do_not_share_cards():
    first, second = Player(), Player()
    first.add_card(Card(2, Suit.SPADES))
    assert second.cards == []