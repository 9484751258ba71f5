import dataclasses

import pytest

from corabia.card import Card, Suit


@pytest.mark.parametrize(
    "value, suit, expected",
    [
        (11, Suit.HEARTS, "J [Hearts]"),
        (12, Suit.DIAMONDS, "Q [Diamonds]"),
        (13, Suit.CLUBS, "K [Clubs]"),
        (14, Suit.SPADES, "A [Spades]"),
        (7, Suit.CLUBS, "7 [Clubs]"),
    ],
)
def test_str(value, suit, expected):
    assert str(Card(value, suit)) == expected


@pytest.mark.parametrize(
    "suit, color",
    [
        (Suit.HEARTS, "red"),
        (Suit.DIAMONDS, "red"),
        (Suit.CLUBS, "black"),
        (Suit.SPADES, "black"),
    ],
)
def test_color(suit, color):
    assert Card(5, suit).color == color


def test_suit_from_string():
    card = Card(3, "Spades")
    assert card.suit is Suit.SPADES
    assert card.suit == "Spades"


def test_unknown_suit_rejected():
    with pytest.raises(ValueError):
        Card(3, "Stars")


def test_card_is_immutable():
    card = Card(2, Suit.HEARTS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.value = 9
    assert card.value == 2
    assert str(card) == "2 [Hearts]"


def test_equality():
    assert Card(10, Suit.CLUBS) == Card(10, "Clubs")