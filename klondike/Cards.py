from dataclasses import dataclass
from enum import Enum

from klondike.Errors import ContractViolation


class Suit(Enum):
    # Bridge order plus jokers; value is (letter, unicode symbol)
    CLUBS = ("C", "♧")
    DIAMONDS = ("D", "♦")
    HEARTS = ("H", "♥")
    SPADES = ("S", "♤")
    JOKER = ("*", "*")

    def symbol(self, symbols="unicode"):
        letter, glyph = self.value
        if symbols == "letters":
            return letter
        return glyph

    def isRed(self):
        if self is Suit.JOKER:
            raise ContractViolation("Suit color should not be used with Jokers")
        return self in (Suit.DIAMONDS, Suit.HEARTS)


PLAYING_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS)


class Rank(Enum):
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    def toInt(self):
        return self.value

    def shortString(self):
        return RANK_STRINGS[self.value]


RANK_STRINGS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    def isRed(self):
        return self.suit.isRed()

    def opposingColor(self, other):
        return self.isRed() != other.isRed()

    def shortString(self, symbols="unicode"):
        return self.suit.symbol(symbols) + " " + self.rank.shortString()

    def __str__(self):
        return self.shortString()


def newDeck():
    """
    Builds the 52 playing cards, suit by suit from Ace to King. No jokers.
    """
    return [Card(suit, rank) for suit in PLAYING_SUITS for rank in Rank]
