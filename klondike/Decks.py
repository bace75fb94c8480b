from enum import Enum

from klondike.Errors import ContractViolation


class DeckType(Enum):
    STOCK = "stock"
    WASTE = "waste"
    STACK = "stack"
    COLUMN = "column"


class Deck:
    """
    An ordered pile of cards. Index 0 is the bottom card, the last index is the top card.

    Only columns keep face-down cards: the first ``invisibleCards`` cards are hidden, the rest are visible.
    """

    def __init__(self, deckType: DeckType, cards=None, invisibleCards=0):
        self.deckType = deckType
        self.cards = list(cards or [])
        self.invisibleCards = 0
        self.setInvisibleCards(invisibleCards)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __getitem__(self, idx):
        return self.cards[idx]

    def __repr__(self):
        return f"Deck({self.deckType.name}, {self.cards!r}, invisible={self.invisibleCards})"

    def setInvisibleCards(self, count):
        if count < 0 or count > len(self.cards):
            raise ContractViolation(f"invisible count {count} out of range for {len(self.cards)} cards")
        if count > 0 and self.deckType is not DeckType.COLUMN:
            raise ContractViolation("only columns hold invisible cards")
        self.invisibleCards = count

    def isEmpty(self):
        return len(self.cards) == 0

    def top(self):
        if len(self.cards) == 0:
            return None
        return self.cards[-1]

    def lastIndex(self):
        return len(self.cards) - 1

    def visibleCount(self):
        return len(self.cards) - self.invisibleCards

    def isVisible(self, idx):
        return self.invisibleCards <= idx < len(self.cards)

    def takeFrom(self, idx):
        """
        Removes and returns the cards from ``idx`` to the top, keeping their order.
        """
        taken = self.cards[idx:]
        del self.cards[idx:]
        return taken

    def extend(self, cards):
        self.cards.extend(cards)

    def append(self, card):
        self.cards.append(card)

    def pop(self, idx=-1):
        return self.cards.pop(idx)

    def insert(self, idx, card):
        self.cards.insert(idx, card)
