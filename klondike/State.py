import time

from klondike.Decks import Deck, DeckType

COLUMN_NAMES = ("A", "B", "C", "D", "E", "F", "G")
STACK_NAMES = ("SA", "SB", "SC", "SD")
STOCK_NAME = "O"


class GameState:
    """
    All containers and bookkeeping of one game.

    It is only mutated by the apply/revert methods of the moves in ``klondike.Moves``.
    """

    def __init__(self, startTime=None):
        self.columns = {name: Deck(DeckType.COLUMN) for name in COLUMN_NAMES}
        self.stackPiles = {name: Deck(DeckType.STACK) for name in STACK_NAMES}
        self.stock = Deck(DeckType.STOCK)
        self.waste = Deck(DeckType.WASTE)

        self.moves = []  # applied moves in execution order
        self.baseScore = 0
        self.timeScore = 0
        self.startTime = time.time() if startTime is None else startTime
        self.endTime = None
        self.stockCycles = 0
        self.gameWon = False

    @property
    def score(self):
        return self.baseScore + self.timeScore

    def allDecks(self):
        decks = [self.stock, self.waste]
        decks.extend(self.stackPiles.values())
        decks.extend(self.columns.values())
        return decks

    def allCards(self):
        cards = []
        for deck in self.allDecks():
            cards.extend(deck.cards)
        return cards

    def elapsedSeconds(self, now=None):
        end = self.endTime
        if end is None:
            end = time.time() if now is None else now
        return max(0, int(end - self.startTime))

    def nameOf(self, deck):
        if deck is self.stock:
            return STOCK_NAME
        if deck is self.waste:
            return "waste"
        for name, d in self.stackPiles.items():
            if d is deck:
                return name
        for name, d in self.columns.items():
            if d is deck:
                return name
        return "?"
