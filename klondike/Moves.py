from dataclasses import dataclass
from typing import Union

from klondike import Rules
from klondike.Cards import Card
from klondike.Decks import Deck, DeckType
from klondike.Errors import ContractViolation, IllegalMove, MoveSyntaxError
from klondike.State import GameState, STOCK_NAME

CREATED = "created"
APPLIED = "applied"
REVERTED = "reverted"

CYCLE_PENALTY = -100


@dataclass(frozen=True)
class TransferRequest:
    source: str
    destination: str


@dataclass(frozen=True)
class CycleRequest:
    pass


MoveRequest = Union[TransferRequest, CycleRequest]


def parseRequest(text: str) -> MoveRequest:
    """
    Turns player input such as ``"m c3 sa"`` or ``"c"`` into a move request.
    """
    parts = text.upper().split()
    if len(parts) == 0:
        raise MoveSyntaxError("Empty command. Type H for help.")
    command = parts[0]
    if command == "M":
        if len(parts) != 3:
            raise MoveSyntaxError("A move needs a source and a destination, e.g. \"M C3 SA\".")
        return TransferRequest(parts[1], parts[2])
    if command == "C":
        if len(parts) != 1:
            raise MoveSyntaxError("Cycling the stock takes no arguments.")
        return CycleRequest()
    raise MoveSyntaxError(f"Unknown command \"{command}\". Type H for help.", command)


@dataclass(frozen=True)
class TransferRecord:
    source: Deck
    destination: Deck
    destinationIndex: int
    movedCards: tuple[Card, ...]
    exposedCard: bool
    previousScore: int


@dataclass(frozen=True)
class CycleRecord:
    branch: str
    previousCycles: int
    previousScore: int


class RevertibleMove:
    """
    A single-use command: created, then applied once, then optionally reverted once.
    """

    def __init__(self):
        self.status = CREATED
        self.record = None

    def apply(self, gameState: GameState) -> str:
        pass

    def revert(self, gameState: GameState):
        pass

    def _checkApplicable(self):
        if self.status != CREATED:
            raise ContractViolation(f"{type(self).__name__} is {self.status} and can't be applied again")

    def _popHistory(self, gameState: GameState):
        if self.status != APPLIED:
            raise ContractViolation(f"{type(self).__name__} is {self.status} and can't be reverted")
        if len(gameState.moves) == 0 or gameState.moves[-1] is not self:
            raise ContractViolation("Only the most recent move can be reverted")
        gameState.moves.pop()
        self.status = REVERTED


class MoveCard(RevertibleMove):
    """
    Moves one card, or a run of column cards, from a source location to a destination location.

    The source token is the stock ``O``, a stack pile ``SA``..``SD`` or a column coordinate such as ``C3``
    (column C, row 3). The destination token is a stack pile or a column letter.
    """

    def __init__(self, source: str, destination: str, symbols="unicode"):
        super().__init__()
        self.source = source
        self.destination = destination
        self.symbols = symbols

    def __str__(self):
        return f"Move {self.source} {self.destination}"

    def apply(self, gameState: GameState) -> str:
        self._checkApplicable()
        Rules.validateInputSyntax(self.source, self.destination)

        sourceDeck, cardIndex = self._resolveSource(gameState)
        destinationDeck = self._resolveDestination(gameState)

        Rules.validateContainerLevel(sourceDeck, cardIndex, destinationDeck)
        Rules.validateCardLevel(destinationDeck, sourceDeck[cardIndex])

        destinationIndex = len(destinationDeck)
        moved = sourceDeck.takeFrom(cardIndex)
        destinationDeck.extend(moved)

        exposed = False
        if sourceDeck.deckType is DeckType.COLUMN and sourceDeck.invisibleCards > 0 \
                and len(sourceDeck) == sourceDeck.invisibleCards:
            sourceDeck.setInvisibleCards(sourceDeck.invisibleCards - 1)
            exposed = True

        previousScore = gameState.baseScore
        gameState.baseScore += scoreDelta(sourceDeck.deckType, destinationDeck.deckType, exposed)

        self.record = TransferRecord(
            source=sourceDeck,
            destination=destinationDeck,
            destinationIndex=destinationIndex,
            movedCards=tuple(moved),
            exposedCard=exposed,
            previousScore=previousScore,
        )
        gameState.moves.append(self)
        self.status = APPLIED

        cards = ", ".join(card.shortString(self.symbols) for card in moved)
        return f"Moved [{cards}] from {self.source} to {self.destination}"

    def revert(self, gameState: GameState):
        self._popHistory(gameState)
        record = self.record
        cards = record.destination.takeFrom(record.destinationIndex)
        if tuple(cards) != record.movedCards:
            raise ContractViolation("Destination deck changed since the move was applied")
        record.source.extend(cards)
        if record.exposedCard:
            record.source.setInvisibleCards(record.source.invisibleCards + 1)
        gameState.baseScore = record.previousScore

    def _resolveSource(self, gameState: GameState):
        token = self.source
        if Rules.isColumnCoordinate(token):
            column = gameState.columns[token[0]]
            row = int(token[1:])
            if row >= len(column):
                raise IllegalMove(f"Column {token[0]} has no card {row}")
            return column, row
        if token == STOCK_NAME:
            deck = gameState.stock
        else:
            deck = gameState.stackPiles[token]
        return deck, deck.lastIndex()

    def _resolveDestination(self, gameState: GameState) -> Deck:
        token = self.destination
        if token in gameState.columns:
            return gameState.columns[token]
        return gameState.stackPiles[token]


DRAW = "draw"
LAST_CARD = "last_card"
RECYCLE = "recycle"


class CycleStock(RevertibleMove):
    """
    Turns the top stock card over onto the waste. When the stock is down to its last card, waste cards are fed back
    into the stock one per call, bottom card first, without reshuffling.
    """

    def __str__(self):
        return "Cycle stock"

    def apply(self, gameState: GameState) -> str:
        self._checkApplicable()
        stock = gameState.stock
        waste = gameState.waste
        if stock.isEmpty() and waste.isEmpty():
            raise IllegalMove("Stock is empty")

        previousCycles = gameState.stockCycles
        previousScore = gameState.baseScore

        if len(stock) > 1:
            waste.append(stock.pop())
            gameState.stockCycles += 1
            branch = DRAW
        elif waste.isEmpty():
            # a lone stock card turns over without counting as a cycle
            waste.append(stock.pop())
            branch = LAST_CARD
        else:
            stock.append(waste.pop(0))
            branch = RECYCLE

        gameState.baseScore += CYCLE_PENALTY
        self.record = CycleRecord(branch=branch, previousCycles=previousCycles, previousScore=previousScore)
        gameState.moves.append(self)
        self.status = APPLIED
        return f"Stock card {len(stock)} out of {len(stock) + len(waste)}, cycle {gameState.stockCycles}"

    def revert(self, gameState: GameState):
        self._popHistory(gameState)
        record = self.record
        if record.branch == RECYCLE:
            gameState.waste.insert(0, gameState.stock.pop())
        else:
            gameState.stock.append(gameState.waste.pop())
        gameState.stockCycles = record.previousCycles
        gameState.baseScore = record.previousScore


def scoreDelta(sourceType: DeckType, destinationType: DeckType, exposedCard: bool) -> int:
    delta = 0
    if sourceType is DeckType.STOCK and destinationType is DeckType.COLUMN:
        delta += 5
    elif sourceType is DeckType.STOCK and destinationType is DeckType.STACK:
        delta += 10
    elif sourceType is DeckType.COLUMN and destinationType is DeckType.STACK:
        delta += 10
    if exposedCard:
        delta += 5
    if sourceType is DeckType.STACK:
        delta -= 15
    return delta


def createMove(request: MoveRequest, symbols="unicode") -> RevertibleMove:
    if isinstance(request, TransferRequest):
        return MoveCard(request.source, request.destination, symbols)
    if isinstance(request, CycleRequest):
        return CycleStock()
    raise ContractViolation(f"Unknown move request {request!r}")
