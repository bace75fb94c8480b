"""
Legality checks for card moves.

Every function here is free of side effects: it reads the decks and cards it is given and either returns or
raises. ``IllegalMove`` and ``MoveSyntaxError`` messages are shown to the player directly.
"""
import re

from klondike.Cards import Card, Rank
from klondike.Decks import Deck, DeckType
from klondike.Errors import ContractViolation, IllegalMove, MoveSyntaxError
from klondike.State import COLUMN_NAMES, STACK_NAMES, STOCK_NAME

COLUMN_COORDINATE = re.compile(r"[A-G][0-9]{1,2}")


def isColumnCoordinate(token):
    return COLUMN_COORDINATE.fullmatch(token) is not None


def isAllowedSource(token):
    return token == STOCK_NAME or token in STACK_NAMES or isColumnCoordinate(token)


def isAllowedDestination(token):
    return token in COLUMN_NAMES or token in STACK_NAMES


def validateInputSyntax(source, destination):
    if not isAllowedSource(source):
        raise MoveSyntaxError(f"Invalid move syntax. \"{source}\" is not a valid source location. Type H for help.",
                              source)
    if not isAllowedDestination(destination):
        raise MoveSyntaxError(
            f"Invalid move syntax. \"{destination}\" is not a valid destination location. Type H for help.",
            destination)


def validateContainerLevel(source: Deck, sourceCardIndex: int, destination: Deck):
    """
    Checks a move by deck types and sizes only. Ranks and suits are left to ``validateCardLevel``.

    :param source: deck that the card(s) come from
    :param sourceCardIndex: index of the first card to move
    :param destination: deck that the card(s) go to
    """
    if source is destination:
        raise IllegalMove("Move source and destination can't be the same")
    if destination.deckType is DeckType.STOCK:
        raise IllegalMove("You can't move cards to the stock")
    if source.isEmpty():
        raise IllegalMove("You can't move a card from an empty deck")
    if sourceCardIndex >= len(source):
        raise IllegalMove(f"There is no card {sourceCardIndex} in that deck")
    if not source.isVisible(sourceCardIndex):
        raise IllegalMove("You can't move an invisible card")
    if sourceCardIndex < source.lastIndex() and destination.deckType is DeckType.STACK:
        raise IllegalMove("You can't move more than 1 card at a time to a Stack Pile")


def validateCardLevel(destination: Deck, cardToMove: Card):
    if destination.deckType is DeckType.STACK:
        checkStackMove(destination.top(), cardToMove)
    elif destination.deckType is DeckType.COLUMN:
        checkColumnMove(destination.top(), cardToMove)
    else:
        raise ContractViolation(f"Target deck is neither Stack nor Column but {destination.deckType.name}")


def rankToInt(rank: Rank):
    return rank.toInt()


def checkStackMove(targetCard, cardToAdd):
    """
    :param targetCard: top card of the stack pile, None if the pile is empty
    """
    if targetCard is None:
        if cardToAdd.rank is not Rank.ACE:
            raise IllegalMove("An Ace has to be the first card of a Stack Pile")
        return
    if rankToInt(targetCard.rank) + 1 != rankToInt(cardToAdd.rank):
        raise IllegalMove("Stack Piles hold same-suit cards of increasing Rank from Ace to King")
    if targetCard.suit is not cardToAdd.suit:
        raise IllegalMove("Stack Piles can only contain same-suit cards")


def checkColumnMove(targetCard, cardToAdd):
    """
    :param targetCard: top card of the column, None if the column is empty
    """
    if targetCard is None:
        if cardToAdd.rank is not Rank.KING:
            raise IllegalMove("A King has to be the first card of a Column")
        return
    if not opposingColor(targetCard, cardToAdd):
        raise IllegalMove("Column cards have to alternate colors (red and black)")
    if rankToInt(targetCard.rank) != rankToInt(cardToAdd.rank) + 1:
        raise IllegalMove("Columns hold alternating-color cards of decreasing rank from King to Two")


def opposingColor(card1: Card, card2: Card):
    return card1.opposingColor(card2)
