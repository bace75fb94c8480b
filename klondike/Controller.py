"""
Game setup and status checks: dealing, time based scoring and win detection.
"""
import random
import time

from klondike.Cards import newDeck
from klondike.State import COLUMN_NAMES, GameState

BONUS_THRESHOLD_SEC = 30
BONUS_NUMERATOR = 700000


def deal(rng: random.Random = None, startTime=None) -> GameState:
    """
    Creates a fresh game from a shuffled 52 card deck.

    Column ``A`` gets one card, column ``G`` seven, and every column only shows its top card. Of the 24 cards left,
    the first becomes the stock and the rest the waste. The stack piles start empty.

    :param rng: random source used for the shuffle, pass a seeded ``random.Random`` for a reproducible deal
    """
    if rng is None:
        rng = random.Random()
    cards = newDeck()
    rng.shuffle(cards)

    state = GameState(startTime)
    idx = 0
    for i, name in enumerate(COLUMN_NAMES):
        column = state.columns[name]
        column.extend(cards[idx:idx + i + 1])
        column.setInvisibleCards(i)
        idx += i + 1

    state.stock.append(cards[idx])
    idx += 1
    state.waste.extend(cards[idx:])
    return state


def applyTimePenalty(gameState: GameState):
    """Subtracts 2 points for every full 10 seconds played."""
    penalty = gameState.elapsedSeconds() // 10 * -2
    gameState.timeScore += penalty


def applyBonusScore(gameState: GameState):
    """
    Adds 700000 / seconds played when the game took longer than 30 seconds. Assumes the game is won.
    """
    totalTime = gameState.elapsedSeconds()
    if totalTime > BONUS_THRESHOLD_SEC:
        gameState.timeScore += BONUS_NUMERATOR // totalTime


def detectWin(gameState: GameState) -> bool:
    totalInvisible = sum(gameState.columns[name].invisibleCards for name in COLUMN_NAMES)
    if totalInvisible == 0 and gameState.waste.isEmpty() and gameState.stock.isEmpty():
        gameState.gameWon = True
    return gameState.gameWon


def settleScore(gameState: GameState, now=None):
    """
    Stops the clock and books the time penalty and, for a won game, the time bonus.
    """
    if gameState.endTime is None:
        gameState.endTime = time.time() if now is None else now
    applyTimePenalty(gameState)
    if gameState.gameWon:
        applyBonusScore(gameState)
