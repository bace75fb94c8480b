from klondike.Cards import Card
from klondike.Decks import Deck
from klondike.State import COLUMN_NAMES, STACK_NAMES, STOCK_NAME, GameState
from terminal_ui.view_model import CardView, ColumnView, GameViewModel, PileView

HIDDEN_LABEL = "? ?"


class StateAdapter:
    """Reads a GameState into a renderer-friendly model. Never mutates the state."""

    @staticmethod
    def card_view(card: Card, symbols="unicode") -> CardView:
        return CardView(
            label=card.shortString(symbols),
            hidden=False,
            suit=card.suit.name,
            rank=card.rank.shortString(),
        )

    @staticmethod
    def hidden_card() -> CardView:
        return CardView(label=HIDDEN_LABEL, hidden=True)

    @staticmethod
    def pile_view(name: str, deck: Deck, symbols="unicode") -> PileView:
        top = deck.top()
        return PileView(
            name=name,
            size=len(deck),
            top=None if top is None else StateAdapter.card_view(top, symbols),
        )

    @staticmethod
    def column_view(name: str, deck: Deck, symbols="unicode") -> ColumnView:
        cards = tuple(
            StateAdapter.card_view(card, symbols) if deck.isVisible(i) else StateAdapter.hidden_card()
            for i, card in enumerate(deck)
        )
        return ColumnView(name=name, cards=cards)

    @staticmethod
    def snapshot(state: GameState, symbols="unicode", now=None) -> GameViewModel:
        return GameViewModel(
            move_count=len(state.moves),
            elapsed_seconds=state.elapsedSeconds(now),
            score=state.score,
            stock_cycles=state.stockCycles,
            game_won=state.gameWon,
            stock=StateAdapter.pile_view(STOCK_NAME, state.stock, symbols),
            waste_size=len(state.waste),
            stack_piles=tuple(StateAdapter.pile_view(name, state.stackPiles[name], symbols) for name in STACK_NAMES),
            columns=tuple(StateAdapter.column_view(name, state.columns[name], symbols) for name in COLUMN_NAMES),
        )
