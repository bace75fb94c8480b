import unittest

from klondike import Rules
from klondike.Cards import Card, Rank, Suit
from klondike.Decks import Deck, DeckType
from klondike.Errors import ContractViolation, IllegalMove, MoveSyntaxError


def card(suit, rank):
    return Card(suit, rank)


class InputSyntaxTestCase(unittest.TestCase):
    def test_valid_sources_and_destinations(self):
        for source in ("O", "SA", "SD", "A0", "G12", "C3"):
            for destination in ("A", "G", "SA", "SC"):
                Rules.validateInputSyntax(source, destination)

    def test_bad_source_names_token(self):
        for source in ("X1", "A", "A123", "S", "SE", "OO", ""):
            with self.assertRaises(MoveSyntaxError) as ctx:
                Rules.validateInputSyntax(source, "A")
            self.assertEqual(source, ctx.exception.token)
            self.assertIn("source", str(ctx.exception))

    def test_bad_destination_names_token(self):
        for destination in ("O", "A1", "H", "SE", "WASTE"):
            with self.assertRaises(MoveSyntaxError) as ctx:
                Rules.validateInputSyntax("O", destination)
            self.assertEqual(destination, ctx.exception.token)
            self.assertIn("destination", str(ctx.exception))


class ContainerLevelTestCase(unittest.TestCase):
    def setUp(self):
        self.column = Deck(DeckType.COLUMN, [card(Suit.SPADES, Rank.FIVE), card(Suit.HEARTS, Rank.FOUR),
                                             card(Suit.CLUBS, Rank.THREE)], invisibleCards=1)
        self.other = Deck(DeckType.COLUMN)
        self.stack = Deck(DeckType.STACK)
        self.stock = Deck(DeckType.STOCK, [card(Suit.HEARTS, Rank.ACE)])

    def test_same_deck_is_illegal(self):
        with self.assertRaises(IllegalMove):
            Rules.validateContainerLevel(self.column, 2, self.column)

    def test_stock_is_never_a_destination(self):
        with self.assertRaises(IllegalMove):
            Rules.validateContainerLevel(self.column, 2, self.stock)

    def test_empty_source_is_illegal(self):
        with self.assertRaises(IllegalMove):
            Rules.validateContainerLevel(self.other, -1, self.column)

    def test_invisible_card_cannot_move(self):
        with self.assertRaises(IllegalMove):
            Rules.validateContainerLevel(self.column, 0, self.other)
        Rules.validateContainerLevel(self.column, 1, self.other)

    def test_stack_pile_accepts_single_cards_only(self):
        with self.assertRaises(IllegalMove):
            Rules.validateContainerLevel(self.column, 1, self.stack)
        Rules.validateContainerLevel(self.column, 2, self.stack)

    def test_validation_is_repeatable(self):
        for _ in range(2):
            with self.assertRaises(IllegalMove):
                Rules.validateContainerLevel(self.column, 0, self.other)
        self.assertEqual(3, len(self.column))
        self.assertEqual(1, self.column.invisibleCards)


class CardLevelTestCase(unittest.TestCase):
    def test_empty_stack_pile_takes_only_aces(self):
        pile = Deck(DeckType.STACK)
        Rules.validateCardLevel(pile, card(Suit.DIAMONDS, Rank.ACE))
        for rank in Rank:
            if rank is Rank.ACE:
                continue
            with self.assertRaises(IllegalMove):
                Rules.validateCardLevel(pile, card(Suit.DIAMONDS, rank))

    def test_stack_pile_needs_same_suit_and_next_rank(self):
        pile = Deck(DeckType.STACK, [card(Suit.HEARTS, Rank.ACE), card(Suit.HEARTS, Rank.TWO)])
        Rules.validateCardLevel(pile, card(Suit.HEARTS, Rank.THREE))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(pile, card(Suit.DIAMONDS, Rank.THREE))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(pile, card(Suit.HEARTS, Rank.FOUR))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(pile, card(Suit.HEARTS, Rank.TWO))

    def test_empty_column_takes_only_kings(self):
        column = Deck(DeckType.COLUMN)
        Rules.validateCardLevel(column, card(Suit.CLUBS, Rank.KING))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(column, card(Suit.CLUBS, Rank.QUEEN))

    def test_column_needs_opposite_color_and_lower_rank(self):
        column = Deck(DeckType.COLUMN, [card(Suit.SPADES, Rank.NINE)])
        Rules.validateCardLevel(column, card(Suit.HEARTS, Rank.EIGHT))
        Rules.validateCardLevel(column, card(Suit.DIAMONDS, Rank.EIGHT))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(column, card(Suit.CLUBS, Rank.EIGHT))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(column, card(Suit.HEARTS, Rank.SEVEN))
        with self.assertRaises(IllegalMove):
            Rules.validateCardLevel(column, card(Suit.HEARTS, Rank.TEN))

    def test_other_destination_types_are_contract_violations(self):
        for deckType in (DeckType.STOCK, DeckType.WASTE):
            with self.assertRaises(ContractViolation):
                Rules.validateCardLevel(Deck(deckType), card(Suit.CLUBS, Rank.KING))

    def test_joker_color_is_a_contract_violation(self):
        column = Deck(DeckType.COLUMN, [card(Suit.SPADES, Rank.NINE)])
        with self.assertRaises(ContractViolation):
            Rules.validateCardLevel(column, card(Suit.JOKER, Rank.EIGHT))

    def test_rank_to_int_is_ace_low(self):
        self.assertEqual(0, Rules.rankToInt(Rank.ACE))
        self.assertEqual(9, Rules.rankToInt(Rank.TEN))
        self.assertEqual(12, Rules.rankToInt(Rank.KING))


if __name__ == "__main__":
    unittest.main()
