import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from klondike.Cards import Card, Rank, Suit
from klondike.Moves import CycleStock
from klondike.State import GameState
from terminal_ui import settings_store
from terminal_ui.adapter import HIDDEN_LABEL, StateAdapter
from terminal_ui.text_view import format_duration, pad, render


def sample_state():
    state = GameState(startTime=0)
    state.columns["A"].append(Card(Suit.DIAMONDS, Rank.SIX))
    state.columns["B"].extend([Card(Suit.CLUBS, Rank.TWO), Card(Suit.SPADES, Rank.EIGHT)])
    state.columns["B"].setInvisibleCards(1)
    state.stock.extend([Card(Suit.HEARTS, Rank.TEN), Card(Suit.SPADES, Rank.NINE)])
    state.waste.append(Card(Suit.HEARTS, Rank.TWO))
    state.stackPiles["SA"].append(Card(Suit.HEARTS, Rank.ACE))
    return state


class AdapterTestCase(unittest.TestCase):
    def test_snapshot_hides_face_down_cards(self):
        state = sample_state()
        vm = StateAdapter.snapshot(state, now=29)
        column_b = vm.columns[1]
        self.assertEqual("B", column_b.name)
        self.assertTrue(column_b.cards[0].hidden)
        self.assertEqual(HIDDEN_LABEL, column_b.cards[0].label)
        self.assertIsNone(column_b.cards[0].suit)
        self.assertEqual("♤ 8", column_b.cards[1].label)
        self.assertEqual(29, vm.elapsed_seconds)

    def test_snapshot_piles_and_counters(self):
        state = sample_state()
        CycleStock().apply(state)
        vm = StateAdapter.snapshot(state, symbols="letters", now=5)
        self.assertEqual(1, vm.move_count)
        self.assertEqual(-100, vm.score)
        self.assertEqual(1, vm.stock_cycles)
        self.assertEqual("H 10", vm.stock.top.label)
        self.assertEqual(2, vm.waste_size)
        self.assertEqual("H A", vm.stack_piles[0].top.label)
        self.assertIsNone(vm.stack_piles[1].top)

    def test_snapshot_does_not_mutate(self):
        state = sample_state()
        StateAdapter.snapshot(state)
        self.assertIsNone(state.endTime)
        self.assertEqual(2, len(state.stock))
        self.assertEqual(1, state.columns["B"].invisibleCards)


class TextViewTestCase(unittest.TestCase):
    def test_pad_adds_leading_space_to_single_characters(self):
        self.assertEqual(" A      ", pad("A", 8))
        self.assertEqual("SA      ", pad("SA", 8))
        self.assertEqual("   ", pad("", 3))

    def test_format_duration(self):
        self.assertEqual("00:00:29", format_duration(29))
        self.assertEqual("01:01:01", format_duration(3661))

    def test_render_layout(self):
        text = render(StateAdapter.snapshot(sample_state(), now=29))
        lines = text.splitlines()
        self.assertEqual("0 move(s) played in 00:00:29 for 0 points", lines[0])
        self.assertEqual("   O (3)                   SA      SB      SC      SD", lines[2])
        self.assertEqual("   ♤ 9                     ♥ A     _ _     _ _     _ _", lines[3])
        self.assertEqual("    A       B       C       D       E       F       G", lines[5])
        self.assertEqual(" 0 ♦ 6     ? ?", lines[6])
        self.assertEqual(" 1         ♤ 8", lines[7])
        self.assertEqual(8, len(lines))


class SettingsStoreTestCase(unittest.TestCase):
    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            data = settings_store.load_settings(Path(td) / "missing.ini")
        self.assertEqual(settings_store.DEFAULT_SETTINGS, data)

    def test_load_sanitizes_values(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "settings.ini"
            ini_path.write_text("[game]\nseed = abc\nsymbols = emoji\nshow_help = off\n", encoding="utf-8")
            with patch.object(settings_store, "SETTINGS_PATH", ini_path):
                data = settings_store.load_settings()
        self.assertEqual("", data["seed"])
        self.assertEqual("unicode", data["symbols"])
        self.assertEqual("no", data["show_help"])

    def test_save_and_config_round_trip(self):
        with tempfile.TemporaryDirectory() as td:
            ini_path = Path(td) / "nested" / "settings.ini"
            settings_store.save_settings({"seed": "17", "symbols": "letters", "show_help": "no"}, ini_path)
            text = ini_path.read_text(encoding="utf-8")
            config = settings_store.config_from_settings(settings_store.load_settings(ini_path))
        self.assertIn("seed = 17", text)
        self.assertEqual(17, config.seed)
        self.assertEqual("letters", config.symbols)
        self.assertFalse(config.showHelp)


if __name__ == "__main__":
    unittest.main()
