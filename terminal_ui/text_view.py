"""
Monospace text rendering of a game snapshot.

Example::

    0 move(s) played in 00:00:29 for 0 points

       O (24)                  SA      SB      SC      SD
       ♤ 9                     _ _     _ _     _ _     _ _

        A       B       C       D       E       F       G
     0 ♦ 6     ? ?     ? ?     ? ?     ? ?     ? ?     ? ?
     1         ♤ 8     ? ?     ? ?     ? ?     ? ?     ? ?
"""
from terminal_ui.view_model import GameViewModel, PileView

COLUMN_WIDTH = 8
FIRST_COLUMN_WIDTH = 3
STOCK_WIDTH = 24
EMPTY_PILE = "_ _"


def pad(text: str, width: int) -> str:
    if len(text) == 1:
        text = " " + text
    return text.ljust(width)


def format_duration(seconds: int) -> str:
    return f"{seconds // 3600:02d}:{seconds // 60 % 60:02d}:{seconds % 60:02d}"


def _pile_label(pile: PileView) -> str:
    if pile.top is None:
        return EMPTY_PILE
    return pile.top.label


def render(vm: GameViewModel) -> str:
    lines = [
        f"{vm.move_count} move(s) played in {format_duration(vm.elapsed_seconds)} for {vm.score} points",
        "",
    ]

    header = pad("", FIRST_COLUMN_WIDTH) + pad(f"O ({vm.stock.size + vm.waste_size})", STOCK_WIDTH)
    header += "".join(pad(pile.name, COLUMN_WIDTH) for pile in vm.stack_piles)
    lines.append(header.rstrip())

    stock_label = "" if vm.stock.top is None else vm.stock.top.label
    piles = pad("", FIRST_COLUMN_WIDTH) + pad(stock_label, STOCK_WIDTH)
    piles += "".join(pad(_pile_label(pile), COLUMN_WIDTH) for pile in vm.stack_piles)
    lines.append(piles.rstrip())
    lines.append("")

    lines.append((pad("", FIRST_COLUMN_WIDTH) + "".join(pad(c.name, COLUMN_WIDTH) for c in vm.columns)).rstrip())
    depth = max((len(c.cards) for c in vm.columns), default=0)
    for row in range(depth):
        line = pad(str(row), FIRST_COLUMN_WIDTH)
        for column in vm.columns:
            label = column.cards[row].label if row < len(column.cards) else ""
            line += pad(label, COLUMN_WIDTH)
        lines.append(line.rstrip())

    if vm.game_won:
        lines.append("")
        lines.append("All cards are uncovered, you won!")
    return "\n".join(lines) + "\n"
