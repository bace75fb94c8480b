import argparse

from klondike.Core import Core, GameConfig
from klondike.Errors import MoveError, MoveSyntaxError
from klondike.Interface import Interface
from klondike.Moves import parseRequest
from terminal_ui import settings_store
from terminal_ui.adapter import StateAdapter
from terminal_ui.text_view import render

HELP_TEXT = """Commands (case-insensitive):
  M <source> <destination>   move a card, e.g. "M O SA" or "M C3 D"
                             source: O (stock), SA..SD (stack piles) or a column letter plus row, e.g. C3
                             destination: SA..SD or a column letter A..G
  C                          cycle the stock
  U                          undo the last move
  H                          show this help
  Q                          quit"""


class CommandLineInterface(Interface):

    def printAll(self):
        core = self.core
        print(render(StateAdapter.snapshot(core.state, core.config.symbols)))

    def onStart(self):
        print("Game started!")
        if self.core.config.showHelp:
            print(HELP_TEXT)
        self.printAll()

    def onEvent(self, move, message):
        print(message)
        super().onEvent(move, message)

    def onUndoEvent(self, move):
        print(f"Undid: {move}")
        super().onUndoEvent(move)

    def onError(self, error):
        print(error)

    def notifyRedraw(self):
        self.printAll()

    def onWin(self):
        print(f"You win! Final score: {self.core.state.score}")


def runLoop(core: Core, readLine=input):
    while not core.gameEnded:
        try:
            command = readLine().strip()
        except EOFError:
            break
        upper = command.upper()
        if upper == "Q":
            break
        elif upper == "H":
            print(HELP_TEXT)
        elif upper == "U":
            if not core.askUndo():
                print("Nothing to undo!")
        else:
            try:
                request = parseRequest(command)
            except MoveSyntaxError as e:
                core.interface.onError(e)
                continue
            try:
                core.ask(request)
            except MoveError:
                # already shown by the interface
                continue


def parseArgs(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Klondike solitaire in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal.")
    parser.add_argument("--letters", action="store_true", help="Use letters instead of Unicode suit symbols.")
    parser.add_argument("--settings", type=str, default="", help="Optional settings.ini path.")
    return parser.parse_args(argv)


def buildConfig(args: argparse.Namespace) -> GameConfig:
    settings = settings_store.load_settings(args.settings or None)
    config = settings_store.config_from_settings(settings)
    if args.seed is not None:
        config.seed = args.seed
    if args.letters:
        config.symbols = "letters"
    return config


def main(argv=None):
    args = parseArgs(argv)
    interface = CommandLineInterface()
    core = Core()
    core.registerInterface(interface)
    core.startGame(buildConfig(args))
    runLoop(core)


if __name__ == '__main__':
    main()
