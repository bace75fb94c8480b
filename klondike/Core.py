import random

from klondike import Controller
from klondike.Errors import MoveError
from klondike.Moves import CycleRequest, MoveRequest, TransferRequest, createMove
from klondike.State import GameState

SYMBOL_STYLES = ("unicode", "letters")


class GameConfig:
    def __init__(self, seed=None, symbols="unicode", showHelp=True):
        self.seed = seed
        self.symbols = symbols
        self.showHelp = showHelp

    def makeRandom(self):
        return random.Random(self.seed)


class Core:
    """
    ask*** : should be called by the input loop; reports to the interface and raises MoveError on illegal requests.
    The game state itself is only changed by applying and reverting moves.
    """
    DEFAULT_CONFIG = GameConfig()

    def __init__(self):
        self.interface = None
        self.config: GameConfig = None
        self.state: GameState = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def startGame(self, gameConfig: GameConfig = DEFAULT_CONFIG, rng: random.Random = None):
        if self.interface is None:
            raise Exception("interface is null")
        self.config = gameConfig
        if rng is None:
            rng = gameConfig.makeRandom()
        self.state = Controller.deal(rng)
        self.interface.onStart()

    def resumeGame(self, state: GameState, gameConfig: GameConfig = DEFAULT_CONFIG):
        if self.interface is None:
            raise Exception("interface is null")
        self.config = gameConfig
        self.state = state
        self.interface.onStart()

    @property
    def gameEnded(self):
        return self.state is None or self.state.gameWon

    def isWon(self):
        return self.state is not None and self.state.gameWon

    def ask(self, request: MoveRequest) -> str:
        move = createMove(request, self.config.symbols)
        try:
            message = move.apply(self.state)
        except MoveError as e:
            self.interface.onError(e)
            raise
        self.interface.onEvent(move, message)
        self.checkWin()
        return message

    def askMove(self, source: str, destination: str) -> str:
        return self.ask(TransferRequest(source, destination))

    def askCycle(self) -> str:
        return self.ask(CycleRequest())

    def askUndo(self) -> bool:
        if self.state.gameWon or len(self.state.moves) == 0:
            return False
        move = self.state.moves[-1]
        move.revert(self.state)
        self.interface.onUndoEvent(move)
        return True

    def checkWin(self):
        if self.state.gameWon:
            return True
        if not Controller.detectWin(self.state):
            return False
        Controller.settleScore(self.state)
        self.interface.onWin()
        return True
