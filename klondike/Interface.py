from klondike.Core import Core
from klondike.Errors import MoveError
from klondike.Moves import RevertibleMove


class Interface:

    def __init__(self):
        self.core: Core = None

    def onStart(self):
        pass

    def onEvent(self, move: RevertibleMove, message: str):
        """
        Invoked when a move is applied.
        :param move: the applied move
        :param message: description of the move's result
        """
        self.notifyRedraw()

    def onUndoEvent(self, move: RevertibleMove):
        """
        Invoked when a move is reverted.
        :param move:
        :return:
        """
        self.notifyRedraw()

    def onError(self, error: MoveError):
        pass

    def notifyRedraw(self):
        pass

    def onWin(self):
        pass
