class MoveError(Exception):
    """
    Base of every error caused by a player request. The message is meant to be shown to the player as is.
    """
    pass


class MoveSyntaxError(MoveError):
    """Raised when a command or one of its location tokens is malformed."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class IllegalMove(MoveError):
    pass


class ContractViolation(AssertionError):
    """
    An internal invariant is broken. This is a defect in the engine or its caller, never a gameplay message.
    """
    pass
