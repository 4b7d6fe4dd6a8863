class MotorpoolError(Exception):
    """Base class for exceptions in this module."""


class ItemNotFound(MotorpoolError):
    """Raised when a key is not found in a collection."""


class CommandAborted(MotorpoolError):
    """Raised when the operator enters the stop token mid-command."""


class ScriptExhausted(MotorpoolError):
    """Raised when a scripted console runs out of lines."""


class UnknownCommand(MotorpoolError):
    """Raised when a shell line names no registered command."""
