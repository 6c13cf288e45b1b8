"""Game-wide exceptions."""


class TimeloopError(Exception):
    """Base exception for the game."""


class CombatContractError(TimeloopError):
    """Raised when an action refers to an inventory slot holding the wrong kind of item.

    This is a programming error: actions are validated when they are chosen,
    so resolution should never see a bad index.
    """


class ContentError(TimeloopError):
    """Raised when a content file is missing, invalid, or references unknown ids."""
