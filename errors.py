"""Errors raised by the numbers engine."""


class NumbersError(Exception):
    """Base class for every engine error."""


class InvalidConfiguration(NumbersError, ValueError):
    """A round was requested that the tile pools cannot deal."""


class InvalidOperation(NumbersError, ValueError):
    """An arithmetic step the rules do not allow."""


class InvalidSelection(InvalidOperation):
    """The chosen tiles cannot take part in a step right now."""


class ExpressionError(NumbersError, ValueError):
    """A typed expression could not be read or uses unavailable tiles."""
