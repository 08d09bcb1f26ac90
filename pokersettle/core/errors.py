"""
Exceptions raised by the settlement core.

Both kinds are reported synchronously to the immediate caller. Neither is
transient: an InvalidInputSizeError means the caller broke a card-count
contract, an InternalConsistencyError means pot partitioning produced
something that cannot be paid out.
"""


class PokerSettleError(Exception):
    """Base class for settlement errors."""


class InvalidInputSizeError(PokerSettleError, ValueError):
    """A card list (or evaluation list) had the wrong length."""

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InternalConsistencyError(PokerSettleError, RuntimeError):
    """A pot reached distribution without anyone able to win it."""
