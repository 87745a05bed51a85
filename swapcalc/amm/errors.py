"""Swap error classes.

Raised by the constant-product math and converted to SwapOutcome
errors at the SwapEngine boundary.
"""


class SwapError(Exception):
    """Base error for swap calculations."""

    pass


class InvalidAmountError(SwapError):
    """Input amount is negative or not finite."""

    pass


class UnknownTokenError(SwapError):
    """Input token matches neither side of the pool."""

    pass


class NoLiquidityError(SwapError):
    """A reserve is zero, negative or not finite."""

    pass


class InvalidFeeError(SwapError):
    """Fee rate must be in range [0, 1)."""

    pass
