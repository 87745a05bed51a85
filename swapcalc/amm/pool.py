"""Two-sided reserve pool value type."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from swapcalc.amm.errors import NoLiquidityError, UnknownTokenError


@dataclass(frozen=True)
class ReservePool:
    """Liquidity state of a tradable token pair.

    Constructed fresh for every calculation and never mutated. A swap
    produces a new pool via `after_swap()`.

    Raises:
        ValueError: If the symbols are empty or identical
        NoLiquidityError: If a reserve is negative or not finite
    """

    token_a: str
    reserve_a: float
    token_b: str
    reserve_b: float

    def __post_init__(self) -> None:
        if not self.token_a or not self.token_b:
            raise ValueError("Pool token symbols must be non-empty")
        if self.token_a == self.token_b:
            raise ValueError(f"Pool token symbols must be distinct, got {self.token_a!r} twice")
        for token, reserve in ((self.token_a, self.reserve_a), (self.token_b, self.reserve_b)):
            if not math.isfinite(reserve) or reserve < 0:
                raise NoLiquidityError(f"Reserve of {token} must be finite and non-negative: {reserve}")

    @property
    def has_liquidity(self) -> bool:
        """True if both sides hold a positive balance."""
        return self.reserve_a > 0 and self.reserve_b > 0

    @property
    def product(self) -> float:
        """Constant-product invariant k = reserve_a * reserve_b."""
        return self.reserve_a * self.reserve_b

    def contains(self, token: str) -> bool:
        return token in (self.token_a, self.token_b)

    def reserves_for(self, token_in: str) -> tuple[float, float]:
        """Get reserves ordered as (reserve_in, reserve_out).

        Raises:
            UnknownTokenError: If token_in is not one of the pool's symbols
        """
        if token_in == self.token_a:
            return self.reserve_a, self.reserve_b
        elif token_in == self.token_b:
            return self.reserve_b, self.reserve_a
        else:
            raise UnknownTokenError(f"Token {token_in!r} not in pool")

    def token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        if token_in == self.token_a:
            return self.token_b
        elif token_in == self.token_b:
            return self.token_a
        else:
            raise UnknownTokenError(f"Token {token_in!r} not in pool")

    def spot_price(self, token_in: str) -> float:
        """Marginal price of token_in, in units of the output token.

        Raises:
            UnknownTokenError: If token_in is not one of the pool's symbols
            NoLiquidityError: If either side is empty
        """
        reserve_in, reserve_out = self.reserves_for(token_in)
        if reserve_in <= 0 or reserve_out <= 0:
            raise NoLiquidityError("Spot price is undefined for an empty pool side")
        return reserve_out / reserve_in

    def after_swap(self, token_in: str, amount_in: float, amount_out: float) -> ReservePool:
        """Return the pool snapshot after a trade.

        The full nominal input is credited to the input side, so the fee
        stays in the pool as extra liquidity.
        """
        if token_in == self.token_a:
            return replace(
                self,
                reserve_a=self.reserve_a + amount_in,
                reserve_b=self.reserve_b - amount_out,
            )
        elif token_in == self.token_b:
            return replace(
                self,
                reserve_a=self.reserve_a - amount_out,
                reserve_b=self.reserve_b + amount_in,
            )
        else:
            raise UnknownTokenError(f"Token {token_in!r} not in pool")

    def as_mapping(self) -> dict[str, float]:
        """Reserves keyed by token symbol."""
        return {self.token_a: self.reserve_a, self.token_b: self.reserve_b}
