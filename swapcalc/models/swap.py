"""Pydantic models for the swap request/response bodies."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from swapcalc.amm.result import SwapErrorKind, SwapOutcome
from swapcalc.models.types import Amount, TokenSymbol


class SwapRequest(BaseModel):
    """A caller's swap intent together with the current pool state.

    Only the shape is validated here. Amount and reserve checks belong
    to the engine so that they come back as typed error kinds.
    """

    token_a: TokenSymbol
    reserve_a: Amount
    token_b: TokenSymbol
    reserve_b: Amount
    input_token: TokenSymbol = Field(description="Symbol of the token being sold.")
    amount_in: Amount = Field(description="Amount of input_token offered.")

    @model_validator(mode="after")
    def check_distinct_tokens(self) -> Self:
        if self.token_a == self.token_b:
            raise ValueError("token_a and token_b must be different symbols")
        return self


class SwapResponse(BaseModel):
    """Outcome of a successful swap."""

    amount_out: float
    new_reserve_a: float
    new_reserve_b: float
    reserves: dict[str, float] = Field(
        default_factory=dict,
        description="Post-trade reserves keyed by token symbol.",
    )
    price_impact: float | None = Field(
        default=None,
        description="Execution price shortfall against the pre-trade spot price.",
    )

    @classmethod
    def from_outcome(cls, outcome: SwapOutcome) -> SwapResponse:
        """Build the response from a successful engine outcome."""
        if outcome.is_error or outcome.pool is None or outcome.amount_out is None:
            raise ValueError(f"Cannot render a failed swap: {outcome.error}")
        pool = outcome.pool
        return cls(
            amount_out=outcome.amount_out,
            new_reserve_a=pool.reserve_a,
            new_reserve_b=pool.reserve_b,
            reserves=pool.as_mapping(),
            price_impact=outcome.price_impact,
        )


# Human-readable messages for engine error kinds
ERROR_MESSAGES: dict[SwapErrorKind, str] = {
    SwapErrorKind.INVALID_AMOUNT: "Input amount must be a finite, non-negative number",
    SwapErrorKind.UNKNOWN_TOKEN: "Invalid input token",
    SwapErrorKind.NO_LIQUIDITY: "Invalid reserves: one of the tokens has no liquidity",
    SwapErrorKind.INVALID_FEE: "Invalid fee configuration",
}


class ErrorResponse(BaseModel):
    """Error body for rejected requests."""

    error: str | None = Field(default=None, description="Machine-readable error kind.")
    detail: str

    @classmethod
    def for_kind(cls, kind: SwapErrorKind) -> ErrorResponse:
        return cls(error=kind.value, detail=ERROR_MESSAGES[kind])
