"""Pydantic models for the swap API."""

from swapcalc.models.swap import ERROR_MESSAGES, ErrorResponse, SwapRequest, SwapResponse
from swapcalc.models.types import Amount, TokenSymbol

__all__ = [
    # Types
    "Amount",
    "TokenSymbol",
    # Request/response models
    "SwapRequest",
    "SwapResponse",
    "ErrorResponse",
    "ERROR_MESSAGES",
]
