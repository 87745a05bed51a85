"""Shared type definitions for the swap API models."""

from typing import Annotated

from pydantic import Field

# Free-form token symbol as supplied by the caller (matched exactly)
TokenSymbol = Annotated[str, Field(min_length=1, max_length=64, description="Token symbol")]

# Token balance or trade amount (JSON number)
Amount = Annotated[float, Field(description="Token amount")]
