"""Engine configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

import structlog

from swapcalc.amm.constant_product import SwapEngine, validate_fee_rate
from swapcalc.amm.errors import InvalidFeeError
from swapcalc.constants import DEFAULT_FEE_RATE

logger = structlog.get_logger()


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the swap engine.

    Attributes:
        fee_rate: Fraction of every input kept by the pool (default: 0.003)
    """

    fee_rate: float = DEFAULT_FEE_RATE

    def __post_init__(self) -> None:
        try:
            validate_fee_rate(self.fee_rate)
        except InvalidFeeError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load configuration from the SWAP_FEE_RATE environment variable."""
        raw = os.environ.get("SWAP_FEE_RATE")
        if raw is None or raw.strip() == "":
            return cls()
        try:
            fee_rate = float(raw)
        except ValueError as err:
            raise ValueError(f"SWAP_FEE_RATE must be a number: '{raw}'") from err
        return cls(fee_rate=fee_rate)

    def build_engine(self) -> SwapEngine:
        return SwapEngine(fee_rate=self.fee_rate)


# Default configuration instance
DEFAULT_ENGINE_CONFIG = EngineConfig()


def _create_default_engine() -> SwapEngine:
    """Create the default engine from the environment.

    An invalid SWAP_FEE_RATE raises ValueError at import time.
    """
    config = EngineConfig.from_env()
    logger.info("swap_engine_configured", fee_rate=config.fee_rate)
    return config.build_engine()


default_engine = _create_default_engine()


def get_default_engine() -> SwapEngine:
    """Get the process-wide engine instance."""
    return default_engine
