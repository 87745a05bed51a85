"""Command-line swap quotes.

Usage:
    swapcalc-quote --token-a ETH --reserve-a 1000 --token-b USDC --reserve-b 1000 \
        --input-token ETH --amount-in 100
"""

import argparse
import sys

import structlog

from swapcalc.amm import ReservePool, SwapEngine
from swapcalc.amm.config import EngineConfig
from swapcalc.log import configure_logging

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Quote a constant-product AMM swap",
    )
    parser.add_argument("--token-a", required=True, help="Symbol of the first pool token")
    parser.add_argument("--reserve-a", type=float, required=True, help="Balance of token A")
    parser.add_argument("--token-b", required=True, help="Symbol of the second pool token")
    parser.add_argument("--reserve-b", type=float, required=True, help="Balance of token B")
    parser.add_argument("--input-token", required=True, help="Symbol of the token being sold")
    parser.add_argument("--amount-in", type=float, required=True, help="Amount being sold")
    parser.add_argument(
        "--fee-rate",
        type=float,
        default=None,
        help="Fee as a fraction (default: SWAP_FEE_RATE or 0.003)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        config = EngineConfig(args.fee_rate) if args.fee_rate is not None else EngineConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}")
        return 2
    engine = SwapEngine(fee_rate=config.fee_rate)

    try:
        outcome = engine.swap(
            args.token_a,
            args.reserve_a,
            args.token_b,
            args.reserve_b,
            args.input_token,
            args.amount_in,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    if outcome.error is not None:
        logger.debug("quote_failed", error=outcome.error.value, detail=outcome.error_detail)
        print(f"Error: {outcome.error.value}")
        return 1

    pool = outcome.pool
    if pool is None:
        print("Error: swap produced no pool")
        return 1
    before = ReservePool(args.token_a, args.reserve_a, args.token_b, args.reserve_b)
    token_out = before.token_out(args.input_token)

    print(f"Sell:         {args.amount_in} {args.input_token}")
    print(f"Receive:      {outcome.amount_out} {token_out}")
    print(f"Spot price:   {before.spot_price(args.input_token)} {token_out}/{args.input_token}")
    print(f"Price impact: {outcome.price_impact:.4%}")
    print(f"Fee rate:     {engine.fee_rate:.4%}")
    for token, reserve in pool.as_mapping().items():
        print(f"Reserve {token}: {reserve}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
