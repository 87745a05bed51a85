"""Test helpers module for shared test utilities."""

from tests.helpers.factories import make_swap_body, reference_amount_out

__all__ = ["make_swap_body", "reference_amount_out"]
