"""Test suite for swapcalc."""
