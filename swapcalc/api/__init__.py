"""HTTP API for the swap calculator."""
