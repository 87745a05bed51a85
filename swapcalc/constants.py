"""Protocol constants for the swap calculator."""

# Proportional fee taken from the input amount (0.3%)
DEFAULT_FEE_RATE = 0.003
