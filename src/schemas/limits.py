"""Numeric bounds matching the store's 32-bit INTEGER columns."""

MAX_INTEGER = 2**31 - 1
MIN_INTEGER = -(2**31)
