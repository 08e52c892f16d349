"""
Core types for the token dictionary.
"""

from typing import Final

type Token = str
type Idx = int

# indices are 32-bit signed integers
MAX_IDX: Final[Idx] = 2**31 - 1
# paired with TokenNotFoundError, never a valid index
INVALID_IDX: Final[Idx] = -1
