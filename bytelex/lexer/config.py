"""
Scanner configuration.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class OverflowPolicy(Enum):
    """What to do with a decimal literal larger than INT32_MAX"""
    ERROR = "error"         # Fail the scan with NUMBER_OVERFLOW
    SATURATE = "saturate"   # Clamp to INT32_MAX
    WRAP = "wrap"           # Two's complement wraparound


class BangPolicy(Enum):
    """Which token a lone '!' produces"""
    DISTINCT = "distinct"   # NOT
    LEGACY = "legacy"       # CLOSE_BRACE, as older scanners emitted


@dataclass
class LexerConfig:
    """Configuration parameters for the scanner"""

    overflow: OverflowPolicy = OverflowPolicy.ERROR
    bang_policy: BangPolicy = BangPolicy.DISTINCT

    def __post_init__(self):
        # Plain string values are accepted too
        self.overflow = OverflowPolicy(self.overflow)
        self.bang_policy = BangPolicy(self.bang_policy)
