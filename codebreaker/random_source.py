"""
Where secret codes come from.

The store never reaches for a hidden global generator: it is handed a
"random source", i.e. anything with a randrange(n) method. In play that is
random.Random(seed) when a seed is configured, or the OS-backed
secrets.SystemRandom otherwise. Tests pass a scripted source instead.
"""

import random
import secrets
from typing import Optional, Protocol

from .config import PEG_COUNT
from .types import Code


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


def default_source(seed: Optional[int] = None) -> RandomSource:
    if seed is None:
        return secrets.SystemRandom()
    return random.Random(seed)


def make_code(length: int, source: RandomSource) -> Code:
    # Independent uniform draws, repeats allowed
    code = []
    k = 0
    while k < length:
        code.append(source.randrange(PEG_COUNT))
        k += 1
    return code
