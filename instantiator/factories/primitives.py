"""Random generators for numeric, boolean, character and string values.

Each generator takes a ``random.Random`` and nothing else, and draws from the
generator primitive matching the width of the value it produces.
"""

from __future__ import annotations

import random
import string

from instantiator.tags import Char, Float32, Int8, Int16, Int64

from ._nullable import next_bool

# 26 lowercase + 26 uppercase + 10 digits
CHAR_POOL: str = string.ascii_lowercase + string.ascii_uppercase + string.digits
STRING_LENGTH = 10

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_INT16_BOUND = 2**15 - 1
_FLOAT32_BITS = 24


def random_int(rng: random.Random) -> int:
    """Signed 32-bit integer."""
    return rng.randint(_INT32_MIN, _INT32_MAX)


def random_bool(rng: random.Random) -> bool:
    return next_bool(rng)


def random_float32(rng: random.Random) -> Float32:
    """Float in [0, 1) with single precision (24 significant bits)."""
    return Float32(rng.getrandbits(_FLOAT32_BITS) / (1 << _FLOAT32_BITS))


def random_float(rng: random.Random) -> float:
    """Double-precision float in [0, 1)."""
    return rng.random()


def random_int64(rng: random.Random) -> Int64:
    return Int64(rng.randint(_INT64_MIN, _INT64_MAX))


def random_int16(rng: random.Random) -> Int16:
    """Non-negative 16-bit integer in [0, 32767)."""
    return Int16(rng.randrange(_INT16_BOUND))


def random_int8(rng: random.Random) -> Int8:
    """Signed byte in [-128, 127]."""
    return Int8(int.from_bytes(rng.randbytes(1), "big", signed=True))


def random_str(rng: random.Random) -> str:
    """Ten alphanumeric characters built from raw random bytes.

    Each byte is mapped into ``CHAR_POOL`` by modulo. 256 is not a multiple of
    62, so the first ``256 % 62`` symbols are slightly more likely; a mask
    against ``len(CHAR_POOL) - 1`` would be far worse since it never produces
    some indices at all.
    """
    pool_size = len(CHAR_POOL)
    return "".join(CHAR_POOL[byte % pool_size] for byte in rng.randbytes(STRING_LENGTH))


def random_char(rng: random.Random) -> Char:
    return Char(rng.choice(CHAR_POOL))
