"""
Unbiased random index selection.

``random_value % n`` favours small results whenever the generator's
output range is not a multiple of ``n``. ``balanced_random`` discards the
raw draws that fall in the uneven tail before taking the modulus.
"""
from typing import Protocol


# ============================================================================
# Constants
# ============================================================================

RAW_BITS = 31
RAW_MAX = (1 << RAW_BITS) - 1


class RandomSource(Protocol):
    """Anything exposing ``getrandbits`` (e.g. ``random.Random``)."""

    def getrandbits(self, k: int) -> int:
        ...


# ============================================================================
# Sampling
# ============================================================================

def balanced_random(upper: int, rng: RandomSource) -> int:
    """
    Draw a uniformly distributed integer in ``[0, upper)``.

    Args:
        upper: Exclusive upper bound, between 1 and ``RAW_MAX + 1``.
        rng: Source of raw ``RAW_BITS``-wide values.

    Returns:
        An integer ``0 <= n < upper``.
    """
    if upper < 1 or upper > RAW_MAX + 1:
        raise ValueError(f"upper must be in [1, {RAW_MAX + 1}], got {upper}")

    max_valid = RAW_MAX - (RAW_MAX + 1) % upper
    raw = rng.getrandbits(RAW_BITS)
    while raw > max_valid:
        raw = rng.getrandbits(RAW_BITS)
    return raw % upper
