"""Seeded pseudo-random stream for reproducible simulations.

Everything here works on 32-bit unsigned words so that a given seed
yields the same sequence on every interpreter and platform.
"""

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296


def imul(a: int, b: int) -> int:
    """Multiply two 32-bit words, keeping the low 32 bits."""
    return ((a & MASK_32) * (b & MASK_32)) & MASK_32


def derive_seed(text: str) -> int:
    """Derive a 32-bit seed by summing the code points of ``text``.

    Args:
        text: Any string, including the empty string.

    Returns:
        Unsigned 32-bit seed.
    """
    seed = 0
    for char in text:
        seed = (seed + ord(char)) & MASK_32
    return seed


class Mulberry32:
    """mulberry32 generator producing floats in ``[0, 1)``."""

    def __init__(self, seed: int):
        self._state = int(seed) & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        """Advance the state and return the next mixed 32-bit word."""
        self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
        t = self._state
        t = imul(t ^ (t >> 15), t | 1)
        t = t ^ ((t + imul(t ^ (t >> 7), t | 61)) & MASK_32)
        return (t ^ (t >> 14)) & MASK_32

    def next(self) -> float:
        """Return the next value in ``[0, 1)``."""
        return self.next_uint32() / TWO_POW_32

    __call__ = next
