"""Deterministic uniform stream.

A linear congruential generator on a single 32-bit signed register:

    register <- register * A + C        (32-bit two's-complement wraparound)
    if register < 0: register += 2**31
    u = register / (2**31 - 1)

Python integers never overflow, so the wraparound is done explicitly with
`wrap_int32` after the multiply and again after the add. This keeps the
sequence bit-exact with any other implementation of the same recurrence.
"""

from __future__ import annotations

MULTIPLIER = 843314861
INCREMENT = 453816693

_MASK32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_MODULUS = 1 << 31
_DIVISOR = float(_MODULUS - 1)


def wrap_int32(value: int) -> int:
    """Reduce an arbitrary integer to the 32-bit signed range (two's complement)."""
    value &= _MASK32
    if value & _SIGN_BIT:
        value -= 1 << 32
    return value


class UniformStream:
    """Pseudo-random stream of reals in [0, 1].

    Each instance owns its register, so two simulations never share state.
    The register can reach 2**31 - 1, which maps to exactly 1.0 once per
    period of the generator.
    """

    def __init__(self, state: int = 0) -> None:
        self._state = wrap_int32(int(state))

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        reg = wrap_int32(self._state * MULTIPLIER)
        reg = wrap_int32(reg + INCREMENT)
        if reg < 0:
            reg += _MODULUS
        self._state = reg
        return reg / _DIVISOR
