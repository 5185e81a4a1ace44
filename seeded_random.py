"""Seeded random number generator utility.

This module exposes a 48-bit linear congruential generator (the classic
``rand48`` constants) that produces reproducible sequences of signed 32-bit
and 64-bit integers for a given seed. It also offers a simple CLI for
printing generated numbers either line-by-line or as JSON.
"""

from __future__ import annotations

import argparse
import json
from typing import Iterable, List

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
STATE_BITS = 48
STATE_MASK = (1 << STATE_BITS) - 1


def to_int32(value: int) -> int:
    """Narrow ``value`` to a signed 32-bit integer, keeping the low bits."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def to_int64(value: int) -> int:
    """Narrow ``value`` to a signed 64-bit integer, keeping the low bits."""
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value >= 1 << 63 else value


class Rand48:
    """Local seeded 48-bit LCG. No global random state touched."""

    def __init__(self, seed: int) -> None:
        self._state = (seed ^ MULTIPLIER) & STATE_MASK

    def _next(self, bits: int) -> int:
        self._state = (self._state * MULTIPLIER + ADDEND) & STATE_MASK
        return to_int32(self._state >> (STATE_BITS - bits))

    def next_int(self) -> int:
        """Return the next signed 32-bit value."""
        return self._next(32)

    def next_long(self) -> int:
        """Return the next signed 64-bit value, built from two 32-bit draws."""
        return to_int64((self._next(32) << 32) + self._next(32))

    def ints(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.next_int() for _ in range(count)]

    def longs(self, count: int) -> List[int]:
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.next_long() for _ in range(count)]


def generate_random_numbers(seed: int, count: int, wide: bool = False) -> List[int]:
    """Generate a deterministic list of pseudo-random integers.

    Args:
        seed: Seed to initialize the RNG.
        count: How many numbers to generate. Must be non-negative.
        wide: Draw signed 64-bit values instead of signed 32-bit ones.

    Returns:
        A list of integers from a freshly seeded :class:`Rand48`.

    Raises:
        ValueError: If ``count`` is negative.
    """

    rng = Rand48(seed)
    return rng.longs(count) if wide else rng.ints(count)


def _format_numbers(numbers: Iterable[int], as_json: bool) -> str:
    if as_json:
        return json.dumps({"numbers": list(numbers)})
    return "\n".join(str(n) for n in numbers)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, required=True, help="Seed for the RNG")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="How many numbers to generate (default: 10)",
    )
    parser.add_argument(
        "--wide",
        action="store_true",
        help="Generate signed 64-bit numbers instead of 32-bit ones",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated numbers as a JSON object",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    numbers = generate_random_numbers(args.seed, args.count, args.wide)
    print(_format_numbers(numbers, args.json))


if __name__ == "__main__":
    main()
