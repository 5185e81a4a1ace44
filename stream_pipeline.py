"""Deterministic stream transform pipeline.

Two identically seeded generators feed a six-stage chain: generation,
concatenation, sign normalization, sorting, windowing and modulo reduction.
Each stage is a pure function over lists so it can be exercised on its own.

The 64-bit source is processed at 64-bit width by default; a width of 32
narrows it first, keeping the low 32 bits of every draw.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from seeded_random import Rand48, to_int32, to_int64

WIDTHS = {32: to_int32, 64: to_int64}

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    seed: int = int(os.getenv("PIPELINE_SEED", "0"))
    count: int = int(os.getenv("PIPELINE_COUNT", "10"))
    skip: int = int(os.getenv("PIPELINE_SKIP", "5"))
    limit: int = int(os.getenv("PIPELINE_LIMIT", "10"))
    modulus: int = int(os.getenv("PIPELINE_MODULUS", "1000"))
    width: int = int(os.getenv("PIPELINE_WIDTH", "64"))

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be non-negative")
        if self.skip < 0:
            raise ValueError("skip must be non-negative")
        if self.limit < 0:
            raise ValueError("limit must be non-negative")
        if self.modulus <= 0:
            raise ValueError("modulus must be positive")
        if self.width not in WIDTHS:
            raise ValueError("width must be 32 or 64")


def generate_sources(seed: int, count: int, width: int = 64) -> Tuple[List[int], List[int]]:
    """Draw the two source sequences.

    The first is ``count`` 64-bit values, narrowed to ``width`` bits by
    keeping the low bits, the second is ``count`` 32-bit values. Each comes
    from its own generator seeded with ``seed``.
    """
    narrow = WIDTHS[width]
    wide = [narrow(value) for value in Rand48(seed).longs(count)]
    ints = Rand48(seed).ints(count)
    return wide, ints


def concatenate(first: Sequence[int], second: Sequence[int]) -> List[int]:
    return [*first, *second]


def normalize_signs(values: Sequence[int], width: int = 32) -> List[int]:
    # abs of the minimum value does not fit in ``width`` bits and wraps back to it
    narrow = WIDTHS[width]
    return [narrow(abs(value)) for value in values]


def sort_ascending(values: Sequence[int]) -> List[int]:
    return sorted(values)


def window(values: Sequence[int], skip: int, limit: int) -> List[int]:
    """Skip the first ``skip`` values and keep at most ``limit`` after them."""
    if skip < 0 or limit < 0:
        raise ValueError("skip and limit must be non-negative")
    return list(values[skip:skip + limit])


def reduce_modulo(values: Sequence[int], modulus: int) -> List[int]:
    """Remainder of truncated division: the sign follows the dividend."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return [value % modulus if value >= 0 else -(-value % modulus) for value in values]


def run_pipeline(config: Optional[PipelineConfig] = None) -> List[int]:
    config = config or PipelineConfig()

    wide, ints = generate_sources(config.seed, config.count, config.width)
    values = concatenate(wide, ints)
    values = normalize_signs(values, config.width)
    values = sort_ascending(values)
    values = window(values, config.skip, config.limit)
    result = reduce_modulo(values, config.modulus)

    logger.debug(
        "Pipeline seed=%s width=%s produced %d values from %d drawn",
        config.seed,
        config.width,
        len(result),
        2 * config.count,
    )
    return result
