"""
Synthetic record generation for the Debug Logging Benchmark.

Field values are random on every run unless a seed is given.
"""

from __future__ import annotations

import random
import string
from typing import List, Optional

from debuglog_bench.domain.models import Record

ALPHANUMERIC = string.ascii_letters + string.digits
ALPHABETIC = string.ascii_letters
NUMERIC = string.digits

EMAIL_DOMAIN = "@example.com"


def _random_string(rng: random.Random, alphabet: str, length: int) -> str:
    return "".join(rng.choices(alphabet, k=length))


def _generate_record(rng: random.Random) -> Record:
    return Record(
        name="Name " + _random_string(rng, ALPHANUMERIC, 20),
        address="Address " + _random_string(rng, ALPHANUMERIC, 50),
        phone_number=_random_string(rng, NUMERIC, 10),
        email=_random_string(rng, ALPHABETIC, 10) + EMAIL_DOMAIN,
        city="City " + _random_string(rng, ALPHABETIC, 10),
        country="Country " + _random_string(rng, ALPHABETIC, 10),
        postal_code=_random_string(rng, NUMERIC, 6),
    )


def generate_records(count: int, seed: Optional[int] = None) -> List[Record]:
    """
    Build `count` randomized records.

    Parameters
    ----------
    count : int
        Number of records to generate. Zero yields an empty list.
    seed : int | None
        Optional RNG seed for reproducible datasets. Unseeded by default.

    Returns
    -------
    List[Record]
        The generated dataset, in generation order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = random.Random(seed)
    return [_generate_record(rng) for _ in range(count)]


__all__ = ["generate_records"]
