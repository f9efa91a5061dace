"""
Indices (precomputed lookup tables)
===================================

Clima builds two small indices over the loaded collection:

- `by_id["us"]` gives the position of a country in the collection.
- `by_region[Region.EUROPE]` gives the positions of all European countries,
  in collection order.

The collection never changes after loading, so the indices are built once.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence
from .models import Country, Region
from .regions import region_of


@dataclass
class Indices:
    """Container of precomputed indices for fast lookups."""
    by_id: Dict[str, int]
    by_region: Dict[Region, List[int]]


def build_indices(countries: Sequence[Country]) -> Indices:
    """Build indices from the loaded collection.

    Raises ValueError if two countries share an id.
    """
    by_id: Dict[str, int] = {}
    by_region: Dict[Region, List[int]] = {r: [] for r in Region}

    for pos, c in enumerate(countries):
        if c.id in by_id:
            raise ValueError(f"Duplicate country id: {c.id!r}")
        by_id[c.id] = pos
        by_region[region_of(c)].append(pos)

    return Indices(by_id=by_id, by_region=by_region)
