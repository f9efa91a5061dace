"""
Dataset loader (JSON -> Country list)
=====================================

This module reads the bundled country dataset (a JSON array of objects) and
converts each entry into a `Country` object.

Key ideas:
- We accept a few spellings per column (`NDGainScore`, `ndGainScore`, ...).
- Conversion helpers (_to_float/_to_str) handle blanks and bad numbers.
- Anything the scorer cannot work with (negative emissions, duplicate ids,
  missing metrics) is rejected here with a DatasetError, so the scoring and
  sorting code can assume well-formed records.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union
import logging
import re
import pandas as pd
from .models import Country

logger = logging.getLogger("clima.loader")


class DatasetError(ValueError):
    """The dataset is missing, unreadable or contains invalid records."""


def _to_float(x) -> Optional[float]:
    """Convert a cell to float, returning None if missing/invalid."""
    if x is None:
        return None
    try:
        if pd.isna(x): return None
    except (TypeError, ValueError):
        return None
    try: return float(x)
    except (TypeError, ValueError): return None


def _to_str(x) -> str:
    if x is None: return ""
    try:
        if pd.isna(x): return ""
    except (TypeError, ValueError):
        pass
    return str(x).strip()


def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", str(s).lower())


def _col(df: pd.DataFrame, *names: str, required: bool = True) -> Optional[str]:
    cols = list(df.columns)
    for n in names:
        if n in cols:
            return n
    norm_map = {_norm(c): c for c in cols}
    for n in names:
        nn = _norm(n)
        if nn in norm_map:
            return norm_map[nn]
    if required:
        raise DatasetError(f"Missing required field. Tried={names}. Available={cols}")
    return None


def countries_from_frame(df: pd.DataFrame) -> List[Country]:
    """Convert a DataFrame (one row per country) into validated Country records."""
    df = df.rename(columns={c: str(c).strip() for c in df.columns})
    if df.empty and len(df.columns) == 0:
        return []

    id_col = _col(df, "id", "iso2", "code")
    name_col = _col(df, "name", "country")
    co2_col = _col(df, "territorialMtCO2", "territorial_mt_co2", "MtCO2")
    gain_col = _col(df, "NDGainScore", "ndGainScore", "nd_gain_score", "ND-GAIN")
    lat_col = _col(df, "latitude", "lat", required=False)
    lon_col = _col(df, "longitude", "lon", "lng", required=False)

    countries: List[Country] = []
    seen = set()
    for i, row in df.iterrows():
        cid = _to_str(row[id_col]).lower()
        name = _to_str(row[name_col])
        if not cid or not name:
            raise DatasetError(f"Row {i}: id and name are required")
        if cid in seen:
            raise DatasetError(f"Row {i}: duplicate country id {cid!r}")
        seen.add(cid)

        co2 = _to_float(row[co2_col])
        gain = _to_float(row[gain_col])
        if co2 is None or gain is None:
            raise DatasetError(f"Row {i} ({cid}): territorial MtCO2 and ND-GAIN score must be numbers")
        if co2 < 0:
            raise DatasetError(f"Row {i} ({cid}): negative territorial MtCO2 ({co2})")

        countries.append(Country(
            id=cid,
            name=name,
            territorial_mt_co2=co2,
            nd_gain_score=gain,
            latitude=_to_float(row[lat_col]) if lat_col else None,
            longitude=_to_float(row[lon_col]) if lon_col else None,
        ))
    return countries


def load_countries_json(path: Union[str, Path]) -> List[Country]:
    """Load the country dataset from a JSON array file."""
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"Dataset not found: {path}")
    try:
        df = pd.read_json(path, orient="records", dtype=False, precise_float=True)
    except ValueError as e:
        raise DatasetError(f"Cannot decode {path}: {e}") from e

    countries = countries_from_frame(df)
    logger.info("loaded %d countries from %s", len(countries), path)
    return countries
