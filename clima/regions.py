"""
Region lookup table
===================

Every country id maps to exactly one of the six `Region` values through a
single static table (region -> member ids). The table is inverted once at
import time into an id -> region mapping, so a lookup is one dict access.

Ids missing from the table fall back to `DEFAULT_REGION` (Asia). That
fallback keeps older datasets working; it is not a statement about where
an unknown country lies.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping, Tuple
from .models import Country, Region

DEFAULT_REGION = Region.ASIA

REGION_MEMBERS: Mapping[Region, Tuple[str, ...]] = MappingProxyType({
    Region.AFRICA: (
        "dz", "ao", "bj", "bw", "bf", "bi", "cv", "cm", "cf", "td", "km", "cg",
        "cd", "ci", "dj", "eg", "gq", "er", "sz", "et", "ga", "gm", "gh", "gn",
        "gw", "ke", "ls", "lr", "ly", "mg", "mw", "ml", "mr", "mu", "ma", "mz",
        "na", "ne", "ng", "rw", "st", "sn", "sc", "sl", "so", "za", "ss", "sd",
        "tz", "tg", "tn", "ug", "eh", "zm", "zw", "re", "yt", "sh",
    ),
    Region.ASIA: (
        "af", "am", "az", "bh", "bd", "bt", "bn", "kh", "cn", "cy", "ge", "hk",
        "in", "id", "ir", "iq", "il", "jp", "jo", "kz", "kw", "kg", "la", "lb",
        "mo", "my", "mv", "mn", "mm", "np", "kp", "om", "pk", "ps", "ph", "qa",
        "sa", "sg", "kr", "lk", "sy", "tw", "tj", "th", "tl", "tr", "tm", "ae",
        "uz", "vn", "ye",
    ),
    Region.EUROPE: (
        "al", "ad", "at", "by", "be", "ba", "bg", "hr", "cz", "dk", "ee", "fo",
        "fi", "fr", "de", "gi", "gr", "hu", "is", "ie", "it", "xk", "lv", "li",
        "lt", "lu", "mt", "md", "mc", "me", "nl", "mk", "no", "pl", "pt", "ro",
        "ru", "sm", "rs", "sk", "si", "es", "se", "ch", "ua", "gb", "va",
    ),
    Region.NORTH_AMERICA: (
        "ag", "bs", "bb", "bz", "bm", "ca", "cr", "cu", "dm", "do", "sv", "gl",
        "gd", "gt", "ht", "hn", "jm", "mx", "ni", "pa", "pr", "kn", "lc", "vc",
        "tt", "us", "aw", "cw", "ky", "tc", "vg", "ai", "ms", "pm",
    ),
    Region.SOUTH_AMERICA: (
        "ar", "bo", "br", "cl", "co", "ec", "gy", "py", "pe", "sr", "uy", "ve",
        "gf", "fk",
    ),
    Region.OCEANIA: (
        "au", "fj", "ki", "mh", "fm", "nr", "nz", "pw", "pg", "ws", "sb", "to",
        "tv", "vu", "nc", "pf", "ck", "nu",
    ),
})


def _invert(members: Mapping[Region, Tuple[str, ...]]) -> Mapping[str, Region]:
    out: Dict[str, Region] = {}
    for region, ids in members.items():
        for cid in ids:
            if cid in out:
                raise ValueError(f"id {cid!r} listed under {out[cid].value} and {region.value}")
            out[cid] = region
    return MappingProxyType(out)


REGION_BY_ID: Mapping[str, Region] = _invert(REGION_MEMBERS)


def region_for_id(country_id: str) -> Region:
    return REGION_BY_ID.get(country_id.strip().lower(), DEFAULT_REGION)


def region_of(country: Country) -> Region:
    """Return the region of `country` (Asia when its id is not in the table)."""
    return region_for_id(country.id)
