"""
Shared fixtures.

The `five` collection is built so that log10(MtCO2 + 1) lands on whole
numbers (0, 1, 2, 3), which keeps expected scores easy to derive by hand:

    id  name           MtCO2  ND-GAIN   C      G     CJS
    ke  Kenya              9     40    2/3    0.60   63.157...
    no  Norway            99     75    1/3    0.25   28.571...
    tv  Tuvalu             0     40    1      0.60   75.0
    us  United States    999     67    0      0.33    0.0
    tr  Türkiye           99     50    1/3    0.50   40.0
"""

import pytest

from clima.engine import Clima
from clima.models import Country


def make_country(cid, name, co2, gain, lat=None, lon=None):
    return Country(id=cid, name=name, territorial_mt_co2=co2, nd_gain_score=gain, latitude=lat, longitude=lon)


KE = make_country("ke", "Kenya", 9.0, 40.0, -0.02, 37.91)
NO = make_country("no", "Norway", 99.0, 75.0, 60.47, 8.47)
TV = make_country("tv", "Tuvalu", 0.0, 40.0)
US = make_country("us", "United States", 999.0, 67.0, 37.09, -95.71)
TR = make_country("tr", "Türkiye", 99.0, 50.0)


@pytest.fixture
def five() -> list:
    return [KE, NO, TV, US, TR]


@pytest.fixture
def engine(five) -> Clima:
    return Clima(countries=five)


@pytest.fixture
def alpha_beta() -> list:
    return [
        make_country("a", "Alpha", 0.0, 100.0),
        make_country("b", "Beta", 1000.0, 0.0),
    ]
