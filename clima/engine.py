"""
Core engine (Clima)
===================

Clima works like a tiny offline analytics engine over one immutable
collection of countries:

1) Load dataset -> list of Country records (immutable)
2) Build indices and the collection's log-CO2 scaling, once
3) Keep a *view state*: search text, sort option, selected country
4) Searching/sorting/selecting only change the view state
5) Scores, ranks, comparisons, charts and exports read from the collection

The module-level functions are pure and usable without the `Clima` class.
Justice scores are always relative to the full collection passed in, never
to a filtered subset.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import heapq, logging
from .models import Country, DataType, Region, SortOption
from .indices import Indices, build_indices
from .dsa import merge_sort
from .regions import region_of
from .scoring import clima_justice_score, log_co2_scaling
from .compare import CountryComparison, compare_countries

logger = logging.getLogger("clima.engine")


class UnknownCountryError(KeyError):
    """Raised when a country id is not part of the loaded collection."""


# ---------------- Pure operations ----------------

def normalize_name(text: str) -> str:
    """Lowercase and fold "ü" to "u" for prefix search."""
    return text.lower().replace("ü", "u")


def matches_prefix(country: Country, name_prefix: str) -> bool:
    return normalize_name(country.name).startswith(normalize_name(name_prefix))


def metric_value(country: Country, data_type: DataType, min_log: float, range_log: float) -> float:
    if data_type is DataType.CLIMA_JUSTICE_SCORE:
        return clima_justice_score(country, min_log, range_log)
    if data_type is DataType.ND_GAIN_SCORE:
        return country.nd_gain_score
    return country.territorial_mt_co2


def _sort_key(option: SortOption, scores: Dict[str, float]) -> Callable[[Country], object]:
    if option in (SortOption.NAME_A_TO_Z, SortOption.NAME_Z_TO_A):
        return lambda c: c.name
    if option in (SortOption.CLIMA_JUSTICE_SCORE_HIGH_TO_LOW, SortOption.CLIMA_JUSTICE_SCORE_LOW_TO_HIGH):
        return lambda c: scores[c.id]
    if option in (SortOption.ND_GAIN_SCORE_HIGH_TO_LOW, SortOption.ND_GAIN_SCORE_LOW_TO_HIGH):
        return lambda c: c.nd_gain_score
    return lambda c: c.territorial_mt_co2


def _justice_scores(countries: Sequence[Country], scaling: Optional[Tuple[float, float]] = None) -> Dict[str, float]:
    min_log, range_log = scaling if scaling is not None else log_co2_scaling(countries)
    return {c.id: clima_justice_score(c, min_log, range_log) for c in countries}


def filter_and_sort(
    countries: Sequence[Country],
    name_prefix: str,
    option: SortOption,
    scaling: Optional[Tuple[float, float]] = None,
) -> List[Country]:
    """Return the countries whose name starts with `name_prefix`, ordered by `option`.

    Justice scores use the scaling of the *full* `countries` collection
    (pass `scaling` to reuse an already computed pair). Ties keep input order.
    """
    scores: Dict[str, float] = {}
    if option in (SortOption.CLIMA_JUSTICE_SCORE_HIGH_TO_LOW, SortOption.CLIMA_JUSTICE_SCORE_LOW_TO_HIGH):
        scores = _justice_scores(countries, scaling)
    kept = [c for c in countries if matches_prefix(c, name_prefix)]
    return merge_sort(kept, key=_sort_key(option, scores), reverse=option.descending)


def justice_order(countries: Sequence[Country], scaling: Optional[Tuple[float, float]] = None) -> List[Country]:
    """The full collection sorted by justice score, highest first."""
    scores = _justice_scores(countries, scaling)
    return merge_sort(list(countries), key=lambda c: scores[c.id], reverse=True)


def rank_by_justice_score(
    countries: Sequence[Country],
    target: Country,
    scaling: Optional[Tuple[float, float]] = None,
) -> int:
    """1-based justice-score rank of `target` in `countries`, or 0 if absent."""
    for pos, c in enumerate(justice_order(countries, scaling), start=1):
        if c == target:
            return pos
    return 0


def top_k(
    countries: Sequence[Country],
    k: int,
    data_type: DataType,
    scaling: Optional[Tuple[float, float]] = None,
) -> List[Country]:
    """The `k` countries with the highest value of `data_type`, highest first.

    Equal values favour the country that comes first in `countries`.
    """
    if k <= 0:
        return []
    min_log, range_log = scaling if scaling is not None else log_co2_scaling(countries)
    heap: List[tuple] = []
    for pos, c in enumerate(countries):
        # -pos makes earlier countries win ties
        item = (metric_value(c, data_type, min_log, range_log), -pos)
        if len(heap) < k:
            heapq.heappush(heap, item)
        elif item > heap[0]:
            heapq.heapreplace(heap, item)
    heap.sort(reverse=True)
    return [countries[-neg_pos] for _, neg_pos in heap]


# ---------------- Stateful view engine ----------------

@dataclass(frozen=True)
class ViewState:
    """What the user is currently looking at."""
    search_text: str = ""
    sort_option: SortOption = SortOption.NAME_A_TO_Z
    selected_id: Optional[str] = None


@dataclass
class Clima:
    """Offline climate justice engine.

    The engine stores:
    - countries: the loaded collection (never modified)
    - idx: precomputed lookups by id and region
    - scaling: (min_log, range_log) of the collection, computed once
    - state: current search text / sort option / selection

    Searches, sorts and selections replace `state` only.
    """
    countries: List[Country]
    dataset_path: Optional[str] = None
    # Stores CLI commands (for reproducibility in reports)
    command_log: List[str] = field(default_factory=list)
    idx: Indices = field(init=False)
    scaling: Tuple[float, float] = field(init=False)
    state: ViewState = field(init=False)

    # Stacks for undo/redo (store previous view states)
    _undo: List[ViewState] = field(default_factory=list, init=False)
    _redo: List[ViewState] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.idx = build_indices(self.countries)
        self.scaling = log_co2_scaling(self.countries)
        self.state = ViewState()
        logger.debug("engine ready: %d countries, scaling=%s", len(self.countries), self.scaling)

    # ---------------- History (Stacks) ----------------
    def _set_state(self, new_state: ViewState) -> None:
        self._undo.append(self.state)
        self._redo.clear()
        self.state = new_state

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.state)
        self.state = self._undo.pop()
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.state)
        self.state = self._redo.pop()
        return True

    # ---------------- View state ----------------
    def reset(self) -> None:
        """Clear search, selection and sort."""
        self._set_state(ViewState())

    def search(self, name_prefix: str) -> None:
        self._set_state(replace(self.state, search_text=name_prefix))

    def sort_by(self, option: SortOption) -> None:
        self._set_state(replace(self.state, sort_option=option))

    def select(self, country_id: str) -> Country:
        country = self.get(country_id)
        self._set_state(replace(self.state, selected_id=country.id))
        return country

    def clear_selection(self) -> None:
        self._set_state(replace(self.state, selected_id=None))

    @property
    def selected(self) -> Optional[Country]:
        if self.state.selected_id is None:
            return None
        return self.get(self.state.selected_id)

    def view(self) -> List[Country]:
        """The countries matching the current search, in the current order."""
        return filter_and_sort(self.countries, self.state.search_text, self.state.sort_option, scaling=self.scaling)

    # ---------------- Lookups ----------------
    def get(self, country_id: str) -> Country:
        pos = self.idx.by_id.get(country_id.strip().lower())
        if pos is None:
            raise UnknownCountryError(country_id)
        return self.countries[pos]

    def in_region(self, region: Region) -> List[Country]:
        return [self.countries[i] for i in self.idx.by_region[region]]

    def score(self, country: Country) -> float:
        return clima_justice_score(country, *self.scaling)

    def rank(self, country: Country) -> int:
        return rank_by_justice_score(self.countries, country, scaling=self.scaling)

    def ranks(self) -> Dict[str, int]:
        """Justice-score rank of every country, keyed by id."""
        return {c.id: pos for pos, c in enumerate(justice_order(self.countries, self.scaling), start=1)}

    def region(self, country: Country) -> Region:
        return region_of(country)

    def compare(self, left_id: str, right_id: str) -> CountryComparison:
        return compare_countries(self.get(left_id), self.get(right_id), *self.scaling)

    def topk(self, k: int, data_type: DataType) -> List[Country]:
        return top_k(self.countries, k, data_type, scaling=self.scaling)

    # ---------------- Charts ----------------
    def region_summary(self):
        from .charts import region_summary
        return region_summary(self.countries)

    def chart(self, chart_type, top_n: int = 10):
        from .charts import chart_series
        return chart_series(chart_type, self.countries, top_n=top_n)

    # ---------------- Output operations ----------------
    def _rows(self) -> List[Dict[str, object]]:
        ranks = self.ranks()
        return [
            {
                "id": c.id,
                "name": c.name,
                "region": region_of(c).value,
                "territorial_mt_co2": c.territorial_mt_co2,
                "nd_gain_score": c.nd_gain_score,
                "clima_justice_score": self.score(c),
                "clima_justice_rank": ranks[c.id],
                "latitude": c.latitude,
                "longitude": c.longitude,
            }
            for c in self.view()
        ]

    def export_csv(self, path: str) -> int:
        """Write the current view to CSV. Returns the number of rows."""
        import csv
        rows = self._rows()
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["id", "name", "region", "territorial_mt_co2", "nd_gain_score",
                        "clima_justice_score", "clima_justice_rank", "latitude", "longitude"])
            for r in rows:
                w.writerow([r["id"], r["name"], r["region"], r["territorial_mt_co2"], r["nd_gain_score"],
                            f"{r['clima_justice_score']:.4f}", r["clima_justice_rank"],
                            "" if r["latitude"] is None else r["latitude"],
                            "" if r["longitude"] is None else r["longitude"]])
        logger.info("exported %d rows to %s", len(rows), path)
        return len(rows)

    def export_json(self, path: str) -> int:
        """Write the current view to JSON (keeps field names). Returns the number of rows."""
        import json
        rows = self._rows()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        logger.info("exported %d rows to %s", len(rows), path)
        return len(rows)
