from dataclasses import dataclass, replace
from pathlib import Path
import os

DEFAULT_DATASET = Path(__file__).resolve().parent / "data" / "clima_countries_data.json"


@dataclass(frozen=True)
class Settings:
    dataset_path: Path = DEFAULT_DATASET
    # rows in "Top N" charts and report tables
    top_n: int = 10
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Defaults, overridden by CLIMA_DATASET / CLIMA_TOP_N / CLIMA_LOG_LEVEL."""
        s = cls()
        if os.environ.get("CLIMA_DATASET"):
            s = replace(s, dataset_path=Path(os.environ["CLIMA_DATASET"]))
        if os.environ.get("CLIMA_TOP_N"):
            try:
                s = replace(s, top_n=int(os.environ["CLIMA_TOP_N"]))
            except ValueError:
                raise ValueError(f"CLIMA_TOP_N must be an integer, got {os.environ['CLIMA_TOP_N']!r}") from None
        if os.environ.get("CLIMA_LOG_LEVEL"):
            s = replace(s, log_level=os.environ["CLIMA_LOG_LEVEL"].upper())
        return s
