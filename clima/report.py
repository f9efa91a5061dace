from __future__ import annotations

"""
Clima report generator
----------------------
This module writes a DOCX summary of a loaded collection and the current view.

Design goals:
- Keep Clima usable without python-docx until a report is requested (lazy import).
- Tables only: the report carries the numbers behind the charts, not images.
- Every score in the report is relative to the whole collection, exactly as
  the engine computes it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
import logging
import os

from .models import DataType
from .scoring import justice_band

logger = logging.getLogger("clima.report")


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "Clima Report"
    subtitle: str = "Climate justice across countries"
    dataset_name: str = "Clima country dataset"

    # How many rows to show in "top" tables
    top_n: int = 10

    # How many rows of the current view to print
    max_rows_view: int = 30

    # Optional: list of CLI commands that produced the current view
    command_log: Optional[List[str]] = None


METHODOLOGY = [
    "CJS = 2 × C × G / (C + G) × 100",
    "C = 1 - (log10(MtCO2 + 1) - min_log) / range_log, or 0 when range_log is 0",
    "G = 1 - ND-GAIN / 100",
    "min_log and range_log are taken over the whole collection.",
]


def generate_docx_report(engine, out_path: str, *, config: Optional[ReportConfig] = None) -> str:
    """
    Generate a DOCX report for a Clima engine.

    Sections: dataset facts, methodology, top-N tables per metric,
    region summary, the current view, reproducibility footer.
    """
    config = config or ReportConfig()

    # Lazy import: only required when "report" is used.
    try:
        from docx import Document
        from docx.shared import Pt
        from docx.enum.text import WD_ALIGN_PARAGRAPH
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    if not engine.countries:
        raise ValueError("No countries to report on (collection is empty).")

    ranks = engine.ranks()

    doc = Document()
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
        p = doc.add_paragraph()
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _kv(key: str, value: str) -> None:
        p = doc.add_paragraph()
        r = p.add_run(f"{key}: ")
        r.bold = True
        p.add_run(value)

    def _table(headers: List[str], rows: List[List[str]]) -> None:
        t = doc.add_table(rows=1, cols=len(headers))
        for cell, h in zip(t.rows[0].cells, headers):
            cell.text = h
        for values in rows:
            cells = t.add_row().cells
            for cell, v in zip(cells, values):
                cell.text = v

    _center_title(config.title, 22, bold=True)
    _center_title(config.subtitle, 12, italic=True)

    doc.add_paragraph("")
    _kv("Dataset", config.dataset_name)
    if engine.dataset_path:
        _kv("Data file", os.path.basename(str(engine.dataset_path)))
    _kv("Countries", str(len(engine.countries)))
    min_log, range_log = engine.scaling
    _kv("log10(MtCO2 + 1) range", f"{min_log:.4f} to {min_log + range_log:.4f}")

    doc.add_heading("Methodology", level=1)
    for line in METHODOLOGY:
        doc.add_paragraph(line, style="List Bullet")

    doc.add_heading("Top countries", level=1)
    for dtype, fmt in [
        (DataType.CLIMA_JUSTICE_SCORE, "{:.1f}"),
        (DataType.TERRITORIAL_MT_CO2, "{:,.1f}"),
        (DataType.ND_GAIN_SCORE, "{:.1f}"),
    ]:
        doc.add_paragraph(f"Top {config.top_n} by {dtype.label}")
        top = engine.topk(config.top_n, dtype)
        _table(
            ["#", "Country", dtype.label],
            [
                [str(i), c.name, fmt.format(
                    engine.score(c) if dtype is DataType.CLIMA_JUSTICE_SCORE
                    else c.territorial_mt_co2 if dtype is DataType.TERRITORIAL_MT_CO2
                    else c.nd_gain_score
                )]
                for i, c in enumerate(top, start=1)
            ],
        )
        doc.add_paragraph("")

    doc.add_heading("Regions", level=1)
    summary = engine.region_summary()
    _table(
        ["Region", "Countries", "Total MtCO2", "Mean ND-GAIN", "Mean CJS"],
        [
            [r.region, str(int(r.countries)), f"{r.total_mt_co2:,.1f}",
             f"{r.mean_nd_gain_score:.1f}", f"{r.mean_clima_justice_score:.1f}"]
            for r in summary.itertuples(index=False)
        ],
    )

    view = engine.view()
    doc.add_heading("Current view", level=1)
    _kv("Search", engine.state.search_text or "(none)")
    _kv("Sort", engine.state.sort_option.value)
    _kv("Matches", str(len(view)))
    _table(
        ["Rank", "Country", "Region", "MtCO2", "ND-GAIN", "CJS", "Band"],
        [
            [str(ranks[c.id]), c.name, engine.region(c).value, f"{c.territorial_mt_co2:,.1f}",
             f"{c.nd_gain_score:.1f}", f"{engine.score(c):.1f}", justice_band(engine.score(c))]
            for c in view[:config.max_rows_view]
        ],
    )
    if len(view) > config.max_rows_view:
        doc.add_paragraph(f"... ({len(view)} total, showing {config.max_rows_view})")

    # -----------------------------
    # Reproducibility footer
    # -----------------------------
    doc.add_paragraph("")
    doc.add_heading("Reproducibility footer", level=1)
    from . import __version__ as clima_version
    doc.add_paragraph(f"Clima version: {clima_version}")
    doc.add_paragraph(f"Report generated at: {datetime.now().isoformat(timespec='seconds')}")
    if config.command_log:
        doc.add_paragraph("Commands used (log):")
        for line in config.command_log:
            doc.add_paragraph(line, style="List Bullet")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    logger.info("report written to %s", out_path)
    return out_path
