"""
Clima Command Line Interface (CLI)
==================================

Interactive terminal program, run like:

    python -m clima.cli
    python -m clima.cli --json "path/to/countries.json"

It loads the dataset once, then maps REPL commands onto engine methods
(search, sort, select, compare, charts, export, report).

The CLI never modifies the dataset file.
"""

from __future__ import annotations
import argparse, logging, shlex
from dataclasses import replace
from pathlib import Path
from typing import List, Optional
from .config import Settings
from .loader import load_countries_json
from .engine import Clima
from .models import Country, DataType, SortOption
from .charts import ChartType
from .scoring import emissions_tier, justice_band, readiness_tier

HELP_TEXT = """
Clima commands (grouped)
------------------------

1) View / Inspect
   help
   stats
   show [n]                          (example: show 20)
   values [prefix]                   (example: values ni)
   country <id>                      (example: country ke)

2) Search / Sort / Select
   search [prefix]                   (example: search new; no prefix clears)
   sort <field> [asc|desc]           (fields: name, justice, gain, co2)
   select <id> | clear
   reset

3) Compare / Rank
   compare <id> <id>                 (example: compare us td)
   top <k> <metric>                  (example: top 10 justice)

4) Charts (data only)
   regions
   chart <name>                      (example: chart bubble_chart)
   charts                            (list chart names)

5) Export (current view)
   export csv "<out.csv>"
   export json "<out.json>"
   report "<out.docx>"

6) History
   undo
   redo

7) Exit
   quit
"""


def build_engine(settings: Settings) -> Clima:
    countries = load_countries_json(settings.dataset_path)
    return Clima(countries=countries, dataset_path=str(settings.dataset_path))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the Clima CLI.

    1) Load dataset
    2) Build the engine
    3) Start an interactive REPL
    """
    settings = Settings.from_env()
    ap = argparse.ArgumentParser(prog="clima")
    ap.add_argument("--json", default=None, help="Path to the country dataset (JSON array)")
    ap.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.json:
        settings = replace(settings, dataset_path=Path(args.json))

    print("Loading dataset...")
    engine = build_engine(settings)
    top_n = settings.top_n

    print(f"Loaded {len(engine.countries)} countries. Type 'help' for commands.")
    while True:
        try:
            line = input("clima> ")
            # Keep a lightweight log of commands for the report (reproducibility).
            stripped = line.strip()
            if stripped:
                cmd0 = stripped.split()[0].lower()
                if cmd0 not in ("help", "show", "values", "stats", "country", "charts", "quit", "exit"):
                    engine.command_log.append(stripped)
        except EOFError:
            break
        if not stripped:
            continue
        if stripped.lower() in ("quit", "exit"):
            break
        try:
            handle(engine, stripped, top_n=top_n)
        except Exception as e:
            logging.getLogger("clima.cli").debug("command failed: %s", stripped, exc_info=True)
            print(f"Error: {e}")


def handle(engine: Clima, line: str, top_n: int = 10) -> None:
    """Handle one CLI command line."""
    parts = shlex.split(line)
    if not parts:
        return
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP_TEXT)
        return

    if cmd == "stats":
        min_log, range_log = engine.scaling
        print(f"Countries: {len(engine.countries)} | In view: {len(engine.view())}")
        print(f"Search: {engine.state.search_text!r} | Sort: {engine.state.sort_option.value}")
        sel = engine.selected
        print(f"Selected: {sel.name if sel else '-'}")
        print(f"log10(MtCO2+1): min={min_log:.4f} range={range_log:.4f}")
        return

    if cmd == "reset":
        engine.reset()
        print("State reset.")
        return

    if cmd == "undo":
        print("Undone." if engine.undo() else "Nothing to undo.")
        return

    if cmd == "redo":
        print("Redone." if engine.redo() else "Nothing to redo.")
        return

    if cmd == "search":
        prefix = " ".join(parts[1:])
        engine.search(prefix)
        n = len(engine.view())
        if n == 0:
            print("No countries found. Search matches name prefixes only.")
        else:
            print(f"Search={prefix!r}. Size={n}")
        return

    if cmd == "sort":
        if len(parts) < 2:
            raise ValueError("usage: sort <field> [asc|desc]")
        field = parts[1]
        default = "asc" if field.lower() == "name" else "desc"
        order = parts[2].lower() if len(parts) >= 3 else default
        if order not in ("asc", "desc"):
            raise ValueError("order must be: asc | desc")
        option = SortOption.from_field(field, descending=(order == "desc"))
        engine.sort_by(option)
        print(f"Sorted by {option.value}. Showing 10:")
        _print_rows(engine, engine.view()[:10])
        return

    if cmd == "show":
        n = int(parts[1]) if len(parts) >= 2 else 10
        sel = engine.selected
        rows = [sel] if sel else engine.view()[:n]
        _print_rows(engine, rows)
        return

    if cmd == "values":
        prefix = " ".join(parts[1:])
        vals = [c for c in engine.countries if not prefix or c.name.lower().startswith(prefix.lower())]
        for c in vals[:50]:
            print(f"{c.id}  {c.name}")
        if len(vals) > 50:
            print(f"... ({len(vals)} total, showing 50)")
        return

    if cmd in ("country", "select"):
        if len(parts) < 2:
            raise ValueError(f"usage: {cmd} <id>")
        c = engine.select(parts[1]) if cmd == "select" else engine.get(parts[1])
        _print_detail(engine, c)
        return

    if cmd == "clear":
        engine.clear_selection()
        print("Selection cleared.")
        return

    if cmd == "compare":
        if len(parts) < 3:
            raise ValueError("usage: compare <id> <id>")
        cmp = engine.compare(parts[1], parts[2])
        print(f"{cmp.left.name} ({cmp.left_region.value})  vs  {cmp.right.name} ({cmp.right_region.value})")
        for m in cmp.metrics():
            pct = f" ({m.percent_difference:.1f}%)" if m.percent_difference is not None else ""
            better = {"left": cmp.left.name, "right": cmp.right.name}.get(m.winner, "tie")
            print(f"  {m.data_type.label:<20} {m.left:>10.1f} | {m.right:<10.1f} diff={m.difference:.1f}{pct} better={better}")
        return

    if cmd == "top":
        if len(parts) < 3:
            raise ValueError("usage: top <k> <metric>")
        k = int(parts[1]); dtype = DataType.from_name(parts[2])
        out = engine.topk(k, dtype)
        print(f"Top {len(out)} by {dtype.label}:")
        _print_rows(engine, out)
        return

    if cmd == "regions":
        print(engine.region_summary().to_string(index=False, float_format=lambda v: f"{v:.1f}"))
        return

    if cmd == "charts":
        for ct in ChartType:
            print(f"{ct.name.lower():<45} {ct.value}")
        return

    if cmd == "chart":
        if len(parts) < 2:
            raise ValueError("usage: chart <name>  (see 'charts')")
        ct = ChartType.from_name(" ".join(parts[1:]))
        df = engine.chart(ct, top_n=top_n)
        print(ct.value)
        print(df.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
        return

    if cmd == "export":
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        if not engine.view():
            print("Nothing to export: current view is empty.")
            return
        if fmt == "csv":
            n = engine.export_csv(out_path)
        elif fmt == "json":
            n = engine.export_json(out_path)
        else:
            raise ValueError("export format must be: csv | json")
        print(f"Exported {n} rows to {out_path}")
        return

    if cmd == "report":
        if len(parts) < 2:
            raise ValueError('usage: report "<out.docx>"')
        from .report import generate_docx_report, ReportConfig
        cfg = ReportConfig(top_n=top_n, command_log=engine.command_log)
        generate_docx_report(engine, parts[1], config=cfg)
        print(f"Report written to {parts[1]}")
        return

    print("Unknown command. Type 'help'.")


def _print_rows(engine: Clima, rows: List[Country]) -> None:
    for c in rows:
        print(f"[{c.id}] {c.name} | {engine.region(c).value} | co2={c.territorial_mt_co2:.1f} "
              f"gain={c.nd_gain_score:.1f} cjs={engine.score(c):.1f}")


def _print_detail(engine: Clima, c: Country) -> None:
    score = engine.score(c)
    print(f"{c.name} [{c.id}] - {engine.region(c).value}")
    print(f"  Clima Justice Score: {score:.1f} (rank {engine.rank(c)} of {len(engine.countries)})")
    print(f"    {justice_band(score)}")
    print(f"  Territorial MtCO2:   {c.territorial_mt_co2:,.1f} ({emissions_tier(c.territorial_mt_co2)})")
    print(f"  ND-Gain Score:       {c.nd_gain_score:.1f} ({readiness_tier(c.nd_gain_score)})")
    coord = c.coordinate()
    if coord:
        print(f"  Location:            {coord[0]:.2f}, {coord[1]:.2f}")


if __name__ == "__main__":
    main()
