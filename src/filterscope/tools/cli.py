"""
Command-line front end for filterscope.

Runs one analysis over a CSV column (or the built-in demo signal), prints
the zeros and poles of the designed filter and a short Bode/candle summary,
and optionally writes every result to CSV files::

    filterscope --file weights.csv --column value --filter cheby1 \\
        --cutoff-period 14 --ripple 3 --output-dir out/

Settings come from ``--config`` (YAML) and are overridden by explicit flags.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from ..analysis.bode import magnitude_to_db
from ..config.runtime import FilterScopeConfig, config_from_mapping, load_config
from ..core.demo import demo_signal
from ..core.models import AnalysisState
from ..core.pipeline import run_analysis
from ..dataio import csv_writer
from ..dataio.log_loader import load_series
from ..errors import FilterScopeError
from .formatting import fmt_tick, format_roots

logger = logging.getLogger(__name__)

_OVERRIDES = {
    "filter_type": "filter_type",
    "cutoff_period": "cutoff_period",
    "order": "order",
    "ripple": "ripple_db",
    "attenuation": "attenuation_db",
    "sample_rate": "sample_rate",
    "bode_points": "bode_points",
    "candle_size": "candle_size",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filterscope",
        description="Pole/zero, Bode and candle analysis of a low-pass filtered series.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        help="CSV file with the series (header optional). Defaults to a demo signal.",
    )
    parser.add_argument(
        "-c",
        "--column",
        type=str,
        help="Column name or index to analyze (default: last column).",
    )
    parser.add_argument("--config", type=str, help="YAML configuration file.")
    parser.add_argument(
        "--filter",
        dest="filter_type",
        type=str,
        help="butterworth, chebyshev1 or chebyshev2 (aliases: butter, cheby1, cheby2).",
    )
    parser.add_argument(
        "--cutoff-period",
        type=float,
        help="Cutoff period in samples per cycle (>= 2).",
    )
    parser.add_argument("--order", type=int, help="Filter order.")
    parser.add_argument("--ripple", type=float, help="Chebyshev I passband ripple (dB).")
    parser.add_argument(
        "--attenuation", type=float, help="Chebyshev II stopband attenuation (dB)."
    )
    parser.add_argument(
        "--sample-rate",
        type=float,
        help="Samples per unit time for the Bode frequency axis (default: 1).",
    )
    parser.add_argument("--bode-points", type=int, help="Bode grid size (min 16).")
    parser.add_argument(
        "--candle-size",
        type=str,
        help="Samples per candle, or weekly/monthly/yearly.",
    )
    parser.add_argument(
        "--db",
        action="store_true",
        default=None,
        help="Report Bode magnitudes in dB instead of linear units.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        help="Directory for zeros/poles/bode/candles/spectrum/filtered CSV files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def resolve_config(args: argparse.Namespace) -> FilterScopeConfig:
    """Merge ``--config`` with explicit command-line overrides."""
    base = load_config(args.config).sanitized()
    mapping = {f.name: getattr(base, f.name) for f in fields(base)}
    for arg_name, field_name in _OVERRIDES.items():
        value = getattr(args, arg_name, None)
        if value is not None:
            mapping[field_name] = value
    if args.db is not None:
        mapping["db_scale"] = args.db
    return config_from_mapping(mapping)


def write_outputs(out_dir: Path, state: AnalysisState, *, db_scale: bool) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    csv_writer.write_roots(out_dir / "zeros.csv", state.zeros)
    csv_writer.write_roots(out_dir / "poles.csv", state.poles)
    csv_writer.write_bode(out_dir / "bode.csv", state.bode, db_scale=db_scale)
    csv_writer.write_candles(out_dir / "candles.csv", state.candles)
    csv_writer.write_series(out_dir / "spectrum.csv", state.spectrum, name="magnitude")
    csv_writer.write_series(out_dir / "filtered.csv", state.filtered_data, name="filtered")
    logger.info("Results written to %s", out_dir)


def print_summary(state: AnalysisState, *, db_scale: bool) -> None:
    print(f"Filter: {state.design.filter_type.label}, order {state.design.order}")
    print("Zeros:")
    print(format_roots(state.zeros))
    print("Poles:")
    print(format_roots(state.poles))

    finite = state.bode.finite()
    if len(finite):
        mags = magnitude_to_db(finite.magnitude) if db_scale else finite.magnitude
        unit = " dB" if db_scale else ""
        print(
            f"Bode: {len(state.bode)} points, "
            f"{fmt_tick(float(finite.freqs[0]))}..{fmt_tick(float(finite.freqs[-1]))}, "
            f"magnitude {fmt_tick(float(np.min(mags)))}..{fmt_tick(float(np.max(mags)))}{unit}"
        )
    print(f"Candles: {len(state.candles)} of {state.settings.candle_size} samples")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.file:
        data_path = Path(args.file).expanduser().resolve()
        if not data_path.exists():
            parser.error(f"Data file not found: {data_path}")
    else:
        data_path = None

    if data_path is None:
        logger.info("No --file given; using demo signal")
        raw = demo_signal()
    else:
        column: Optional[str] = args.column
        try:
            raw = load_series(data_path, column)
        except ValueError as exc:
            print(f"error: could not load {data_path}: {exc}", file=sys.stderr)
            return 1

    state = AnalysisState()
    try:
        state = run_analysis(state.with_data(raw), config.to_settings())
    except FilterScopeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_summary(state, db_scale=config.db_scale)
    if args.output_dir:
        write_outputs(Path(args.output_dir).expanduser(), state, db_scale=config.db_scale)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
