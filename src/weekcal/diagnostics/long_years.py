#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import weekcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "weekcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "weekcal[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not out:
        raise SystemExit("--calendars must name at least one week calendar")
    return out


def long_year_flags(np, calendar: str, start_year: int, end_year: int):
    years = np.arange(start_year, end_year + 1)
    flags = np.array([weekcal.long_year(int(y), calendar=calendar) for y in years], dtype=bool)
    return years, flags


def summarize(np, years, flags) -> dict:
    """Count of long years and the distribution of gaps between them."""
    long_years = years[flags]
    gaps = np.diff(long_years)
    values, counts = np.unique(gaps, return_counts=True)
    return {
        "n_years": int(years.size),
        "n_long": int(long_years.size),
        "fraction": float(long_years.size) / float(years.size) if years.size else 0.0,
        "mean_gap": float(gaps.mean()) if gaps.size else float("nan"),
        "gaps": {int(v): int(c) for v, c in zip(values, counts)},
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Long-year (53-week) statistics for week calendars.")
    p.add_argument("--calendars", default="iso_week,nrf,csco")
    p.add_argument("--start-year", type=int, default=1600)
    p.add_argument("--end-year", type=int, default=1999)
    p.add_argument("--out", default="", help="If set, save a barcode plot of long years to this file.")
    args = p.parse_args(argv)

    np = _need_numpy()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)
    rows = []
    for cal in calendars:
        years, flags = long_year_flags(np, cal, args.start_year, args.end_year)
        s = summarize(np, years, flags)
        rows.append((cal, years, flags))
        print(
            f"{cal:14s} long {s['n_long']:4d}/{s['n_years']:<4d} "
            f"({s['fraction']:.4f})  mean gap {s['mean_gap']:.3f}  gaps {s['gaps']}"
        )

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(14, 0.6 + 0.5 * len(rows)))
        for i, (cal, years, flags) in enumerate(rows):
            ax.scatter(years[flags], np.full(int(flags.sum()), i), marker="|", s=120, c="0.15")
        ax.set_yticks(range(len(rows)))
        ax.set_yticklabels([r[0] for r in rows])
        ax.set_xlabel("Calendar year")
        ax.set_title("53-week years")
        ax.tick_params(axis="y", length=0)
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"Saved: {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
