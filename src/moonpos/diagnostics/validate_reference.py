#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from moonpos.reference import astro_args as aa
from moonpos.reference import lunar
from moonpos.reference.periodic_terms import J2000_JDE
from moonpos.ephemeris.de422 import DE422Moon, DE422_MAX_JD, DE422_MIN_JD


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "moonpos[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "moonpos[diagnostics]"') from e


def residuals(moon: DE422Moon, jds) -> dict:
    """
    Analytical minus DE422 for each JD: longitude and latitude in arcsec,
    distance in km.
    """
    np = _need_numpy()
    d_lon, d_lat, d_dist = [], [], []
    for jd in jds:
        de_lon, de_lat, de_dist = moon.ecliptic_of_date(float(jd))
        pos = lunar.moon_position(float(jd))
        d_lon.append(aa.wrap180(pos.longitude_deg - de_lon) * 3600.0)
        d_lat.append((pos.latitude_deg - de_lat) * 3600.0)
        d_dist.append(pos.distance_km - de_dist)
    return {
        "lon_arcsec": np.asarray(d_lon),
        "lat_arcsec": np.asarray(d_lat),
        "dist_km": np.asarray(d_dist),
    }


def summarize(name: str, values, unit: str) -> str:
    np = _need_numpy()
    rms = float(np.sqrt(np.mean(values * values)))
    return f"  {name:<10} max|err| = {float(np.max(np.abs(values))):10.3f} {unit}   rms = {rms:10.3f} {unit}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytical lunar series against DE422.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--step-days", type=float, default=5.0)
    p.add_argument("--out-png", default="lunar_validation.png")
    p.add_argument("--no-plot", action="store_true", help="print statistics only")
    args = p.parse_args(argv)

    np = _need_numpy()

    print("Loading DE422 Ephemeris...")
    moon = DE422Moon.load()

    if not args.step_days > 0:
        raise ValueError("--step-days must be positive")

    jd_start = J2000_JDE + (args.year_start - 2000) * 365.25
    jd_end = J2000_JDE + (args.year_end - 2000) * 365.25
    jds = np.array([jd for jd in np.arange(jd_start, jd_end, args.step_days) if moon.covers(jd)])

    if len(jds) == 0:
        raise ValueError(
            f"No epochs between {args.year_start} and {args.year_end} inside the ephemeris range "
            f"({DE422_MIN_JD}, {DE422_MAX_JD})"
        )

    years = 2000 + (jds - J2000_JDE) / 365.25

    print(f"Validating {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f}...")
    res = residuals(moon, jds)

    print("Residuals (analytical - DE422):")
    print(summarize("longitude", res["lon_arcsec"], "arcsec"))
    print(summarize("latitude", res["lat_arcsec"], "arcsec"))
    print(summarize("distance", res["dist_km"], "km"))

    if args.no_plot:
        return 0

    plt = _need_matplotlib()
    fig, axs = plt.subplots(3, 1, figsize=(12, 10), sharex=True)

    axs[0].scatter(years, res["lon_arcsec"], s=1, alpha=0.5, color='blue')
    axs[0].set_title("Lunar Longitude Error (Analytical - DE422)")
    axs[0].set_ylabel("Error (arcsec)")
    axs[0].grid(True, alpha=0.3)

    axs[1].scatter(years, res["lat_arcsec"], s=1, alpha=0.5, color='green')
    axs[1].set_title("Lunar Latitude Error (Analytical - DE422)")
    axs[1].set_ylabel("Error (arcsec)")
    axs[1].grid(True, alpha=0.3)

    axs[2].scatter(years, res["dist_km"], s=1, alpha=0.5, color='orange')
    axs[2].set_title("Earth-Moon Distance Error (Analytical - DE422)")
    axs[2].set_ylabel("Error (km)")
    axs[2].set_xlabel("Year")
    axs[2].grid(True, alpha=0.3)

    plt.suptitle(f"Lunar Series Validation against DE422 ({years[0]:.0f} to {years[-1]:.0f})", fontsize=14)
    plt.tight_layout()
    plt.savefig(args.out_png, dpi=200)
    print(f"Validation complete. Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
