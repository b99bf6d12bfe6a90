from __future__ import annotations

import argparse
from datetime import datetime
import sys
import importlib
import inspect

from .core.time import calendar_to_jd, datetime_to_jd


DEFAULT_JDE = 2448724.5  # 1992-04-12 0h TD, Meeus Example 47.a


def _parse_date_jde(s: str) -> float:
    """
    'YYYY-MM-DD' or 'YYYY-MM-DDTHH:MM[:SS][+HH:MM]' (TT) -> JDE.

    A UTC offset, if present, is applied before conversion.
    """
    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{s}', expected YYYY-MM-DD[THH:MM[:SS]]") from e
    if dt.tzinfo is not None:
        return datetime_to_jd(dt)
    day = dt.day + (dt.hour + (dt.minute + (dt.second + dt.microsecond / 1e6) / 60.0) / 60.0) / 24.0
    return calendar_to_jd(dt.year, dt.month, day)


def _add_epoch_args(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jde", type=float, default=None, help=f"Julian Ephemeris Day (default: {DEFAULT_JDE})")
    g.add_argument("--date", type=_parse_date_jde, default=None, dest="date_jde",
                   help="Calendar date in TT, YYYY-MM-DD[THH:MM[:SS]][+HH:MM]")


def _epoch(args: argparse.Namespace) -> float:
    if args.jde is not None:
        return float(args.jde)
    if args.date_jde is not None:
        return args.date_jde
    return DEFAULT_JDE


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_position(argv: list[str]) -> int:
    import moonpos
    from moonpos import report

    p = argparse.ArgumentParser(prog="moonpos position", description="Geocentric position of the Moon at a given epoch.")
    _add_epoch_args(p)
    args = p.parse_args(argv)

    pos = moonpos.moon_position(_epoch(args))
    print(report.format_position(pos))
    return 0

def cmd_args(argv: list[str]) -> int:
    from moonpos.reference import astro_args as aa

    p = argparse.ArgumentParser(prog="moonpos args", description="Print the lunar fundamental arguments at a given epoch.")
    _add_epoch_args(p)
    args = p.parse_args(argv)

    jde = _epoch(args)
    fa = aa.fundamental_angles(jde)

    print(f"JDE = {jde:.6f}")
    print(f"T (Julian centuries from J2000.0) = {fa.T:.12f}")
    print()
    print("Fundamental arguments (degrees, reduced to [0,360))")
    print(f"  L'     = {fa.L_prime:.10f}")
    print(f"  D      = {fa.D:.10f}")
    print(f"  M      = {fa.M:.10f}")
    print(f"  M'     = {fa.M_prime:.10f}")
    print(f"  F      = {fa.F:.10f}")
    print(f"  A1     = {fa.A1:.10f}")
    print(f"  A2     = {fa.A2:.10f}")
    print(f"  A3     = {fa.A3:.10f}")
    print()
    print(f"Eccentricity factor E = {fa.E:.10f}")

    return 0

def cmd_series(argv: list[str]) -> int:
    from moonpos.reference import astro_args as aa
    from moonpos.reference import lunar

    p = argparse.ArgumentParser(prog="moonpos series", description="Print the periodic-term sums at a given epoch.")
    _add_epoch_args(p)
    args = p.parse_args(argv)

    jde = _epoch(args)
    fa = aa.fundamental_angles(jde)
    raw = lunar.series_sums(fa)
    total = lunar.apply_additive_terms(fa, raw)

    print(f"JDE = {jde:.6f}")
    print()
    print(f"{'':8}{'periodic terms':>20}{'with additive':>20}")
    print(f"{'sum_l':8}{raw.sum_l:20.6f}{total.sum_l:20.6f}   (1e-6 deg)")
    print(f"{'sum_b':8}{raw.sum_b:20.6f}{total.sum_b:20.6f}   (1e-6 deg)")
    print(f"{'sum_r':8}{raw.sum_r:20.6f}{total.sum_r:20.6f}   (1e-3 km)")

    return 0

def cmd_table(argv: list[str]) -> int:
    import moonpos
    from moonpos import report

    p = argparse.ArgumentParser(prog="moonpos table", description="Write a CSV ephemeris of the Moon.")
    p.add_argument("--start", type=float, required=True, help="first JDE")
    p.add_argument("--stop", type=float, required=True, help="end JDE (exclusive)")
    p.add_argument("--step", type=float, default=1.0, help="step in days (default 1)")
    p.add_argument("--out", default="-", help="output CSV file, '-' for stdout")
    args = p.parse_args(argv)

    if not args.step > 0:
        p.error("--step must be positive")
    if args.start + args.step == args.start:
        p.error(f"--step {args.step} is too small to advance from --start {args.start}")

    rows = moonpos.moon_ephemeris(args.start, args.stop, args.step)
    if args.out == "-":
        report.write_csv(rows, sys.stdout)
        return 0

    with open(args.out, "w", newline="") as fh:
        n = report.write_csv(rows, fh)
    print(f"Wrote {n} rows to {args.out}")
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="moonpos", description="Geocentric Moon position toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Geocentric longitude, latitude, distance and x/y/z")
    sub.add_parser("args", help="Fundamental arguments and eccentricity factor")
    sub.add_parser("series", help="Periodic-term sums before and after additive terms")
    sub.add_parser("table", help="CSV ephemeris over a JDE range")
    sub.add_parser("validate", help="Compare the series against DE422 (needs extras)")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "position":
        return cmd_position(rest)

    if args.cmd == "args":
        return cmd_args(rest)

    if args.cmd == "series":
        return cmd_series(rest)

    if args.cmd == "table":
        return cmd_table(rest)

    if args.cmd == "validate":
        return _run_module_main("moonpos.diagnostics.validate_reference", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
