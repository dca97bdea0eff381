"""Command line for field curing and harvest loss estimates.

Prints the hourly moisture of one curing day, or the dry matter losses of
one curing event. Inputs are metric; echoed conditions follow
settings.display_units.
"""

import argparse
import logging
import sys

from forage.core.config import settings
from forage.core.units import format_fraction, format_rain, format_swath_density, format_temp
from forage.core.validation import InvalidInputError
from forage.harvest.curing import curing, summarize_curing
from forage.harvest.losses import estimate_harvest_losses


def cmd_cure(args: argparse.Namespace) -> None:
    """Show hourly moisture for one curing day."""
    series = curing(
        args.moisture,
        args.insolation,
        args.day_length,
        args.rain,
        args.conditioned,
        args.cut,
        args.wind,
        args.humidity,
        args.mowed,
        args.raked,
        dry_bulb=args.dry_bulb,
        soil_moisture=args.soil_moisture,
        swath_density=args.swath_density,
        strict=args.strict,
    )
    summary = summarize_curing(series, args.moisture)

    conditioning = "conditioned" if args.conditioned else "unconditioned"
    print(f"Curing day: {summary['hours']} h, cut {args.cut}, {conditioning}")
    print(
        f"  Rain: {format_rain(args.rain)}  Dry bulb: {format_temp(args.dry_bulb)}  "
        f"Swath: {format_swath_density(args.swath_density)}"
    )
    print()
    print(f"{'Hour':>4}  {'Moisture':>9}")
    print("-" * 15)
    for hour, moisture in enumerate(series):
        print(f"{hour:>4}  {format_fraction(moisture, 1):>9}")
    print()
    print(f"Start: {format_fraction(summary['initial_moisture'], 1)}", end="")
    if summary["rewetted"]:
        print(" (rewetted overnight)", end="")
    print(f"  End: {format_fraction(summary['final_moisture'], 1)}")


def cmd_losses(args: argparse.Namespace) -> None:
    """Show dry matter losses for one curing event."""
    losses = estimate_harvest_losses(
        args.initial,
        args.final,
        args.temp,
        args.hours,
        conditioned=args.conditioned,
        ndf=args.ndf,
        rainfall=args.rain,
        swath_density=args.swath_density,
        stage_factor=args.stage,
        legume_fraction=args.legume,
        tedded=args.tedded,
        raked=args.raked,
        strict=args.strict,
    )

    # Negative moisture raised to a fractional power has no real loss
    complex_parts = [name for name, value in losses.items() if name != "total" and isinstance(value, complex)]
    if complex_parts:
        raise InvalidInputError(
            "moisture",
            (args.initial, args.final),
            f"gives no real {', '.join(complex_parts)} loss; moisture must be in [0, 1)",
        )

    conditions = f"{format_temp(args.temp)}, {format_rain(args.rain)}, {format_swath_density(args.swath_density)}"
    print(f"Harvest losses ({conditions})")
    print(f"{'Component':<12} {'Loss':>8}")
    print("-" * 21)
    for component in ("respiration", "rain", "mowing", "tedding", "raking"):
        print(f"{component:<12} {format_fraction(losses[component]):>8}")
    print("-" * 21)
    print(f"{'total':<12} {format_fraction(losses['total']):>8}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Field curing and harvest loss estimates for cut forage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  forage-harvest cure --moisture 0.8 --insolation 400 --day-length 10 --mowed --conditioned
  forage-harvest cure --moisture 0.55 --insolation 300 --day-length 14 --rain 5
  forage-harvest losses --initial 0.8 --final 0.6 --temp 20 --hours 10 --raked
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log model internals")
    parser.add_argument("--strict", action="store_true", default=None, help="Reject physically invalid inputs")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # cure - Hourly moisture for one day
    cure_parser = subparsers.add_parser("cure", help="Simulate hourly moisture for one curing day")
    cure_parser.add_argument("--moisture", type=float, required=True, help="Initial moisture, fresh basis (0-1)")
    cure_parser.add_argument("--insolation", type=float, required=True, help="Solar insolation (W/m²)")
    cure_parser.add_argument("--day-length", type=float, required=True, help="Day length (hours)")
    cure_parser.add_argument("--rain", type=float, default=0.0, help="Rainfall since previous day (mm)")
    cure_parser.add_argument("--conditioned", action="store_true", help="Forage was conditioned")
    cure_parser.add_argument("--cut", type=int, default=1, help="Cut number (default: 1)")
    cure_parser.add_argument("--wind", type=float, default=2.0, help="Wind speed (m/s, default: 2)")
    cure_parser.add_argument("--humidity", type=float, default=0.7, help="Relative humidity (0-1, default: 0.7)")
    cure_parser.add_argument("--mowed", action="store_true", help="Day of mowing")
    cure_parser.add_argument("--raked", action="store_true", help="Day of raking")
    cure_parser.add_argument(
        "--dry-bulb",
        type=float,
        default=settings.reference_dry_bulb_c,
        help=f"Dry bulb temperature (°C, default: {settings.reference_dry_bulb_c:g})",
    )
    cure_parser.add_argument(
        "--soil-moisture",
        type=float,
        default=settings.reference_soil_moisture,
        help=f"Soil moisture (kg/kg, default: {settings.reference_soil_moisture:g})",
    )
    cure_parser.add_argument(
        "--swath-density",
        type=float,
        default=settings.reference_swath_density,
        help=f"Swath density (g DM/m², default: {settings.reference_swath_density:g})",
    )

    # losses - Harvest loss components
    loss_parser = subparsers.add_parser("losses", help="Estimate harvest losses for one curing event")
    loss_parser.add_argument("--initial", type=float, required=True, help="Initial moisture, fresh basis (0-1)")
    loss_parser.add_argument("--final", type=float, required=True, help="Final moisture, fresh basis (0-1)")
    loss_parser.add_argument("--temp", type=float, required=True, help="Average temperature (°C)")
    loss_parser.add_argument("--hours", type=float, required=True, help="Curing time (h)")
    loss_parser.add_argument("--conditioned", action="store_true", help="Forage was conditioned")
    loss_parser.add_argument("--ndf", type=float, default=0.45, help="NDF fraction (default: 0.45)")
    loss_parser.add_argument("--rain", type=float, default=0.0, help="Rainfall during curing (mm)")
    loss_parser.add_argument(
        "--swath-density",
        type=float,
        default=settings.reference_swath_density,
        help=f"Swath density (g DM/m², default: {settings.reference_swath_density:g})",
    )
    loss_parser.add_argument("--stage", type=float, default=1.0, help="Crop stage factor (default: 1.0)")
    loss_parser.add_argument("--legume", type=float, default=0.0, help="Legume leaf fraction of DM (default: 0)")
    loss_parser.add_argument("--tedded", action="store_true", help="Forage was tedded")
    loss_parser.add_argument("--raked", action="store_true", help="Forage was raked")

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Dispatch to command handlers
    commands = {
        "cure": cmd_cure,
        "losses": cmd_losses,
    }

    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        commands[args.command](args)
    except (InvalidInputError, ZeroDivisionError) as e:
        print(f"Error: {e}")
        return 2
    return 0


def cli() -> None:
    """CLI entry point."""
    sys.exit(cli_main())


if __name__ == "__main__":
    cli()
