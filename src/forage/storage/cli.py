"""Command line for hay and silage storage loss estimates."""

import argparse
import logging
import sys

from forage.core.units import format_fraction, format_mass
from forage.core.validation import InvalidInputError
from forage.storage.losses import (
    EFFLUENT_LAST_DAY,
    loss_effluent,
    loss_fermentation,
    loss_hay_storage,
    max_effluent_volume,
)


def cmd_hay(args: argparse.Namespace) -> None:
    """Show hay storage loss."""
    loss = loss_hay_storage(args.moisture_dm, strict=args.strict)
    print(f"Hay at {args.moisture_dm:.2f} kg H2O/kg DM")
    print(f"  Storage loss: {format_fraction(loss)}")


def cmd_silage(args: argparse.Namespace) -> None:
    """Show silage fermentation and effluent losses."""
    fermentation = loss_fermentation(args.dmc, strict=args.strict)
    effluent = loss_effluent(args.dmc, args.dm_mass, args.days, strict=args.strict)

    print(f"Silage at {format_fraction(args.dmc, 0)} DM, {format_mass(args.dm_mass)} DM, day {args.days:g}")
    print(f"  Fermentation loss: {format_fraction(fermentation)}")
    print(f"  Max effluent:      {max_effluent_volume(args.dmc):.0f} l/t")
    print(f"  Effluent loss:     {format_fraction(effluent, 4)} per day")
    if args.days > EFFLUENT_LAST_DAY:
        print(f"  (no effluent loss defined after day {EFFLUENT_LAST_DAY})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hay and silage storage loss estimates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  forage-storage hay --moisture-dm 0.25
  forage-storage silage --dmc 0.22 --dm-mass 120 --days 10
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log model internals")
    parser.add_argument("--strict", action="store_true", default=None, help="Reject physically invalid inputs")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # hay - Hay storage loss
    hay_parser = subparsers.add_parser("hay", help="Estimate hay storage loss")
    hay_parser.add_argument("--moisture-dm", type=float, required=True, help="Moisture, dry basis (kg H2O/kg DM)")

    # silage - Fermentation and effluent losses
    silage_parser = subparsers.add_parser("silage", help="Estimate silage fermentation and effluent losses")
    silage_parser.add_argument("--dmc", type=float, required=True, help="Dry matter fraction (0-1)")
    silage_parser.add_argument("--dm-mass", type=float, required=True, help="Dry matter in silo (t)")
    silage_parser.add_argument("--days", type=float, default=0.0, help="Days since sealing (default: 0)")

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "hay": cmd_hay,
        "silage": cmd_silage,
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
