import argparse
import sys

from environs import Env

from spicebridge.adapter import SpiceAPI
from spicebridge.application.services import ephemeris, time
from spicebridge.domain.exceptions import KernelDirectoryError, SpiceCallError
from spicebridge.domain.models.enums import AberrationCorrection, UTCTimeFormat
from spicebridge.domain.models.results import Failure, Success
from spicebridge.domain.models.units import EphemerisTime
from spicebridge.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
)
from spicebridge.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spicebridge", description="Query the SPICE toolkit from the command line"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON instead of text"
    )
    parser.add_argument(
        "-k",
        "--kernel",
        action="append",
        default=[],
        help="Kernel to load, relative to SPICE_KERNEL_DIR (repeatable)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    kernels_parser = subparsers.add_parser("kernels", help="List kernel files")
    kernels_parser.add_argument(
        "directory", nargs="?", default="", help="Subdirectory of SPICE_KERNEL_DIR"
    )

    str2et_parser = subparsers.add_parser("str2et", help="Time string to ephemeris time")
    str2et_parser.add_argument("time", help='e.g. "2000 JAN 01 12:00:00 TDB"')

    et2utc_parser = subparsers.add_parser("et2utc", help="Ephemeris time to UTC string")
    et2utc_parser.add_argument("et", type=float, help="Seconds past J2000 TDB")
    et2utc_parser.add_argument(
        "--format",
        choices=[f.value for f in UTCTimeFormat],
        default=UTCTimeFormat.ISO_CALENDAR.value,
    )
    et2utc_parser.add_argument("--prec", type=int, default=3)

    spkpos_parser = subparsers.add_parser("spkpos", help="Position of a target body")
    spkpos_parser.add_argument("time", help="Epoch as a time string")
    spkpos_parser.add_argument("--target", default="MOON")
    spkpos_parser.add_argument("--observer", default="EARTH")
    spkpos_parser.add_argument("--frame", default="J2000")
    spkpos_parser.add_argument(
        "--abcorr",
        choices=[a.value for a in AberrationCorrection],
        default=AberrationCorrection.NONE.value,
    )
    return parser


def run_command(args: argparse.Namespace, api: SpiceAPI):
    """Dispatch a parsed command. Returns (title, outcome)."""
    if args.command == "kernels":
        files = api.kernel_directory.enumerate_kernels(
            args.directory, error_if_no_files_found=False
        )
        return f"Kernels in {api.kernel_directory.base_dir}", Success(files)

    if args.command == "str2et":
        return f"str2et {args.time}", time.str2et(args.time)

    if args.command == "et2utc":
        return (
            f"et2utc {args.et}",
            time.et2utc(EphemerisTime(args.et), UTCTimeFormat(args.format), args.prec),
        )

    if args.command == "spkpos":
        et = time.str2et(args.time)
        if not et.ok:
            return f"spkpos {args.target}", et
        outcome = ephemeris.spkpos(
            et.value,
            targ=args.target,
            obs=args.observer,
            ref=args.frame,
            abcorr=AberrationCorrection(args.abcorr),
        )
        if outcome.ok:
            position, light_time = outcome.value
            outcome = Success({"position": position, "light_time": light_time})
        return f"spkpos {args.target} from {args.observer} ({args.frame})", outcome

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    # Setup logging ONLY AFTER environment variables are loaded
    setup_logging(env)

    formatter: OutputFormatter = JSONOutputFormatter() if args.json else ConsoleOutputFormatter()

    try:
        api = SpiceAPI.create_from_env(env)
        for kernel in args.kernel:
            api.load(kernel).unwrap()
        title, outcome = run_command(args, api)
    except SpiceCallError as e:
        print(f"Error loading kernels: {e}", file=sys.stderr)
        return 1
    except KernelDirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(formatter.format_result(outcome, title))
    return 1 if isinstance(outcome, Failure) else 0


if __name__ == "__main__":
    sys.exit(main())
