import argparse
import logging
import sys
from collections.abc import Sequence
from contextlib import nullcontext
from typing import TextIO

from florist.composer import BouquetComposer
from florist.config import LOG_LEVELS, Settings
from florist.designs import RequirementOrder
from florist.errors import RecordError
from florist.records import iter_stems, load_catalog, read_section
from florist.result import Err, Ok
from florist.summary import render_summary

logger = logging.getLogger(__name__)


def report_error(error: RecordError) -> int:
    print(f"Error: {error}", file=sys.stderr)
    return 1


def handle_compose(source: TextIO, *, order: RequirementOrder, summary: bool) -> int:
    """Read designs, then compose bouquets as each stem arrives."""
    lines = enumerate(source, start=1)

    match load_catalog(read_section(lines), order=order):
        case Ok(catalog):
            pass
        case Err(e):
            return report_error(e)
    logger.info("Loaded %d designs", len(catalog))

    composer = BouquetComposer(catalog)
    status = 0
    for result in iter_stems(read_section(lines)):
        match result:
            case Ok(stem):
                bouquet = composer.compose(stem)
                if bouquet is not None:
                    print(bouquet, flush=True)
            case Err(e):
                status = report_error(e)

    if summary:
        print(render_summary(composer), file=sys.stderr, end="")
    return status


def handle_check(source: TextIO, *, order: RequirementOrder) -> int:
    """Parse the design section and print each design with its clamped caps."""
    match load_catalog(read_section(enumerate(source, start=1)), order=order):
        case Ok(catalog):
            for design in catalog:
                print(design)
            print(f"{len(catalog)} design(s) OK")
            return 0
        case Err(e):
            return report_error(e)


def open_source(path: str | None):
    if path is None or path == "-":
        return nullcontext(sys.stdin)
    return open(path, encoding="utf-8")


def run(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="florist",
        description="Compose bouquets from a design catalog and a stream of arriving stems",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: FLORIST_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--order",
        choices=[o.value for o in RequirementOrder],
        help="Requirement order inside a design (default: FLORIST_REQUIREMENT_ORDER or record).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: compose
    compose_parser = subparsers.add_parser(
        "compose",
        help="Read designs, then stems, printing one line per bouquet composed.",
    )
    compose_parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Input file (default: stdin).",
    )
    compose_parser.add_argument(
        "--summary",
        action="store_true",
        default=False,
        help="Print a stock summary to stderr when the stream ends.",
    )

    # Command: check
    check_parser = subparsers.add_parser(
        "check",
        help="Validate the design section and print each design's effective caps.",
    )
    check_parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Input file (default: stdin).",
    )

    args = parser.parse_args(argv)

    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    order = RequirementOrder(args.order) if args.order else settings.requirement_order

    match args.command:
        case "compose":
            with open_source(args.file) as source:
                return handle_compose(source, order=order, summary=args.summary)
        case "check":
            with open_source(args.file) as source:
                return handle_check(source, order=order)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
