import argparse
from collections.abc import Callable, Sequence
import logging
import sys
from typing import Any, TypeAlias

from . import __version__
from .configuration import Configuration, resolve_options


# Package logger, also when run as `python -m imgdoc`
logger = logging.getLogger(__package__)


PROG = "imgdoc"

LOG_FORMAT = "%(levelname)s: %(message)s"


Handoff: TypeAlias = Callable[[Configuration], None]


def parse_commandline(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Collect images into a single PDF document",
    )
    parser.add_argument(
        "-i",
        "--input",
        help="Image files to convert",
        metavar="FILE",
        nargs="+",
        required=True,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        help="Print debugging information",
        action="store_true",
    )
    parser.add_argument(
        "-s",
        "--sort",
        help="Order input files by the number in their names",
        action="store_true",
        dest="sort_numerically",
    )
    parser.add_argument(
        "-b",
        "--base",
        help="Base name for generated files (default: `cn`)",
        metavar="NAME",
        dest="basename",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def namespace_to_options(args: argparse.Namespace) -> dict[str, Any]:
    "Keep only the options that were actually given on the command line."
    options = {}
    for key, val in vars(args).items():
        match val:
            case None | False:
                continue
            case _:
                options[key] = val
    return options


def setup_logging(verbose: bool) -> None:
    # Only the package logger is touched, handlers of a host program stay.
    package_logger = logging.getLogger(PROG)

    # Avoid duplicate output when called more than once
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_configuration(config: Configuration) -> None:
    "Default handoff: write the input files to stdout, one per line, in order."
    for filename in config.input_filenames:
        print(filename)


def main(argv: Sequence[str] | None = None, handoff: Handoff | None = None) -> int:
    args = parse_commandline(argv)
    options = namespace_to_options(args)

    setup_logging(bool(options.get("verbose")))

    config = resolve_options(options)
    logger.debug("Resolved configuration: %s", config)

    if handoff is None:
        handoff = print_configuration
    handoff(config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
