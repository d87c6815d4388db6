""" Command line entry point. """
import argparse
import logging
import os
import sys

from constants import DEBUG_ENV, DEFAULT_PROMPT
from shell import Shell


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pysh-lite",
        description="A small interactive command interpreter"
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="Prompt printed before each line (default: %(default)r)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get(DEBUG_ENV)),
        help=f"Log debug messages to stderr (also enabled by ${DEBUG_ENV})"
    )
    return parser.parse_args(argv)


def setup_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)
    rc = Shell(prompt=args.prompt).run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
