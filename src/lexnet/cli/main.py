"""
lexnet CLI.
"""

import argparse

from lexnet.cli.commands import exists, listing, lookup
from lexnet.logging_config import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(prog="lexnet", description="WordNet lookup")
    subparsers = parser.add_subparsers(dest="command")

    lookup.add_subparser(subparsers)
    listing.add_subparser(subparsers)
    exists.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        configure_logging()
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
