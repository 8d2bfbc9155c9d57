"""
Check whether a word is in the database. Exit status 0 if so, 1 if not.
"""

import asyncio
import sys

from rich.console import Console
from rich.markup import escape

from lexnet.core.engine import WordNet
from lexnet.core.errors import LexnetError

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("exists", help="Check if a word exists")
    parser.add_argument("word", help="Word or phrase")
    parser.add_argument("--dir", dest="data_dir", help="WordNet database directory (default: $LEXNET_DATA_DIR)")
    parser.set_defaults(func=run)


async def check(args) -> bool:
    async with WordNet(args.data_dir) as wordnet:
        return await wordnet.exists(args.word)


def run(args):
    try:
        found = asyncio.run(check(args))
    except LexnetError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if found:
        console.print(f"[green]✓ {args.word}[/green]")
    else:
        console.print(f"[red]✗ {args.word}[/red]")
        sys.exit(1)
