"""
List every lemma in the database.
"""

import asyncio
import sys

from rich.console import Console
from rich.markup import escape

from lexnet.core.engine import WordNet
from lexnet.core.errors import LexnetError

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("list", help="List all words")
    parser.add_argument("--dir", dest="data_dir", help="WordNet database directory (default: $LEXNET_DATA_DIR)")
    parser.add_argument("-n", "--limit", type=int, help="Print at most N words")
    parser.set_defaults(func=run)


async def list_words(args) -> list[str]:
    async with WordNet(args.data_dir) as wordnet:
        words = await wordnet.list()
    if args.limit is not None:
        words = words[:args.limit]
    return words


def run(args):
    try:
        words = asyncio.run(list_words(args))
    except LexnetError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    for word in words:
        print(word)
