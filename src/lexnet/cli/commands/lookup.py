"""
Look up a word and print its senses.
"""

import asyncio
import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from lexnet.core.engine import WordNet
from lexnet.core.errors import LexnetError

console = Console()

# Relations shown even when the related sense does not contain the word.
ALWAYS_SHOWN = {"*", "="}


def add_subparser(subparsers):
    parser = subparsers.add_parser("lookup", help="Look up a word")
    parser.add_argument("word", help="Word or phrase to look up")
    parser.add_argument("--dir", dest="data_dir", help="WordNet database directory (default: $LEXNET_DATA_DIR)")
    parser.add_argument("-p", "--pointers", action="store_true", help="Also show related senses")
    parser.add_argument("--json", action="store_true", help="Print senses as JSON")
    parser.set_defaults(func=run)


def print_sense(sense, indent: str = "  "):
    console.print(f"{indent}[bold]type :[/bold] {sense.synset_type}")
    console.print(f"{indent}[bold]words:[/bold] {' / '.join(sense.words)}")
    console.print(f"{indent}{sense.glossary}", markup=False, highlight=False)
    console.print()


async def show_related(wordnet: WordNet, sense, word: str):
    for relation, target in await wordnet.resolve_relations(sense):
        found = any(w.startswith(word) for w in target.words)
        if found or relation.symbol in ALWAYS_SHOWN:
            console.print(f"    [cyan]pointer: {escape(relation.symbol)}[/cyan] [dim]({relation.name})[/dim]")
            print_sense(target, indent="    ")


async def lookup_word(args):
    async with WordNet(args.data_dir) as wordnet:
        senses = await wordnet.lookup(args.word)

        if args.json:
            print_json(data=[s.to_dict() for s in senses])
            return

        if not senses:
            console.print(f"[yellow]No senses found for '{args.word}'[/yellow]")
            return

        console.print(f"\n  [bold]{args.word}[/bold]\n")
        for sense in senses:
            print_sense(sense)
            if args.pointers:
                await show_related(wordnet, sense, args.word)


def run(args):
    try:
        asyncio.run(lookup_word(args))
    except LexnetError as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)
