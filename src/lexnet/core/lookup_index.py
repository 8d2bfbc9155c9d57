# src/lexnet/core/lookup_index.py
"""
Lemma -> index entries, built once from the four index files.

"ice cream" -> "ice_cream" -> [IndexEntry(pos="n", ...)]
"run"       -> "run"       -> [IndexEntry(pos="n"), IndexEntry(pos="v")]
"""

import asyncio
from collections.abc import Iterator, Mapping
from contextlib import aclosing
from pathlib import Path

import structlog

from lexnet.core.errors import IndexFileUnavailable, MalformedIndexLine
from lexnet.core.index_parser import IndexEntry, parse_index_line
from lexnet.core.pos import CATEGORIES
from lexnet.core.reader import read_lines

logger = structlog.get_logger()


def normalize(word: str) -> str:
    return str(word).lower().replace(" ", "_")


def denormalize(key: str) -> str:
    return key.replace("_", " ")


class LookupIndex(Mapping):
    """Read-only view over the lemma table. Keys keep insertion order."""

    def __init__(self, table: dict[str, tuple[IndexEntry, ...]]):
        self._table = table

    def __getitem__(self, key: str) -> tuple[IndexEntry, ...]:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def find(self, word: str) -> tuple[IndexEntry, ...]:
        """Entries for a word in any spelling; empty if absent."""
        return self._table.get(normalize(word), ())

    def lemmas(self) -> list[str]:
        return [denormalize(key) for key in self._table]

    def entries(self) -> Iterator[IndexEntry]:
        for entries in self._table.values():
            yield from entries

    @classmethod
    def from_entries(cls, entries) -> "LookupIndex":
        table: dict[str, list[IndexEntry]] = {}
        for entry in entries:
            table.setdefault(normalize(entry.lemma), []).append(entry)
        return cls({key: tuple(group) for key, group in table.items()})


async def read_index_file(
    path: Path,
    *,
    strict: bool = True,
    encoding: str = "utf-8",
) -> list[IndexEntry]:
    """
    Parse every entry in one index file, in file order.

    Strict mode raises on the first malformed line; otherwise the line is
    logged and skipped.
    """
    entries = []
    line_number = 0
    try:
        async with aclosing(read_lines(path, encoding)) as lines:
            async for line in lines:
                line_number += 1
                try:
                    entry = parse_index_line(line)
                except MalformedIndexLine as e:
                    if strict:
                        raise e.locate(path, line_number)
                    logger.warning("index_line_skipped", path=str(path), line=line_number, error=str(e))
                    continue
                if entry is not None:
                    entries.append(entry)
    except (OSError, UnicodeDecodeError) as e:
        raise IndexFileUnavailable(path, str(e)) from e
    return entries


async def build_index(
    data_dir: Path | str,
    *,
    strict: bool = True,
    encoding: str = "utf-8",
) -> LookupIndex:
    """
    Read index.adj, index.adv, index.noun and index.verb concurrently and
    merge them in that order.
    """
    data_dir = Path(data_dir)
    paths = [data_dir / f"index.{ext}" for ext in CATEGORIES]

    results = await asyncio.gather(
        *(read_index_file(path, strict=strict, encoding=encoding) for path in paths)
    )

    index = LookupIndex.from_entries(entry for entries in results for entry in entries)
    logger.info(
        "index_loaded",
        data_dir=str(data_dir),
        entries={ext: len(entries) for ext, entries in zip(CATEGORIES, results)},
        lemmas=len(index),
    )
    return index
