# src/lexnet/core/engine.py
"""
WordNet engine: the query surface over the lookup index and the resolver.

    async with WordNet("/path/to/dict") as wn:
        for sense in await wn.lookup("bank"):
            print(sense.synset_type, sense.words, sense.glossary)

Loading runs once, as a single shared task. Every query waits on that
task, so queries issued during loading return only after all four index
files are read and the data files are open. If loading fails, every
waiting and future query raises the same error.
"""

import asyncio
from pathlib import Path

import structlog

from lexnet.config import Settings, get_settings
from lexnet.core.data_parser import Relation, SenseRecord
from lexnet.core.errors import EngineClosed, MissingDataset
from lexnet.core.index_parser import IndexEntry
from lexnet.core.lookup_index import LookupIndex, build_index, normalize
from lexnet.core.pos import storage_code
from lexnet.core.resolver import DataFiles, SenseResolver

logger = structlog.get_logger()


def _close_opened(opening: asyncio.Future) -> None:
    if not opening.cancelled() and opening.exception() is None:
        opening.result().close()


class WordNet:
    def __init__(self, data_dir: Path | str | None = None, *, settings: Settings | None = None):
        self.settings = settings or get_settings()
        data_dir = data_dir or self.settings.DATA_DIR
        if not data_dir:
            raise MissingDataset()
        self.data_dir = Path(data_dir)

        self._loading: asyncio.Task | None = None
        self._index: LookupIndex | None = None
        self._resolver: SenseResolver | None = None
        self._closed = False

        # Start reading right away when constructed inside a running loop.
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            self._start_loading()

    @classmethod
    async def open(cls, data_dir: Path | str | None = None, *, settings: Settings | None = None) -> "WordNet":
        wordnet = cls(data_dir, settings=settings)
        await wordnet.start()
        return wordnet

    # === Loading ===

    def _start_loading(self) -> asyncio.Task:
        if self._loading is None:
            self._loading = asyncio.ensure_future(self._load())
            self._loading.add_done_callback(self._on_loaded)
        return self._loading

    async def _load(self) -> tuple[LookupIndex, SenseResolver]:
        index = await build_index(
            self.data_dir,
            strict=self.settings.STRICT_INDEX,
            encoding=self.settings.ENCODING,
        )
        # Data files are opened only once every index file is consumed.
        opening = asyncio.ensure_future(asyncio.to_thread(DataFiles.open, self.data_dir))
        try:
            data_files = await asyncio.shield(opening)
        except asyncio.CancelledError:
            # The worker thread still finishes opening; release what it opens.
            opening.add_done_callback(_close_opened)
            raise
        resolver = SenseResolver(
            data_files,
            window=self.settings.READ_WINDOW,
            encoding=self.settings.ENCODING,
        )
        self._index = index
        self._resolver = resolver
        return index, resolver

    def _on_loaded(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("wordnet_load_failed", data_dir=str(self.data_dir), error=str(error))
        else:
            logger.info("wordnet_ready", data_dir=str(self.data_dir), lemmas=len(self._index))

    async def _ready(self) -> tuple[LookupIndex, SenseResolver]:
        if self._closed:
            raise EngineClosed(self.data_dir)
        # shield: a cancelled caller must not cancel the shared load.
        loaded = await asyncio.shield(self._start_loading())
        if self._closed:
            raise EngineClosed(self.data_dir)
        return loaded

    async def start(self) -> None:
        """Load the database if not already loaded, and wait for it."""
        await self._ready()

    @property
    def ready(self) -> bool:
        task = self._loading
        if self._closed or task is None:
            return False
        return task.done() and not task.cancelled() and task.exception() is None

    def close(self) -> None:
        """Release the data files. Queries made after this raise EngineClosed."""
        self._closed = True
        if self._loading is not None and not self._loading.done():
            self._loading.cancel()
        if self._resolver is not None:
            self._resolver.data_files.close()
            self._resolver = None

    async def __aenter__(self) -> "WordNet":
        await self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        self.close()

    # === Queries ===

    async def lookup(self, word: str) -> list[SenseRecord]:
        """Every sense of `word` across all parts of speech; [] if unknown."""
        index, resolver = await self._ready()
        entries = index.find(word)
        if not entries:
            return []
        return await resolver.resolve_entries(entries)

    async def lookup_pos(self, word: str, pos: str) -> list[SenseRecord]:
        """Senses of `word` in one part of speech ("n", "v", "a", "s" or "r")."""
        code = storage_code(pos)
        index, resolver = await self._ready()
        entries = [e for e in index.find(word) if e.pos == code]
        return await resolver.resolve_entries(entries)

    async def entries(self, word: str) -> list[IndexEntry]:
        index, _ = await self._ready()
        return list(index.find(word))

    async def exists(self, word: str) -> bool:
        index, _ = await self._ready()
        return normalize(word) in index

    async def resolve(self, relation: Relation) -> SenseRecord:
        _, resolver = await self._ready()
        return await resolver.resolve(relation)

    async def resolve_at(self, pos: str, offset: int) -> SenseRecord:
        _, resolver = await self._ready()
        return await resolver.resolve_at(pos, offset)

    async def resolve_relations(self, record: SenseRecord, symbols=None) -> list[tuple[Relation, SenseRecord]]:
        _, resolver = await self._ready()
        return await resolver.resolve_relations(record, symbols)

    async def list(self) -> list[str]:
        """All lemmas, space-separated, in index order."""
        index, _ = await self._ready()
        return index.lemmas()
