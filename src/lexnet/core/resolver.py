# src/lexnet/core/resolver.py
"""
Sense resolution: byte offset -> SenseRecord.

Each category's data file is opened once and read with positioned reads,
so any number of lookups can run at the same time without sharing a
file cursor.
"""

import asyncio
import os
from dataclasses import dataclass
from pathlib import Path

import structlog

from lexnet.core.data_parser import Relation, SenseRecord, parse_data_line
from lexnet.core.errors import (
    DataFileUnavailable,
    MalformedDataLine,
    OffsetReadFailure,
    UnknownPartOfSpeech,
)
from lexnet.core.index_parser import IndexEntry
from lexnet.core.pos import CATEGORIES, EXTENSIONS, from_code

logger = structlog.get_logger()

READ_WINDOW = 1024


@dataclass(frozen=True)
class DataFiles:
    """Open, read-only descriptors for data.adj/adv/noun/verb keyed by storage code."""
    fds: tuple[tuple[str, int], ...]
    data_dir: Path

    @classmethod
    def open(cls, data_dir: Path | str) -> "DataFiles":
        data_dir = Path(data_dir)
        opened = []
        for ext, code in CATEGORIES.items():
            path = data_dir / f"data.{ext}"
            try:
                opened.append((code, os.open(path, os.O_RDONLY)))
            except OSError as e:
                for _, fd in opened:
                    os.close(fd)
                raise DataFileUnavailable(path, e.strerror or str(e)) from e
        logger.debug("data_files_opened", data_dir=str(data_dir))
        return cls(tuple(opened), data_dir)

    def fd(self, code: str) -> int | None:
        for key, fd in self.fds:
            if key == code:
                return fd
        return None

    def close(self) -> None:
        for _, fd in self.fds:
            try:
                os.close(fd)
            except OSError:
                logger.warning("data_file_close_failed", fd=fd)


class SenseResolver:
    def __init__(self, data_files: DataFiles, *, window: int = READ_WINDOW, encoding: str = "utf-8"):
        self.data_files = data_files
        self.window = window
        self.encoding = encoding

    def _read(self, code: str, offset: int) -> bytes:
        fd = self.data_files.fd(code)
        if fd is None:
            raise OffsetReadFailure(code, offset, "no data file for this part of speech")
        if offset < 0:
            raise OffsetReadFailure(code, offset, "negative offset")
        try:
            chunk = os.pread(fd, self.window, offset)
        except OSError as e:
            raise OffsetReadFailure(code, offset, e.strerror or str(e)) from e
        if not chunk:
            raise OffsetReadFailure(code, offset, f"offset is past the end of data.{EXTENSIONS[code]}")
        return chunk.split(b"\n", 1)[0]

    async def resolve_at(self, pos: str, offset: int) -> SenseRecord:
        """Read and parse the synset stored at `offset` in the data file for `pos`."""
        try:
            code = from_code(pos).storage_code
        except UnknownPartOfSpeech:
            raise OffsetReadFailure(pos, offset, "unknown part of speech") from None

        raw = await asyncio.to_thread(self._read, code, offset)
        try:
            try:
                line = raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise MalformedDataLine(f"line is not valid {self.encoding}: {e.reason}") from e
            record = parse_data_line(line)
            if record.offset != offset:
                # Offset landed inside some other line.
                raise MalformedDataLine(f"line starts with synset offset {record.offset}", line)
        except MalformedDataLine as e:
            logger.warning("sense_read_failed", pos=code, offset=offset, error=str(e))
            raise e.locate(code, offset)
        return record

    async def resolve_entry(self, entry: IndexEntry) -> list[SenseRecord]:
        return await self.resolve_entries([entry])

    async def resolve_entries(self, entries) -> list[SenseRecord]:
        """All senses of all entries, in entry order then offset order."""
        reads = [
            self.resolve_at(entry.pos, offset)
            for entry in entries
            for offset in entry.synset_offsets
        ]
        return list(await asyncio.gather(*reads))

    async def resolve(self, relation: Relation) -> SenseRecord:
        """Load the synset a relation points at. Safe to call repeatedly."""
        return await self.resolve_at(relation.target_pos, relation.target_offset)

    async def resolve_relations(
        self,
        record: SenseRecord,
        symbols=None,
    ) -> list[tuple[Relation, SenseRecord]]:
        relations = [r for r in record.relations if symbols is None or r.symbol in symbols]
        targets = await asyncio.gather(*(self.resolve(r) for r in relations))
        return list(zip(relations, targets))
