# src/lexnet/core/reader.py
"""
Streams a text file line by line without blocking the event loop.
"""

from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles


async def read_lines(path: Path | str, encoding: str = "utf-8") -> AsyncIterator[str]:
    """Yield each line with its line terminator removed."""
    async with aiofiles.open(path, mode="r", encoding=encoding, newline="") as f:
        async for line in f:
            yield line.rstrip("\r\n")
