# src/lexnet/core/errors.py
"""
Error types raised by the lexnet engine.

Dataset errors are fatal to construction: the engine never becomes ready.
Line and read errors are raised to the single query that hit them.
"""


class LexnetError(Exception):
    """Base class for all lexnet errors."""


# === Dataset (construction time) ===

class DatasetError(LexnetError):
    pass


class MissingDataset(DatasetError):
    def __init__(self):
        super().__init__(
            "No WordNet database directory given. Pass data_dir to WordNet() "
            "or set LEXNET_DATA_DIR to a directory containing the "
            "index.* and data.* files."
        )


class IndexFileUnavailable(DatasetError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        super().__init__(f"Cannot read index file {self.path}: {reason}")


class DataFileUnavailable(DatasetError):
    def __init__(self, path, reason: str):
        self.path = str(path)
        super().__init__(f"Cannot open data file {self.path}: {reason}")


# === Parsing ===

class MalformedLine(LexnetError, ValueError):
    """A line that does not follow the lexicographer file format."""

    def __init__(self, message: str, line: str | None = None):
        self.line = line
        super().__init__(message)


class UnknownPartOfSpeech(MalformedLine):
    pass


class MalformedIndexLine(MalformedLine):
    path: str | None = None
    line_number: int | None = None

    def locate(self, path, line_number: int) -> "MalformedIndexLine":
        self.path = str(path)
        self.line_number = line_number
        self.args = (f"{self.path}:{line_number}: {self.args[0]}",)
        return self


class MalformedDataLine(MalformedLine):
    pos: str | None = None
    offset: int | None = None

    def locate(self, pos: str, offset: int) -> "MalformedDataLine":
        self.pos = pos
        self.offset = offset
        self.args = (f"data.{pos} @ {offset}: {self.args[0]}",)
        return self


# === Query time ===

class OffsetReadFailure(LexnetError):
    def __init__(self, pos: str, offset: int, reason: str):
        self.pos = pos
        self.offset = offset
        super().__init__(f"Cannot read {pos!r} sense at offset {offset}: {reason}")


class EngineClosed(LexnetError):
    def __init__(self, data_dir):
        self.data_dir = str(data_dir)
        super().__init__(f"WordNet engine for {self.data_dir} is closed")
