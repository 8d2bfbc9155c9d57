# src/lexnet/__init__.py
"""
lexnet: read-only access to a WordNet lexicographer database.
"""

from lexnet.core.data_parser import Member, Relation, SenseRecord, VerbFrame
from lexnet.core.engine import WordNet
from lexnet.core.errors import (
    DataFileUnavailable,
    DatasetError,
    EngineClosed,
    IndexFileUnavailable,
    LexnetError,
    MalformedDataLine,
    MalformedIndexLine,
    MissingDataset,
    OffsetReadFailure,
)
from lexnet.core.index_parser import IndexEntry
from lexnet.core.pos import PartOfSpeech

__version__ = "0.1.0"

__all__ = [
    "WordNet",
    "IndexEntry",
    "SenseRecord",
    "Member",
    "Relation",
    "VerbFrame",
    "PartOfSpeech",
    "LexnetError",
    "DatasetError",
    "EngineClosed",
    "MissingDataset",
    "IndexFileUnavailable",
    "DataFileUnavailable",
    "MalformedIndexLine",
    "MalformedDataLine",
    "OffsetReadFailure",
]
