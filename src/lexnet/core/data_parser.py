# src/lexnet/core/data_parser.py
"""
Data file lines (one synset per line).

    synset_offset lex_filenum ss_type w_cnt word lex_id [word lex_id...]
        p_cnt [ptr...] [frames...] | gloss

w_cnt, lex_id and the pointer source/target field are hexadecimal,
everything else is decimal. Only data.verb lines carry frames.
"""

import re
from dataclasses import dataclass, field

from lexnet.core.errors import MalformedDataLine, UnknownPartOfSpeech
from lexnet.core.fields import FieldReader
from lexnet.core.pos import PartOfSpeech, from_code


RELATION_NAMES = {
    "!": "antonym",
    "@": "hypernym",
    "@i": "instance hypernym",
    "~": "hyponym",
    "~i": "instance hyponym",
    "#m": "member holonym",
    "#s": "substance holonym",
    "#p": "part holonym",
    "%m": "member meronym",
    "%s": "substance meronym",
    "%p": "part meronym",
    "=": "attribute",
    "+": "derivationally related form",
    ";c": "domain of synset - topic",
    "-c": "member of this domain - topic",
    ";r": "domain of synset - region",
    "-r": "member of this domain - region",
    ";u": "domain of synset - usage",
    "-u": "member of this domain - usage",
    "*": "entailment",
    ">": "cause",
    "^": "also see",
    "$": "verb group",
    "&": "similar to",
    "<": "participle of verb",
    "\\": "pertainym",
}

# Adjective position markers: (p) predicate, (a) prenominal, (ip) postnominal.
_MARKER = re.compile(r"^(?P<word>.+)\((?P<marker>a|p|ip)\)$")

_SOURCE_TARGET = re.compile(r"^[0-9a-fA-F]{4}$")

POS_CODES = frozenset(p.value for p in PartOfSpeech)


@dataclass(frozen=True)
class Member:
    word: str                  # "ice cream"
    lex_id: int
    marker: str | None = None  # adjective position marker, if any

    def to_dict(self) -> dict:
        return {"word": self.word, "lex_id": self.lex_id, "marker": self.marker}


@dataclass(frozen=True)
class Relation:
    """An outgoing pointer. Resolve it with SenseResolver.resolve()."""
    symbol: str          # "@"
    target_offset: int
    target_pos: str      # "n"
    source_target: str   # "0000" for synset-to-synset

    @property
    def name(self) -> str:
        return RELATION_NAMES.get(self.symbol, self.symbol)

    @property
    def source(self) -> int:
        """1-based member index in this synset, 0 for the whole synset."""
        return int(self.source_target[:2], 16)

    @property
    def target(self) -> int:
        """1-based member index in the target synset, 0 for the whole synset."""
        return int(self.source_target[2:], 16)

    @property
    def is_lexical(self) -> bool:
        return self.source_target != "0000"

    @property
    def target_storage_pos(self) -> str:
        return from_code(self.target_pos).storage_code

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "target_offset": self.target_offset,
            "target_pos": self.target_pos,
            "source_target": self.source_target,
        }


@dataclass(frozen=True)
class VerbFrame:
    frame_number: int
    word_number: int     # 0 = applies to every member

    def to_dict(self) -> dict:
        return {"frame_number": self.frame_number, "word_number": self.word_number}


@dataclass(frozen=True)
class SenseRecord:
    offset: int
    lex_file_number: int
    synset_type: str     # "adjective satellite"
    pos: str             # storage code: "a" for satellites
    members: tuple[Member, ...]
    relations: tuple[Relation, ...]
    glossary: str
    frames: tuple[VerbFrame, ...] = field(default=())

    @property
    def words(self) -> list[str]:
        return [m.word for m in self.members]

    @property
    def word_count(self) -> int:
        return len(self.members)

    @property
    def pointer_count(self) -> int:
        return len(self.relations)

    def relations_of(self, *symbols: str) -> list[Relation]:
        return [r for r in self.relations if r.symbol in symbols]

    def to_dict(self) -> dict:
        return {
            "offset": self.offset,
            "lex_file_number": self.lex_file_number,
            "synset_type": self.synset_type,
            "pos": self.pos,
            "members": [m.to_dict() for m in self.members],
            "relations": [r.to_dict() for r in self.relations],
            "frames": [f.to_dict() for f in self.frames],
            "glossary": self.glossary,
        }


def _member(raw: str, lex_id: int) -> Member:
    m = _MARKER.match(raw)
    if m:
        return Member(m.group("word").replace("_", " "), lex_id, m.group("marker"))
    return Member(raw.replace("_", " "), lex_id)


def parse_data_line(line: str) -> SenseRecord:
    """
    Parse one data line. Anything after the first newline is ignored.

    Raises MalformedDataLine if a declared count is not matched by the
    fields present, or a numeric field does not parse.
    """
    line = line.split("\n", 1)[0].rstrip("\r")
    metadata, bar, gloss = line.partition("|")
    glossary = gloss.strip() if bar else ""

    fields = FieldReader(metadata, MalformedDataLine, line)

    offset = fields.next_int("synset_offset")
    lex_file_number = fields.next_int("lex_filenum")

    code = fields.next("ss_type")
    try:
        ss_type = from_code(code)
    except UnknownPartOfSpeech as e:
        raise fields.fail(str(e)) from None

    word_count = fields.next_int("w_cnt", 16)
    members = []
    for _ in range(word_count):
        word = fields.next("word")
        members.append(_member(word, fields.next_int("lex_id", 16)))

    pointer_count = fields.next_int("p_cnt")
    relations = []
    for _ in range(pointer_count):
        symbol = fields.next("pointer_symbol")
        target_offset = fields.next_int("synset_offset")
        target_pos = fields.next("pos")
        source_target = fields.next("source/target")
        if target_pos not in POS_CODES:
            raise fields.fail(f"unknown pointer target pos {target_pos!r}")
        if not _SOURCE_TARGET.match(source_target):
            raise fields.fail(f"bad source/target field {source_target!r}")
        relations.append(Relation(symbol, target_offset, target_pos, source_target))

    frames = []
    if ss_type is PartOfSpeech.VERB and fields.remaining:
        frame_count = fields.next_int("f_cnt")
        for _ in range(frame_count):
            plus = fields.next("+")
            if plus != "+":
                raise fields.fail(f"expected '+' before frame, got {plus!r}")
            frame_number = fields.next_int("f_num")
            frames.append(VerbFrame(frame_number, fields.next_int("w_num", 16)))

    fields.finish()

    return SenseRecord(
        offset=offset,
        lex_file_number=lex_file_number,
        synset_type=ss_type.label,
        pos=ss_type.storage_code,
        members=tuple(members),
        relations=tuple(relations),
        glossary=glossary,
        frames=tuple(frames),
    )
