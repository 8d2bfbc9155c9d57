# src/lexnet/core/index_parser.py
"""
Index file lines.

    lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt tagsense_cnt synset_offset [synset_offset...]

One line per (lemma, category). Lines starting with a space are the
licence header and carry no entry.
"""

from dataclasses import dataclass

from lexnet.core.errors import MalformedIndexLine, UnknownPartOfSpeech
from lexnet.core.fields import FieldReader
from lexnet.core.pos import PartOfSpeech, from_code


@dataclass(frozen=True)
class IndexEntry:
    lemma: str                       # "ice_cream" (storage form)
    pos: str                         # "n"
    synset_count: int
    pointer_symbols: tuple[str, ...]
    sense_count: int
    tag_sense_count: int
    synset_offsets: tuple[int, ...]

    @property
    def part_of_speech(self) -> PartOfSpeech:
        return PartOfSpeech(self.pos)

    @property
    def pointer_count(self) -> int:
        return len(self.pointer_symbols)

    @property
    def word(self) -> str:
        return self.lemma.replace("_", " ")

    def to_line(self) -> str:
        """Serialize back to index file format."""
        fields = [
            self.lemma,
            self.pos,
            str(self.synset_count),
            str(self.pointer_count),
            *self.pointer_symbols,
            str(self.sense_count),
            str(self.tag_sense_count),
            *(f"{offset:08d}" for offset in self.synset_offsets),
        ]
        return " ".join(fields) + "  "

    def to_dict(self) -> dict:
        return {
            "lemma": self.lemma,
            "pos": self.pos,
            "synset_count": self.synset_count,
            "pointer_symbols": list(self.pointer_symbols),
            "sense_count": self.sense_count,
            "tag_sense_count": self.tag_sense_count,
            "synset_offsets": list(self.synset_offsets),
        }


def parse_index_line(line: str) -> IndexEntry | None:
    """
    Parse one index line. Returns None for header and blank lines.

    Raises MalformedIndexLine if the line is shorter than its declared
    counts, has a non-numeric count, or has fields left over.
    """
    line = line.rstrip("\r\n")
    if not line or line[0] == " ":
        return None

    fields = FieldReader(line, MalformedIndexLine)

    lemma = fields.next("lemma")
    pos = fields.next("pos")
    try:
        from_code(pos)
    except UnknownPartOfSpeech as e:
        raise fields.fail(str(e)) from None
    synset_count = fields.next_int("synset_cnt")

    pointer_count = fields.next_int("p_cnt")
    pointer_symbols = tuple(fields.next("ptr_symbol") for _ in range(pointer_count))

    sense_count = fields.next_int("sense_cnt")
    tag_sense_count = fields.next_int("tagsense_cnt")

    synset_offsets = tuple(fields.next_int("synset_offset") for _ in range(synset_count))
    fields.finish()

    return IndexEntry(
        lemma=lemma,
        pos=pos,
        synset_count=synset_count,
        pointer_symbols=pointer_symbols,
        sense_count=sense_count,
        tag_sense_count=tag_sense_count,
        synset_offsets=synset_offsets,
    )
