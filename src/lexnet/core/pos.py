# src/lexnet/core/pos.py
"""
Syntactic categories.

WordNet stores four categories on disk (adj, adv, noun, verb). Satellite
adjectives ("s") are a fifth synset type but live in the adjective files.
"""

from enum import Enum

from lexnet.core.errors import UnknownPartOfSpeech


class PartOfSpeech(str, Enum):
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADJECTIVE_SATELLITE = "s"
    ADVERB = "r"

    @property
    def label(self) -> str:
        return LABELS[self]

    @property
    def storage_code(self) -> str:
        """Code of the file pair holding this category ("s" -> "a")."""
        if self is PartOfSpeech.ADJECTIVE_SATELLITE:
            return PartOfSpeech.ADJECTIVE.value
        return self.value


LABELS = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adjective",
    PartOfSpeech.ADJECTIVE_SATELLITE: "adjective satellite",
    PartOfSpeech.ADVERB: "adverb",
}

# File extension -> storage code. Order is the index build order.
CATEGORIES = {
    "adj": "a",
    "adv": "r",
    "noun": "n",
    "verb": "v",
}

EXTENSIONS = {code: ext for ext, code in CATEGORIES.items()}


def from_code(code: str) -> PartOfSpeech:
    try:
        return PartOfSpeech(code)
    except ValueError:
        raise UnknownPartOfSpeech(f"unknown part of speech code {code!r}") from None


def storage_code(code: str) -> str:
    return from_code(code).storage_code
