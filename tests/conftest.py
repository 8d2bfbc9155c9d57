"""Shared fixtures: a miniature WordNet database with real byte offsets."""

import pytest
from structlog.testing import capture_logs

from lexnet.core.engine import WordNet


HEADER = [
    "  1 This software and database is being provided to you, the LICENSEE, by  ",
    "  2 Princeton University under the following license.  ",
]

# {name} placeholders become 8-digit byte offsets.
DATA = {
    "noun": [
        "{entity} 03 n 01 entity 0 001 ~ {dog_n} n 0000 | that which is perceived or known or inferred to have its own distinct existence  ",
        "{dog_n} 05 n 02 dog 0 domestic_dog 0 002 @ {entity} n 0000 + {dog_v} v 0101 | a member of the genus Canis; \"the dog barked all night\"  ",
        "{run_n} 04 n 01 run 0 000 | a score in baseball made by a runner touching all four bases  ",
        "{ice_cream} 13 n 01 ice_cream 0 000 | frozen dessert containing cream and sugar and flavoring  ",
    ],
    "verb": [
        "{run_v} 38 v 02 run 0 running 0 002 @ {move_v} v 0000 ~ {sprint_v} v 0000 02 + 01 00 + 02 01 | move fast by using one's feet  ",
        "{move_v} 38 v 01 move 0 001 ~ {run_v} v 0000 01 + 01 00 | change location  ",
        "{sprint_v} 38 v 01 sprint 0 001 @ {run_v} v 0000 | run very fast, usually for a short distance  ",
        "{dog_v} 38 v 01 dog 0 001 + {dog_n} n 0101 01 + 08 00 | go after with the intent to catch  ",
    ],
    "adj": [
        "{fast_a} 00 a 01 fast 0 002 ! {slow_a} a 0101 & {quick_s} s 0000 | acting or moving or capable of acting or moving quickly  ",
        "{quick_s} 00 s 01 quick(p) 0 001 & {fast_a} a 0000 | moving quickly and lightly  ",
        "{slow_a} 00 a 01 slow 0 001 ! {fast_a} a 0101 | not moving quickly  ",
    ],
    "adv": [
        "{fast_r} 02 r 01 fast 0 001 \\ {fast_a} a 0101 | quickly or rapidly  ",
    ],
}

INDEX = {
    "adj": [
        "fast a 1 2 ! & 1 0 {fast_a}  ",
        "quick a 1 1 & 1 0 {quick_s}  ",
        "slow a 1 1 ! 1 0 {slow_a}  ",
    ],
    "adv": [
        "fast r 1 1 \\ 1 0 {fast_r}  ",
    ],
    "noun": [
        "dog n 1 2 @ + 1 1 {dog_n}  ",
        "entity n 1 1 ~ 1 1 {entity}  ",
        "ice_cream n 1 0 1 0 {ice_cream}  ",
        "run n 1 0 1 0 {run_n}  ",
    ],
    "verb": [
        "dog v 1 1 + 1 0 {dog_v}  ",
        "move v 1 1 ~ 1 0 {move_v}  ",
        "run v 1 2 @ ~ 1 1 {run_v}  ",
        "sprint v 1 1 @ 1 0 {sprint_v}  ",
    ],
}

LEMMAS = ["fast", "quick", "slow", "dog", "entity", "ice cream", "run", "move", "sprint"]


class _Zeros(dict):
    def __missing__(self, key):
        return "00000000"


def compute_offsets(data=DATA) -> dict[str, int]:
    offsets = {}
    for lines in data.values():
        position = sum(len(line.encode()) + 1 for line in HEADER)
        for line in lines:
            name = line[1:line.index("}")]
            offsets[name] = position
            position += len(line.format_map(_Zeros()).encode()) + 1
    return offsets


def write_database(path, data=DATA, index=INDEX, skip=()) -> dict[str, int]:
    """Write index.* and data.* under `path`. Returns name -> offset."""
    path.mkdir(parents=True, exist_ok=True)
    offsets = compute_offsets(data)
    values = {name: f"{offset:08d}" for name, offset in offsets.items()}

    for ext, lines in data.items():
        if f"data.{ext}" in skip:
            continue
        text = "\n".join(HEADER + [line.format_map(values) for line in lines]) + "\n"
        (path / f"data.{ext}").write_bytes(text.encode())

    for ext, lines in index.items():
        if f"index.{ext}" in skip:
            continue
        text = "\n".join(HEADER + [line.format_map(values) for line in lines]) + "\n"
        (path / f"index.{ext}").write_bytes(text.encode())

    return offsets


@pytest.fixture(autouse=True)
def log_output():
    with capture_logs() as entries:
        yield entries


@pytest.fixture
def wordnet_dir(tmp_path):
    path = tmp_path / "dict"
    write_database(path)
    return path


@pytest.fixture
def offsets():
    return compute_offsets()


@pytest.fixture
async def wordnet(wordnet_dir):
    wn = await WordNet.open(wordnet_dir)
    yield wn
    wn.close()
