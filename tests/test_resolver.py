# tests/test_resolver.py
"""Tests for positioned sense reads and relation resolution."""

import asyncio

import pytest

from lexnet.core.errors import DataFileUnavailable, MalformedDataLine, OffsetReadFailure
from lexnet.core.index_parser import parse_index_line
from lexnet.core.resolver import DataFiles, SenseResolver

from conftest import write_database


@pytest.fixture
def data_files(wordnet_dir):
    files = DataFiles.open(wordnet_dir)
    yield files
    files.close()


@pytest.fixture
def resolver(data_files):
    return SenseResolver(data_files)


def test_open_missing_data_file(tmp_path):
    write_database(tmp_path, skip=("data.verb",))

    with pytest.raises(DataFileUnavailable) as excinfo:
        DataFiles.open(tmp_path)

    assert excinfo.value.path.endswith("data.verb")


def test_data_files_by_code(data_files):
    assert {code for code, _ in data_files.fds} == {"a", "r", "n", "v"}
    assert data_files.fd("s") is None


async def test_resolve_at(resolver, offsets):
    record = await resolver.resolve_at("n", offsets["dog_n"])

    assert record.offset == offsets["dog_n"]
    assert record.words == ["dog", "domestic dog"]
    assert record.glossary == 'a member of the genus Canis; "the dog barked all night"'


async def test_resolve_satellite(resolver, offsets):
    record = await resolver.resolve_at("s", offsets["quick_s"])

    assert record.synset_type == "adjective satellite"
    assert record.pos == "a"


async def test_resolve_past_end(resolver):
    with pytest.raises(OffsetReadFailure, match="past the end"):
        await resolver.resolve_at("n", 10_000_000)


async def test_resolve_negative_offset(resolver):
    with pytest.raises(OffsetReadFailure):
        await resolver.resolve_at("n", -1)


async def test_resolve_unknown_pos(resolver):
    with pytest.raises(OffsetReadFailure):
        await resolver.resolve_at("x", 0)


async def test_resolve_mid_line(resolver, offsets):
    with pytest.raises(MalformedDataLine) as excinfo:
        await resolver.resolve_at("n", offsets["dog_n"] + 1)

    assert excinfo.value.pos == "n"
    assert excinfo.value.offset == offsets["dog_n"] + 1


async def test_window_too_small(data_files, offsets):
    resolver = SenseResolver(data_files, window=24)

    with pytest.raises(MalformedDataLine):
        await resolver.resolve_at("n", offsets["dog_n"])


async def test_invalid_bytes_fail_the_read(tmp_path):
    write_database(tmp_path)
    data_noun = tmp_path / "data.noun"
    offset = data_noun.stat().st_size
    with data_noun.open("ab") as f:
        f.write(f"{offset:08d} 13 n 01 ice_cream 0 000 | frozen d".encode() + b"\xe9ssert\n")

    files = DataFiles.open(tmp_path)
    try:
        with pytest.raises(MalformedDataLine, match="not valid utf-8") as excinfo:
            await SenseResolver(files).resolve_at("n", offset)
    finally:
        files.close()

    assert excinfo.value.offset == offset


async def test_resolve_entries_order(resolver, offsets):
    entries = [
        parse_index_line(f"run n 1 0 1 0 {offsets['run_n']}"),
        parse_index_line(f"x v 3 0 3 0 {offsets['sprint_v']} {offsets['run_v']} {offsets['move_v']}"),
    ]

    records = await resolver.resolve_entries(entries)

    assert [r.offset for r in records] == [
        offsets["run_n"], offsets["sprint_v"], offsets["run_v"], offsets["move_v"],
    ]


async def test_resolve_entries_empty(resolver):
    assert await resolver.resolve_entries([]) == []


async def test_resolve_entry(resolver, offsets):
    entry = parse_index_line(f"fast a 1 0 1 0 {offsets['fast_a']}")
    records = await resolver.resolve_entry(entry)
    assert records[0].words == ["fast"]


async def test_resolve_relation(resolver, offsets):
    dog = await resolver.resolve_at("n", offsets["dog_n"])
    hypernym = dog.relations_of("@")[0]

    entity = await resolver.resolve(hypernym)

    assert entity.offset == offsets["entity"]
    assert entity.words == ["entity"]


async def test_resolve_relation_idempotent(resolver, offsets):
    dog = await resolver.resolve_at("n", offsets["dog_n"])
    relation = dog.relations[1]

    first = await resolver.resolve(relation)
    second = await resolver.resolve(relation)

    assert first == second
    assert first.pos == "v"


async def test_resolve_relation_to_satellite(resolver, offsets):
    fast = await resolver.resolve_at("a", offsets["fast_a"])
    similar = fast.relations_of("&")[0]

    quick = await resolver.resolve(similar)

    assert quick.synset_type == "adjective satellite"
    assert quick.members[0].marker == "p"


async def test_resolve_relations(resolver, offsets):
    run = await resolver.resolve_at("v", offsets["run_v"])

    pairs = await resolver.resolve_relations(run)

    assert [(r.symbol, t.words) for r, t in pairs] == [("@", ["move"]), ("~", ["sprint"])]


async def test_resolve_relations_filtered(resolver, offsets):
    run = await resolver.resolve_at("v", offsets["run_v"])

    pairs = await resolver.resolve_relations(run, {"~"})

    assert [t.words for _, t in pairs] == [["sprint"]]


async def test_concurrent_reads(resolver, offsets):
    names = ["entity", "dog_n", "run_n", "ice_cream"] * 25
    records = await asyncio.gather(*(resolver.resolve_at("n", offsets[n]) for n in names))

    assert [r.offset for r in records] == [offsets[n] for n in names]
