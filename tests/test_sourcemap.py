from __future__ import annotations

import asyncio
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from errorframe import OriginalPosition, Position, SourceMapError, load_source_map, resolve_original
from errorframe.sourcemap import original_position_for
from errorframe.testing import identity_source_map
from errorframe.testing.corpus import encode_vlq


PAYLOAD = {
    "version": 3,
    "file": "out.js",
    "sources": ["a.ts"],
    "names": ["foo"],
    "mappings": "AAAA,IAAIA;AACA",
}


def test_encode_vlq() -> None:
    assert encode_vlq([0, 0, 0, 0]) == "AAAA"
    assert encode_vlq([1]) == "C"
    assert encode_vlq([16]) == "gB"
    assert encode_vlq([-1]) == "D"


def test_original_position_lookup() -> None:
    assert original_position_for(PAYLOAD, 1, 0) == OriginalPosition(line=1, column=0, source="a.ts")
    # Greatest lower bound: column 7 falls in the segment starting at 4.
    assert original_position_for(PAYLOAD, 1, 7) == OriginalPosition(line=1, column=4, source="a.ts", name="foo")
    assert original_position_for(PAYLOAD, 2, 3) == OriginalPosition(line=2, column=4, source="a.ts")
    assert original_position_for(PAYLOAD, 3, 0) is None
    assert original_position_for(PAYLOAD, 0, 0) is None
    assert original_position_for(PAYLOAD, 1, -1) is None


def test_unmapped_segment_has_no_position() -> None:
    payload = {"version": 3, "sources": ["a.ts"], "names": [], "mappings": "AAAA,K"}
    assert original_position_for(payload, 1, 0) is not None
    assert original_position_for(payload, 1, 9) is None


def test_names_key_is_optional() -> None:
    payload = {"version": 3, "sources": ["a.ts"], "mappings": "AAAA"}
    assert original_position_for(payload, 1, 0) == OriginalPosition(line=1, column=0, source="a.ts")


def test_source_root_and_json_payload() -> None:
    text = json.dumps({**PAYLOAD, "sourceRoot": "src/"})
    assert original_position_for(text, 1, 0).source == "src/a.ts"
    assert original_position_for(text.encode(), 1, 0).source == "src/a.ts"
    index = load_source_map(text)
    assert load_source_map(index) is index


def test_null_source_with_source_root_is_unmapped() -> None:
    payload = {"version": 3, "sourceRoot": "src/", "sources": [None, "b.ts"], "names": [], "mappings": "AAAA,ECAA"}
    assert original_position_for(payload, 1, 0) is None
    assert original_position_for(payload, 1, 2) == OriginalPosition(line=1, column=0, source="src/b.ts")


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        42,
        {**PAYLOAD, "mappings": None},
        {**PAYLOAD, "mappings": "AAAAA,CC"},
        {**PAYLOAD, "sources": []},
        {**PAYLOAD, "sources": [5]},
        {**PAYLOAD, "sourceRoot": "src/", "sources": [{"path": "a.ts"}]},
        {"version": 3, "sections": []},
    ],
)
def test_malformed_payloads(payload: object) -> None:
    with pytest.raises(SourceMapError):
        load_source_map(payload)


def test_source_map_error_carries_hint() -> None:
    with pytest.raises(SourceMapError) as info:
        load_source_map({**PAYLOAD, "sources": []})
    assert str(info.value).startswith("invalid source map:")
    assert "flat v3 map" in str(info.value)


def test_resolve_original_without_map() -> None:
    assert asyncio.run(resolve_original(None, Position(line=1, column=1))) is None


def test_resolve_original_with_default_decoder() -> None:
    pos = asyncio.run(resolve_original(PAYLOAD, Position(line=2, column=0)))
    assert pos == Position(line=2, column=4)


def test_resolve_original_with_async_resolver() -> None:
    seen: list[tuple[object, int, int]] = []

    async def resolver(map, line, column):
        seen.append((map, line, column))
        return {"line": 7, "column": 3}

    pos = asyncio.run(resolve_original("opaque", Position(line=4, column=9), resolver=resolver))
    assert pos == Position(line=7, column=3)
    assert seen == [("opaque", 4, 9)]


def test_resolve_original_incomplete_result() -> None:
    def resolver(map, line, column):
        return OriginalPosition(line=3, column=None)

    assert asyncio.run(resolve_original("opaque", Position(line=1, column=1), resolver=resolver)) is None


@given(st.text(alphabet=st.sampled_from(list("xyz ;,\n")), max_size=60), st.data())
def test_identity_map_maps_every_position_to_itself(src: str, data: st.DataObject) -> None:
    index = load_source_map(identity_source_map(src, "f.js"))
    lines = src.split("\n")
    line = data.draw(st.integers(min_value=1, max_value=len(lines)))
    column = data.draw(st.integers(min_value=0, max_value=len(lines[line - 1])))
    assert original_position_for(index, line, column) == OriginalPosition(line=line, column=column, source="f.js")
