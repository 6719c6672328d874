import pytest

from bentree import (
    decode, encode, Integer, ByteString, List, Dictionary, NestingDepthError,
)


def test_encode_integer():
    assert encode(Integer(42)) == b"i42e"
    assert encode(Integer(-3)) == b"i-3e"
    assert encode(Integer(0)) == b"i0e"


def test_encode_string():
    assert encode(ByteString(b"spam")) == b"4:spam"
    assert encode(ByteString(b"")) == b"0:"
    assert encode(ByteString(b"\x00\xff")) == b"2:\x00\xff"


def test_encode_list():
    assert encode(List([ByteString(b"spam"), Integer(42)])) == b"l4:spami42ee"
    assert encode(List([])) == b"le"


def test_encode_dictionary_sorts_keys():
    tree = Dictionary({b"spam": ByteString(b"eggs"), b"cow": ByteString(b"moo")})
    assert encode(tree) == b"d3:cow3:moo4:spam4:eggse"
    assert encode(Dictionary({})) == b"de"


def test_encode_sorts_by_raw_bytes():
    tree = Dictionary({b"b": Integer(1), b"B": Integer(2), b"\xff": Integer(3), b"": Integer(4)})
    assert encode(tree) == b"d0:i4e1:Bi2e1:bi1e1:\xffi3ee"


def test_encode_rejects_plain_objects():
    with pytest.raises(TypeError):
        encode(42)
    with pytest.raises(TypeError):
        encode({b"a": 1})


@pytest.mark.parametrize("data", [
    b"i-3e",
    b"4:spam",
    b"le",
    b"de",
    b"l4:spami42ee",
    b"d3:cow3:moo4:spam4:eggse",
    b"d4:dictd3:key5:value4:listl1:a1:bee5:hello5:worlde",
    b"d8:announce35:http://tracker.example.com/announce"
    b"4:infod6:lengthi1024e4:name8:file.bin12:piece lengthi16384eee",
])
def test_canonical_round_trip(data):
    assert encode(decode(data)) == data


def test_non_canonical_input_is_normalised():
    assert encode(decode(b"d1:bi1e1:ai2ee")) == b"d1:ai2e1:bi1ee"
    assert encode(decode(b"d1:ai1e1:ai2ee")) == b"d1:ai2ee"
    assert encode(decode(b"i007e")) == b"i7e"


def test_value_round_trip():
    tree = Dictionary({
        b"t": ByteString(b"aa"),
        b"y": ByteString(b"q"),
        b"q": ByteString(b"ping"),
        b"a": Dictionary({b"id": ByteString(bytes(range(20)))}),
        b"n": List([Integer(-(2 ** 63)), Integer(2 ** 63 - 1), List([])]),
    })
    assert decode(encode(tree)) == tree


def test_encode_depth_limit():
    tree = List([])
    for _ in range(300):
        tree = List([tree])
    with pytest.raises(NestingDepthError):
        encode(tree)
    assert encode(List([List([])]), max_depth=2) == b"llee"
    with pytest.raises(NestingDepthError):
        encode(List([List([])]), max_depth=1)


def test_depth_error_has_no_input_position():
    with pytest.raises(NestingDepthError) as excinfo:
        encode(List([List([])]), max_depth=1)
    assert str(excinfo.value) == "encode: nesting deeper than 1 levels"
    assert excinfo.value.position is None
