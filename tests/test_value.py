import pytest

from bentree import Integer, ByteString, List, Dictionary


def test_integer_bounds():
    assert Integer(2 ** 63 - 1).value == 2 ** 63 - 1
    assert Integer(-(2 ** 63)).value == -(2 ** 63)
    with pytest.raises(ValueError):
        Integer(2 ** 63)
    with pytest.raises(ValueError):
        Integer(-(2 ** 63) - 1)


def test_integer_rejects_non_int():
    with pytest.raises(TypeError):
        Integer(True)
    with pytest.raises(TypeError):
        Integer(1.5)
    with pytest.raises(TypeError):
        Integer("3")


def test_bytestring_accepts_bytes_like():
    assert ByteString(bytearray(b"spam")) == ByteString(b"spam")
    assert ByteString(memoryview(b"spam")).value == b"spam"
    with pytest.raises(TypeError):
        ByteString("spam")


def test_variants_are_distinct():
    assert Integer(1) != ByteString(b"1")
    assert List([]) != Dictionary({})
    assert Integer(1) != 1


def test_list_equality_is_ordered():
    assert List([Integer(1), Integer(2)]) == List([Integer(1), Integer(2)])
    assert List([Integer(1), Integer(2)]) != List([Integer(2), Integer(1)])


def test_list_rejects_plain_objects():
    with pytest.raises(TypeError):
        List([1, 2])


def test_dictionary_equality_ignores_construction_order():
    first = Dictionary([(b"b", Integer(1)), (b"a", Integer(2))])
    second = Dictionary({b"a": Integer(2), b"b": Integer(1)})
    assert first == second


def test_dictionary_keys_are_sorted():
    d = Dictionary({b"spam": Integer(1), b"cow": Integer(2), b"a": Integer(3)})
    assert d.keys() == [ByteString(b"a"), ByteString(b"cow"), ByteString(b"spam")]
    assert [key.value for key in d] == [b"a", b"cow", b"spam"]


def test_dictionary_last_key_wins():
    d = Dictionary([(b"a", Integer(1)), (b"a", Integer(2))])
    assert len(d) == 1
    assert d[b"a"] == Integer(2)


def test_dictionary_lookup_by_any_key_form():
    d = Dictionary({b"cow": ByteString(b"moo")})
    assert d[b"cow"] == ByteString(b"moo")
    assert d["cow"] == ByteString(b"moo")
    assert d[ByteString(b"cow")] == ByteString(b"moo")
    assert "cow" in d
    assert 42 not in d
    assert d.get(b"pig") is None
    with pytest.raises(KeyError):
        d[b"pig"]


def test_dictionary_rejects_bad_entries():
    with pytest.raises(TypeError):
        Dictionary({1: Integer(1)})
    with pytest.raises(TypeError):
        Dictionary({b"a": 1})


def test_containers_are_unhashable():
    assert hash(Integer(3)) == hash(Integer(3))
    assert hash(ByteString(b"x")) == hash(ByteString(b"x"))
    with pytest.raises(TypeError):
        hash(List([]))
    with pytest.raises(TypeError):
        hash(Dictionary({}))


def test_repr():
    assert repr(Integer(-3)) == "Integer(-3)"
    assert repr(ByteString(b"moo")) == "ByteString(b'moo')"
    assert repr(List([Integer(1)])) == "List([Integer(1)])"
    assert repr(Dictionary({b"a": Integer(1)})) == "Dictionary({b'a': Integer(1)})"
