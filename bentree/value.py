"""
Value model for bencoded documents.

A decoded document is a tree of four node types: Integer, ByteString, List
and Dictionary. Containers own their children and nothing is shared, so a
tree can never contain a cycle.
"""

from .config import INT_MIN, INT_MAX, TEXT_ENCODING


class Value:
    """Base class of the four bencode node types."""

    __slots__ = ()


class Integer(Value):
    """A signed 64-bit integer."""

    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Integer requires an int, not {type(value).__name__}")
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"Integer {value} does not fit in 64 bits")
        self._value = value

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((Integer, self._value))

    def __int__(self):
        return self._value

    def __repr__(self):
        return f"Integer({self._value})"


class ByteString(Value):
    """A run of raw bytes; not necessarily valid text."""

    __slots__ = ('_value',)

    def __init__(self, value):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"ByteString requires bytes, not {type(value).__name__}")
        self._value = bytes(value)

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, ByteString):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, ByteString):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash((ByteString, self._value))

    def __len__(self):
        return len(self._value)

    def __bytes__(self):
        return self._value

    def __repr__(self):
        return f"ByteString({self._value!r})"


class List(Value):
    """An ordered sequence of values."""

    __slots__ = ('_items',)

    def __init__(self, items=()):
        items = tuple(items)
        for item in items:
            if not isinstance(item, Value):
                raise TypeError(f"List items must be Value, not {type(item).__name__}")
        self._items = items

    def __eq__(self, other):
        if not isinstance(other, List):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self):
        return f"List({list(self._items)!r})"


def _key_bytes(key):
    """Normalise a dictionary key given as ByteString, bytes or str."""
    if isinstance(key, ByteString):
        return key.value
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode(TEXT_ENCODING)
    raise TypeError(f"Dictionary keys must be byte strings, not {type(key).__name__}")


class Dictionary(Value):
    """
    A mapping from byte-string keys to values.

    Entries are kept sorted by key bytes, which is the order canonical
    bencode requires on the wire. When the same key is given more than once
    the last value wins.
    """

    __slots__ = ('_entries',)

    def __init__(self, entries=()):
        if hasattr(entries, 'items'):
            entries = entries.items()

        collected = {}
        for key, value in entries:
            if not isinstance(value, Value):
                raise TypeError(f"Dictionary values must be Value, not {type(value).__name__}")
            collected[_key_bytes(key)] = value

        self._entries = {key: collected[key] for key in sorted(collected)}

    def __eq__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return (ByteString(key) for key in self._entries)

    def __contains__(self, key):
        try:
            return _key_bytes(key) in self._entries
        except TypeError:
            return False

    def __getitem__(self, key):
        return self._entries[_key_bytes(key)]

    def get(self, key, default=None):
        return self._entries.get(_key_bytes(key), default)

    def keys(self):
        return [ByteString(key) for key in self._entries]

    def values(self):
        return list(self._entries.values())

    def items(self):
        """Return (ByteString, Value) pairs in sorted key order."""
        return [(ByteString(key), value) for key, value in self._entries.items()]

    def __repr__(self):
        inner = ', '.join(f"{key!r}: {value!r}" for key, value in self._entries.items())
        return f"Dictionary({{{inner}}})"
