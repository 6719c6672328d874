"""
Bridges between Value trees and plain Python objects.

Plain objects are what most callers want for torrent metadata: ints, bytes,
lists and dicts with bytes keys.
"""

from .config import DEFAULT_MAX_DEPTH, TEXT_ENCODING
from .decoder import decode
from .encoder import encode
from .value import Value, Integer, ByteString, List, Dictionary


def from_python(obj):
    """
    Build a Value tree from plain Python objects.

    Args:
        obj: int, bytes, str (encoded as UTF-8), list, tuple or dict with
            str/bytes keys. Value instances are passed through.

    Returns:
        Value: The equivalent tree
    """
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, bool):
        raise TypeError("Booleans have no bencode representation")
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, (bytes, bytearray)):
        return ByteString(obj)
    if isinstance(obj, str):
        return ByteString(obj.encode(TEXT_ENCODING))
    if isinstance(obj, (list, tuple)):
        return List(from_python(item) for item in obj)
    if isinstance(obj, dict):
        entries = []
        for key, val in obj.items():
            if not isinstance(key, (str, bytes)):
                raise TypeError(f"Bencode expects dict keys as str|bytes, not {type(key)}")
            entries.append((key, from_python(val)))
        return Dictionary(entries)
    raise TypeError(f"Unsupported type for bencode: {type(obj)}")


def to_python(value):
    """Turn a Value tree into ints, bytes, lists and dicts with bytes keys."""
    if isinstance(value, Integer):
        return value.value
    if isinstance(value, ByteString):
        return value.value
    if isinstance(value, List):
        return [to_python(item) for item in value]
    if isinstance(value, Dictionary):
        return {key.value: to_python(item) for key, item in value.items()}
    raise TypeError(f"Expected a bencode Value, not {type(value)}")


# Shortcuts for working with plain objects
def loads(data, *, max_depth=DEFAULT_MAX_DEPTH):
    """Decode bencode bytes straight to plain Python objects."""
    return to_python(decode(data, max_depth=max_depth))


def dumps(obj, *, max_depth=DEFAULT_MAX_DEPTH):
    """Encode plain Python objects to bencode bytes."""
    return encode(from_python(obj), max_depth=max_depth)
