"""
Bencode encoder.

Serialises a Value tree to canonical bencode bytes. Dictionary entries come
out in sorted key order, so equal trees always encode to the same bytes.
"""

from .config import DEFAULT_MAX_DEPTH
from .errors import NestingDepthError
from .value import Integer, ByteString, List, Dictionary


def encode(value, *, max_depth=DEFAULT_MAX_DEPTH):
    """
    Turn a Value tree into bencode bytes.

    Args:
        value: The tree to encode
        max_depth: Maximum list/dictionary nesting, None for no limit

    Returns:
        bytes: The bencoded output
    """
    output = []
    _encode(value, output, 0, max_depth)
    return b"".join(output)


def _encode_string(raw, output):
    output.append(f"{len(raw)}:".encode())
    output.append(raw)


def _encode(value, output, depth, max_depth):
    if isinstance(value, Integer):
        output.append(f"i{value.value}e".encode())
    elif isinstance(value, ByteString):
        _encode_string(value.value, output)
    elif isinstance(value, (List, Dictionary)):
        if max_depth is not None and depth >= max_depth:
            raise NestingDepthError('encode', max_depth)
        if isinstance(value, List):
            output.append(b"l")
            for item in value:
                _encode(item, output, depth + 1, max_depth)
        else:
            output.append(b"d")
            for key, item in value.items():
                _encode_string(key.value, output)
                _encode(item, output, depth + 1, max_depth)
        output.append(b"e")
    else:
        raise TypeError(f"Unsupported type for bencode: {type(value)}")
