"""
Bencode decoder.

Turns bencoded bytes into a Value tree with a recursive-descent parser. Each
production takes the input buffer and a start offset and returns the parsed
value together with the offset just past it, so nothing is mutated while
parsing.
"""

import logging

from .config import DEFAULT_MAX_DEPTH, INT_MIN, INT_MAX
from .errors import ParseError, NestingDepthError
from .value import Integer, ByteString, List, Dictionary

logger = logging.getLogger(__name__)

DIGITS = b'0123456789'
MAX_INT_DIGITS = len(str(INT_MAX))


def decode(data, *, max_depth=DEFAULT_MAX_DEPTH):
    """
    Decode one complete bencoded document.

    Args:
        data: bytes-like object, or a binary file object to read fully
        max_depth: Maximum list/dictionary nesting, None for no limit

    Returns:
        Value: The decoded tree

    Raises:
        ParseError: If the input is malformed or has trailing bytes
        TypeError: If data is not bytes-like
    """
    if hasattr(data, 'read'):
        data = data.read()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"decode expects bytes, not {type(data).__name__}")
    data = bytes(data)

    try:
        value, pos = _decode_value(data, 0, 0, max_depth)
        if pos != len(data):
            raise ParseError('document', f"{len(data) - pos} bytes of trailing data", data, pos)
    except ParseError as e:
        logger.debug(f"Rejected bencoded input of {len(data)} bytes: {e}")
        raise

    return value


def _decode_value(data, pos, depth, max_depth):
    """Pick the production from the byte at pos."""
    marker = data[pos:pos + 1]
    if not marker:
        raise ParseError('value', "unexpected end of input", data, pos)

    if marker == b'i':
        return _decode_int(data, pos)
    if marker in (b'l', b'd'):
        if max_depth is not None and depth >= max_depth:
            raise NestingDepthError('value', max_depth, data, pos)
        if marker == b'l':
            return _decode_list(data, pos, depth + 1, max_depth)
        return _decode_dict(data, pos, depth + 1, max_depth)
    if data[pos] in DIGITS:
        return _decode_string(data, pos)

    raise ParseError('value', f"invalid marker {marker!r}", data, pos)


def _scan_digits(data, pos):
    """Return the offset of the first non-digit at or after pos."""
    end = len(data)
    while pos < end and data[pos] in DIGITS:
        pos += 1
    return pos


def _decode_int(data, pos):
    """Decode i<number>e starting at the 'i'."""
    start = pos + 1
    digits_start = start + 1 if data[start:start + 1] == b'-' else start
    end = _scan_digits(data, digits_start)

    if end == digits_start:
        raise ParseError('integer', "no digits", data, start)

    # Anything past 19 significant digits cannot fit in 64 bits
    significant = data[digits_start:end].lstrip(b'0')
    if len(significant) > MAX_INT_DIGITS:
        raise ParseError('integer', f"{end - digits_start} digit number does not fit in 64 bits", data, start)

    number = int(significant or b'0')
    if digits_start != start:
        number = -number
    if not INT_MIN <= number <= INT_MAX:
        raise ParseError('integer', f"{number} does not fit in 64 bits", data, start)

    if data[end:end + 1] != b'e':
        raise ParseError('integer', "missing 'e' terminator", data, end)

    return Integer(number), end + 1


def _decode_string(data, pos):
    """Decode <length>:<bytes> starting at the first length digit."""
    colon = _scan_digits(data, pos)
    if colon == pos:
        raise ParseError('string', "missing length", data, pos)
    if data[colon:colon + 1] != b':':
        raise ParseError('string', "missing ':' after length", data, colon)

    # A length with more digits than the input size cannot be satisfied
    significant = data[pos:colon].lstrip(b'0')
    if len(significant) > len(str(len(data))):
        raise ParseError(
            'string',
            f"truncated, {colon - pos} digit length declared but {len(data) - colon - 1} bytes available",
            data, colon + 1
        )

    length = int(significant or b'0')
    start = colon + 1
    end = start + length
    if end > len(data):
        raise ParseError(
            'string',
            f"truncated, {length} bytes declared but {len(data) - start} available",
            data, start
        )

    return ByteString(data[start:end]), end


def _decode_list(data, pos, depth, max_depth):
    """Decode l<values>e starting at the 'l'."""
    items = []
    pos += 1
    while True:
        marker = data[pos:pos + 1]
        if marker == b'e':
            break
        if not marker:
            raise ParseError('list', "unexpected end of input before 'e'", data, pos)

        item, pos = _decode_value(data, pos, depth, max_depth)
        items.append(item)

    return List(items), pos + 1


def _decode_dict(data, pos, depth, max_depth):
    """Decode d<key><value>...e starting at the 'd'."""
    entries = {}
    pos += 1
    while True:
        marker = data[pos:pos + 1]
        if marker == b'e':
            break
        if not marker:
            raise ParseError('dictionary', "unexpected end of input before 'e'", data, pos)

        # Keys have to be strings
        if data[pos] not in DIGITS:
            raise ParseError('dictionary', f"key must be a byte string, got {marker!r}", data, pos)
        key, pos = _decode_string(data, pos)

        # A repeated key replaces the earlier value
        value, pos = _decode_value(data, pos, depth, max_depth)
        entries[key.value] = value

    return Dictionary(entries), pos + 1
