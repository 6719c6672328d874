"""
Human-readable rendering of Value trees, for logs and debugging.

The output is not bencode and cannot be decoded again.
"""

from .config import DEFAULT_MAX_DEPTH, TEXT_ENCODING
from .errors import NestingDepthError
from .value import Integer, ByteString, List, Dictionary

SEPARATOR = " , "


def render(value, *, max_depth=DEFAULT_MAX_DEPTH):
    """Render a tree as text, e.g. {cow : moo , spam : [1 , 2]}."""
    return _render(value, 0, max_depth)


def _render(value, depth, max_depth):
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, ByteString):
        return value.value.decode(TEXT_ENCODING, errors='replace')

    if not isinstance(value, (List, Dictionary)):
        raise TypeError(f"Cannot render {type(value)}")
    if max_depth is not None and depth >= max_depth:
        raise NestingDepthError('render', max_depth)

    if isinstance(value, List):
        if not len(value):
            return "[]"
        items = (_render(item, depth + 1, max_depth) for item in value)
        return "[" + SEPARATOR.join(items) + "]"

    if not len(value):
        return "{}"
    pairs = (
        f"{_render(key, depth + 1, max_depth)} : {_render(item, depth + 1, max_depth)}"
        for key, item in value.items()
    )
    return "{" + SEPARATOR.join(pairs) + "}"
