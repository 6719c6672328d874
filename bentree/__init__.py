"""
Bencode codec for BitTorrent metadata and DHT messages.

    >>> from bentree import decode, encode, render
    >>> tree = decode(b"d3:cow3:moo4:spam4:eggse")
    >>> render(tree)
    '{cow : moo , spam : eggs}'
    >>> encode(tree)
    b'd3:cow3:moo4:spam4:eggse'
"""

from .config import DEFAULT_MAX_DEPTH
from .errors import BencodeError, ParseError, NestingDepthError
from .value import Value, Integer, ByteString, List, Dictionary
from .decoder import decode
from .encoder import encode
from .pretty import render
from .convert import from_python, to_python, loads, dumps

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'BencodeError',
    'ParseError',
    'NestingDepthError',
    'Value',
    'Integer',
    'ByteString',
    'List',
    'Dictionary',
    'decode',
    'encode',
    'render',
    'from_python',
    'to_python',
    'loads',
    'dumps',
]

__version__ = '0.1.0'
