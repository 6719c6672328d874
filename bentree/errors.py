"""
Exceptions raised by the bencode codec.
"""

from .config import ERROR_CONTEXT_BYTES


class BencodeError(Exception):
    """General exception for bencode problems."""
    pass


class ParseError(BencodeError, ValueError):
    """
    Raised when bencoded input does not follow the grammar.

    Attributes:
        production: Grammar rule that failed ('value', 'integer', 'string',
            'list', 'dictionary' or 'document')
        position: Byte offset of the failing check, None without input
        context: A short slice of the input starting at that offset
    """

    def __init__(self, production, reason, data=None, position=0):
        self.production = production
        self.reason = reason
        if data is None:
            # Raised while walking a tree, there is no input to point at
            self.position = None
            self.context = b''
            super().__init__(f"{production}: {reason}")
            return

        self.position = position
        self.context = bytes(data[position:position + ERROR_CONTEXT_BYTES])
        super().__init__(
            f"{production}: {reason} at offset {position} (near {self.context!r})"
        )


class NestingDepthError(ParseError):
    """Raised when lists and dictionaries nest deeper than the allowed limit."""

    def __init__(self, production, limit, data=None, position=0):
        self.limit = limit
        super().__init__(production, f"nesting deeper than {limit} levels", data, position)
