"""
Shared constants for the bencode codec.
"""

# Bencode integers are held as signed 64-bit values
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# The decoder spends two Python frames per nesting level, so this keeps
# the default well under the interpreter's recursion limit
DEFAULT_MAX_DEPTH = 256

# Bytes of input quoted in a ParseError message
ERROR_CONTEXT_BYTES = 20

TEXT_ENCODING = 'utf-8'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
