#!/usr/bin/env python3
"""
Command-line interface for inspecting bencoded files.
"""

import argparse
import json
import logging
import sys

from .config import DEFAULT_MAX_DEPTH, LOG_FORMAT, LOG_DATE_FORMAT, TEXT_ENCODING
from .decoder import decode
from .encoder import encode
from .errors import BencodeError
from .pretty import render
from .value import Integer, ByteString, List, Dictionary

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )


def read_input(path):
    """Read raw bytes from a file path, or stdin for '-'."""
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


HEX_PREFIX = 'hex:'


def format_bytes(raw):
    """
    Show a byte string as text when it decodes cleanly, otherwise as hex.

    Text that itself starts with the hex prefix is hex-encoded too, so two
    different byte strings never map to the same output.
    """
    try:
        text = raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        return f"{HEX_PREFIX}{raw.hex()}"
    if text.startswith(HEX_PREFIX):
        return f"{HEX_PREFIX}{raw.hex()}"
    return text


def to_json_object(value):
    """Convert a tree into something json.dumps accepts."""
    if isinstance(value, Integer):
        return value.value
    if isinstance(value, ByteString):
        return format_bytes(value.value)
    if isinstance(value, List):
        return [to_json_object(item) for item in value]
    if isinstance(value, Dictionary):
        return {format_bytes(key.value): to_json_object(item) for key, item in value.items()}
    raise TypeError(f"Expected a bencode Value, not {type(value)}")


def show(args):
    """Print the rendered tree."""
    tree = decode(read_input(args.file), max_depth=args.max_depth)
    print(render(tree, max_depth=args.max_depth))
    return 0


def show_json(args):
    """Print the tree as indented JSON."""
    tree = decode(read_input(args.file), max_depth=args.max_depth)
    print(json.dumps(to_json_object(tree), indent=2))
    return 0


def check(args):
    """Report whether a file decodes and is in canonical form."""
    raw = read_input(args.file)
    tree = decode(raw, max_depth=args.max_depth)
    canonical = encode(tree, max_depth=args.max_depth)

    if canonical == raw:
        print(f"{args.file}: valid, canonical ({len(raw)} bytes)")
        return 0

    logger.debug(f"Re-encoded {len(canonical)} bytes differ from {len(raw)} input bytes")
    print(f"{args.file}: valid, not canonical (keys unsorted or duplicated)")
    return 1


COMMANDS = {
    'show': show,
    'json': show_json,
    'check': check,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog='bentree',
        description='Inspect bencoded data such as .torrent files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a torrent as text
  %(prog)s show example.torrent

  # Dump a DHT packet as JSON
  %(prog)s json packet.bin

  # Check that a file is canonical bencode
  %(prog)s check example.torrent
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH,
                        help=f'Maximum nesting depth (default: {DEFAULT_MAX_DEPTH})')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    show_parser = subparsers.add_parser('show', help='Print the decoded tree')
    show_parser.add_argument('file', help="Path to bencoded file, '-' for stdin")

    json_parser = subparsers.add_parser('json', help='Print the decoded tree as JSON')
    json_parser.add_argument('file', help="Path to bencoded file, '-' for stdin")

    check_parser = subparsers.add_parser('check', help='Check the file is canonical bencode')
    check_parser.add_argument('file', help="Path to bencoded file, '-' for stdin")

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        return COMMANDS[args.command](args)
    except (BencodeError, OSError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
