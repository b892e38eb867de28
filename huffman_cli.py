# filename: huffman_cli.py

import argparse
import logging
import os
import sys

from huffman_config import CoderConfig
from huffman_errors import HuffmanError
from huffman_service import HuffmanService

logger = logging.getLogger(__name__)


def format_code_table(frequencies, codes):
    lines = [" symbol      count    code", 40 * "-"]
    for symbol in sorted(codes, key=lambda s: (-frequencies[s], s)):
        lines.append(f"{symbol!r:>7} {frequencies[symbol]:>10}    {codes[symbol].to01()}")
    return "\n".join(lines)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman-text",
        description="Huffman-encode a text file, report sizes, and decode it back",
    )
    parser.add_argument("path", help="Input text file")
    parser.add_argument(
        "--show-codes",
        action="store_true",
        help="Print each symbol with its count and Huffman code",
    )
    parser.add_argument(
        "--no-decoded",
        action="store_true",
        help="Do not print the decoded text",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: HUFFMAN_LOG_LEVEL or WARNING)",
    )
    return parser


def load_config(args):
    config = CoderConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ValueError(f"unknown log level {config.log_level!r}")
    return config


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(message)s")

    try:
        print(f"File is {os.path.getsize(args.path)} bytes")
        with HuffmanService.open(args.path, config) as coder:
            encoded = coder.encode()
            print(f"Encoded value has {len(encoded) // 8} bytes")
            if args.show_codes:
                print(format_code_table(coder.frequencies, coder.codes))
            decoded = coder.decode(encoded)
    except (OSError, LookupError, HuffmanError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.debug("%s: %d symbols decoded", args.path, len(decoded))
    if not args.no_decoded:
        print(f"Decoded value is {decoded}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
