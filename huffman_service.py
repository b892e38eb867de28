# filename: huffman_service.py

import logging

from huffman_config import CoderConfig
from huffman_core import HuffmanLogic, iter_symbols
from huffman_errors import TreeNotBuiltError

logger = logging.getLogger(__name__)


class HuffmanService:
    """Two-pass Huffman coder over a readable, seekable text stream.

    ``encode`` scans the stream once to count symbols and again to emit bits,
    keeping the tree it built so that ``decode`` can walk it afterwards.
    """

    def __init__(self, stream, config=None, owns_stream=False):
        self.logic = HuffmanLogic()
        self.stream = stream
        self.config = config if config is not None else CoderConfig()
        self._owns_stream = owns_stream
        self._frequencies = None
        self._root = None
        self._codes = None

    @classmethod
    def open(cls, path, config=None):
        if config is None:
            config = CoderConfig()
        # Opening only; nothing is read until encode()
        stream = open(path, "r", encoding=config.encoding)
        logger.debug("opened %s for encoding (%s)", path, config.encoding)
        return cls(stream, config, owns_stream=True)

    @property
    def frequencies(self):
        return self._frequencies

    @property
    def root(self):
        return self._root

    @property
    def codes(self):
        return self._codes

    @property
    def closed(self):
        return self.stream.closed

    def encode(self):
        try:
            self.stream.seek(0)
            frequencies = self.logic.count_frequencies(self.stream)
            root = self.logic.build_tree(frequencies)
            codes = self.logic.generate_codes(root)

            # rewind for the emission pass
            self.stream.seek(0)
            encoded = self.logic.encode_symbols(iter_symbols(self.stream), codes)
        except UnicodeDecodeError as e:
            # undecodable input is a read failure, reported like any other
            raise OSError(f"cannot read input as {self.config.encoding}: {e}") from e

        self._frequencies = frequencies
        self._root = root
        self._codes = codes
        logger.debug("encoded %d symbols into %d bits", root.weight, len(encoded))
        return encoded

    def decode(self, bits, strict=None):
        if self._root is None:
            raise TreeNotBuiltError()
        if strict is None:
            strict = self.config.strict_decode
        return self.logic.decode_bits(bits, self._root, strict=strict)

    def close(self):
        if self._owns_stream and not self.stream.closed:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
