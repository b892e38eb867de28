# filename: huffman_config.py

import os
from dataclasses import dataclass

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _parse_bool(name, value):
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {_TRUE + _FALSE}, got {value!r}")


@dataclass
class CoderConfig:
    encoding: str = "utf-8"
    # strict: a bit sequence ending mid-code is an error; otherwise the tail is dropped
    strict_decode: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from HUFFMAN_* environment variables, falling back to defaults."""
        if environ is None:
            environ = os.environ
        config = cls()
        if "HUFFMAN_ENCODING" in environ:
            config.encoding = environ["HUFFMAN_ENCODING"]
        if "HUFFMAN_STRICT_DECODE" in environ:
            config.strict_decode = _parse_bool("HUFFMAN_STRICT_DECODE", environ["HUFFMAN_STRICT_DECODE"])
        if "HUFFMAN_LOG_LEVEL" in environ:
            config.log_level = environ["HUFFMAN_LOG_LEVEL"].upper()
        return config
