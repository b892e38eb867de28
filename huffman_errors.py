# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every error raised by the codec."""


class EncodeError(HuffmanError):
    pass


class EmptyAlphabetError(EncodeError):
    def __init__(self, message="no symbols to encode: frequency table is empty"):
        super().__init__(message)


class SymbolNotFoundError(EncodeError, KeyError):
    # Raised when the emission pass meets a symbol the frequency pass never saw
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} has no code in the code table")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class DecodeError(HuffmanError):
    pass


class TreeNotBuiltError(DecodeError):
    def __init__(self, message="no tree has been built yet; call encode() first"):
        super().__init__(message)


class MalformedBitSequenceError(DecodeError, ValueError):
    def __init__(self, message, position=None):
        self.position = position
        super().__init__(message)
