# filename: huffman_core.py

import heapq
import itertools
import logging
from collections import Counter

from bitarray import bitarray

from huffman_errors import EmptyAlphabetError, MalformedBitSequenceError, SymbolNotFoundError

logger = logging.getLogger(__name__)

# Every line read is followed by this symbol, both when counting and when emitting
TERMINATOR = "\n"


class HuffmanNode:
    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.symbol is not None

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.weight})"
        return f"HuffmanNode(<internal>, {self.weight})"


def iter_symbols(lines):
    """Yield the characters of each line followed by one TERMINATOR per line.

    Lines coming from file iteration keep their trailing newline; it is
    stripped so that the terminator is counted exactly once per line.
    """
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        yield from line
        yield TERMINATOR


def tree_depth(root):
    if root is None or root.is_leaf:
        return 0
    return 1 + max(tree_depth(root.left), tree_depth(root.right))


def code_lengths(codes):
    return {symbol: len(code) for symbol, code in codes.items()}


class HuffmanLogic:
    def count_frequencies(self, lines):
        # Counter keeps first-seen order, which the tree builder relies on for ties
        freqs = Counter()
        freqs.update(iter_symbols(lines))
        logger.debug("frequency pass: %d distinct symbols, %d total", len(freqs), sum(freqs.values()))
        return freqs

    def build_tree(self, frequencies):
        if not frequencies:
            raise EmptyAlphabetError()

        # Heap entries are (weight, order, node): equal weights pop in insertion
        # order, leaves first-seen order and merged nodes in creation order
        order = itertools.count()
        priority_queue = [
            (freq, next(order), HuffmanNode(symbol, freq))
            for symbol, freq in frequencies.items()
        ]
        heapq.heapify(priority_queue)

        # Iteratively merge the two lightest nodes to form the binary tree
        while len(priority_queue) > 1:
            left_weight, _, left = heapq.heappop(priority_queue)
            right_weight, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left_weight + right_weight, left, right)
            heapq.heappush(priority_queue, (merged.weight, next(order), merged))

        root = priority_queue[0][2]
        logger.debug("built tree: weight=%d depth=%d", root.weight, tree_depth(root))
        return root

    def generate_codes(self, root):
        codes = {}

        # A lone leaf has no path to describe; it gets the 1-bit code 0
        if root.is_leaf:
            codes[root.symbol] = bitarray("0")
            return codes

        def traverse(node, prefix):
            if node.is_leaf:
                codes[node.symbol] = prefix
                return
            traverse(node.left, prefix + bitarray("0"))
            traverse(node.right, prefix + bitarray("1"))

        traverse(root, bitarray())
        return codes

    def encode_symbols(self, symbols, codes):
        encoded = bitarray()
        for symbol in symbols:
            try:
                code = codes[symbol]
            except KeyError:
                raise SymbolNotFoundError(symbol) from None
            encoded.extend(code)
        return encoded

    def decode_bits(self, bits, root, strict=True):
        if isinstance(bits, str):
            bits = bitarray(bits)
        output = []

        if root.is_leaf:
            for position, bit in enumerate(bits):
                if bit:
                    raise MalformedBitSequenceError(
                        f"bit 1 at position {position} has no branch in a single-symbol tree",
                        position,
                    )
                output.append(root.symbol)
            return "".join(output)

        node = root
        code_start = 0
        for position, bit in enumerate(bits):
            node = node.right if bit else node.left
            if node.is_leaf:
                output.append(node.symbol)
                node = root
                code_start = position + 1

        if node is not root:
            trailing = len(bits) - code_start
            if strict:
                raise MalformedBitSequenceError(
                    f"bit sequence ends mid-code: {trailing} trailing bit(s) do not reach a leaf",
                    code_start,
                )
            logger.warning("dropping %d trailing bit(s) that do not reach a leaf", trailing)

        return "".join(output)

    def validate_tree(self, root):
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                if node.left is not None or node.right is not None:
                    raise ValueError(f"leaf {node!r} has children")
                continue
            if node.left is None or node.right is None:
                raise ValueError(f"internal node {node!r} is missing a child")
            if node.weight != node.left.weight + node.right.weight:
                raise ValueError(
                    f"internal node weight {node.weight} != "
                    f"{node.left.weight} + {node.right.weight}"
                )
            stack.append(node.left)
            stack.append(node.right)
