import heapq
from typing import Dict, Iterable, Mapping

ETB_CHAR = 23


class HuffmanError(ValueError):
    pass


class UnknownSymbolError(HuffmanError):
    def __init__(self, symbol: int, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol {symbol!r} at position {position} has no code in the encoding map")


class MalformedStreamError(HuffmanError):
    pass


class HuffmanNode: # Node for Huffman trie
    def __init__(self, symbol, frequency, left=None, right=None):
        self.symbol = symbol    # byte or None
        self.frequency = frequency
        self.left = left        # zero-child
        self.right = right      # one-child
        # smallest symbol anywhere in this subtree, used only for tie-breaking
        if left is None:
            self.min_symbol = symbol
        else:
            self.min_symbol = min(left.min_symbol, right.min_symbol)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.frequency, self.min_symbol) < (other.frequency, other.min_symbol)

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode(symbol={self.symbol}, frequency={self.frequency})"
        return f"HuffmanNode(frequency={self.frequency}, min_symbol={self.min_symbol})"


def frequency_table(corpus: bytes) -> Dict[int, int]:
    """
    Counts every byte of the corpus. ETB is always present with count 1;
    literal ETB bytes in the corpus are not counted.
    """
    ft: Dict[int, int] = {ETB_CHAR: 1}
    for b in corpus:
        if b == ETB_CHAR:
            continue
        ft[b] = ft.get(b, 0) + 1
    return ft


def build_huffman_tree(frequency_table: Mapping[int, int]) -> HuffmanNode: # frequency_table: dict of symbol -> frequency
    if not frequency_table:
        raise ValueError("Cannot build a Huffman trie from an empty frequency table")

    priority_queue = [HuffmanNode(symbol, frequency) for symbol, frequency in frequency_table.items()]
    heapq.heapify(priority_queue)

    # Build the tree, first popped node becomes the zero-child
    while len(priority_queue) > 1:
        zero_child = heapq.heappop(priority_queue)
        one_child = heapq.heappop(priority_queue)
        merged_node = HuffmanNode(None, zero_child.frequency + one_child.frequency, zero_child, one_child)
        heapq.heappush(priority_queue, merged_node)

    return priority_queue[0] # root of the trie


def generate_huffman_codes(root: HuffmanNode) -> Dict[int, str]: # root: root of the Huffman trie
    # Single-symbol alphabet: the root is a leaf and still needs one bit
    if root.is_leaf():
        return {root.symbol: "0"}

    codes: Dict[int, str] = {}
    def generate_codes_helper(node, current_code): # depth is bounded by the alphabet size
        if node.is_leaf():
            codes[node.symbol] = current_code
            return

        generate_codes_helper(node.left, current_code + '0')
        generate_codes_helper(node.right, current_code + '1')

    generate_codes_helper(root, '')
    return codes


def huffman_encode(data: bytes, code_map: Mapping[int, str]) -> str: # data: input bytes to encode, code_map: dict of symbol -> Huffman code
    parts = []
    for position, byte in enumerate(data):
        code = code_map.get(byte)
        if code is None:
            raise UnknownSymbolError(byte, position)
        parts.append(code)
    return ''.join(parts)


def huffman_decode(bits: Iterable[int], root: HuffmanNode, terminator: int = ETB_CHAR) -> bytes:
    """
    Walks the trie one bit at a time and stops at the terminator leaf.
    Bits after the terminator (padding) are never read.
    """
    decoded = bytearray()

    if root.is_leaf():
        for bit in bits:
            if bit != 0:
                raise MalformedStreamError(f"Unexpected 1 bit after {len(decoded)} decoded symbols in single-symbol stream")
            if root.symbol == terminator:
                return bytes(decoded)
            decoded.append(root.symbol)
        raise MalformedStreamError(f"Bitstream ended after {len(decoded)} symbols without end-of-transmission marker")

    node = root
    for bit in bits:
        node = node.right if bit else node.left
        if node.is_leaf():
            if node.symbol == terminator:
                return bytes(decoded)
            decoded.append(node.symbol)
            node = root

    raise MalformedStreamError(f"Bitstream ended after {len(decoded)} symbols without end-of-transmission marker")
