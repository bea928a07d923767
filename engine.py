"""
Huffman instances provide reusable encoding maps for compressing and
decompressing text with a character distribution comparable to the corpus
they were built from.

Compressed payload layout:
  (1) the codes of every message symbol, in order
  (2) the code of the end-of-transmission symbol (ETB)
  (3) 0-padding up to the next byte boundary
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

import huffman as huff
from bitpack import iter_bits, pack_bits


def _as_bytes(data) -> bytes:
    # memoryview rejects str, so text has to be encoded by the caller
    return memoryview(data).tobytes()


class Huffman:
    def __init__(self, corpus: bytes = b""):
        corpus = _as_bytes(corpus)
        self._frequencies = MappingProxyType(huff.frequency_table(corpus))
        self._trie_root = huff.build_huffman_tree(self._frequencies)
        self._encoding_map = MappingProxyType(huff.generate_huffman_codes(self._trie_root))

    @classmethod
    def build(cls, corpus: bytes) -> "Huffman":
        return cls(corpus)

    @property
    def frequencies(self) -> Mapping[int, int]:
        return self._frequencies

    @property
    def encoding_map(self) -> Mapping[int, str]:
        return self._encoding_map

    def code_table(self) -> List[Tuple[int, str]]:
        """(symbol, code) pairs sorted by symbol, handy for inspection."""
        return sorted(self._encoding_map.items())

    def average_code_length(self) -> float:
        """Mean bits per symbol over the training distribution (ETB included)."""
        total = sum(self._frequencies.values())
        weighted = sum(len(self._encoding_map[s]) * f for s, f in self._frequencies.items())
        return weighted / total

    # Compression

    def encode_bits(self, message: bytes) -> str:
        """
        Returns the unpadded bitstring for the message followed by the ETB code.
        Raises UnknownSymbolError for symbols the corpus never contained,
        and for a literal ETB, which would end the message early on decode.
        """
        message = _as_bytes(message)
        position = message.find(huff.ETB_CHAR)
        if position != -1:
            raise huff.UnknownSymbolError(huff.ETB_CHAR, position)
        return huff.huffman_encode(message, self._encoding_map) + self._encoding_map[huff.ETB_CHAR]

    def compress(self, message: bytes) -> bytes:
        packed, _ = pack_bits((self.encode_bits(message),))
        return packed

    # Decompression

    def decompress(self, compressed: bytes) -> bytes:
        """
        Decodes until the ETB leaf is reached; padding after it is ignored.
        Raises MalformedStreamError if the payload ends before ETB.
        """
        compressed = _as_bytes(compressed)
        return huff.huffman_decode(iter_bits(compressed), self._trie_root, huff.ETB_CHAR)

    def __repr__(self):
        return f"Huffman(alphabet_size={len(self._encoding_map)}, corpus_symbols={sum(self._frequencies.values()) - 1})"
