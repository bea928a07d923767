from typing import Iterable, Iterator, Tuple


def pack_bits(codes: Iterable[str]) -> Tuple[bytes, int]:
    """
    Converts a sequence of '0'/'1' strings into packed bytes, MSB first.
    Returns (packed_bytes, pad_bits) where pad_bits is number of 0 bits added at the end
    """
    out = bytearray()
    acc = 0
    acc_bits = 0

    for bits in codes:
        for ch in bits:
            acc = (acc << 1) | (1 if ch == '1' else 0)
            acc_bits += 1
            if acc_bits == 8:
                out.append(acc)
                acc = 0
                acc_bits = 0

    pad_bits = 0
    if acc_bits != 0:
        pad_bits = 8 - acc_bits
        acc = acc << pad_bits
        out.append(acc & 0xFF)

    return bytes(out), pad_bits


def iter_bits(packed: bytes) -> Iterator[int]:
    for byte in packed:
        for i in range(7, -1, -1):
            yield (byte >> i) & 1
