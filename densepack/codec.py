"""
Encoding and decoding of small integer sequences.

Bitstream layout (MSB first, no byte alignment):

    [flag:1][count:6 or 10][code:2][field_1:w] ... [field_n:w][pad:0-5]

- flag 0: count is 6 bits (sequences shorter than 64)
- flag 1: count is 10 bits (64..1023 elements)
- code:   00 => 4 bits, 01 => 7 bits, 10 => 9 bits per field
- pad:    zero bits up to the next multiple of 6, never read back

The bitstream is then framed as text, one character per 6 bits.
"""

from typing import List, NamedTuple, Sequence

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from .bit_width import bit_width_code, select_bit_width, width_for_code
from .errors import RangeError, TruncatedInput
from .six_bit_framer import SixBitFramer

SHORT_COUNT_BITS = 6
LONG_COUNT_BITS = 10
MAX_COUNT = (1 << LONG_COUNT_BITS) - 1
EMPTY_WIDTH = 4


class Header(NamedTuple):
    count: int
    bit_width: int
    long_form: bool


class _BitReader:
    def __init__(self, bits: bitarray) -> None:
        self.bits = bits
        self.pos = 0

    def read(self, n_bits: int, field: str) -> bitarray:
        available = len(self.bits) - self.pos
        if available < n_bits:
            raise TruncatedInput(field, n_bits, available)
        chunk = self.bits[self.pos:self.pos + n_bits]
        self.pos += n_bits
        return chunk

    def read_int(self, n_bits: int, field: str) -> int:
        return ba2int(self.read(n_bits, field))


def pack_bits(numbers: Sequence[int]) -> bitarray:
    """
    Build the padded bitstream for a sequence of numbers.

    Parameters:
    numbers (Sequence[int]): Values in 1..300, at most 1023 of them.

    Returns:
    bitarray: Header, fixed-width fields and zero padding.
    """
    if isinstance(numbers, (str, bytes)):
        raise TypeError("Input numbers must be a sequence of ints.")
    numbers = list(numbers)
    if len(numbers) > MAX_COUNT:
        raise RangeError(f"Sequence length {len(numbers)} exceeds {MAX_COUNT}")

    if numbers:
        width = select_bit_width(numbers)
    else:
        width = EMPTY_WIDTH

    bits = bitarray(endian="big")
    if len(numbers) < 64:
        bits.append(0)
        bits.extend(int2ba(len(numbers), length=SHORT_COUNT_BITS, endian="big"))
    else:
        bits.append(1)
        bits.extend(int2ba(len(numbers), length=LONG_COUNT_BITS, endian="big"))
    bits.extend(bit_width_code(width))

    for n in numbers:
        bits.extend(int2ba(n, length=width, endian="big"))

    padding = (6 - len(bits) % 6) % 6
    bits.extend("0" * padding)
    return bits


def encode(numbers: Sequence[int]) -> str:
    """
    Serialize a sequence of numbers (1-300) into a compact printable string.

    Parameters:
    numbers (Sequence[int]): The values to encode.

    Returns:
    str: Text over the 64-character alphabet.
    """
    return SixBitFramer().frame(pack_bits(numbers))


def _read_header(reader: _BitReader) -> Header:
    long_form = bool(reader.read_int(1, "length flag"))
    if long_form:
        count = reader.read_int(LONG_COUNT_BITS, "count")
    else:
        count = reader.read_int(SHORT_COUNT_BITS, "count")
    code = reader.read(2, "bit width code").to01()
    return Header(count, width_for_code(code), long_form)


def _deframe(text: str) -> bitarray:
    if not isinstance(text, str):
        raise TypeError("Encoded input must be a string.")
    return SixBitFramer().deframe(text)


def read_header(text: str) -> Header:
    """Parse only the header of an encoded string."""
    return _read_header(_BitReader(_deframe(text)))


def decode(text: str) -> List[int]:
    """
    Deserialize a string produced by encode() back into its numbers.

    Parameters:
    text (str): The encoded string.

    Returns:
    List[int]: The numbers, in their original order.
    """
    reader = _BitReader(_deframe(text))
    header = _read_header(reader)

    numbers = []
    for i in range(header.count):
        numbers.append(reader.read_int(header.bit_width, f"field {i}"))
    # whatever is left is padding
    return numbers


def trivial_encoding(numbers: Sequence[int]) -> str:
    return ",".join(str(n) for n in numbers)


def compression_ratio(numbers: Sequence[int]) -> float:
    """
    Ratio of the encoded length to the plain comma-separated length.
    Lower is better.
    """
    trivial = trivial_encoding(numbers)
    if not trivial:
        raise ValueError("Compression ratio is undefined for an empty sequence")
    return len(encode(numbers)) / len(trivial)
