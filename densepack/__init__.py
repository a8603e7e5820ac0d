from .bit_width import select_bit_width
from .codec import Header, compression_ratio, decode, encode, pack_bits, read_header
from .errors import CodecError, InvalidCharacter, InvalidHeader, RangeError, TruncatedInput
from .six_bit_framer import SixBitFramer

__all__ = [
    "CodecError",
    "Header",
    "InvalidCharacter",
    "InvalidHeader",
    "RangeError",
    "SixBitFramer",
    "TruncatedInput",
    "compression_ratio",
    "decode",
    "encode",
    "pack_bits",
    "read_header",
    "select_bit_width",
]
