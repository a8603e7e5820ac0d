"""
Exception types raised by the densepack codec.

Every codec failure derives from CodecError, which is a ValueError so
callers that already guard against bad values keep working.
"""


class CodecError(ValueError):
    """Base class for all encode/decode failures."""


class RangeError(CodecError):
    """An input number (or the sequence length) is outside the supported range."""


class InvalidHeader(CodecError):
    """The bit-width code in the header is not one of the known codes."""


class InvalidCharacter(CodecError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class TruncatedInput(CodecError):
    def __init__(self, field: str, needed: int, available: int) -> None:
        self.field = field
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input: {field} needs {needed} bits, only {available} left"
        )
