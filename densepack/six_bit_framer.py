from bitarray import bitarray

from .errors import InvalidCharacter


class SixBitFramer:
    # Define the character set and mappings
    CHARSET = (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "abcdefghijklmnopqrstuvwxyz"
        "0123456789+/"
    )
    ENCODE_MAP = {idx: char for idx, char in enumerate(CHARSET)}
    DECODE_MAP = {char: idx for idx, char in enumerate(CHARSET)}

    def frame(self, bits: bitarray) -> str:
        """
        Render a bitstream as printable text, one character per 6 bits.

        Parameters:
        bits (bitarray): The bitstream, already padded to a multiple of 6 bits.

        Returns:
        str: The framed text.
        """
        if len(bits) % 6:
            raise ValueError(f"Bitstream length {len(bits)} is not a multiple of 6")
        text = []
        for i in range(0, len(bits), 6):
            # Extract 6 bits at a time and convert to integer
            group = int(bits[i:i + 6].to01(), 2)
            text.append(self.ENCODE_MAP[group])
        return "".join(text)

    def deframe(self, text: str) -> bitarray:
        """
        Turn framed text back into its bitstream.

        Parameters:
        text (str): Text produced by frame().

        Returns:
        bitarray: The bitstream, 6 bits per input character.
        """
        bits = bitarray(endian="big")
        for position, char in enumerate(text):
            if char not in self.DECODE_MAP:
                raise InvalidCharacter(char, position)
            # Convert the character to its 6-bit binary representation
            bits.extend(format(self.DECODE_MAP[char], "06b"))
        return bits
