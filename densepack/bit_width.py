from typing import Dict, Sequence

from .errors import InvalidHeader, RangeError

MIN_VALUE = 1
MAX_VALUE = 300

# width -> 2-bit header code; "11" is unassigned
WIDTH_CODES: Dict[int, str] = {4: "00", 7: "01", 9: "10"}
CODE_WIDTHS: Dict[str, int] = {code: width for width, code in WIDTH_CODES.items()}


def check_number(n, index: int) -> None:
    """
    Validates a single element of an input sequence.

    Parameters:
    n (int): The value to check.
    index (int): Position of the value, used in the error message.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Element {index} must be an int, got {type(n).__name__}")
    if n < MIN_VALUE or n > MAX_VALUE:
        raise RangeError(
            f"All numbers must be in the range {MIN_VALUE}-{MAX_VALUE}: "
            f"got {n} at index {index}"
        )


def select_bit_width(numbers: Sequence[int]) -> int:
    """
    Picks the smallest fixed width able to hold every number in the sequence.

    The choice is driven by the maximum value only:
     - max < 10   => 4 bits,
     - max < 100  => 7 bits,
     - otherwise  => 9 bits (enough for 300).

    Parameters:
    numbers (Sequence[int]): Non-empty sequence of values in 1..300.

    Returns:
    int: 4, 7 or 9.
    """
    if not numbers:
        raise RangeError("Cannot select a bit width for an empty sequence")
    for i, n in enumerate(numbers):
        check_number(n, i)

    largest = max(numbers)
    if largest < 10:
        return 4
    if largest < 100:
        return 7
    return 9


def bit_width_code(width: int) -> str:
    if width not in WIDTH_CODES:
        raise RangeError(f"Unsupported bit width: {width}")
    return WIDTH_CODES[width]


def width_for_code(code: str) -> int:
    if code not in CODE_WIDTHS:
        raise InvalidHeader(f"Invalid bit width code: {code}")
    return CODE_WIDTHS[code]
