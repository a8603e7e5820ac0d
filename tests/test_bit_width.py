import pytest

from densepack.bit_width import bit_width_code, select_bit_width, width_for_code
from densepack.errors import InvalidHeader, RangeError


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([1], 4),
        ([9, 9, 1], 4),
        ([10], 7),
        ([1, 2, 99], 7),
        ([100], 9),
        ([1, 1, 300], 9),
        (list(range(100, 301)), 9),
    ],
)
def test_select_bit_width_uses_maximum(numbers, expected):
    assert select_bit_width(numbers) == expected


def test_single_large_value_lifts_whole_sequence():
    assert select_bit_width([1] * 50 + [150]) == 9


@pytest.mark.parametrize("bad", [[0], [301], [5, -1], [1, 2, 1000]])
def test_out_of_range_rejected(bad):
    with pytest.raises(RangeError):
        select_bit_width(bad)


def test_empty_sequence_rejected():
    with pytest.raises(RangeError):
        select_bit_width([])


@pytest.mark.parametrize("bad", [[1.5], ["3"], [True]])
def test_non_int_rejected(bad):
    with pytest.raises(TypeError):
        select_bit_width(bad)


def test_codes():
    assert [bit_width_code(w) for w in (4, 7, 9)] == ["00", "01", "10"]
    assert [width_for_code(c) for c in ("00", "01", "10")] == [4, 7, 9]


def test_unknown_code_and_width():
    with pytest.raises(InvalidHeader):
        width_for_code("11")
    with pytest.raises(RangeError):
        bit_width_code(8)
