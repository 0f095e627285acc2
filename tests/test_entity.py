import pytest

from firefly2d.entity import MAX_NAME_LENGTH, decode_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a", 0xAF63DC4C8601EC8C),
        ("foobar", 0x85944171F73967E8),
    ],
)
def test_fnv1a_reference_values(name, expected):
    assert decode_name(name) == expected


def test_empty_name_is_zero():
    assert decode_name("") == 0


def test_str_and_bytes_agree():
    assert decode_name("blueFont") == decode_name(b"blueFont")


def test_name_stops_at_nul():
    assert decode_name("ab\0cd") == decode_name("ab")


def test_leading_nul_is_zero():
    assert decode_name("\0abc") == 0


def test_longest_accepted_name_is_hashed():
    name = "x" * (MAX_NAME_LENGTH - 1)
    value = decode_name(name)
    assert 0 < value < 2**64


def test_too_long_name_is_zero():
    assert decode_name("x" * MAX_NAME_LENGTH) == 0


def test_different_names_differ():
    assert decode_name("mainLight") != decode_name("globalLight")


def test_result_fits_in_64_bits_for_non_ascii():
    value = decode_name("caffè")
    assert 0 <= value < 2**64
    assert value != decode_name("caffe")