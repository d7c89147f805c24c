import pytest

from arenalloc.checks import (
    check_all,
    check_checksum,
    check_length,
    check_palindrome,
    check_uppercase,
    checksum,
)


@pytest.mark.parametrize(
    "arg, expected",
    [("A" * 20, True), ("A" * 19, False), ("A" * 21, False), ("", False)],
)
def test_check_length(arg, expected):
    assert check_length(arg) is expected


def test_check_length_stops_at_nul():
    assert check_length("A" * 20 + "\0" + "B" * 5) is True
    assert check_length("A" * 10 + "\0" + "B" * 9) is False


def test_check_length_counts_bytes():
    assert check_length(b"Z" * 20) is True


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("HELLO", True),
        ("AZ", True),
        ("", True),
        ("Hello", False),
        ("@", False),
        ("[", False),
        ("ABC1", False),
    ],
)
def test_check_uppercase(arg, expected):
    assert check_uppercase(arg) is expected


@pytest.mark.parametrize(
    "arg, expected",
    [("ABBA", True), ("RACECAR", True), ("", True), ("A", True), ("ABC", False), ("AB", False)],
)
def test_check_palindrome(arg, expected):
    assert check_palindrome(arg) is expected


def test_checksum_of_empty_string():
    assert checksum("") == 0


def test_checksum_str_and_bytes_agree():
    assert checksum("HELLOWORLD") == checksum(b"HELLOWORLD")


def test_checksum_ignores_bytes_after_nul():
    assert checksum("AB\0CD") == checksum("AB")


@pytest.mark.parametrize("arg", ["A", "XYZ", "A" * 20, "QWERTYUIOPASDFGHJKLZ", "z" * 300])
def test_checksum_fits_in_a_byte_for_short_input(arg):
    assert 0 <= checksum(arg) < 256


@pytest.mark.parametrize("arg", ["", "A", "ABBA", "A" * 20, "HELLO"])
def test_check_checksum_matches_expected_value(arg):
    assert check_checksum(arg) is (checksum(arg) == 228)


@pytest.mark.parametrize("arg", ["A" * 20, "ABCDEFGHIJJIHGFEDCBA", "short", "abcdefghijjihgfedcba"])
def test_check_all_is_conjunction(arg):
    expected = (
        check_length(arg)
        and check_uppercase(arg)
        and check_palindrome(arg)
        and check_checksum(arg)
    )
    assert check_all(arg) is expected


def test_check_all_rejects_lowercase_palindrome():
    assert check_all("abcdefghijjihgfedcba") is False