import pytest

from pushswap.arguments import ArgumentError, check_arguments, parse_arguments


def test_parse_signed_numbers():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


def test_parse_int_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_empty_list():
    assert parse_arguments([]) == []


def test_lone_sign_reads_as_zero():
    assert parse_arguments(["-"]) == [0]


@pytest.mark.parametrize(
    "args",
    [
        ["abc"],
        ["1a"],
        ["1.5"],
        [" 1"],
        ["--1"],
        ["1", "x"],
        ["2147483648"],
        ["-2147483649"],
        ["99999999999999999999"],
        ["1", "2", "1"],
        ["1", "+1"],
        ["7", "007"],
        ["", "0"],
    ],
)
def test_invalid_arguments_raise(args):
    with pytest.raises(ArgumentError):
        check_arguments(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["5", "5"])


def test_error_names_the_argument():
    with pytest.raises(ArgumentError, match="abc"):
        parse_arguments(["1", "abc"])


def test_parse_round_trips_distinct_values():
    values = [-2147483648, -7, 0, 12, 2147483647]
    assert parse_arguments([str(value) for value in values]) == values