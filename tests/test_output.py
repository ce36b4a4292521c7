import io

import pytest

from pushswap import output


def test_putchar_writes_and_counts(capsys):
    assert output.putchar("a") == 1
    assert output.putchar(ord("b")) == 1
    assert capsys.readouterr().out == "ab"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        output.putchar("ab")


def test_putstr_none_writes_null(capsys):
    assert output.putstr(None) == 6
    assert capsys.readouterr().out == "(null)"


def test_putstr_stops_at_nul(capsys):
    count = output.putstr("push\0swap")
    out = capsys.readouterr().out
    assert out == "push"
    assert count == len(out)


@pytest.mark.parametrize("number", [0, 7, 42, -5, 2147483647, -2147483648])
def test_putint_round_trip(capsys, number):
    count = output.putint(number)
    out = capsys.readouterr().out
    assert int(out) == number
    assert count == len(out) == output.int_length(number)


def test_putint_int_min(capsys):
    assert output.putint(-2147483648) == 11
    assert capsys.readouterr().out == "-2147483648"


def test_putint_wraps_to_32_bits(capsys):
    output.putint(2147483648)
    assert capsys.readouterr().out == "-2147483648"


def test_putui_negative_wraps(capsys):
    count = output.putui(-1)
    out = capsys.readouterr().out
    assert int(out) == 2**32 - 1
    assert count == len(out) == output.unsigned_length(-1)


@pytest.mark.parametrize("number", [0, 9, 255, 4096, 3735928559])
def test_hex_round_trip(capsys, number):
    lower = output.puthex_lower(number)
    lower_out = capsys.readouterr().out
    upper = output.puthex_upper(number)
    upper_out = capsys.readouterr().out
    assert int(lower_out, 16) == number
    assert lower_out == lower_out.lower()
    assert upper_out == lower_out.upper()
    assert lower == upper == len(lower_out) == output.hex_length(number)


def test_putpointer_zero(capsys):
    assert output.putpointer(0) == 3
    assert capsys.readouterr().out == "0x0"


def test_putpointer_value(capsys):
    count = output.putpointer(0x7FFE1234)
    out = capsys.readouterr().out
    assert out.startswith("0x")
    assert int(out, 16) == 0x7FFE1234
    assert count == len(out)


@pytest.mark.parametrize("number", [0, 1, -1, 123456, -2147483648])
def test_itoa_round_trip(number):
    text = output.itoa(number)
    assert int(text) == number
    assert len(text) == output.int_length(number)


def test_lengths_of_zero():
    assert output.int_length(0) == 1
    assert output.unsigned_length(0) == 1
    assert output.hex_length(0) == 1


def test_printf_mixed(capsys):
    total = output.printf("%s=%d %c%%", "n", 42, "x")
    out = capsys.readouterr().out
    assert out == "n=42 x%"
    assert total == len(out)


def test_printf_plain_text(capsys):
    assert output.printf("pa\n") == 3
    assert capsys.readouterr().out == "pa\n"


def test_printf_null_string(capsys):
    output.printf("%s", None)
    assert capsys.readouterr().out == "(null)"


def test_printf_numbers_round_trip(capsys):
    total = output.printf("%i|%u|%x|%X|%p", -7, 7, 255, 255, 0)
    out = capsys.readouterr().out
    parts = out.split("|")
    assert int(parts[0]) == -7
    assert int(parts[1]) == 7
    assert int(parts[2], 16) == 255
    assert parts[3] == parts[2].upper()
    assert parts[4] == "0x0"
    assert total == len(out)


def test_printf_unknown_specifier_consumes_nothing(capsys):
    total = output.printf("a%qb%d", 5)
    out = capsys.readouterr().out
    assert out == "ab5"
    assert total == 3


def test_printf_missing_argument():
    with pytest.raises(TypeError):
        output.printf("%d")


def test_printf_trailing_percent(capsys):
    total = output.printf("ab%")
    assert capsys.readouterr().out == "ab"
    assert total == 2


def test_fd_functions_write_to_stream():
    stream = io.StringIO()
    output.putchar_fd("H", stream)
    output.putstr_fd("ey", stream)
    output.putendl_fd("!", stream)
    output.putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "Hey!\n-2147483648"


@pytest.mark.parametrize("number", [0, 9, 10, -99, 2147483647])
def test_putnbr_fd_round_trip(number):
    stream = io.StringIO()
    output.putnbr_fd(number, stream)
    assert int(stream.getvalue()) == number


def test_putstr_fd_rejects_none():
    with pytest.raises(TypeError):
        output.putstr_fd(None, io.StringIO())