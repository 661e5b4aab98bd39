import io

import pytest

from lemin.output import putchar, putendl, putnbr, putstr


def test_putchar_writes_character():
    stream = io.StringIO()
    putchar("L", stream)
    assert stream.getvalue() == "L"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putstr_writes_text():
    stream = io.StringIO()
    putstr("L1-room", stream)
    assert stream.getvalue() == "L1-room"


def test_putstr_none_writes_nothing():
    stream = io.StringIO()
    putstr(None, stream)
    assert stream.getvalue() == ""


def test_putstr_stops_at_nul():
    stream = io.StringIO()
    putstr("ab\0cd", stream)
    assert stream.getvalue() == "ab"


def test_putendl_appends_newline():
    stream = io.StringIO()
    putendl("Error", stream)
    assert stream.getvalue() == "Error\n"


def test_putendl_none_writes_nothing():
    stream = io.StringIO()
    putendl(None, stream)
    assert stream.getvalue() == ""


@pytest.mark.parametrize("n", [0, 5, 42, -7, 999999999, 1000000000, 2147483647])
def test_putnbr_round_trips(n):
    stream = io.StringIO()
    putnbr(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_minimum():
    stream = io.StringIO()
    putnbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("n, expected", [(1, "1"), (10, "10"), (100, "100"), (1000000000, "1000000000")])
def test_putnbr_no_leading_zeros(n, expected):
    stream = io.StringIO()
    putnbr(n, stream)
    assert stream.getvalue() == expected


@pytest.mark.parametrize("n", [2147483648, -2147483649])
def test_putnbr_out_of_range(n):
    with pytest.raises(OverflowError):
        putnbr(n, io.StringIO())


def test_default_stream_is_stdout(capsys):
    putstr("ants")
    putchar("!")
    putendl("")
    putnbr(3)
    assert capsys.readouterr().out == "ants!\n3"