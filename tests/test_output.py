import os

import pytest

from ftkit.output import (
    putchar_fd,
    putendl_fd,
    putnbr_base,
    putnbr_base_p,
    putnbr_fd,
    putstr_fd,
)

HEX = "0123456789abcdef"


class Captured:
    """A pipe whose write end is handed out; the text written is read on exit."""

    def __enter__(self):
        self._read_fd, self.fd = os.pipe()
        self.output = ""
        return self

    def __exit__(self, *exc):
        os.close(self.fd)
        chunks = []
        while True:
            chunk = os.read(self._read_fd, 65536)
            if not chunk:
                break
            chunks.append(chunk)
        os.close(self._read_fd)
        self.output = b"".join(chunks).decode("utf-8")
        return False


def test_putchar_fd():
    with Captured() as cap:
        putchar_fd("A", cap.fd)
    assert cap.output == "A"


def test_putchar_fd_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("AB", 1)


def test_putstr_fd():
    with Captured() as cap:
        putstr_fd("Hello, World!", cap.fd)
    assert cap.output == "Hello, World!"


def test_putstr_fd_empty():
    with Captured() as cap:
        putstr_fd("", cap.fd)
    assert cap.output == ""


def test_putendl_fd():
    with Captured() as cap:
        putendl_fd("Hello, World!", cap.fd)
    assert cap.output == "Hello, World!\n"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483647, -2147483648])
def test_putnbr_fd_round_trip(n):
    with Captured() as cap:
        putnbr_fd(n, cap.fd)
    assert int(cap.output) == n
    assert cap.output == str(n)


def test_putnbr_fd_int_min():
    with Captured() as cap:
        putnbr_fd(-2147483648, cap.fd)
    assert cap.output == "-2147483648"


def test_putnbr_fd_overflow():
    with pytest.raises(OverflowError):
        putnbr_fd(2147483648, 1)


def test_putnbr_base_hex():
    with Captured() as cap:
        count = putnbr_base(42, 16, HEX, cap.fd)
    assert cap.output == "2a"
    assert count == len(cap.output)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 4294967295])
def test_putnbr_base_round_trip(n):
    with Captured() as cap:
        count = putnbr_base(n, 16, HEX, cap.fd)
    assert int(cap.output, 16) == n
    assert count == len(cap.output)


def test_putnbr_base_upper_digits():
    with Captured() as cap:
        putnbr_base(3054, 16, HEX.upper(), cap.fd)
    assert cap.output == cap.output.upper()
    assert int(cap.output, 16) == 3054


def test_putnbr_base_rejects_negative():
    with pytest.raises(OverflowError):
        putnbr_base(-1, 16, HEX, 1)


def test_putnbr_base_rejects_bad_base():
    with pytest.raises(ValueError):
        putnbr_base(5, 1, HEX, 1)
    with pytest.raises(ValueError):
        putnbr_base(5, 20, HEX, 1)


def test_putnbr_base_p_address():
    with Captured() as cap:
        count = putnbr_base_p(0x123B, 16, HEX, cap.fd)
    assert cap.output == "0x123b"
    assert count == len(cap.output)


def test_putnbr_base_p_nil():
    with Captured() as cap:
        count = putnbr_base_p(0, 16, HEX, cap.fd)
    assert cap.output == "(nil)"
    assert count == 5


def test_putnbr_base_p_round_trip():
    n = 0x7FFDEADBEEF0
    with Captured() as cap:
        count = putnbr_base_p(n, 16, HEX, cap.fd)
    assert cap.output.startswith("0x")
    assert int(cap.output, 16) == n
    assert count == len(cap.output)