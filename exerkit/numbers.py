"""Integer exercises: base conversion, digit tricks and classic sequences."""

import math
from collections.abc import Iterator

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base(n: int, base: int) -> str:
    digits = []
    while n > 0:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def to_binary(n: int) -> str:
    """Binary digits of n; empty for n <= 0."""
    return _to_base(n, 2)


def to_octal(n: int) -> str:
    """Octal digits of n; empty for n <= 0."""
    return _to_base(n, 8)


def is_armstrong(n: int) -> bool:
    """Tell whether n equals the sum of its digits each raised to the digit count."""
    digits = str(n) if n > 0 else ""
    return sum(int(d) ** len(digits) for d in digits) == n


def factorial(n: int) -> int:
    """Return n! for non-negative n."""
    _require_non_negative(n, "n")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting from fibonacci(0) == 0."""
    _require_non_negative(n, "n")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(count: int) -> Iterator[int]:
    """Yield the first count Fibonacci numbers."""
    a, b = 0, 1
    for _ in range(count):
        yield a
        a, b = b, a + b


def hcf(a: int, b: int) -> int:
    """Highest common factor by Euclid's algorithm, remainder truncated toward zero."""
    while b != 0:
        rem = abs(a) % abs(b)
        a, b = b, -rem if a < 0 else rem
    return a


def is_leap_year(year: int) -> bool:
    """Tell whether year is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def is_perfect(n: int) -> bool:
    """Tell whether n equals the sum of its divisors below n."""
    return sum(d for d in range(1, n) if n % d == 0) == n


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    _require_non_negative(exponent, "exponent")
    return base**exponent


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n for non-negative n."""
    _require_non_negative(n, "n")
    return n * (n + 1) // 2


def sum_of_digits(n: int) -> int:
    """Sum the decimal digits of n, carrying n's sign."""
    sign = -1 if n < 0 else 1
    return sign * sum(int(d) for d in str(abs(n)))