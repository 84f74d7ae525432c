# exerkit

A small collection of classic programming exercises. It covers string
manipulation, integer arithmetic and simple searches over lists of integers.
It needs only the standard library.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `exerkit.strings`

- `char_code(ch)`: the code point of a single character.
- `classify_letter(ch)`: returns `"vowel"`, `"consonant"` or `"invalid"`. Any character that is not an ASCII letter counts as invalid.
- `is_anagram(first, second)`: `True` when the two strings contain the same characters the same number of times.
- `char_frequencies(text)`: a dict that maps each character to its count. Keys appear in the order in which the characters first occur.
- `non_repeating_chars(text)`: the characters that occur exactly once, in the order they appear in the text.
- `reverse_text(text)`: the whole string reversed.
- `reverse_vowels(text)`: reverses the order of the vowels (`aeiouAEIOU`). Every other character keeps its position.
- `reverse_word_order(text)`: the space-separated words in reverse order, joined by single spaces.
- `reverse_each_word(text)`: reverses each word and keeps every space where it was.
- `is_palindrome(text)`: a case-sensitive check that the text reads the same backwards.

`char_code` and `classify_letter` raise `ValueError` unless they are given exactly one character. `reverse_word_order` raises `ValueError` when the text contains no words.

### `exerkit.numbers`

- `to_binary(n)` and `to_octal(n)`: the digits of `n` as a string. The result is an empty string when `n <= 0`.
- `is_armstrong(n)`: `True` when `n` equals the sum of its digits, each raised to the power of the number of digits.
- `is_perfect(n)`: `True` when `n` equals the sum of its divisors below `n`.
- `is_leap_year(year)`: the Gregorian leap-year rule.
- `factorial(n)`, `power(base, exponent)` and `sum_natural(n)`: these raise `ValueError` when `n` or `exponent` is negative.
- `fibonacci(n)`: the n-th Fibonacci number, with `fibonacci(0) == 0`. It raises `ValueError` when `n` is negative.
- `fibonacci_series(count)`: a generator that yields the first `count` Fibonacci numbers.
- `hcf(a, b)`: the highest common factor, computed with Euclid's algorithm.
- `reverse_digits(n)` and `sum_of_digits(n)`: both work on the decimal digits of `n` and keep its sign.

### `exerkit.arrays`

Every function accepts any iterable of integers.

- `largest(values)` and `smallest(values)`: these raise `ValueError` when there are no values.
- `second_smallest(values)`: the second smallest distinct value. It returns `None` when fewer than two distinct values exist.
- `top_three(values)`: a tuple of the three largest distinct values in descending order. When fewer than three distinct values exist, the tuple is padded with `None`. It raises `ValueError` when there are no values.
- `third_smallest(values)`: the third slot of a single running scan that tracks the three smallest values. When a new minimum arrives, the old minimum moves into both the second and the third slot. For this reason the result is not always the third distinct value. It raises `ValueError` when there are fewer than three values, and returns `None` when the third slot is never filled.

## Example

```python
from exerkit.strings import is_anagram, is_palindrome, reverse_vowels
from exerkit.numbers import factorial, hcf, is_leap_year
from exerkit.arrays import largest

is_anagram("listen", "silent")   # True
is_palindrome("level")           # True
reverse_vowels("hello")          # 'holle'
factorial(5)                     # 120
hcf(12, 18)                      # 6
is_leap_year(1900)               # False
largest([3, 9, 2])               # 9
```

## Command line

Installing the package also installs the `exerkit` command:

```
exerkit
```

The command prints `Hello, world!` and accepts only `--help`.

## What it does not do

The command line does not run the exercises. To use the string, number and list functions, import them from Python.