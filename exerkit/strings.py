"""String exercises: character codes, anagrams, frequencies and reversals."""

from collections import Counter
from typing import Literal

VOWELS = frozenset("aeiouAEIOU")

LetterKind = Literal["vowel", "consonant", "invalid"]


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def char_code(ch: str) -> int:
    """Return the code point of a single character."""
    return ord(_single_char(ch))


def classify_letter(ch: str) -> LetterKind:
    """Classify one character as 'vowel', 'consonant' or 'invalid'."""
    ch = _single_char(ch)
    if not (ch.isascii() and ch.isalpha()):
        return "invalid"
    return "vowel" if ch.lower() in "aeiou" else "consonant"


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters, counted."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def char_frequencies(text: str) -> dict[str, int]:
    """Count each character, keyed in order of first appearance."""
    return dict(Counter(text))


def non_repeating_chars(text: str) -> list[str]:
    """Return the characters that occur exactly once, in text order."""
    counts = Counter(text)
    return [ch for ch in text if counts[ch] == 1]


def reverse_text(text: str) -> str:
    """Return the characters of text in reverse order."""
    return text[::-1]


def reverse_vowels(text: str) -> str:
    """Reverse the order of the vowels in text, leaving other characters put."""
    chars = list(text)
    positions = [index for index, ch in enumerate(text) if ch in VOWELS]
    for target, source in zip(positions, reversed(positions)):
        chars[target] = text[source]
    return "".join(chars)


def reverse_word_order(text: str) -> str:
    """Reverse the order of space-separated words, joined by single spaces.

    Raises ValueError when the text holds no words.
    """
    words = [word for word in text.split(" ") if word]
    if not words:
        raise ValueError("text contains no words")
    return " ".join(reversed(words))


def reverse_each_word(text: str) -> str:
    """Reverse every word in place, keeping the spaces where they are."""
    return " ".join(word[::-1] for word in text.split(" "))


def is_palindrome(text: str) -> bool:
    """Tell whether text reads the same backwards, case-sensitively."""
    return text == text[::-1]