"""String drills: word and vowel reversal, run-length compression, windows."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from itertools import groupby, zip_longest

_VOWELS = frozenset("aeiouAEIOU")
_LOWER_VOWELS = frozenset("aeiou")


def reverse_words(s: str) -> str:
    """Return the whitespace-separated words of ``s`` in reverse order."""
    return " ".join(reversed(s.split()))


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters put."""
    positions = [index for index, ch in enumerate(s) if ch in _VOWELS]
    chars = list(s)
    for index, vowel in zip(positions, reversed([s[p] for p in positions])):
        chars[index] = vowel
    return "".join(chars)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def compress(chars: list[str]) -> int:
    """Run-length encode ``chars`` in place.

    Each run becomes its character followed by its length when longer than
    one. Returns the new length; the encoding occupies ``chars[:length]``.
    """
    encoded: list[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(ch)
        if count > 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both ``str1`` and ``str2``."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def max_vowels(s: str, k: int) -> int:
    """Return the most lowercase vowels in any substring of length ``k``."""
    best = count = 0
    for index, ch in enumerate(s):
        if ch in _LOWER_VOWELS:
            count += 1
        if index >= k and s[index - k] in _LOWER_VOWELS:
            count -= 1
        best = max(best, count)
    return best


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of two words, appending the longer's tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def _read_word(prompt: str) -> str:
    tokens = input(prompt).split()
    return tokens[0] if tokens else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Merge two words alternately, prompting for any not given."""
    parser = argparse.ArgumentParser(description="Merge two words alternately.")
    parser.add_argument("word1", nargs="?")
    parser.add_argument("word2", nargs="?")
    args = parser.parse_args(argv)

    word1 = args.word1 if args.word1 is not None else _read_word("Enter word1: ")
    word2 = args.word2 if args.word2 is not None else _read_word("Enter word2: ")

    print(f"Merged String: {merge_alternately(word1, word2)}")
    return 0