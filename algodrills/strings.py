"""Classic string exercises: matching, counting, bracket handling and parsing."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def largest_odd_number(s: str) -> str:
    """Longest prefix of the digit string ``s`` that ends in an odd digit.

    Returns an empty string when ``s`` holds no odd digit.
    """
    if not all(ch in "0123456789" for ch in s):
        raise ValueError(f"not a string of decimal digits: {s!r}")
    for end in range(len(s), 0, -1):
        if int(s[end - 1]) % 2 == 1:
            return s[:end]
    return ""


def is_rotation(s: str, goal: str) -> bool:
    """Whether ``goal`` is ``s`` shifted cyclically by some number of places."""
    return len(s) == len(goal) and goal in s + s


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` holds exactly the same characters as ``s``."""
    return Counter(s) == Counter(t)


def beauty_sum(s: str) -> int:
    """Sum over all substrings of (highest - lowest) character frequency."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def sort_by_frequency(s: str) -> str:
    """Characters of ``s`` grouped and ordered from most to least frequent.

    Characters with equal frequency keep the order of their first appearance.
    """
    return "".join(ch * count for ch, count in Counter(s).most_common())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest string that every element of ``strs`` starts with."""
    if not strs:
        return ""
    prefix = strs[0]
    for word in strs[1:]:
        length = 0
        for a, b in zip(prefix, word):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
        if not prefix:
            break
    return prefix


def max_nesting_depth(s: str) -> int:
    """Deepest level of parenthesis nesting reached while reading ``s``."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of every primitive parenthesised group.

    Only parentheses are kept in the result; other characters are ignored.
    """
    parts: list[str] = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                parts.append(ch)
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth > 0:
                parts.append(ch)
    return "".join(parts)


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; unknown characters count as zero."""
    total = 0
    previous = 0
    for ch in reversed(s):
        value = _ROMAN_VALUES.get(ch, 0)
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total