"""Puzzles over strings and sequences of strings."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import dropwhile, pairwise, zip_longest
from string import ascii_lowercase, ascii_uppercase

_SPECIAL_CHARACTERS = frozenset("!@#$%^&*()-+")
_MIN_PASSWORD_LENGTH = 8
_RING_COLOURS = frozenset("RGB")
_TO_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix: list[str] = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def generate_the_string(n: int) -> str:
    """Return ``n`` characters in which every letter occurs an odd number of times."""
    if n % 2 == 0:
        return "a" + "b" * (n - 1)
    return "a" * n


def dest_city(paths: Iterable[Sequence[str]]) -> str:
    """Return the destination that no path leaves from, or ``""``.

    If several qualify, the alphabetically smallest is returned.
    """
    routes = [(start, end) for start, end in paths]
    remaining = {end for _, end in routes} - {start for start, _ in routes}
    return min(remaining, default="")


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words, appending what is left of the longer one."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def square_is_white(coordinates: str) -> bool:
    """Return whether a chessboard square such as ``"c7"`` is white."""
    if len(coordinates) < 2:
        raise ValueError(f"not a square: {coordinates!r}")
    file_index = ord(coordinates[0]) - ord("a")
    rank = ord(coordinates[1]) - ord("0")
    return (file_index + rank) % 2 == 0


def truncate_sentence(s: str, k: int) -> str:
    """Keep the text before the ``k``-th space; ``k`` of zero or less keeps it all."""
    if k <= 0:
        return s
    parts = s.split(" ", k)
    if len(parts) > k:
        return " ".join(parts[:k])
    return s


def check_if_pangram(sentence: str) -> bool:
    """Return whether every lowercase letter appears in the sentence."""
    return set(ascii_lowercase) <= set(sentence)


def replace_digits(s: str) -> str:
    """Replace each digit at an odd position by the letter before it shifted by it."""
    out: list[str] = []
    for letter, digit in zip_longest(s[::2], s[1::2]):
        out.append(letter)
        if digit is not None:
            out.append(chr(ord(letter) + ord(digit) - ord("0")))
    return "".join(out)


def sort_sentence(s: str) -> str:
    """Rebuild a sentence whose words each end with their 1-based position."""
    slots: dict[int, str] = {}
    word: list[str] = []
    chars = iter(s)
    for ch in chars:
        if "1" <= ch <= "9":
            slots[int(ch)] = "".join(word) + " "
            word = []
            next(chars, None)
        else:
            word.append(ch)
    joined = "".join(slots[position] for position in sorted(slots))
    if not joined:
        raise ValueError("the sentence holds no numbered words")
    return joined[:-1]


def are_occurrences_equal(s: str) -> bool:
    """Return whether every character that occurs does so equally often."""
    return len(set(Counter(s).values())) <= 1


def reverse_prefix(word: str, ch: str) -> str:
    """Reverse the word up to and including the first ``ch``."""
    index = word.find(ch)
    if index < 0:
        return word
    return word[: index + 1][::-1] + word[index + 1 :]


def count_points(rings: str) -> int:
    """Count the rods that carry rings of all three colours."""
    rods: defaultdict[str, set[str]] = defaultdict(set)
    for colour, rod in pairwise(rings):
        if "0" <= rod <= "9" and colour in _RING_COLOURS:
            rods[rod].add(colour)
    return sum(1 for colours in rods.values() if colours >= _RING_COLOURS)


def first_palindrome(words: Iterable[str]) -> str:
    """Return the first word that reads the same backwards, or ``""``."""
    return next((word for word in words if word == word[::-1]), "")


def can_be_valid(s: str, locked: str) -> bool:
    """Return whether unlocking positions can turn ``s`` into balanced parentheses."""
    if len(s) != len(locked):
        raise ValueError("the string and its lock mask differ in length")
    if len(s) % 2:
        return False

    def _balanced(pairs: Iterable[tuple[str, str]], opener: str) -> bool:
        opened = closed = 0
        for char, lock in pairs:
            if lock == "0" or char == opener:
                opened += 1
            else:
                closed += 1
            if closed > opened:
                return False
        return True

    pairs = list(zip(s, locked))
    return _balanced(pairs, "(") and _balanced(reversed(pairs), ")")


def reverse_string(s: MutableSequence[str]) -> None:
    """Reverse the characters in place."""
    s.reverse()


def reverse_words(s: str) -> str:
    """Reverse each space-separated word, keeping the words in order.

    Leading spaces are dropped, as is one trailing space.
    """
    tokens = s.split(" ")
    if tokens[-1] == "":
        tokens.pop()
    words = dropwhile(lambda token: token == "", tokens)
    return " ".join(word[::-1] for word in words)


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII capital letters, leaving every other character alone."""
    return s.translate(_TO_LOWER)


def min_deletion_size(strs: Sequence[str]) -> int:
    """Count the columns that are not sorted from top to bottom."""
    if not strs:
        raise ValueError("at least one string is required")
    width = len(strs[0])
    if any(len(row) != width for row in strs):
        raise ValueError("all strings must have the same length")
    return sum(
        1
        for column in zip(*strs)
        if any(below < above for above, below in pairwise(column))
    )


def strong_password_checker_ii(password: str) -> bool:
    """Return whether the password meets every strength rule."""
    if len(password) < _MIN_PASSWORD_LENGTH:
        return False
    has_lower = any("a" <= c <= "z" for c in password)
    has_upper = any("A" <= c <= "Z" for c in password)
    has_digit = any("0" <= c <= "9" for c in password)
    has_special = any(c in _SPECIAL_CHARACTERS for c in password)
    if not (has_lower and has_upper and has_digit and has_special):
        return False
    return all(a != b for a, b in pairwise(password))


def array_strings_are_equal(word1: Iterable[str], word2: Iterable[str]) -> bool:
    """Return whether the two lists spell the same string when concatenated."""
    return "".join(word1) == "".join(word2)