"""Puzzles over single integers."""


def maximum_69_number(num: int) -> int:
    """Turn the first digit 6 into a 9."""
    return int(str(num).replace("6", "9", 1))


def number_of_matches(n: int) -> int:
    """Count the matches played in a knockout tournament of ``n`` teams."""
    matches = 0
    while n > 1:
        played, bye = divmod(n, 2)
        matches += played
        n = played + bye
    return matches