import regex


def count_occurrences(sequence: str, pattern: str) -> int:
    """
    Count how often a STR occurs in a DNA sequence. The sequence is scanned from left to right and after
    each hit the search continues directly behind it, so hits never overlap ("AAAA" contains "AA" twice).

    :param sequence: (String) DNA sequence to search
    :param pattern: (String) STR to count
    :return: (int) number of non-overlapping occurrences. 0 if the pattern is empty or longer than the sequence.
    """
    # STRs can't be longer than the sequence
    if not pattern or len(pattern) > len(sequence):
        return 0

    return len(regex.findall(regex.escape(pattern), sequence))


def full_name(first: str, last: str) -> str:
    """
    Key under which a person is stored in the database
    """
    return f"{last}, {first}"
