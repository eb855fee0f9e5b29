"""Tests for the STR matcher and small helpers."""

import pytest

from forensic.profile import STR, Profile
from forensic.utils import count_occurrences, full_name


@pytest.mark.parametrize(
    "sequence, pattern, expected",
    [
        ("AAAA", "AA", 2),
        ("ABC", "ABCD", 0),
        ("AAA", "AA", 1),
        ("ATATA", "ATA", 1),
        ("AGATAGATAGAT", "AGAT", 3),
        ("GATTACA", "CAT", 0),
        ("", "A", 0),
        ("TCTA", "TCTA", 1),
    ],
)
def test_count_occurrences(sequence, pattern, expected):
    assert count_occurrences(sequence, pattern) == expected


def test_count_occurrences_empty_pattern():
    assert count_occurrences("AGAT", "") == 0


def test_count_occurrences_treats_pattern_literally():
    assert count_occurrences("A.A.", "A.") == 2
    assert count_occurrences("ABAB", "A.") == 0


def test_full_name_puts_last_name_first():
    assert full_name("Ann", "Smith") == "Smith, Ann"


def test_str_record_is_immutable():
    record = STR("AGAT", 3)
    with pytest.raises(AttributeError):
        record.occurrences = 4


def test_profile_defaults():
    profile = Profile([STR("AGAT", 3), STR("TCTA", 2)])
    assert profile.strs == (STR("AGAT", 3), STR("TCTA", 2))
    assert len(profile.strs) == 2
    assert profile.is_of_interest is False

    profile.mark()
    assert profile.is_of_interest is True
    assert Profile().strs == ()


def test_profile_without_strs_is_truthy():
    # found profiles must not look like a failed lookup
    assert Profile()
    assert bool(Profile([])) is True
