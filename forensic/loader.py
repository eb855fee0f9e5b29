import logging
from typing import List, TextIO, Tuple

from forensic.bst import ForensicDatabase
from forensic.profile import STR, Profile
from forensic.utils import full_name


def _read_int(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"Expected an integer for {what}, got {token!r}") from None
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def read_profiles(fh: TextIO) -> Tuple[str, str, List[Tuple[str, Profile]]]:
    """
    Function for reading a forensic database file. The file holds the first unknown sequence, the second
    unknown sequence and the number of people on one line each. Every person then follows as whitespace
    separated tokens: first name, last name, number of STRs and a (STR, occurrences) pair per STR.

    :param fh: open text file
    :return: (str, str, list) both unknown sequences and a list of (name, profile) tuples in file order
    """
    first_sequence = fh.readline()
    second_sequence = fh.readline()
    people_line = fh.readline()
    if not people_line:
        raise ValueError("Input is missing the unknown sequences or the number of people")

    number_of_people = _read_int(people_line.strip(), "number of people")
    tokens = fh.read().split()
    pos = 0

    def next_token(what):
        nonlocal pos
        if pos >= len(tokens):
            raise ValueError(f"Unexpected end of input while reading {what}")
        pos += 1
        return tokens[pos - 1]

    people = []
    for i in range(number_of_people):
        first = next_token(f"first name of person {i + 1}")
        last = next_token(f"last name of person {i + 1}")
        name = full_name(first, last)

        number_of_strs = _read_int(next_token(f"STR count of {name!r}"), f"STR count of {name!r}")
        strs = []
        for _ in range(number_of_strs):
            repeat = next_token(f"STR of {name!r}")
            occurrences = _read_int(next_token(f"occurrences of {repeat} for {name!r}"),
                                    f"occurrences of {repeat} for {name!r}")
            strs.append(STR(repeat, occurrences))

        logging.debug(f"Read {name!r} with {len(strs)} STRs")
        people.append((name, Profile(strs)))

    if pos < len(tokens):
        logging.warning(f"Ignoring {len(tokens) - pos} trailing tokens after {number_of_people} people")

    return first_sequence.strip(), second_sequence.strip(), people


def build_database(path: str) -> ForensicDatabase:
    """
    Build a ForensicDatabase from a file in the format read by read_profiles. People are inserted in file
    order; a name that appears twice keeps the later profile.
    """
    with open(path, "r") as fh:
        first_sequence, second_sequence, people = read_profiles(fh)

    db = ForensicDatabase(first_sequence, second_sequence)
    for name, profile in people:
        db.insert(name, profile)

    logging.info(f"Loaded {len(people)} profiles ({len(db)} distinct people) from {path!r}")
    return db


def write_profiles_tsv(db: ForensicDatabase, fh: TextIO):
    """
    Write all profiles of the database in name order as TSV
    """
    fh.write("#name\tof interest\tSTRs\n")
    for name in db.names():
        profile = db.search(name)
        strs = ",".join(f"{s.repeat}:{s.occurrences}" for s in profile.strs)
        fh.write(f"{name}\t{profile.is_of_interest}\t{strs}\n")
