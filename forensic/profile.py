from collections import namedtuple

# a short tandem repeat and how often it occurs in a person's DNA
STR = namedtuple('STR', ['repeat', 'occurrences'])


class Profile:
    # DNA profile stored as the value of a tree node
    def __init__(self, strs=()):
        self.strs = tuple(strs)

        # only ever switched on, see ForensicDatabase.flag_of_interest
        self.is_of_interest = False

    def mark(self):
        self.is_of_interest = True

    def __repr__(self):
        return f"Profile(strs={list(self.strs)!r}, is_of_interest={self.is_of_interest})"
