"""Hydrogen-bond role of an atom."""

from enum import IntEnum


class AtomType(IntEnum):
    """Donor/acceptor character of an atom."""

    NONE = 0
    DONOR = 1
    ACCEPTOR = 2
    BOTH = 3
