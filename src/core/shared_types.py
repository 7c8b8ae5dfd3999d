"""
Type definitions used across layers
"""

from enum import StrEnum

# Integer hundredths of a second. Clock data, move times and frame delays all use it.
Centis = int


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class Variant(StrEnum):
    """Game variants, named the way they are stored and passed in query strings."""

    STANDARD = "standard"
    CHESS960 = "chess960"
    FROM_POSITION = "fromPosition"
    ANTICHESS = "antichess"
    KING_OF_THE_HILL = "kingOfTheHill"
    THREE_CHECK = "threeCheck"
    ATOMIC = "atomic"
    HORDE = "horde"
    RACING_KINGS = "racingKings"
    CRAZYHOUSE = "crazyhouse"
