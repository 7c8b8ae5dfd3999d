"""
Conversion of the time spent on each move into the delay of each frame.

Goal for bullet: stay close to real time.
Goal for classical: speed up to reach the target median, and avoid extremely fast
frames unless the move was actually played instantly (premoves).
"""

import math
import statistics
from typing import Optional, Sequence

from src.core.shared_types import Centis

TARGET_MEDIAN_TIME: Centis = 80
TARGET_MAX_TIME: Centis = 200
# lower bound for moves that were not played much faster than the median
TARGET_MIN_TIME: Centis = TARGET_MEDIAN_TIME // 2


def to_centis(value: float) -> Centis:
    """Round half up, so that 40.5 becomes 41 (not 40 as round() would do)."""
    return math.floor(value + 0.5)


def median_time(move_times: Sequence[Centis]) -> Optional[Centis]:
    if not move_times:
        return None
    return to_centis(statistics.median(move_times))


def scale_move_times(move_times: Sequence[Centis]) -> list[Centis]:
    """Scale the raw time of every move into a frame delay in [0, TARGET_MAX_TIME]."""
    median = median_time(move_times)
    if median is None or median < TARGET_MEDIAN_TIME:
        return [min(t, TARGET_MAX_TIME) for t in move_times]

    scale = TARGET_MEDIAN_TIME / max(median, 1)
    scaled = []
    for t in move_times:
        if t * 2 < median:
            scaled.append(min(t, TARGET_MIN_TIME))
        else:
            scaled.append(min(max(to_centis(t * scale), TARGET_MIN_TIME), TARGET_MAX_TIME))
    return scaled
