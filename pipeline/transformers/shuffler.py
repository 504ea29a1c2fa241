"""
Randomise series order so the generated fixtures do not reveal source order
"""

from typing import List, Optional
import logging
import random
import time

from schemas.series import Series

logger = logging.getLogger(__name__)


def shuffle_series(series: List[Series], seed: Optional[int] = None) -> List[Series]:
    """
    Return a uniformly random permutation of ``series``.

    Args:
        series: Records in document order (left untouched)
        seed: Fixed seed for reproducible output; defaults to the wall clock

    Returns:
        New list with the same records in shuffled order
    """
    if seed is None:
        seed = time.time_ns()
        logger.debug("Shuffling series with a time-based seed")
    else:
        logger.debug(f"Shuffling series with seed {seed}")

    shuffled = list(series)
    random.Random(seed).shuffle(shuffled)
    return shuffled
