"""
Invariants the generated join scripts rely on
"""

from collections import Counter
from typing import List

from core.exceptions import DuplicateBusinessKeyError
from schemas.series import Series


def ensure_unique_localized_names(series: List[Series]) -> None:
    """
    Join rows look up SeriesId by SeriesName, so every localized name
    must identify exactly one series.

    Raises:
        DuplicateBusinessKeyError: listing every name used more than once
    """
    counts = Counter(s.localized_name for s in series)
    duplicates = sorted(name for name, count in counts.items() if count > 1)

    if duplicates:
        raise DuplicateBusinessKeyError(
            f"Duplicate localized series names: {', '.join(duplicates)}",
            context={"duplicates": duplicates}
        )
