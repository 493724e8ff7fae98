from __future__ import annotations

from typing import Iterable, List, Optional

from sortedcontainers import SortedList

from .types import K


def sorted_unique(values: Optional[Iterable[K]]) -> List[K]:
    """
    Removes duplicates and sorts ascending, producing valid input for
    building a tree. None is treated as an empty collection.
    Keys only need to be orderable; they do not have to be hashable.
    """
    unique: List[K] = []
    if values is None:
        return unique

    # equal keys sit next to each other once sorted
    for value in SortedList(values):
        if not unique or unique[-1] < value:
            unique.append(value)
    return unique
