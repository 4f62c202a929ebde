"""
Apriori candidate generation: join frequent (k-1)-item sets, then prune.
"""
from collections import defaultdict
from itertools import combinations
from typing import Iterable, Set, Tuple

from apriori_miner.data_structures import ItemSet


def _all_subsets_frequent(candidate: Tuple, previous: Set[Tuple]) -> bool:
    return all(subset in previous for subset in combinations(candidate, len(candidate) - 1))


def generate_candidates(previous_level: Iterable[ItemSet]) -> Set[ItemSet]:
    """
    Generate the candidate k-item sets from the frequent (k-1)-item sets.

    Two item sets are joined if their sorted items differ only in the last
    position, so every candidate is produced once. A candidate is kept only if
    all of its (k-1)-subsets are in previous_level.

    Args:
        previous_level: Frequent item sets, all of the same size

    Returns:
        Set of candidate item sets with a support of 0
    """
    if previous_level is None:
        raise ValueError("The previous level may not be None")

    previous = {item_set.items for item_set in previous_level}
    if not previous:
        return set()

    sizes = {len(items) for items in previous}
    if len(sizes) != 1:
        raise ValueError(f"All item sets of a level must have the same size, got sizes {sorted(sizes)}")
    if 0 in sizes:
        raise ValueError("The item sets of a level may not be empty")

    # Group by the first k-2 items; within a group, the last items are ascending
    groups = defaultdict(list)
    for items in sorted(previous):
        groups[items[:-1]].append(items[-1])

    candidates = set()
    for prefix, last_items in groups.items():
        for i, first in enumerate(last_items):
            for second in last_items[i + 1:]:
                candidate = prefix + (first, second)
                if _all_subsets_frequent(candidate, previous):
                    candidates.add(ItemSet(candidate))
    return candidates
