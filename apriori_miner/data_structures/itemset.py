"""
Item sets and the sorted container of frequent item sets.
"""
from itertools import combinations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from apriori_miner.utils.validation import ensure_in_range, ensure_int


class ItemSet:
    """
    An ordered, duplicate-free set of items with an associated support.

    Items may be of any hashable type, as long as all items of a set can be
    compared to each other. Two item sets are equal if they contain the same
    items, regardless of their support. The support is fixed once the item set
    has been created.
    """

    __slots__ = ('_items', '_members', '_support')

    def __init__(self, items: Iterable[Any] = (), support: float = 0.0):
        members = frozenset(items)
        self._members = members
        self._items = tuple(sorted(members))
        ensure_in_range(support, 0.0, 1.0, f"The support must be in [0, 1], got {support}")
        self._support = float(support)

    @property
    def items(self) -> Tuple[Any, ...]:
        return self._items

    @property
    def support(self) -> float:
        return self._support

    def first(self) -> Any:
        if not self._items:
            raise ValueError("The item set is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def issubset(self, other: Iterable[Any]) -> bool:
        if isinstance(other, ItemSet):
            other = other._members
        return self._members.issubset(other)

    def union(self, other: 'ItemSet', support: float = 0.0) -> 'ItemSet':
        return ItemSet(self._members | other._members, support)

    def difference(self, other: 'ItemSet', support: float = 0.0) -> 'ItemSet':
        return ItemSet(self._members - other._members, support)

    def isdisjoint(self, other: 'ItemSet') -> bool:
        return self._members.isdisjoint(other._members)

    def subsets(self, size: int) -> Iterator['ItemSet']:
        """Yield all subsets with the given number of items, in item order."""
        for subset in combinations(self._items, size):
            yield ItemSet(subset)

    def sort_key(self) -> Tuple[float, int, Tuple[Any, ...]]:
        """Most frequent first, then smaller sets first, then by items."""
        return -self._support, len(self._items), self._items

    def copy(self) -> 'ItemSet':
        return ItemSet(self._items, self._support)

    def to_dict(self) -> Dict[str, Any]:
        return {'items': list(self._items), 'support': self._support}

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __contains__(self, item):
        return item in self._members

    def __eq__(self, other):
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self):
        return hash(self._members)

    def __str__(self):
        return '[' + ', '.join(str(item) for item in self._items) + ']'

    def __repr__(self):
        return f"ItemSet({list(self._items)!r}, support={self._support})"


class FrequentItemSets:
    """
    Frequent item sets ordered from most to least frequent.

    Item sets must have their final support before they are added, since the
    order depends on it.
    """

    def __init__(self, item_sets: Iterable[ItemSet] = ()):
        unique = {}
        for item_set in item_sets:
            unique.setdefault(item_set, item_set)
        self._item_sets: List[ItemSet] = sorted(unique.values(), key=ItemSet.sort_key)
        self._index: Dict[frozenset, ItemSet] = {
            frozenset(item_set.items): item_set for item_set in self._item_sets
        }

    def get(self, items: Iterable[Any]) -> Optional[ItemSet]:
        if isinstance(items, ItemSet):
            items = items.items
        return self._index.get(frozenset(items))

    def get_support(self, items: Iterable[Any]) -> float:
        """Support of the given items, or 0 if they are not frequent."""
        item_set = self.get(items)
        return item_set.support if item_set is not None else 0.0

    def by_size(self, size: int) -> List[ItemSet]:
        return [item_set for item_set in self._item_sets if len(item_set) == size]

    def max_size(self) -> int:
        return max((len(item_set) for item_set in self._item_sets), default=0)

    def truncate(self, count: int) -> 'FrequentItemSets':
        ensure_int(count, 0, f"The count must be an integer of at least 0, got {count}")
        return FrequentItemSets(item_set.copy() for item_set in self._item_sets[:count])

    def copy(self) -> 'FrequentItemSets':
        return FrequentItemSets(item_set.copy() for item_set in self._item_sets)

    def to_list(self) -> List[Dict[str, Any]]:
        return [item_set.to_dict() for item_set in self._item_sets]

    def to_dataframe(self) -> pd.DataFrame:
        """Frame with 'support' and 'itemsets' columns, as mlxtend returns them."""
        return pd.DataFrame({
            'support': [item_set.support for item_set in self._item_sets],
            'itemsets': [frozenset(item_set.items) for item_set in self._item_sets]
        }, columns=['support', 'itemsets'])

    def __len__(self):
        return len(self._item_sets)

    def __iter__(self):
        return iter(self._item_sets)

    def __getitem__(self, index):
        return self._item_sets[index]

    def __contains__(self, item_set):
        return self.get(item_set) is not None

    def __eq__(self, other):
        if not isinstance(other, FrequentItemSets):
            return NotImplemented
        return [(s.items, s.support) for s in self] == [(s.items, s.support) for s in other]

    def __hash__(self):
        return hash(tuple((s.items, s.support) for s in self))

    def __str__(self):
        return '[' + ', '.join(f"{item_set} (support={item_set.support})" for item_set in self) + ']'

    def __repr__(self):
        return f"FrequentItemSets({len(self)} item sets)"
