from typing import Any, Dict

from apriori_miner.data_structures.itemset import ItemSet
from apriori_miner.metrics import METRICS
from apriori_miner.utils.validation import ensure_not_none, ensure_not_empty, ensure_in_range


class AssociationRule:
    """
    An association rule of the form body -> head.

    The support of a rule is the support of the union of its body and head. The
    body and head carry their own supports, which are needed by metrics such as
    confidence and lift.
    """

    __slots__ = ('_body', '_head', '_support')

    def __init__(self, body: ItemSet, head: ItemSet, support: float):
        ensure_not_none(body, "The body may not be None")
        ensure_not_none(head, "The head may not be None")
        ensure_not_empty(body, "The body may not be empty")
        ensure_not_empty(head, "The head may not be empty")
        if not body.isdisjoint(head):
            raise ValueError(f"The body {body} and the head {head} must be disjoint")
        ensure_in_range(support, 0.0, 1.0, f"The support must be in [0, 1], got {support}")
        self._body = body
        self._head = head
        self._support = float(support)

    @property
    def body(self) -> ItemSet:
        return self._body

    @property
    def head(self) -> ItemSet:
        return self._head

    @property
    def support(self) -> float:
        return self._support

    def item_set(self) -> ItemSet:
        """The item set the rule has been derived from."""
        return self.body.union(self.head, self.support)

    def sort_key(self):
        return self.body.items, self.head.items

    def copy(self) -> 'AssociationRule':
        return AssociationRule(self.body.copy(), self.head.copy(), self.support)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'antecedents': list(self.body.items),
            'consequents': list(self.head.items),
            'antecedent_support': self.body.support,
            'consequent_support': self.head.support,
        }
        for name, metric in METRICS.items():
            result[name] = metric.evaluate(self)
        return result

    def __eq__(self, other):
        if not isinstance(other, AssociationRule):
            return NotImplemented
        return self.body == other.body and self.head == other.head

    def __hash__(self):
        return hash((self.body, self.head))

    def __str__(self):
        return f"{self.body} -> {self.head}"

    def __repr__(self):
        return f"AssociationRule({self.body!r}, {self.head!r}, support={self.support})"
