from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from apriori_miner.data_structures.itemset import ItemSet
from apriori_miner.data_structures.rule import AssociationRule
from apriori_miner.utils.validation import ensure_not_none, ensure_int


class RuleSet:
    """
    An ordered collection of association rules, which are unique by body and head.

    Rules keep the order in which they have been given. A rule, whose body and
    head are already present, is skipped. Rule sets cannot be changed once they
    have been created.
    """

    def __init__(self, rules: Iterable[AssociationRule] = ()):
        self._rules: Dict[AssociationRule, AssociationRule] = {}
        for rule in rules:
            ensure_not_none(rule, "The rule may not be None")
            self._rules.setdefault(rule, rule)
        self._list: List[AssociationRule] = list(self._rules)

    def find_by_body(self, body: Iterable[Any]) -> List[AssociationRule]:
        body = body if isinstance(body, ItemSet) else ItemSet(body)
        return [rule for rule in self._rules if rule.body == body]

    def find_by_head(self, head: Iterable[Any]) -> List[AssociationRule]:
        head = head if isinstance(head, ItemSet) else ItemSet(head)
        return [rule for rule in self._rules if rule.head == head]

    def sort(self, metric, limit: Optional[int] = None) -> 'RuleSet':
        """
        Return a new rule set ordered by descending metric value.

        Ties are broken by descending support, then by body and head items.

        Args:
            metric: Metric instance used as ranking key
            limit: Keep only the first `limit` rules, if given
        """
        ensure_not_none(metric, "The metric may not be None")
        if limit is not None:
            ensure_int(limit, 0, f"The limit must be an integer of at least 0, got {limit}")
        scored = sorted(
            self._rules,
            key=lambda rule: (-metric.evaluate(rule), -rule.support, rule.sort_key())
        )
        if limit is not None:
            scored = scored[:limit]
        return RuleSet(scored)

    def copy(self) -> 'RuleSet':
        return RuleSet(rule.copy() for rule in self._rules)

    def to_list(self) -> List[Dict[str, Any]]:
        return [rule.to_dict() for rule in self._rules]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per rule with antecedents, consequents and all metric values."""
        rows = [dict(rule.to_dict(),
                     antecedents=frozenset(rule.body.items),
                     consequents=frozenset(rule.head.items)) for rule in self._rules]
        if not rows:
            return pd.DataFrame(columns=['antecedents', 'consequents'])
        return pd.DataFrame(rows)

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._list)

    def __getitem__(self, index):
        return self._list[index]

    def __contains__(self, rule):
        return rule in self._rules

    def __eq__(self, other):
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._list == other._list

    def __hash__(self):
        return hash(tuple(self._list))

    def __str__(self):
        return '[' + ',\n'.join(str(rule) for rule in self._rules) + ']'

    def __repr__(self):
        return f"RuleSet({len(self)} rules)"
