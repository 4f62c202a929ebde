"""
Derive association rules from frequent item sets.
"""
import logging
from typing import Iterable, Union

from apriori_miner.data_structures import AssociationRule, FrequentItemSets, ItemSet, RuleSet
from apriori_miner.metrics import Metric, get_metric
from apriori_miner.utils.validation import ensure_not_none, ensure_in_range

logger = logging.getLogger(__name__)


def generate_rules(
    frequent_item_sets: Union[FrequentItemSets, Iterable[ItemSet]],
    metric: Union[str, Metric] = 'confidence',
    min_value: float = 0.5
) -> RuleSet:
    """
    Generate all rules body -> head from frequent item sets.

    For every item set S with at least two items, each non-empty proper subset B
    of S becomes the body of a rule with head S - B and support S.support. Only
    rules with metric.evaluate(rule) >= min_value are kept. Bodies are enumerated
    by size, then in item order.

    Args:
        frequent_item_sets: Frequent item sets. The subsets of every item set must
                            be included as well, since bodies and heads take their
                            supports from them.
        metric: Metric (or metric name) used to accept rules
        min_value: Minimum metric value of accepted rules

    Returns:
        RuleSet with the accepted rules
    """
    ensure_not_none(frequent_item_sets, "The frequent item sets may not be None")
    ensure_not_none(metric, "The metric may not be None")
    metric = get_metric(metric)
    ensure_in_range(
        min_value, metric.min_value(), metric.max_value(),
        f"The minimum {metric.name} must be in [{metric.min_value()}, {metric.max_value()}], got {min_value}"
    )
    if not isinstance(frequent_item_sets, FrequentItemSets):
        frequent_item_sets = FrequentItemSets(frequent_item_sets)

    rules = []
    num_candidates = 0

    for item_set in frequent_item_sets:
        if len(item_set) < 2:
            continue
        for size in range(1, len(item_set)):
            for subset in item_set.subsets(size):
                rest = item_set.difference(subset)
                body = ItemSet(subset, frequent_item_sets.get_support(subset))
                head = ItemSet(rest, frequent_item_sets.get_support(rest))
                rule = AssociationRule(body, head, item_set.support)
                num_candidates += 1
                if metric.evaluate(rule) >= min_value:
                    rules.append(rule)

    logger.debug("Accepted %d of %d candidate rules with %s >= %s",
                 len(rules), num_candidates, metric.name, min_value)
    return RuleSet(rules)
