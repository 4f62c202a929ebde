from typing import Iterable, List, Optional, Tuple, Union

from apriori_miner.data_structures import AssociationRule, FrequentItemSets, ItemSet, RuleSet
from apriori_miner.metrics import Metric, get_metric
from apriori_miner.utils.validation import ensure_not_none, ensure_in_range


def filter_rules(rules: Iterable[AssociationRule], criterion: Union[str, Metric], threshold: float) -> RuleSet:
    """
    Filters rules based on a metric >= threshold.

    Args:
        rules: RuleSet or iterable of rules
        criterion: The metric to filter on (e.g., 'support', 'confidence', 'zhangs_metric')
        threshold: Minimum value for the metric (inclusive)

    Returns:
        New RuleSet with the rules meeting the criterion, in their original order
    """
    ensure_not_none(rules, "The rules may not be None")
    metric = get_metric(criterion)
    ensure_in_range(
        threshold, metric.min_value(), metric.max_value(),
        f"The threshold for {metric.name} must be in [{metric.min_value()}, {metric.max_value()}], got {threshold}"
    )
    return RuleSet(rule for rule in rules if metric.evaluate(rule) >= threshold)


def apply_filters(rules: Iterable[AssociationRule], filters) -> RuleSet:
    """Chain filter_rules over (metric, threshold) pairs or FilterConfig objects."""
    result = rules if isinstance(rules, RuleSet) else RuleSet(rules)
    for f in filters or ():
        metric, threshold = (f.metric, f.threshold) if hasattr(f, 'threshold') else f
        result = filter_rules(result, criterion=metric, threshold=threshold)
    return result


def rank_rules(rules: RuleSet, metric: Union[str, Metric], top_k: Optional[int] = None) -> RuleSet:
    """
    Order rules by descending metric value, keeping at most top_k of them.

    The input is left unchanged. Ties are broken by support, then by body and head.
    """
    ensure_not_none(rules, "The rules may not be None")
    if not isinstance(rules, RuleSet):
        rules = RuleSet(rules)
    return rules.sort(get_metric(metric), limit=top_k)


def filter_rules_by_pattern(
    rules: Iterable[AssociationRule],
    antecedent_contains: list = None,
    consequent_contains: list = None,
    antecedent_excludes: list = None,
    consequent_excludes: list = None,
    match_any: bool = False
) -> RuleSet:
    """
    Filter rules by antecedent (body) and consequent (head) patterns.

    A pattern matches an item if it is a case-insensitive substring of the item's
    string form, e.g. 'milk' matches 'whole milk' and 'product__milk'.

    Args:
        rules: RuleSet or iterable of rules
        antecedent_contains: List of patterns that must appear in the body
        consequent_contains: List of patterns that must appear in the head
        antecedent_excludes: List of patterns that must NOT appear in the body
        consequent_excludes: List of patterns that must NOT appear in the head
        match_any: If True, match if ANY pattern matches. If False, ALL must match.

    Returns:
        New RuleSet with the matching rules
    """
    def normalize_itemset(item_set: ItemSet):
        return {str(item).lower() for item in item_set}

    def matches_patterns(item_set, patterns, match_any_pattern):
        if not patterns:
            return True
        itemset_normalized = normalize_itemset(item_set)
        patterns_lower = [p.lower() for p in patterns]
        found = (any(p in item for item in itemset_normalized) for p in patterns_lower)
        return any(found) if match_any_pattern else all(found)

    def excludes_patterns(item_set, patterns):
        if not patterns:
            return True
        itemset_normalized = normalize_itemset(item_set)
        return not any(
            any(p.lower() in item for item in itemset_normalized)
            for p in patterns
        )

    filtered = []
    for rule in rules:
        if (matches_patterns(rule.body, antecedent_contains, match_any)
                and matches_patterns(rule.head, consequent_contains, match_any)
                and excludes_patterns(rule.body, antecedent_excludes)
                and excludes_patterns(rule.head, consequent_excludes)):
            filtered.append(rule)
    return RuleSet(filtered)


def filter_rules_by_consequent(rules, targets: list, match_any: bool = True) -> RuleSet:
    """Keep only rules whose head matches one (or all) of the target patterns."""
    return filter_rules_by_pattern(rules, consequent_contains=targets, match_any=match_any)


def filter_rules_by_antecedent(rules, patterns: list, match_any: bool = True) -> RuleSet:
    """Keep only rules whose body matches one (or all) of the patterns."""
    return filter_rules_by_pattern(rules, antecedent_contains=patterns, match_any=match_any)


def filter_itemsets(
    itemsets: Iterable[ItemSet],
    threshold: float = 0.0,
    min_size: int = 1
) -> Tuple[FrequentItemSets, dict]:
    """
    Filters frequent item sets by support >= threshold and size >= min_size.
    Returns both filtered item sets and a stats dictionary.

    Args:
        itemsets: FrequentItemSets or iterable of item sets
        threshold: Minimum support (inclusive)
        min_size: Minimum number of items

    Returns:
        Tuple of (filtered_itemsets, stats)
    """
    ensure_in_range(threshold, 0.0, 1.0, f"The support threshold must be in [0, 1], got {threshold}")
    filtered = FrequentItemSets(
        item_set for item_set in itemsets
        if item_set.support >= threshold and len(item_set) >= min_size
    )

    count = len(filtered)
    if count == 0:
        stats = {
            "num_itemsets": 0,
            "average_support": 0.0,
        }
        return filtered, stats

    avg_support = sum(item_set.support for item_set in filtered) / count

    stats = {
        "num_itemsets": count,
        "average_support": round(avg_support, 3),
    }

    return filtered, stats


def summarize_rules(rules: Iterable[AssociationRule], metrics: List[str] = None) -> dict:
    """Average value of each metric over the rules, 0.0 for an empty collection."""
    rules = list(rules)
    metrics = metrics or ['support', 'confidence', 'lift', 'zhangs_metric', 'interestingness']
    stats = {'num_rules': len(rules)}
    for name in metrics:
        metric = get_metric(name)
        stats[f'average_{metric.name}'] = (
            sum(metric.evaluate(rule) for rule in rules) / len(rules) if rules else 0.0
        )
    return stats
