"""
Level-wise frequent item set mining (Apriori).
"""
import logging
import time
from collections import Counter
from itertools import combinations
from math import comb
from typing import Any, Dict, Iterable, List, Set, Tuple

from apriori_miner.data_structures import FrequentItemSets, ItemSet, RuleSet, TransactionDB
from apriori_miner.rule_mining.base import HybridMiner, Transactions, as_transaction_db
from apriori_miner.rule_mining.candidate_generation import generate_candidates
from apriori_miner.rule_mining.rule_generation import generate_rules

logger = logging.getLogger(__name__)


class AprioriMiner(HybridMiner):
    """
    Apriori miner.

    Counts the support of all single items, then repeatedly generates the
    candidates of the next level from the frequent item sets of the current one
    and counts their support, until no candidate is frequent or max_items is
    reached.

    Can generate:
    - Frequent item sets (mine, mine_itemsets)
    - Association rules (mine_rules)
    """

    def __init__(
        self,
        min_support: float = 0.01,
        min_confidence: float = 0.5,
        max_items: int = None,
        metric='confidence',
        **kwargs
    ):
        """
        Initialize Apriori miner.

        Args:
            min_support: Minimum support threshold in (0, 1]
            min_confidence: Minimum value of the rule generation metric
            max_items: Maximum number of items of an item set, unlimited if None
            metric: Metric for rule generation ('confidence', 'lift', etc.)
        """
        super().__init__(min_support, min_confidence, max_items, metric, **kwargs)
        self.level_sizes: List[Tuple[int, int]] = []

    def _count_singletons(self, transactions: TransactionDB) -> List[ItemSet]:
        counts = Counter()
        for transaction in transactions:
            counts.update(transaction)
        n = len(transactions)
        return [ItemSet((item,), count / n) for item, count in counts.items()
                if count / n >= self.min_support]

    def _count_candidates(self, candidates: Set[ItemSet], transactions: TransactionDB, size: int) -> List[ItemSet]:
        """Count the support of candidates and return the frequent ones."""
        by_items = {frozenset(candidate.items): candidate for candidate in candidates}
        counts = Counter()

        for transaction in transactions:
            if len(transaction) < size:
                continue
            if comb(len(transaction), size) <= len(by_items):
                for subset in combinations(transaction, size):
                    key = frozenset(subset)
                    if key in by_items:
                        counts[key] += 1
            else:
                for key in by_items:
                    if key <= transaction:
                        counts[key] += 1

        n = len(transactions)
        frequent = []
        for key, candidate in by_items.items():
            support = counts[key] / n
            if support >= self.min_support:
                frequent.append(ItemSet(candidate.items, support))
        return frequent

    def mine(self, transactions: Transactions) -> FrequentItemSets:
        """
        Find all item sets with a support of at least min_support.

        Args:
            transactions: Transactions, each an iterable of items

        Returns:
            FrequentItemSets, ordered by descending support. Empty if there are no
            transactions.
        """
        transactions = as_transaction_db(transactions)
        self.level_sizes = []
        if len(transactions) == 0:
            logger.debug("No transactions, no frequent item sets")
            return FrequentItemSets()

        level = self._count_singletons(transactions)
        self.level_sizes.append((len(level), len(level)))
        frequent = list(level)
        logger.debug("Level 1: %d frequent items", len(level))

        size = 2
        while level and (self.max_items is None or size <= self.max_items):
            candidates = generate_candidates(level)
            if not candidates:
                break
            level = self._count_candidates(candidates, transactions, size)
            self.level_sizes.append((len(candidates), len(level)))
            logger.debug("Level %d: %d candidates, %d frequent", size, len(candidates), len(level))
            frequent.extend(level)
            size += 1

        return FrequentItemSets(frequent)

    def mine_itemsets(self, data: Transactions) -> Tuple[FrequentItemSets, Dict[str, Any]]:
        """
        Mine frequent item sets.

        Args:
            data: Transactions, each an iterable of items

        Returns:
            Tuple of (itemsets, stats)
        """
        start_time = time.time()
        itemsets = self.mine(data)
        execution_time = time.time() - start_time

        stats = {
            'num_itemsets': len(itemsets),
            'execution_time': execution_time,
            'average_support': sum(s.support for s in itemsets) / len(itemsets) if len(itemsets) > 0 else 0.0,
            'num_candidates': sum(candidates for candidates, _ in self.level_sizes),
            'num_levels': len(self.level_sizes),
            'algorithm': 'apriori',
            'mode': 'itemsets'
        }
        return itemsets, stats

    def mine_rules(self, data: Transactions) -> Tuple[RuleSet, Dict[str, Any]]:
        """
        Mine frequent item sets, then derive association rules from them.

        Args:
            data: Transactions, each an iterable of items

        Returns:
            Tuple of (rules, stats)
        """
        start_time = time.time()
        itemsets = self.mine(data)
        rules = generate_rules(itemsets, self.metric, self.min_confidence)
        execution_time = time.time() - start_time

        stats = {
            'num_rules': len(rules),
            'num_itemsets': len(itemsets),
            'execution_time': execution_time,
            'average_support': sum(r.support for r in rules) / len(rules) if rules else 0.0,
            f'average_{self.metric.name}': sum(self.metric.evaluate(r) for r in rules) / len(rules) if rules else 0.0,
            'algorithm': 'apriori',
            'mode': 'rules'
        }
        return rules, stats

    def __repr__(self):
        return (f"AprioriMiner(min_support={self.min_support}, min_confidence={self.min_confidence}, "
                f"max_items={self.max_items}, metric='{self.metric.name}')")


def mine(transactions: Iterable[Iterable[Any]], min_support: float, max_items: int = None) -> FrequentItemSets:
    """Shortcut for AprioriMiner(min_support, max_items=max_items).mine(transactions)."""
    return AprioriMiner(min_support=min_support, max_items=max_items).mine(transactions)
