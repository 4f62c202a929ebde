"""
Base interfaces for frequent item set and association rule miners.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Tuple, Union

from apriori_miner.data_structures import FrequentItemSets, RuleSet, TransactionDB
from apriori_miner.metrics import Metric, get_metric
from apriori_miner.utils.validation import ensure_in_range, ensure_greater, ensure_int

Transactions = Union[TransactionDB, Iterable[Iterable[Any]]]


def as_transaction_db(transactions: Transactions) -> TransactionDB:
    """Wrap arbitrary transactions, so they can be iterated more than once."""
    if transactions is None:
        raise ValueError("The transactions may not be None")
    if isinstance(transactions, TransactionDB):
        return transactions
    return TransactionDB(transactions)


class FrequentItemsetMiner(ABC):
    """
    Base class for frequent item set mining algorithms.

    These algorithms discover item sets whose support is at least min_support,
    without forming rules.
    """

    def __init__(self, min_support: float = 0.01, max_items: int = None, **kwargs):
        message = f"The minimum support must be in (0, 1], got {min_support}"
        ensure_in_range(min_support, 0.0, 1.0, message)
        ensure_greater(min_support, 0.0, message)
        if max_items is not None:
            ensure_int(max_items, 1, f"The maximum number of items must be an integer of at least 1, got {max_items}")
        self.min_support = min_support
        self.max_items = max_items
        self.config = kwargs

    @abstractmethod
    def mine_itemsets(self, data: Transactions) -> Tuple[FrequentItemSets, Dict[str, Any]]:
        """
        Mine frequent item sets from transactions.

        Args:
            data: Transactions, each an iterable of items

        Returns:
            Tuple of (itemsets, stats) where:
                itemsets: FrequentItemSets ordered by descending support
                stats: Dict with mining statistics (execution_time, num_itemsets, etc.)
        """
        pass


class AssociationRuleMiner(ABC):
    """
    Base class for association rule mining algorithms.

    These algorithms discover rules of the form body -> head, whose value for the
    generation metric (confidence by default) is at least min_confidence.
    """

    def __init__(
        self,
        min_support: float = 0.01,
        min_confidence: float = 0.5,
        metric: Union[str, Metric] = 'confidence',
        **kwargs
    ):
        self.metric = get_metric(metric)
        ensure_in_range(
            min_confidence, self.metric.min_value(), self.metric.max_value(),
            f"The minimum {self.metric.name} must be in "
            f"[{self.metric.min_value()}, {self.metric.max_value()}], got {min_confidence}"
        )
        self.min_support = min_support
        self.min_confidence = min_confidence
        self.config = kwargs

    @abstractmethod
    def mine_rules(self, data: Transactions) -> Tuple[RuleSet, Dict[str, Any]]:
        """
        Mine association rules from transactions.

        Args:
            data: Transactions, each an iterable of items

        Returns:
            Tuple of (rules, stats) where:
                rules: RuleSet in generation order
                stats: Dict with mining statistics
        """
        pass


class HybridMiner(FrequentItemsetMiner, AssociationRuleMiner):
    """
    Base class for algorithms that can produce both frequent item sets and association rules.

    max_items limits the size of the mined item sets, and therefore the total
    number of items of a rule.
    """

    def __init__(
        self,
        min_support: float = 0.01,
        min_confidence: float = 0.5,
        max_items: int = None,
        metric: Union[str, Metric] = 'confidence',
        **kwargs
    ):
        FrequentItemsetMiner.__init__(self, min_support, max_items, **kwargs)
        AssociationRuleMiner.__init__(self, min_support, min_confidence, metric, **kwargs)

    @abstractmethod
    def mine_itemsets(self, data: Transactions) -> Tuple[FrequentItemSets, Dict[str, Any]]:
        """Mine frequent item sets."""
        pass

    @abstractmethod
    def mine_rules(self, data: Transactions) -> Tuple[RuleSet, Dict[str, Any]]:
        """Mine association rules."""
        pass
