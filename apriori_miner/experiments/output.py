from dataclasses import dataclass
from typing import Any, Dict, Optional

from apriori_miner.data_structures import FrequentItemSets, RuleSet
from apriori_miner.experiments.config import Configuration
from apriori_miner.postprocessing import summarize_rules
from apriori_miner.utils.validation import ensure_at_least, ensure_not_none


@dataclass(frozen=True)
class Output:
    """
    Result of one mining run.

    Times are milliseconds since the epoch. rule_set is None exactly when the
    configuration did not ask for rules.
    """
    configuration: Configuration
    start_time: int
    end_time: int
    frequent_item_sets: FrequentItemSets
    rule_set: Optional[RuleSet] = None

    def __post_init__(self):
        ensure_not_none(self.configuration, "The configuration may not be None")
        ensure_at_least(self.start_time, 0, f"The start time must be at least 0, got {self.start_time}")
        ensure_at_least(self.end_time, self.start_time,
                        f"The end time must be at least {self.start_time}, got {self.end_time}")
        ensure_not_none(self.frequent_item_sets, "The frequent item sets may not be None")
        if self.configuration.generate_rules and self.rule_set is None:
            raise ValueError("The rule set may not be None, if rules should be generated")
        if not self.configuration.generate_rules and self.rule_set is not None:
            raise ValueError("The rule set must be None, if no rules should be generated")

    @property
    def runtime(self) -> int:
        return self.end_time - self.start_time

    def copy(self) -> 'Output':
        """Deep copy, sharing no item sets or rules with this output."""
        return Output(
            configuration=self.configuration.copy(),
            start_time=self.start_time,
            end_time=self.end_time,
            frequent_item_sets=self.frequent_item_sets.copy(),
            rule_set=self.rule_set.copy() if self.rule_set is not None else None
        )

    def get_stats(self) -> Dict[str, Any]:
        itemsets = self.frequent_item_sets
        stats = {
            'num_itemsets': len(itemsets),
            'average_support': sum(s.support for s in itemsets) / len(itemsets) if len(itemsets) > 0 else 0.0,
            'max_itemset_size': itemsets.max_size(),
            'runtime_ms': self.runtime,
            'algorithm': 'apriori',
            'mode': 'both' if self.rule_set is not None else 'itemsets'
        }
        if self.rule_set is not None:
            stats.update(summarize_rules(self.rule_set))
        return stats

    def __str__(self):
        return (f"configuration={self.configuration.to_dict()},\nstart_time={self.start_time},\n"
                f"end_time={self.end_time},\nruntime={self.runtime},\n"
                f"frequent_item_sets={self.frequent_item_sets},\nrule_set={self.rule_set}")
