import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from apriori_miner.metrics import Metric, get_metric
from apriori_miner.utils.validation import (
    ensure_at_least, ensure_greater, ensure_in_range, ensure_int, ensure_not_none
)


def _ensure_in_metric_range(metric: Metric, value: float, label: str):
    ensure_in_range(
        value, metric.min_value(), metric.max_value(),
        f"The {label} must be in [{metric.min_value()}, {metric.max_value()}] "
        f"for metric '{metric.name}', got {value}"
    )


@dataclass(frozen=True)
class FilterConfig:
    metric: Union[str, Metric]
    threshold: float

    def __post_init__(self):
        metric = get_metric(self.metric)
        object.__setattr__(self, 'metric', metric)
        _ensure_in_metric_range(metric, self.threshold, 'threshold')

    def to_dict(self) -> Dict[str, Any]:
        return {'metric': self.metric.name, 'threshold': self.threshold}


@dataclass(frozen=True)
class Configuration:
    """
    Parameters of one mining run. All values are validated on construction.

    Frequent item sets:
        min_support: Minimum support, in (0, 1]
        max_support: Support to start from when searching for a number of item
                     sets, in [min_support, 1]
        support_delta: Amount the support is lowered by per search step
        frequent_item_set_count: Number of item sets to search for, 0 to mine
                                 once at min_support without a limit
        max_items: Maximum number of items of an item set, unlimited if None

    Rules:
        generate_rules: Whether rules should be generated
        rule_metric: Metric (or metric name) rules are accepted by
        min_rule_value: Minimum value of rule_metric
        max_rule_value: Value to start from when searching for a number of rules,
                        defaults to the maximum value of rule_metric
        rule_value_delta: Amount the value is lowered by per search step
        rule_count: Number of rules to search for, 0 for no limit
        sort_metric: Metric (or name) the rules are ranked by, if any
        filters: Further FilterConfigs the rules must pass
    """
    min_support: float = 0.1
    max_support: float = 1.0
    support_delta: float = 0.1
    frequent_item_set_count: int = 0
    max_items: Optional[int] = None
    generate_rules: bool = False
    rule_metric: Union[str, Metric] = 'confidence'
    min_rule_value: float = 0.5
    max_rule_value: Optional[float] = None
    rule_value_delta: float = 0.1
    rule_count: int = 0
    sort_metric: Optional[Union[str, Metric]] = None
    filters: Tuple[FilterConfig, ...] = field(default_factory=tuple)

    def __post_init__(self):
        ensure_in_range(self.min_support, 0.0, 1.0,
                        f"The minimum support must be in (0, 1], got {self.min_support}")
        ensure_greater(self.min_support, 0.0,
                       f"The minimum support must be in (0, 1], got {self.min_support}")
        ensure_in_range(self.max_support, self.min_support, 1.0,
                        f"The maximum support must be in [{self.min_support}, 1], got {self.max_support}")
        ensure_in_range(self.support_delta, 0.0, 1.0,
                        f"The support delta must be in (0, 1], got {self.support_delta}")
        ensure_greater(self.support_delta, 0.0,
                       f"The support delta must be in (0, 1], got {self.support_delta}")
        ensure_int(self.frequent_item_set_count, 0,
                   f"The frequent item set count must be an integer of at least 0, got {self.frequent_item_set_count}")
        if self.max_items is not None:
            ensure_int(self.max_items, 1,
                       f"The maximum number of items must be an integer of at least 1, got {self.max_items}")

        ensure_not_none(self.rule_metric, "The rule metric may not be None")
        rule_metric = get_metric(self.rule_metric)
        object.__setattr__(self, 'rule_metric', rule_metric)
        _ensure_in_metric_range(rule_metric, self.min_rule_value, 'minimum rule value')

        max_rule_value = rule_metric.max_value() if self.max_rule_value is None else self.max_rule_value
        _ensure_in_metric_range(rule_metric, max_rule_value, 'maximum rule value')
        ensure_at_least(max_rule_value, self.min_rule_value,
                        f"The maximum rule value must be at least {self.min_rule_value}, got {max_rule_value}")
        object.__setattr__(self, 'max_rule_value', max_rule_value)
        ensure_greater(self.rule_value_delta, 0.0,
                       f"The rule value delta must be greater than 0, got {self.rule_value_delta}")
        ensure_int(self.rule_count, 0, f"The rule count must be an integer of at least 0, got {self.rule_count}")
        if self.rule_count > 0 and math.isinf(max_rule_value):
            raise ValueError(
                f"A finite maximum rule value is required to search for {self.rule_count} rules "
                f"by metric '{rule_metric.name}'"
            )

        if self.sort_metric is not None:
            object.__setattr__(self, 'sort_metric', get_metric(self.sort_metric))

        filters = tuple(
            f if isinstance(f, FilterConfig) else FilterConfig(*f) for f in (self.filters or ())
        )
        object.__setattr__(self, 'filters', filters)

    def copy(self, **changes) -> 'Configuration':
        """A new configuration with the same values, except for the given changes."""
        values = {
            'min_support': self.min_support,
            'max_support': self.max_support,
            'support_delta': self.support_delta,
            'frequent_item_set_count': self.frequent_item_set_count,
            'max_items': self.max_items,
            'generate_rules': self.generate_rules,
            'rule_metric': self.rule_metric,
            'min_rule_value': self.min_rule_value,
            'max_rule_value': self.max_rule_value,
            'rule_value_delta': self.rule_value_delta,
            'rule_count': self.rule_count,
            'sort_metric': self.sort_metric,
            'filters': self.filters
        }
        values.update(changes)
        return Configuration(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min_support': self.min_support,
            'max_support': self.max_support,
            'support_delta': self.support_delta,
            'frequent_item_set_count': self.frequent_item_set_count,
            'max_items': self.max_items,
            'generate_rules': self.generate_rules,
            'rule_metric': self.rule_metric.name,
            'min_rule_value': self.min_rule_value,
            'max_rule_value': self.max_rule_value,
            'rule_value_delta': self.rule_value_delta,
            'rule_count': self.rule_count,
            'sort_metric': self.sort_metric.name if self.sort_metric is not None else None,
            'filters': [f.to_dict() for f in self.filters]
        }
