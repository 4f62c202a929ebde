"""
Metrics comparing the observed co-occurrence of body and head to independence.
"""
import math

from apriori_miner.metrics.base import Metric
from apriori_miner.metrics.frequency import Confidence


class Lift(Metric):
    """
    confidence(rule) / support(head).

    A value of 1 means body and head are independent. The metric has no upper
    bound. Rules whose head has a support of 0 have a lift of 0.
    """

    name = 'lift'

    def _evaluate(self, rule) -> float:
        if rule.head.support <= 0:
            return 0.0
        return Confidence().evaluate(rule) / rule.head.support

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return math.inf


class Leverage(Metric):
    """support(rule) - support(body) * support(head)."""

    name = 'leverage'

    def _evaluate(self, rule) -> float:
        leverage = rule.support - rule.body.support * rule.head.support
        return max(self.min_value(), min(leverage, self.max_value()))

    def min_value(self) -> float:
        return -0.25

    def max_value(self) -> float:
        return 0.25


class Conviction(Metric):
    """
    (1 - support(head)) / (1 - confidence(rule)).

    Rules that always hold have an infinite conviction.
    """

    name = 'conviction'

    def _evaluate(self, rule) -> float:
        if rule.body.support <= 0:
            return 0.0
        confidence = Confidence().evaluate(rule)
        if confidence >= 1.0:
            return math.inf
        return (1.0 - rule.head.support) / (1.0 - confidence)

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return math.inf


class ZhangsMetric(Metric):
    """
    Zhang's metric of association and dissociation, within [-1, 1].

    With cs = support(head): (confidence - cs) / (1 - cs) if the head is more
    likely given the body, (confidence - cs) / cs otherwise. 0 if cs is 0 or 1.
    """

    name = 'zhangs_metric'

    def _evaluate(self, rule) -> float:
        cons_support = rule.head.support
        if cons_support <= 0 or cons_support >= 1:
            return 0.0
        confidence = Confidence().evaluate(rule)
        if confidence >= cons_support:
            value = (confidence - cons_support) / (1 - cons_support)
        else:
            value = (confidence - cons_support) / cons_support
        return max(-1.0, min(value, 1.0))

    def min_value(self) -> float:
        return -1.0

    def max_value(self) -> float:
        return 1.0
