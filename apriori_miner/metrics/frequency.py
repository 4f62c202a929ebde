"""
Metrics derived from how often the parts of a rule occur.
"""
from apriori_miner.metrics.base import Metric


class Support(Metric):
    """Fraction of transactions containing both body and head."""

    name = 'support'

    def _evaluate(self, rule) -> float:
        return rule.support

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return 1.0


class Coverage(Metric):
    """Fraction of transactions containing the body (antecedent support)."""

    name = 'coverage'

    def _evaluate(self, rule) -> float:
        return rule.body.support

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return 1.0


class Confidence(Metric):
    """
    Conditional frequency of the head given the body: support(rule) / support(body).

    Rules whose body has a support of 0 have a confidence of 0.
    """

    name = 'confidence'

    def _evaluate(self, rule) -> float:
        if rule.body.support <= 0:
            return 0.0
        return min(rule.support / rule.body.support, 1.0)

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return 1.0


class Interestingness(Metric):
    """Product of support and confidence."""

    name = 'interestingness'

    def _evaluate(self, rule) -> float:
        return rule.support * Confidence().evaluate(rule)

    def min_value(self) -> float:
        return 0.0

    def max_value(self) -> float:
        return 1.0
