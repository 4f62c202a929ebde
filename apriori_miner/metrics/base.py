"""
Base interface for rule interestingness metrics.
"""
from abc import ABC, abstractmethod


class Metric(ABC):
    """
    A measure of how interesting an association rule is.

    Every metric evaluates a rule to a value within [min_value(), max_value()].
    The bounds are constants of the metric and are used to validate thresholds
    when a configuration is created.
    """

    name: str = None

    @abstractmethod
    def _evaluate(self, rule) -> float:
        pass

    @abstractmethod
    def min_value(self) -> float:
        pass

    @abstractmethod
    def max_value(self) -> float:
        pass

    def evaluate(self, rule) -> float:
        """
        Evaluate a rule.

        Args:
            rule: AssociationRule to evaluate

        Returns:
            Metric value of the rule

        Raises:
            ValueError: If the rule is None
        """
        if rule is None:
            raise ValueError("The rule may not be None")
        return self._evaluate(rule)

    def __call__(self, rule) -> float:
        return self.evaluate(rule)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{self.__class__.__name__}()"
