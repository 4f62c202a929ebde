import math

import pytest

from apriori_miner import (
    AssociationRule, Confidence, Conviction, Coverage, Interestingness, ItemSet, Leverage, Lift,
    Support, ZhangsMetric, get_metric, mine, generate_rules
)
from apriori_miner.metrics import METRICS


def test_support_evaluate():
    rule = AssociationRule(ItemSet(['a']), ItemSet(['b']), 0.5)
    assert Support().evaluate(rule) == 0.5
    assert Support().min_value() == 0
    assert Support().max_value() == 1


@pytest.mark.parametrize('metric', list(METRICS.values()), ids=list(METRICS))
def test_evaluate_none_raises(metric):
    with pytest.raises(ValueError):
        metric.evaluate(None)


@pytest.mark.parametrize('metric, expected', [
    (Support(), 0.5),
    (Coverage(), 0.75),
    (Confidence(), 2 / 3),
    (Interestingness(), 1 / 3),
    (Lift(), 8 / 9),
    (Leverage(), 0.5 - 0.75 * 0.75),
    (Conviction(), 0.75),
    (ZhangsMetric(), (2 / 3 - 0.75) / 0.75),
])
def test_metric_values(rule_a_b, metric, expected):
    assert metric.evaluate(rule_a_b) == pytest.approx(expected)


def test_rule_that_always_holds(rule_c_b):
    assert Confidence().evaluate(rule_c_b) == 1.0
    assert Lift().evaluate(rule_c_b) == pytest.approx(4 / 3)
    assert math.isinf(Conviction().evaluate(rule_c_b))
    assert ZhangsMetric().evaluate(rule_c_b) == pytest.approx(1.0)


def test_zero_supports_are_guarded():
    rule = AssociationRule(ItemSet(['a']), ItemSet(['b']), 0.0)
    assert Confidence().evaluate(rule) == 0.0
    assert Lift().evaluate(rule) == 0.0
    assert Conviction().evaluate(rule) == 0.0
    assert ZhangsMetric().evaluate(rule) == 0.0


def test_metric_is_callable(rule_a_b):
    assert Confidence()(rule_a_b) == Confidence().evaluate(rule_a_b)


def test_lift_has_no_upper_bound():
    assert math.isinf(Lift().max_value())


@pytest.mark.parametrize('name, expected', [
    ('support', Support),
    ('Confidence', Confidence),
    (' lift ', Lift),
    ("Zhang's metric", ZhangsMetric),
    ('zhangs_metric', ZhangsMetric),
])
def test_get_metric(name, expected):
    assert isinstance(get_metric(name), expected)


def test_get_metric_returns_instances_unchanged():
    metric = Leverage()
    assert get_metric(metric) is metric


@pytest.mark.parametrize('name', ['accuracy', None, 3])
def test_get_metric_rejects_unknown(name):
    with pytest.raises(ValueError):
        get_metric(name)


def test_values_within_declared_range(baskets):
    rules = generate_rules(mine(baskets, 0.2), 'support', 0.0)
    assert len(rules) > 0
    for rule in rules:
        for metric in METRICS.values():
            assert metric.min_value() <= metric.evaluate(rule) <= metric.max_value()
