from itertools import count

import pytest

from apriori_miner import Configuration, FilterConfig, TransactionDB, run_apriori


def _names(rules):
    return [str(rule) for rule in rules]


def test_frequent_item_sets_only(transactions, fixed_clock):
    output = run_apriori(transactions, Configuration(min_support=0.5), clock=fixed_clock)
    assert [s.items for s in output.frequent_item_sets] == [('a',), ('b',), ('c',), ('a', 'b'), ('b', 'c')]
    assert output.rule_set is None


def test_rules(transactions, fixed_clock):
    config = Configuration(min_support=0.5, generate_rules=True, min_rule_value=0.5)
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert _names(output.rule_set) == ['[a] -> [b]', '[b] -> [a]', '[b] -> [c]', '[c] -> [b]']


def test_empty_transactions(fixed_clock):
    output = run_apriori([], Configuration(min_support=0.5, generate_rules=True), clock=fixed_clock)
    assert len(output.frequent_item_sets) == 0
    assert len(output.rule_set) == 0


def test_times_come_from_clock(transactions):
    ticks = count(100, 50)
    output = run_apriori(transactions, Configuration(min_support=0.5), clock=lambda: next(ticks))
    assert output.start_time == 100
    assert output.end_time == 150
    assert output.runtime == 50


def test_default_clock(transactions):
    output = run_apriori(transactions, Configuration(min_support=0.5))
    assert output.start_time > 0
    assert output.end_time >= output.start_time


def test_determinism(baskets, fixed_clock):
    config = Configuration(min_support=0.2, generate_rules=True, min_rule_value=0.5, sort_metric='lift')
    first = run_apriori(baskets, config, clock=fixed_clock)
    second = run_apriori(TransactionDB(baskets), config, clock=fixed_clock)
    assert first == second
    assert _names(first.rule_set) == _names(second.rule_set)


def test_configuration_is_required(transactions):
    with pytest.raises(ValueError):
        run_apriori(transactions, None)


def test_frequent_item_set_count(transactions, fixed_clock):
    config = Configuration(min_support=0.25, max_support=1.0, support_delta=0.25, frequent_item_set_count=3)
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert [s.items for s in output.frequent_item_sets] == [('a',), ('b',), ('c',)]


def test_frequent_item_set_count_not_reached(transactions, fixed_clock):
    config = Configuration(min_support=0.5, frequent_item_set_count=100)
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert len(output.frequent_item_sets) == 5


def test_rule_count(transactions, fixed_clock):
    config = Configuration(min_support=0.5, generate_rules=True, rule_count=1)
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert _names(output.rule_set) == ['[c] -> [b]']

    config = config.copy(rule_count=2)
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert _names(output.rule_set) == ['[c] -> [b]', '[a] -> [b]']


def test_filters(transactions, fixed_clock):
    config = Configuration(min_support=0.5, generate_rules=True, filters=(FilterConfig('lift', 1.0),))
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert _names(output.rule_set) == ['[b] -> [c]', '[c] -> [b]']


def test_sort_metric(transactions, fixed_clock):
    config = Configuration(min_support=0.5, generate_rules=True, sort_metric='confidence')
    output = run_apriori(transactions, config, clock=fixed_clock)
    assert _names(output.rule_set) == ['[c] -> [b]', '[a] -> [b]', '[b] -> [a]', '[b] -> [c]']


def test_max_items(baskets, fixed_clock):
    output = run_apriori(baskets, Configuration(min_support=0.2, max_items=2), clock=fixed_clock)
    assert output.frequent_item_sets.max_size() == 2


def test_output_contents_cannot_be_changed(transactions, fixed_clock):
    output = run_apriori(transactions, Configuration(min_support=0.5, generate_rules=True), clock=fixed_clock)
    with pytest.raises(AttributeError):
        output.frequent_item_sets[4].support = 1.0
    with pytest.raises(AttributeError):
        output.rule_set[0].support = 0.9
    with pytest.raises(AttributeError):
        output.rule_set.add(output.rule_set[0])
    assert [s.support for s in output.frequent_item_sets] == [0.75, 0.75, 0.5, 0.5, 0.5]
    assert output.rule_set[0].support == 0.5


def test_equal_outputs_have_equal_hashes(transactions, fixed_clock):
    config = Configuration(min_support=0.5, generate_rules=True)
    output = run_apriori(transactions, config, clock=fixed_clock)
    other = run_apriori(transactions, config, clock=fixed_clock)
    assert output == other
    assert hash(output) == hash(other)
    assert hash(output) == hash(output.copy())
