import pytest

from apriori_miner import generate_rules, mine
from apriori_miner.experiments import FilterConfig
from apriori_miner.postprocessing import (
    apply_filters, filter_itemsets, filter_rules, filter_rules_by_antecedent, filter_rules_by_consequent,
    filter_rules_by_pattern, rank_rules, summarize_rules
)


@pytest.fixture
def rules(transactions):
    return generate_rules(mine(transactions, 0.5), 'confidence', 0.5)


def _names(rules):
    return [str(rule) for rule in rules]


def test_filter_rules(rules):
    assert _names(filter_rules(rules, 'lift', 1.0)) == ['[b] -> [c]', '[c] -> [b]']
    assert len(rules) == 4


def test_filter_rules_rejects_out_of_range_threshold(rules):
    with pytest.raises(ValueError):
        filter_rules(rules, 'confidence', 2.0)


def test_apply_filters(rules):
    filtered = apply_filters(rules, [FilterConfig('lift', 1.0), ('confidence', 0.9)])
    assert _names(filtered) == ['[c] -> [b]']
    assert apply_filters(rules, None) == rules


def test_rank_rules(rules):
    ranked = rank_rules(rules, 'confidence')
    assert _names(ranked) == ['[c] -> [b]', '[a] -> [b]', '[b] -> [a]', '[b] -> [c]']
    assert _names(rank_rules(rules, 'lift', top_k=1)) == ['[b] -> [c]']
    assert _names(rules) == ['[a] -> [b]', '[b] -> [a]', '[b] -> [c]', '[c] -> [b]']


def test_ranking_is_idempotent(rules):
    ranked = rank_rules(rules, 'lift')
    assert rank_rules(ranked, 'lift') == ranked


def test_filter_rules_by_pattern(rules):
    assert _names(filter_rules_by_pattern(rules, antecedent_contains=['B'])) == ['[b] -> [a]', '[b] -> [c]']
    assert _names(filter_rules_by_pattern(rules, consequent_excludes=['b'])) == ['[b] -> [a]', '[b] -> [c]']
    assert _names(filter_rules_by_consequent(rules, ['c'])) == ['[b] -> [c]']
    assert _names(filter_rules_by_antecedent(rules, ['a', 'c'])) == ['[a] -> [b]', '[c] -> [b]']
    assert len(filter_rules_by_pattern(rules, antecedent_contains=['a', 'c'])) == 0


def test_filter_itemsets(transactions):
    filtered, stats = filter_itemsets(mine(transactions, 0.5), threshold=0.5, min_size=2)
    assert [s.items for s in filtered] == [('a', 'b'), ('b', 'c')]
    assert stats == {'num_itemsets': 2, 'average_support': 0.5}

    filtered, stats = filter_itemsets(mine(transactions, 0.5), threshold=0.9)
    assert len(filtered) == 0
    assert stats == {'num_itemsets': 0, 'average_support': 0.0}


def test_summarize_rules(rules):
    stats = summarize_rules(rules, ['confidence'])
    assert stats['num_rules'] == 4
    assert stats['average_confidence'] == pytest.approx((3 * 2 / 3 + 1) / 4)
    assert summarize_rules([])['average_lift'] == 0.0
