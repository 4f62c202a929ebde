import pytest

from apriori_miner import AssociationRule, ItemSet


@pytest.fixture
def transactions():
    return [['a', 'b'], ['a', 'b', 'c'], ['a'], ['b', 'c']]


@pytest.fixture
def baskets():
    return [
        ['bread', 'milk'],
        ['bread', 'diapers', 'beer', 'eggs'],
        ['milk', 'diapers', 'beer', 'cola'],
        ['bread', 'milk', 'diapers', 'beer'],
        ['bread', 'milk', 'diapers', 'cola'],
    ]


@pytest.fixture
def fixed_clock():
    return lambda: 1000


@pytest.fixture
def rule_a_b():
    """a -> b with support(a) = support(b) = 0.75, support(a, b) = 0.5."""
    return AssociationRule(ItemSet(['a'], 0.75), ItemSet(['b'], 0.75), 0.5)


@pytest.fixture
def rule_c_b():
    """c -> b, which holds in every transaction containing c."""
    return AssociationRule(ItemSet(['c'], 0.5), ItemSet(['b'], 0.75), 0.5)
