"""
Items, item sets, rules and transactions.
"""
from .item import NamedItem
from .itemset import ItemSet, FrequentItemSets
from .rule import AssociationRule
from .rule_set import RuleSet
from .transactions import TransactionDB

__all__ = [
    'NamedItem',
    'ItemSet',
    'FrequentItemSets',
    'AssociationRule',
    'RuleSet',
    'TransactionDB'
]
