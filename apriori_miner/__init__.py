"""
Frequent item set mining and association rule generation with the Apriori algorithm.
"""
from .data_structures import (
    NamedItem,
    ItemSet,
    FrequentItemSets,
    AssociationRule,
    RuleSet,
    TransactionDB
)
from .metrics import (
    Metric,
    Support,
    Coverage,
    Confidence,
    Interestingness,
    Lift,
    Leverage,
    Conviction,
    ZhangsMetric,
    get_metric
)
from .rule_mining import AprioriMiner, generate_candidates, generate_rules, mine
from .postprocessing import filter_rules, rank_rules
from .experiments import Configuration, FilterConfig, Output, run_apriori

__version__ = '1.0.0'

__all__ = [
    'NamedItem',
    'ItemSet',
    'FrequentItemSets',
    'AssociationRule',
    'RuleSet',
    'TransactionDB',
    'Metric',
    'Support',
    'Coverage',
    'Confidence',
    'Interestingness',
    'Lift',
    'Leverage',
    'Conviction',
    'ZhangsMetric',
    'get_metric',
    'AprioriMiner',
    'generate_candidates',
    'generate_rules',
    'mine',
    'filter_rules',
    'rank_rules',
    'Configuration',
    'FilterConfig',
    'Output',
    'run_apriori'
]
