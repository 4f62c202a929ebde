from .config import Configuration, FilterConfig
from .output import Output
from .base import run_apriori, find_frequent_item_sets, find_rules, current_time_millis, load_transactions

__all__ = [
    'Configuration',
    'FilterConfig',
    'Output',
    'run_apriori',
    'find_frequent_item_sets',
    'find_rules',
    'current_time_millis',
    'load_transactions'
]
