from .validation import (
    ensure_not_none,
    ensure_not_empty,
    ensure_at_least,
    ensure_greater,
    ensure_int,
    ensure_in_range
)
from .excel_io import save_mining_results, save_experiment_results

__all__ = [
    'ensure_not_none',
    'ensure_not_empty',
    'ensure_at_least',
    'ensure_greater',
    'ensure_int',
    'ensure_in_range',
    'save_mining_results',
    'save_experiment_results'
]
