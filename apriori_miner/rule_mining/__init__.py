"""
Rule Mining Module

- Frequent item set mining (Apriori)
- Candidate generation with anti-monotonicity pruning
- Association rule generation from frequent item sets
"""
from .base import FrequentItemsetMiner, AssociationRuleMiner, HybridMiner, as_transaction_db
from .candidate_generation import generate_candidates
from .rule_generation import generate_rules
from .apriori_miner import AprioriMiner, mine

__all__ = [
    'FrequentItemsetMiner',
    'AssociationRuleMiner',
    'HybridMiner',
    'as_transaction_db',
    'generate_candidates',
    'generate_rules',
    'AprioriMiner',
    'mine'
]
