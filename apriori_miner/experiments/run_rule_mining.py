"""
Rule Mining Experiment: Market Baskets

Mines frequent item sets and association rules from a basket file (one
transaction per line) for several minimum supports and saves one Excel report
per run plus an overview.
"""
import logging
from datetime import datetime
from pathlib import Path

from apriori_miner.experiments.base import load_transactions, run_apriori
from apriori_miner.experiments.config import Configuration, FilterConfig
from apriori_miner.utils.excel_io import save_mining_results, save_experiment_results

# =============================================================================
# CONFIGURATION
# =============================================================================

DATA_PATH = "../../data/raw/baskets.csv"
OUTPUT_DIR = "../../out/basket_rules"
DELIMITER = ','

MIN_SUPPORTS = [0.1, 0.05, 0.02]
MAX_ITEMS = 4

# Rule generation
MIN_CONFIDENCE = 0.6
SORT_METRIC = 'lift'
FILTERS = [FilterConfig('lift', 1.0)]


# =============================================================================
# EXPERIMENT
# =============================================================================

def run_experiment(
    data_path=DATA_PATH,
    output_dir=OUTPUT_DIR,
    min_supports=MIN_SUPPORTS,
    delimiter=DELIMITER
):
    print("=" * 70)
    print("BASKET RULE MINING EXPERIMENT")
    print("=" * 70)

    print("\n[1] Loading data...")
    transactions = load_transactions(data_path, basket=True, delimiter=delimiter)
    print(f"  Transactions: {len(transactions)}")
    print(f"  Distinct items: {len(transactions.items())}")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

    print("\n[2] Mining...")
    all_results = []
    for min_support in min_supports:
        print(f"\n  [min_support={min_support}]")
        try:
            configuration = Configuration(
                min_support=min_support,
                max_items=MAX_ITEMS,
                generate_rules=True,
                rule_metric='confidence',
                min_rule_value=MIN_CONFIDENCE,
                sort_metric=SORT_METRIC,
                filters=tuple(FILTERS)
            )
            output = run_apriori(transactions, configuration)
            print(f"    Frequent itemsets: {len(output.frequent_item_sets)}")
            print(f"    Rules: {len(output.rule_set)}")

            report = save_mining_results(
                output,
                output_path / f"{timestamp}_basket_rules_support_{min_support}",
                metadata={'data_path': str(data_path)}
            )
            all_results.append({'min_support': min_support, 'output': output, 'report': report})

        except ValueError as e:
            print(f"    Error: {e}")
            all_results.append({'min_support': min_support, 'output': None, 'error': str(e)})

    print(f"\n{'=' * 70}")
    print("SAVING OVERVIEW")
    print("=" * 70)

    summary_data = []
    for result in all_results:
        row = {'min_support': result['min_support']}
        if result['output'] is not None:
            row.update(result['output'].get_stats())
        else:
            row['error'] = result['error']
        summary_data.append(row)

    params = {
        'data_path': str(data_path),
        'min_supports': str(list(min_supports)),
        'max_items': MAX_ITEMS,
        'min_confidence': MIN_CONFIDENCE,
        'sort_metric': SORT_METRIC,
        'filters': str([f.to_dict() for f in FILTERS]),
        'timestamp': datetime.now().isoformat()
    }

    overview = save_experiment_results(
        output_path=output_path / f"{timestamp}_basket_rules_overview",
        sheets={
            'Summary': summary_data,
            'Parameters': params
        }
    )

    print(f"\n{'=' * 70}")
    print("EXPERIMENT COMPLETE")
    print("=" * 70)
    for row in summary_data:
        print(f"  support >= {row['min_support']}: "
              f"{row.get('num_itemsets', 0)} itemsets, {row.get('num_rules', 0)} rules")
    print("=" * 70)

    return all_results, overview


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    run_experiment()
