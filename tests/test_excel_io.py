import pandas as pd

from apriori_miner import Configuration, run_apriori
from apriori_miner.utils.excel_io import format_rule_for_excel, save_experiment_results, save_mining_results


def test_save_mining_results(tmp_path, transactions):
    output = run_apriori(transactions, Configuration(min_support=0.5, generate_rules=True))
    path = save_mining_results(output, tmp_path / 'report', metadata={'dataset': 'toy'})
    assert path.suffix == '.xlsx'
    assert path.exists()

    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {'Frequent Itemsets', 'Rules', 'Summary', 'Parameters'}
    assert sheets['Frequent Itemsets']['items'].tolist() == ['a', 'b', 'c', 'a AND b', 'b AND c']
    assert len(sheets['Rules']) == 4
    assert 'dataset' in sheets['Summary']['Metric'].tolist()


def test_save_without_rules(tmp_path, transactions):
    output = run_apriori(transactions, Configuration(min_support=0.5))
    path = save_mining_results(output, tmp_path / 'report.xlsx')
    assert 'Rules' not in pd.read_excel(path, sheet_name=None)


def test_save_experiment_results(tmp_path):
    path = save_experiment_results(tmp_path / 'overview', {
        'Summary': [{'min_support': 0.5, 'num_rules': 4}],
        'Parameters': {'max_items': 3},
        'Skipped': [],
    })
    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {'Summary', 'Parameters'}


def test_format_rule_for_excel():
    rule = {'antecedents': ['color__red', 'size__S'], 'consequents': ['label__yes'], 'support': 0.5}
    formatted = format_rule_for_excel(rule)
    assert formatted['antecedents'] == 'color=red AND size=S'
    assert formatted['consequents'] == 'label=yes'
    assert rule['antecedents'] == ['color__red', 'size__S']
