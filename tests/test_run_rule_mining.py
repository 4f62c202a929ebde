from apriori_miner.experiments.base import load_transactions
from apriori_miner.experiments.run_rule_mining import run_experiment


def test_load_basket_file(tmp_path):
    path = tmp_path / 'baskets.csv'
    path.write_text("bread, milk\n\nbread,beer\n")
    db = load_transactions(path)
    assert len(db) == 2
    assert db[0] == frozenset({'bread', 'milk'})


def test_load_table(tmp_path):
    path = tmp_path / 'table.csv'
    path.write_text("color,size\nred,S\nblue,M\n")
    db = load_transactions(path, basket=False)
    assert db[1] == frozenset({'color__blue', 'size__M'})


def test_run_experiment(tmp_path, baskets):
    path = tmp_path / 'baskets.csv'
    path.write_text('\n'.join(','.join(basket) for basket in baskets))

    results, overview = run_experiment(data_path=path, output_dir=tmp_path / 'out', min_supports=[0.4, 0.2])
    assert [r['min_support'] for r in results] == [0.4, 0.2]
    assert all(r['output'] is not None for r in results)
    assert all(r['report'].exists() for r in results)
    assert overview.exists()
    # Rules must pass the lift filter
    for rule in results[1]['output'].rule_set:
        assert rule.to_dict()['lift'] >= 1.0
