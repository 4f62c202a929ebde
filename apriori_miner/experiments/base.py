"""
Mining session: frequent item sets and, optionally, rules for one configuration.
"""
import logging
import time
from pathlib import Path
from typing import Callable, Union

import pandas as pd

from apriori_miner.data_structures import FrequentItemSets, RuleSet, TransactionDB
from apriori_miner.postprocessing import apply_filters, rank_rules
from apriori_miner.rule_mining import AprioriMiner, as_transaction_db, generate_rules
from apriori_miner.utils.validation import ensure_not_none

from .config import Configuration
from .output import Output

logger = logging.getLogger(__name__)


def load_transactions(path: Union[str, Path], basket: bool = True, delimiter: str = ',') -> TransactionDB:
    """
    Load transactions from a file.

    Basket files hold one transaction per line with items separated by delimiter;
    blank lines are skipped. Otherwise the file is read as a table (.csv, .xlsx,
    .xls, .parquet) and every row becomes one transaction of feature__value items.
    """
    path = Path(path)
    if basket:
        transactions = []
        for line in path.read_text(encoding='utf-8').splitlines():
            items = [item.strip() for item in line.split(delimiter) if item.strip()]
            if items:
                transactions.append(items)
        return TransactionDB(transactions)

    if path.suffix == '.csv':
        df = pd.read_csv(path, sep=delimiter)
    elif path.suffix in ['.xlsx', '.xls']:
        df = pd.read_excel(path)
    elif path.suffix == '.parquet':
        df = pd.read_parquet(path)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")
    return TransactionDB.from_dataframe(df)


def current_time_millis() -> int:
    return int(time.time() * 1000)


def _lower(value: float, delta: float, minimum: float) -> float:
    return max(minimum, round(value - delta, 10))


def find_frequent_item_sets(transactions: TransactionDB, config: Configuration) -> FrequentItemSets:
    """
    Mine frequent item sets as configured.

    Without a frequent item set count, mines once at the minimum support.
    Otherwise the support starts at max_support and is lowered by support_delta
    until enough item sets are found or min_support is reached; the result is
    cut to the most frequent frequent_item_set_count item sets.
    """
    count = config.frequent_item_set_count
    if count == 0:
        return AprioriMiner(min_support=config.min_support, max_items=config.max_items).mine(transactions)

    support = config.max_support
    while True:
        frequent = AprioriMiner(min_support=support, max_items=config.max_items).mine(transactions)
        logger.debug("Found %d frequent item sets with support >= %s", len(frequent), support)
        if len(frequent) >= count or support <= config.min_support:
            break
        support = _lower(support, config.support_delta, config.min_support)

    return frequent.truncate(count) if len(frequent) > count else frequent


def find_rules(frequent_item_sets: FrequentItemSets, config: Configuration) -> RuleSet:
    """
    Generate, filter and rank rules as configured.

    With a rule count, the threshold of the rule metric starts at max_rule_value
    and is lowered by rule_value_delta until enough rules pass or min_rule_value
    is reached. The rules are then ranked by the sort metric (or the rule metric)
    and cut to rule_count.
    """
    metric = config.rule_metric
    count = config.rule_count

    if count == 0:
        rules = apply_filters(generate_rules(frequent_item_sets, metric, config.min_rule_value), config.filters)
        if config.sort_metric is not None:
            rules = rank_rules(rules, config.sort_metric)
        return rules

    threshold = config.max_rule_value
    while True:
        rules = apply_filters(generate_rules(frequent_item_sets, metric, threshold), config.filters)
        logger.debug("Found %d rules with %s >= %s", len(rules), metric.name, threshold)
        if len(rules) >= count or threshold <= config.min_rule_value:
            break
        threshold = _lower(threshold, config.rule_value_delta, config.min_rule_value)

    return rank_rules(rules, config.sort_metric or metric, top_k=count)


def run_apriori(
    transactions,
    configuration: Configuration,
    clock: Callable[[], int] = current_time_millis
) -> Output:
    """
    Run one mining session.

    Args:
        transactions: TransactionDB or iterable of transactions (iterables of items)
        configuration: Validated Configuration
        clock: Returns the current time in milliseconds

    Returns:
        Output with the frequent item sets and, if configured, the rules
    """
    ensure_not_none(configuration, "The configuration may not be None")
    transactions = as_transaction_db(transactions)

    start_time = clock()
    frequent_item_sets = find_frequent_item_sets(transactions, configuration)
    rule_set = find_rules(frequent_item_sets, configuration) if configuration.generate_rules else None
    end_time = clock()

    logger.info(
        "Mined %d frequent item sets%s from %d transactions in %d ms",
        len(frequent_item_sets),
        f" and {len(rule_set)} rules" if rule_set is not None else "",
        len(transactions),
        end_time - start_time
    )
    return Output(configuration, start_time, end_time, frequent_item_sets, rule_set)
