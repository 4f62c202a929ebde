"""
Transaction database consumed by the miners.
"""
from typing import Any, Iterable, List

import pandas as pd
from mlxtend.preprocessing import TransactionEncoder


class TransactionDB:
    """
    A finite, re-iterable collection of transactions.

    Each transaction is stored as a frozenset, so that checking whether it
    contains an item or an item set does not require a scan of the transaction.
    """

    def __init__(self, transactions: Iterable[Iterable[Any]] = ()):
        if transactions is None:
            raise ValueError("The transactions may not be None")
        self._transactions: List[frozenset] = [frozenset(transaction) for transaction in transactions]

    @classmethod
    def from_dataframe(cls, data: pd.DataFrame, separator: str = '__') -> 'TransactionDB':
        """
        Create transactions from a DataFrame with categorical values.

        Every row becomes one transaction with one "feature<separator>value" item per
        non-missing cell.
        """
        transactions = []
        for _, row in data.iterrows():
            transaction = []
            for col in data.columns:
                value = row[col]
                if pd.notna(value):
                    transaction.append(f"{col}{separator}{value}")
            transactions.append(transaction)
        return cls(transactions)

    @classmethod
    def from_onehot(cls, data: pd.DataFrame) -> 'TransactionDB':
        """Create transactions from a boolean one-hot encoded DataFrame."""
        columns = list(data.columns)
        values = data.astype(bool).values
        return cls([col for col, present in zip(columns, row) if present] for row in values)

    def to_onehot(self) -> pd.DataFrame:
        """One-hot encode the transactions the way mlxtend's miners expect them."""
        transactions = [sorted(transaction) for transaction in self._transactions]
        te = TransactionEncoder()
        te_array = te.fit(transactions).transform(transactions)
        return pd.DataFrame(te_array, columns=te.columns_)

    def items(self) -> List[Any]:
        """All distinct items, sorted."""
        distinct = set()
        for transaction in self._transactions:
            distinct.update(transaction)
        return sorted(distinct)

    def __len__(self):
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)

    def __getitem__(self, index):
        return self._transactions[index]

    def __repr__(self):
        return f"TransactionDB({len(self)} transactions)"
