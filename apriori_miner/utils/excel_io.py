import pandas as pd
from pathlib import Path
from typing import Dict, List, Any, Union


def _xlsx_path(output_path: Union[str, Path]) -> Path:
    output_path = Path(output_path)
    if output_path.suffix != '.xlsx':
        output_path = output_path.with_suffix('.xlsx')
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path


def save_mining_results(
    output,
    output_path: Union[str, Path],
    metadata: Dict[str, Any] = None
) -> Path:
    """
    Save the Output of a mining run to Excel with multiple sheets.

    Sheets:
        - Frequent Itemsets: Items and support, most frequent first
        - Rules: All rules with metrics (only if rules were generated)
        - Summary: Aggregate statistics
        - Parameters: Configuration used

    Args:
        output: Output of run_apriori
        output_path: Output file path (will add .xlsx if needed)
        metadata: Additional metadata (dataset name, etc.)
    """
    output_path = _xlsx_path(output_path)
    stats = output.get_stats()

    with pd.ExcelWriter(output_path, engine='openpyxl') as writer:
        # Sheet 1: Frequent item sets
        itemsets_df = pd.DataFrame({
            'items': [_format_itemset(s.items) for s in output.frequent_item_sets],
            'size': [len(s) for s in output.frequent_item_sets],
            'support': [s.support for s in output.frequent_item_sets]
        }, columns=['items', 'size', 'support'])
        itemsets_df.to_excel(writer, sheet_name='Frequent Itemsets', index=False)

        # Sheet 2: Rules
        if output.rule_set is not None:
            rules = [format_rule_for_excel(rule) for rule in output.rule_set.to_list()]
            rules_df = pd.DataFrame(rules) if rules else pd.DataFrame(columns=['antecedents', 'consequents'])
            rules_df.to_excel(writer, sheet_name='Rules', index=False)

        # Sheet 3: Summary
        summary_data = {
            'Metric': list(stats.keys()),
            'Value': list(stats.values())
        }
        if metadata:
            summary_data['Metric'].extend(list(metadata.keys()))
            summary_data['Value'].extend(list(metadata.values()))
        summary_df = pd.DataFrame({
            'Metric': summary_data['Metric'],
            'Value': [str(v) for v in summary_data['Value']]
        })
        summary_df.to_excel(writer, sheet_name='Summary', index=False)

        # Sheet 4: Parameters
        parameters = output.configuration.to_dict()
        params_df = pd.DataFrame({
            'Parameter': list(parameters.keys()),
            'Value': [str(v) for v in parameters.values()]
        })
        params_df.to_excel(writer, sheet_name='Parameters', index=False)

    print(f"Results saved to: {output_path}")
    return output_path


def save_experiment_results(
    output_path: Union[str, Path],
    sheets: Dict[str, Union[pd.DataFrame, List[Dict], Dict[str, Any]]]
) -> Path:
    """
    Generic function to save experiment results with custom sheets.

    Args:
        output_path: Output file path
        sheets: Dictionary mapping sheet names to data.
                Data can be:
                - pd.DataFrame: Written directly
                - List[Dict]: Converted to DataFrame
                - Dict[str, Any]: Converted to key-value DataFrame
    """
    output_path = _xlsx_path(output_path)

    with pd.ExcelWriter(output_path, engine='openpyxl') as writer:
        for sheet_name, data in sheets.items():
            if isinstance(data, pd.DataFrame):
                df = data
            elif isinstance(data, list) and data and isinstance(data[0], dict):
                df = pd.DataFrame(data)
            elif isinstance(data, dict):
                df = pd.DataFrame({
                    'Key': list(data.keys()),
                    'Value': [str(v) for v in data.values()]
                })
            else:
                continue

            # Excel limits sheet names to 31 chars
            df.to_excel(writer, sheet_name=sheet_name[:31], index=False)

    print(f"Results saved to: {output_path}")
    return output_path


def format_rule_for_excel(rule: Dict[str, Any]) -> Dict[str, Any]:
    """
    Format a rule dictionary for Excel output with human-readable antecedents/consequents.

    Format: "feature1=value1 AND feature2=value2", parseable by splitting on
    " AND " then "=".
    """
    formatted = rule.copy()

    for key in ['antecedents', 'consequents']:
        if key in formatted:
            formatted[key] = _format_itemset(formatted[key])

    return formatted


def _format_itemset(val: Any) -> str:
    """Convert items to 'feature=value AND ...' string format."""
    if isinstance(val, (list, tuple, set, frozenset)):
        return ' AND '.join(_format_item(item) for item in val)
    return _format_item(val)


def _format_item(item: Any) -> str:
    # "feature__value" items come from TransactionDB.from_dataframe
    if isinstance(item, str) and '__' in item:
        feature, value = item.split('__', 1)
        return f"{feature}={value}"
    return str(item)
