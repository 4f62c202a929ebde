"""
Rule interestingness metrics.

Metrics can be referred to by name, e.g. in a Configuration:
'support', 'coverage', 'confidence', 'interestingness', 'lift', 'leverage',
'conviction', 'zhangs_metric'
"""
from typing import Union

from .base import Metric
from .frequency import Support, Coverage, Confidence, Interestingness
from .correlation import Lift, Leverage, Conviction, ZhangsMetric

METRICS = {
    metric.name: metric for metric in (
        Support(),
        Coverage(),
        Confidence(),
        Interestingness(),
        Lift(),
        Leverage(),
        Conviction(),
        ZhangsMetric()
    )
}


def get_metric(metric: Union[str, Metric]) -> Metric:
    """
    Resolve a metric name to a metric instance.

    Metric instances are returned as they are.
    """
    if isinstance(metric, Metric):
        return metric
    if not isinstance(metric, str):
        raise ValueError(f"Metric must be a Metric or a metric name, got {metric!r}")
    key = metric.strip().lower().replace(' ', '_').replace("'", '')
    if key not in METRICS:
        raise ValueError(f"Metric must be one of {list(METRICS)}, got '{metric}'")
    return METRICS[key]


__all__ = [
    'Metric',
    'Support',
    'Coverage',
    'Confidence',
    'Interestingness',
    'Lift',
    'Leverage',
    'Conviction',
    'ZhangsMetric',
    'METRICS',
    'get_metric'
]
