"""Reduction of a raw sample into a Stats record."""

from __future__ import annotations

import math

import numpy as np

from .percentile import Sample, as_sample
from .types import Stats

# Two-sided 95% normal critical value
Z_95 = 1.96


def summarize(sample: Sample) -> Stats:
    """
    Compute summary statistics for a sample.

    Variance uses the n-1 denominator and is 0 for a single measurement.

    Args:
        sample: Measurements (durations in ms)

    Returns:
        Stats describing the sample
    """
    arr = as_sample(sample)
    n = arr.size

    mean = float(np.mean(arr))
    variance = float(np.var(arr, ddof=1)) if n > 1 else 0.0
    std = math.sqrt(variance)
    sem = std / math.sqrt(n)
    moe = Z_95 * sem
    p50, p90, p95, p99 = np.quantile(arr, [0.50, 0.90, 0.95, 0.99], method="linear")

    return Stats(
        count=n,
        sum=float(np.sum(arr)),
        mean=mean,
        variance=variance,
        std=std,
        sem=sem,
        moe=moe,
        rme=moe / mean * 100 if mean else 0.0,
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        p50=float(p50),
        p90=float(p90),
        p95=float(p95),
        p99=float(p99),
    )
