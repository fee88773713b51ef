"""Percentile of a numeric sample."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from benchcmp.exceptions import InvalidArgument

Sample = Sequence[float] | np.ndarray


def as_sample(values: Sample, name: str = "sample") -> np.ndarray:
    """
    Validate a sample and return it as a new 1-D float array.

    Args:
        values: Measurements to validate
        name: Label used in error messages

    Returns:
        A float64 copy of ``values``

    Raises:
        InvalidArgument: If the sample is empty, not 1-D, or holds
            non-finite values
    """
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"{name} is not a numeric sequence: {e}") from e

    if arr.ndim != 1:
        raise InvalidArgument(f"{name} must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidArgument(f"{name} must contain at least one measurement")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument(f"{name} contains non-finite values")
    return arr


def _check_fraction(p: float) -> None:
    if not 0 <= p <= 1:
        raise InvalidArgument(f"Percentile must be within [0, 1], got {p}")


def percentile(sample: Sample, p: float) -> float:
    """
    Compute the ``p``-th percentile of a sample.

    Uses linear interpolation between the two ranks bounding the fractional
    index ``p * (n - 1)``. The caller's sample is never reordered.

    Args:
        sample: Measurements, in any order
        p: Percentile as a fraction in [0, 1]

    Returns:
        The interpolated percentile value
    """
    _check_fraction(p)
    arr = np.sort(as_sample(sample))
    return float(np.quantile(arr, p, method="linear"))


def percentiles(sample: Sample, ps: Sequence[float]) -> list[float]:
    """Compute several percentiles of a sample with a single sort."""
    for p in ps:
        _check_fraction(p)
    arr = np.sort(as_sample(sample))
    return [float(v) for v in np.quantile(arr, list(ps), method="linear")]
