"""Value types produced by the statistics functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from benchcmp.exceptions import InvalidArgument

PERCENTILES = (50, 90, 95, 99)


@dataclass(frozen=True)
class Stats:
    """
    Statistical summary of one or more samples (durations in ms).

    ``count`` is an int when summarized from a sample and may be fractional
    after aggregation (e.g. the median of two run counts).
    """

    count: int | float
    sum: float
    mean: float
    variance: float
    std: float
    sem: float
    moe: float
    rme: float
    min: float
    max: float
    p50: float
    p90: float
    p95: float
    p99: float


class Verdict(IntEnum):
    """Outcome of a two-sample comparison."""

    CONTROL_HIGHER = -1
    NO_DIFFERENCE = 0
    TEST_HIGHER = 1


@dataclass(frozen=True)
class BootstrapResult:
    """
    Bootstrap estimate of control-minus-test percentile differences.

    ``dNN`` is the mean difference at the NN-th percentile and ``ciNN`` the
    half-width of its 95% confidence interval.
    """

    d50: float
    d90: float
    d95: float
    d99: float
    ci50: float
    ci90: float
    ci95: float
    ci99: float

    def interval(self, p: int) -> tuple[float, float]:
        """Return the (low, high) confidence bounds for percentile ``p``."""
        if p not in PERCENTILES:
            raise InvalidArgument(f"No bootstrap estimate for percentile {p}")
        d = getattr(self, f"d{p}")
        ci = getattr(self, f"ci{p}")
        return d - ci, d + ci


@dataclass(frozen=True)
class Comparison:
    """Verdict and effect size for a control/test pair of samples."""

    verdict: Verdict
    control: Stats
    test: Stats
    bootstrap: BootstrapResult | None = None
