"""Percentile bootstrap confidence intervals for control/test differences."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from benchcmp.exceptions import InvalidArgument

from .percentile import Sample, as_sample
from .summary import Z_95
from .types import BootstrapResult

logger = logging.getLogger(__name__)

# Returns an integer in [min, max)
RandomSource = Callable[[int, int], int]

ITERATIONS = 1000
QUANTILES = (0.50, 0.90, 0.95, 0.99)

# Each resample draws a third of the original sample
RESAMPLE_DIVISOR = 3

# Upper bound on resampled values held per side at once
CHUNK_ELEMENTS = 1_000_000


def _draw(random: RandomSource, length: int, k: int) -> list[int]:
    indices = []
    for _ in range(k):
        idx = random(0, length)
        if not 0 <= idx < length:
            raise InvalidArgument(f"Random source returned {idx}, outside [0, {length})")
        indices.append(idx)
    return indices


def bootstrap(
    control: Sample,
    test: Sample,
    random: RandomSource | np.random.Generator | None = None,
    *,
    iterations: int = ITERATIONS,
    seed: int | None = None,
) -> BootstrapResult:
    """
    Estimate percentile differences between two samples by resampling.

    Every iteration draws, with replacement, a third of each sample, takes
    the 50th/90th/95th/99th percentiles of both resamples and records the
    control-minus-test differences. The result holds the mean difference per
    percentile and a 95% half-width of 1.96 population standard deviations.

    Args:
        control: Baseline measurements
        test: Measurements to compare against the baseline
        random: Source of resampling indices. Either a callable returning an
            integer in ``[min, max)`` (called once per drawn element, control
            before test within an iteration) or a numpy Generator, from which
            one child stream per sample is spawned. Defaults to a new
            ``numpy.random.default_rng(seed)``.
        iterations: Number of resampling iterations
        seed: Seed for the default generator, ignored when ``random`` is given

    Returns:
        BootstrapResult with mean differences and half-widths

    Raises:
        InvalidArgument: If a sample has fewer than 3 measurements (its
            resample would be empty) or ``iterations`` is not positive
    """
    c = as_sample(control, "control")
    t = as_sample(test, "test")
    kc = c.size // RESAMPLE_DIVISOR
    kt = t.size // RESAMPLE_DIVISOR
    if kc == 0 or kt == 0:
        raise InvalidArgument(
            f"Bootstrap needs at least {RESAMPLE_DIVISOR} measurements per sample, "
            f"got control={c.size} test={t.size}"
        )
    if iterations < 1:
        raise InvalidArgument(f"iterations must be positive, got {iterations}")

    if random is None:
        random = np.random.default_rng(seed)

    # One independent stream per side keeps draws identical for any chunk size
    streams = random.spawn(2) if isinstance(random, np.random.Generator) else None
    chunk = max(1, CHUNK_ELEMENTS // max(kc, kt))
    logger.debug(
        f"Bootstrap {iterations} iterations in chunks of {chunk}, "
        f"resample sizes control={kc} test={kt}"
    )

    # Shape (4, iterations): one column of differences per iteration
    diffs = np.empty((len(QUANTILES), iterations))
    for start in range(0, iterations, chunk):
        n = min(chunk, iterations - start)
        if streams is not None:
            ic = streams[0].integers(0, c.size, size=(n, kc))
            it = streams[1].integers(0, t.size, size=(n, kt))
        else:
            ic = np.empty((n, kc), dtype=np.intp)
            it = np.empty((n, kt), dtype=np.intp)
            for i in range(n):
                ic[i] = _draw(random, c.size, kc)
                it[i] = _draw(random, t.size, kt)

        diffs[:, start : start + n] = np.quantile(
            c[ic], QUANTILES, axis=1, method="linear"
        ) - np.quantile(t[it], QUANTILES, axis=1, method="linear")

    means = diffs.mean(axis=1)
    half_widths = Z_95 * np.sqrt(np.mean((diffs - means[:, np.newaxis]) ** 2, axis=1))

    d50, d90, d95, d99 = (float(v) for v in means)
    ci50, ci90, ci95, ci99 = (float(v) for v in half_widths)
    return BootstrapResult(
        d50=d50,
        d90=d90,
        d95=d95,
        d99=d99,
        ci50=ci50,
        ci90=ci90,
        ci95=ci95,
        ci99=ci99,
    )
