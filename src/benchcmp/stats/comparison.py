"""Comparison of two samples: significance verdict plus effect size."""

from __future__ import annotations

import logging

import numpy as np

from benchcmp.config import ComparisonConfig

from .bootstrap import RESAMPLE_DIVISOR, RandomSource, bootstrap
from .mannwhitney import compare
from .percentile import Sample, as_sample
from .summary import summarize
from .types import Comparison

logger = logging.getLogger(__name__)


def compare_samples(
    control: Sample,
    test: Sample,
    config: ComparisonConfig | None = None,
    random: RandomSource | np.random.Generator | None = None,
) -> Comparison:
    """
    Compare a test sample against a control sample.

    Args:
        control: Baseline measurements
        test: Measurements to compare against the baseline
        config: Comparison settings (defaults to ``ComparisonConfig()``)
        random: Random source for the bootstrap, see ``bootstrap``

    Returns:
        Comparison with the Mann-Whitney verdict, both summaries and, when
        enabled and the samples are large enough, the bootstrap estimate
    """
    if config is None:
        config = ComparisonConfig()

    c = as_sample(control, "control")
    t = as_sample(test, "test")
    verdict = compare(control, test)

    estimate = None
    if config.bootstrap:
        if min(c.size, t.size) < RESAMPLE_DIVISOR:
            logger.warning(
                f"Skipping bootstrap: need {RESAMPLE_DIVISOR} measurements per sample, "
                f"got control={c.size} test={t.size}"
            )
        else:
            estimate = bootstrap(c, t, random, iterations=config.iterations, seed=config.seed)

    return Comparison(
        verdict=verdict,
        control=summarize(c),
        test=summarize(t),
        bootstrap=estimate,
    )
