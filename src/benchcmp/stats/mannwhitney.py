"""Mann-Whitney U test for deciding whether two samples differ."""

from __future__ import annotations

import logging
import math

import numpy as np

from .percentile import Sample, as_sample
from .types import Verdict

logger = logging.getLogger(__name__)

# From this combined size on, the normal approximation replaces the table
NORMAL_APPROXIMATION_MIN = 31

Z_CRITICAL = 1.96

# Critical U values for 95% two-sided confidence, indexed by
# [max(n1, n2) - 5][min(n1, n2) - 3].
# fmt: off
CRITICAL_U = (
    (0, 1, 2),
    (1, 2, 3, 5),
    (1, 3, 5, 6, 8),
    (2, 4, 6, 8, 10, 13),
    (2, 4, 7, 10, 12, 15, 17),
    (3, 5, 8, 11, 14, 17, 20, 23),
    (3, 6, 9, 13, 16, 19, 23, 26, 30),
    (4, 7, 11, 14, 18, 22, 26, 29, 33, 37),
    (4, 8, 12, 16, 20, 24, 28, 33, 37, 41, 45),
    (5, 9, 13, 17, 22, 26, 31, 36, 40, 45, 50, 55),
    (5, 10, 14, 19, 24, 29, 34, 39, 44, 49, 54, 59, 64),
    (6, 11, 15, 21, 26, 31, 37, 42, 47, 53, 59, 64, 70, 75),
    (6, 11, 17, 22, 28, 34, 39, 45, 51, 57, 63, 67, 75, 81, 87),
    (7, 12, 18, 24, 30, 36, 42, 48, 55, 61, 67, 74, 80, 86, 93, 99),
    (7, 13, 19, 25, 32, 38, 45, 52, 58, 65, 72, 78, 85, 92, 99, 106, 113),
    (8, 14, 20, 27, 34, 41, 48, 55, 62, 69, 76, 83, 90, 98, 105, 112, 119, 127),
    (8, 15, 22, 29, 36, 43, 50, 58, 65, 73, 80, 88, 96, 103, 111, 119, 126, 134, 142),
    (9, 16, 23, 30, 38, 45, 53, 61, 69, 77, 85, 93, 101, 109, 117, 125, 133, 141, 150, 158),
    (9, 17, 24, 32, 40, 48, 56, 64, 73, 81, 89, 98, 106, 115, 123, 132, 140, 149, 157, 166, 175),
    (10, 17, 25, 33, 42, 50, 59, 67, 76, 85, 94, 102, 111, 120, 129, 138, 147, 156, 165, 174, 183, 192),
    (10, 18, 27, 35, 44, 53, 62, 71, 80, 89, 98, 107, 117, 126, 135, 145, 154, 163, 173, 182, 192, 201, 211),
    (11, 19, 28, 37, 46, 55, 64, 74, 83, 93, 102, 112, 122, 132, 141, 151, 161, 171, 181, 191, 200, 210, 220, 230),
    (11, 20, 29, 38, 48, 57, 67, 77, 87, 97, 107, 118, 125, 138, 147, 158, 168, 178, 188, 199, 209, 219, 230, 240, 250),
    (12, 21, 30, 40, 50, 60, 70, 80, 90, 101, 111, 122, 132, 143, 154, 164, 175, 186, 196, 207, 218, 228, 239, 250, 261, 272),
    (13, 22, 32, 42, 52, 62, 73, 83, 94, 105, 116, 127, 138, 149, 160, 171, 182, 193, 204, 215, 226, 238, 249, 260, 271, 282, 294),
    (13, 23, 33, 43, 54, 65, 76, 87, 98, 109, 120, 131, 143, 154, 166, 177, 189, 200, 212, 223, 235, 247, 258, 270, 282, 293, 305, 317),
)
# fmt: on


def critical_u(n1: int, n2: int) -> int | None:
    """
    Look up the 95% critical U value for two sample sizes.

    Returns None for sizes below the table's range (larger sample under 5
    or smaller sample under 3): no difference is ever declared for them.
    """
    hi, lo = max(n1, n2), min(n1, n2)
    if hi < 5 or lo < 3:
        return None
    return CRITICAL_U[hi - 5][lo - 3]


def u_statistics(control: Sample, test: Sample) -> tuple[float, float]:
    """
    Compute the Mann-Whitney U statistic of each sample against the other.

    Each element of one sample scores 1 for every element of the other
    sample below it, 0.5 for every tie, and 0 otherwise.

    Returns:
        ``(u_control, u_test)``
    """
    c = as_sample(control, "control")
    t = as_sample(test, "test")

    diff = c[:, np.newaxis] - t[np.newaxis, :]
    ties = float(np.count_nonzero(diff == 0))
    u_control = float(np.count_nonzero(diff > 0)) + 0.5 * ties
    u_test = float(np.count_nonzero(diff < 0)) + 0.5 * ties
    return u_control, u_test


def compare(control: Sample, test: Sample) -> Verdict:
    """
    Decide whether two samples come from different populations.

    Uses the table of critical U values for combined sizes up to 30 and the
    normal approximation above that, both at 95% two-sided confidence.

    Args:
        control: Baseline measurements
        test: Measurements to compare against the baseline

    Returns:
        ``TEST_HIGHER`` if test values are significantly larger,
        ``CONTROL_HIGHER`` if control values are, ``NO_DIFFERENCE`` otherwise

    Raises:
        InvalidArgument: If either sample is empty or malformed
    """
    c = as_sample(control, "control")
    t = as_sample(test, "test")
    if control is test:
        return Verdict.NO_DIFFERENCE

    u_control, u_test = u_statistics(c, t)
    nc, nt = c.size, t.size
    u = min(u_control, u_test)
    direction = Verdict.TEST_HIGHER if u == u_control else Verdict.CONTROL_HIGHER

    if nc + nt >= NORMAL_APPROXIMATION_MIN:
        z = (u - nc * nt / 2) / math.sqrt(nc * nt * (nc + nt + 1) / 12)
        logger.debug(f"Mann-Whitney n={nc}+{nt} U={u} Z={z:.3f}")
        significant = abs(z) > Z_CRITICAL
    else:
        critical = critical_u(nc, nt)
        logger.debug(f"Mann-Whitney n={nc}+{nt} U={u} critical={critical}")
        significant = critical is not None and u <= critical

    return direction if significant else Verdict.NO_DIFFERENCE
