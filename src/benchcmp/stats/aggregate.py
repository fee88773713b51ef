"""Field-wise aggregation of Stats records from repeated runs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import fields

import numpy as np

from benchcmp.exceptions import InvalidArgument

from .types import Stats

logger = logging.getLogger(__name__)

Reducer = Callable[[Sequence[float]], float]


def median(values: Sequence[float]) -> float:
    """Median of a list, averaging the two middle values for even lengths."""
    if len(values) == 0:
        raise InvalidArgument("Cannot take the median of an empty list")
    return float(np.median(values))


def aggregate(stats: Sequence[Stats], reducer: Reducer = median) -> Stats:
    """
    Fold several Stats records into one.

    Every field is reduced the same way: the values of that field across
    all records are collected into a list and passed to ``reducer``.

    Args:
        stats: Records from independent runs of the same measurement
        reducer: Function reducing a list of field values to one value

    Returns:
        A new Stats record

    Raises:
        InvalidArgument: If ``stats`` is empty or holds non-Stats values
    """
    if not stats:
        raise InvalidArgument("Cannot aggregate an empty list of stats")
    for s in stats:
        if not isinstance(s, Stats):
            raise InvalidArgument(f"Cannot aggregate {type(s).__name__}, expected Stats")

    logger.debug(f"Aggregating {len(stats)} stats records")
    return Stats(**{f.name: reducer([getattr(s, f.name) for s in stats]) for f in fields(Stats)})


def aggregate_by_name(
    runs: Iterable[Mapping[str, Stats]],
    reducer: Reducer = median,
) -> dict[str, Stats]:
    """
    Aggregate per-name stats across runs.

    Names are grouped in first-seen order; a name missing from some runs is
    aggregated over the runs that recorded it.

    Args:
        runs: One ``{name: Stats}`` mapping per run (e.g. ``Timer.stats()``)
        reducer: Function reducing a list of field values to one value

    Returns:
        Mapping of name to aggregated Stats
    """
    grouped: dict[str, list[Stats]] = {}
    for run in runs:
        for name, s in run.items():
            grouped.setdefault(name, []).append(s)

    return {name: aggregate(group, reducer) for name, group in grouped.items()}
