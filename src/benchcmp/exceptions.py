"""Exceptions raised by benchcmp."""


class BenchcmpError(Exception):
    """Base class for all benchcmp errors."""


class InvalidArgument(BenchcmpError, ValueError):
    """An operation was called with input it cannot produce a result for."""


class UnsupportedFormat(BenchcmpError, ValueError):
    """A reporter was requested for an output format that does not exist."""
