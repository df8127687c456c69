"""Errors raised by the benchmark. The command line aborts the run on any of them."""


class LogBenchError(Exception):
    """Base class for benchmark failures"""


class BackendError(LogBenchError):
    """A backend could not be set up or an insert failed"""


class ChartError(LogBenchError):
    """A chart could not be rendered"""


class EmptySeriesError(ChartError, ValueError):
    """An average was requested for a series with no measurements"""


class ResultsError(LogBenchError):
    """A saved results file is missing or malformed"""
