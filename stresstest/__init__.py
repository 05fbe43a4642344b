"""Fixed-size HTTP GET load generator with a bounded worker pool."""

from stresstest.cli import run
from stresstest.dispatcher import dispatch
from stresstest.executor import DEFAULT_TIMEOUT, Failure, execute_request
from stresstest.report import Report, build_report, format_duration

__all__ = [
    'DEFAULT_TIMEOUT',
    'Failure',
    'Report',
    'build_report',
    'dispatch',
    'execute_request',
    'format_duration',
    'run',
]
