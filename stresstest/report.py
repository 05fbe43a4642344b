from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

SUCCESS_STATUS = 200

# label -> inclusive status range
FAILURE_CLASSES = (
    ('3xx', 300, 399),
    ('4xx', 400, 499),
    ('5xx', 500, 599),
)


@dataclass(frozen=True)
class Report:
    """Summary of one batch. Not hashable: failures_by_class is a mapping."""

    __hash__ = None

    duration: str
    total_issued: int
    successful: int
    failures_by_class: Mapping[str, int]

    def to_dict(self):
        return {
            'elapsed_time': self.duration,
            'requests_made': self.total_issued,
            'successful_requests': self.successful,
            'failed_requests': dict(self.failures_by_class),
        }


def format_duration(seconds):
    """Round to whole seconds and render as e.g. '0s', '42s', '1m5s', '2h0m3s'."""
    total = int(seconds + 0.5) if seconds > 0 else 0
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def build_report(outcomes, duration):
    """Tally outcomes into a Report.

    Only an exact 200 counts as a success. Failures without a status code and
    codes outside 200-599 count towards the total but no bucket.
    """
    successful = 0
    buckets = {label: 0 for label, _, _ in FAILURE_CLASSES}

    for outcome in outcomes:
        if not isinstance(outcome, int):
            continue
        if outcome == SUCCESS_STATUS:
            successful += 1
            continue
        for label, low, high in FAILURE_CLASSES:
            if low <= outcome <= high:
                buckets[label] += 1
                break

    return Report(
        duration=format_duration(duration),
        total_issued=len(outcomes),
        successful=successful,
        failures_by_class=MappingProxyType(buckets),
    )
