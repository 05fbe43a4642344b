import logging
import time
from dataclasses import dataclass

import requests
from urllib3.exceptions import LocationParseError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

CONSTRUCTION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.URLRequired,
    requests.exceptions.InvalidHeader,
    LocationParseError,
    UnicodeError,
)


@dataclass(frozen=True)
class Failure:
    """A request that never produced a response."""
    kind: str
    cause: str


def classify_error(exc):
    if isinstance(exc, requests.exceptions.Timeout):
        return 'timeout'
    if isinstance(exc, CONSTRUCTION_ERRORS):
        return 'construction'
    return 'transport'


def _fail(url, kind, cause):
    failure = Failure(kind, cause)
    logger.warning("%s failure for %s: %s", failure.kind, url, failure.cause)
    return failure


def execute_request(url, timeout=DEFAULT_TIMEOUT):
    """Send one GET to url and return its status code, or a Failure.

    Only the headers are fetched; the response is closed before returning.
    `timeout` is a deadline for the whole call: a response whose headers
    arrive after it is a timeout failure.
    """
    start = time.perf_counter()
    try:
        with requests.get(url, timeout=timeout, stream=True) as response:
            status = response.status_code
    except (requests.exceptions.RequestException, LocationParseError, UnicodeError) as e:
        return _fail(url, classify_error(e), str(e))

    elapsed = time.perf_counter() - start
    if elapsed > timeout:
        return _fail(url, 'timeout', f"deadline of {timeout}s exceeded after {elapsed:.2f}s")
    return status
