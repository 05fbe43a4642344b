import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from stresstest.executor import Failure, execute_request

logger = logging.getLogger(__name__)


def dispatch(url, requests, workers, execute=execute_request):
    """Run `requests` calls of execute(url), at most `workers` at a time.

    Blocks until every call has settled and returns (outcomes, seconds).
    Outcomes arrive in completion order.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if requests < 0:
        raise ValueError(f"requests must not be negative, got {requests}")

    outcomes = []
    lock = threading.Lock()
    gate = threading.BoundedSemaphore(workers)

    def invoke(i):
        with gate:
            try:
                outcome = execute(url)
            except Exception as e:
                logger.exception("Request #%d abandoned", i)
                outcome = Failure('abandoned', str(e))
        if isinstance(outcome, Failure):
            logger.debug("Request #%d failed: %s", i, outcome.kind)
        with lock:
            outcomes.append(outcome)

    logger.info("Dispatching %d requests to %s with %d workers", requests, url, workers)
    start = time.perf_counter()

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(invoke, i) for i in range(requests)]

    for future in futures:
        future.result()

    elapsed = time.perf_counter() - start
    logger.info("Collected %d outcomes in %.3fs", len(outcomes), elapsed)
    return tuple(outcomes), elapsed
